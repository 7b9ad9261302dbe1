"""String exercises."""


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same both ways, counting only ASCII letters and digits, case-blind."""
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]