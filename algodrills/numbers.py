"""Small integer routines: digit counting, greatest common divisor, Fibonacci."""


def count_digits(n: int) -> int:
    """Return the number of decimal digits of ``n``; zero and negatives give 0."""
    count = 0
    while n > 0:
        count += 1
        n //= 10
    return count


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers (Euclid)."""
    if a < 0 or b < 0:
        raise ValueError("gcd() takes non-negative integers")
    a, b = max(a, b), min(a, b)
    while b != 0:
        a, b = b, a % b
    return a


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("fib() is not defined for negative n")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current