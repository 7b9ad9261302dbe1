"""Classic algorithm exercises: numbers, counting drills, arrays, sorting, searching and text."""

__version__ = "0.1.0"