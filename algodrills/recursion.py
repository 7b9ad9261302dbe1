"""Counting and accumulating exercises, expressed as generators and folds."""

import math
from collections.abc import Iterator
from typing import TypeVar

T = TypeVar("T")


def repeat(value: T, times: int) -> Iterator[T]:
    """Yield ``value`` exactly ``times`` times."""
    if times < 0:
        raise ValueError("times must not be negative")
    for _ in range(times):
        yield value


def count_up(start: int, end: int) -> Iterator[int]:
    """Yield the integers from ``start`` to ``end`` inclusive, ascending."""
    yield from range(start, end + 1)


def count_down(n: int) -> Iterator[int]:
    """Yield the integers from ``n`` down to 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    yield from range(n, 0, -1)


def count_up_reversed(start: int, end: int) -> Iterator[int]:
    """Yield the integers from ``end`` down to ``start``, i.e. count_up backwards."""
    yield from range(end, start - 1, -1)


def sum_of_n(n: int) -> int:
    """Return 1 + 2 + ... + n, with sum_of_n(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(range(n + 1))


def factorial(n: int) -> int:
    """Return n! for n >= 1."""
    if n < 1:
        raise ValueError("factorial() needs n >= 1")
    return math.prod(range(1, n + 1))