"""Array and matrix exercises."""

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        return True
    successors = list(nums[1:]) + [nums[0]]
    dips = sum(1 for current, following in zip(nums, successors) if current > following)
    return dips <= 1


def count_frequencies(values: Iterable[Hashable]) -> dict:
    """Map each value to how often it occurs, in order of first appearance."""
    return dict(Counter(values))


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    if not nums:
        return 0
    written = 1
    for value in nums[1:]:
        if value != nums[written - 1]:
            nums[written] = value
            written += 1
    return written


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column of ``matrix`` that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def max_frequency(nums: Iterable[int], k: int) -> int:
    """Return the highest count of equal elements reachable with at most ``k`` increments."""
    ordered = sorted(nums)
    left = 0
    window_sum = 0
    best = 0
    for right, value in enumerate(ordered):
        window_sum += value
        while (right - left + 1) * value - window_sum > k:
            window_sum -= ordered[left]
            left += 1
        best = max(best, right - left + 1)
    return best