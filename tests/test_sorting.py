import pytest

from algodrills.sorting import insertion_sort, merge_sort

CASES = [
    [9, 6, 11, 13, 81, 15, 7, 4, 19],
    [],
    [1],
    [2, 1],
    [5, 5, 5],
    [3, -1, 0, -7, 3, 2],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort])
@pytest.mark.parametrize("values", CASES)
def test_sorts_match_builtin(sort, values):
    assert sort(values) == sorted(values)


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort])
def test_input_is_not_modified(sort):
    values = [4, 2, 3, 1]
    sort(values)
    assert values == [4, 2, 3, 1]


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort])
def test_accepts_any_iterable(sort):
    assert sort(iter("banana")) == sorted("banana")


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])