# algodrills

A collection of classic algorithm exercises: counting digits, greatest common
divisors, Fibonacci numbers, counting and summing drills, array puzzles,
sorting, binary search and palindrome checking. Each one is a plain function
with no dependencies beyond the standard library.

## Installation

```
pip install algodrills
```

To run the test suite:

```
pip install "algodrills[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `algodrills.numbers` | `count_digits`, `gcd`, `fib` |
| `algodrills.recursion` | `repeat`, `count_up`, `count_down`, `count_up_reversed`, `sum_of_n`, `factorial` |
| `algodrills.arrays` | `max_profit`, `is_sorted_and_rotated`, `count_frequencies`, `remove_duplicates`, `set_zeroes`, `max_frequency` |
| `algodrills.sorting` | `insertion_sort`, `merge_sort` |
| `algodrills.searching` | `binary_search`, `search_insert`, `peak_index_in_mountain_array` |
| `algodrills.text` | `is_palindrome` |

## Examples

```python
from algodrills.numbers import count_digits, gcd, fib
from algodrills.arrays import max_profit, max_frequency
from algodrills.searching import binary_search, search_insert
from algodrills.text import is_palindrome

count_digits(12345)                          # 5 (zero and negatives give 0)
gcd(52, 10)                                  # 2 (negative input raises ValueError)
fib(10)                                      # 55

max_profit([7, 1, 5, 3, 6, 4])               # 5: buy at 1, sell at 6
max_frequency([1, 2, 4], 5)                  # 3

binary_search([-1, 0, 3, 5, 9, 12], 9)       # 4
binary_search([-1, 0, 3, 5, 9, 12], 2)       # -1
search_insert([1, 3, 5, 6], 2)               # 1

is_palindrome("A man, a plan, a canal: Panama")  # True
```

Some array functions work in place:

```python
from algodrills.arrays import remove_duplicates, set_zeroes, count_frequencies

nums = [1, 1, 2]
k = remove_duplicates(nums)   # 2; nums[:k] == [1, 2]

matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
set_zeroes(matrix)            # [[1, 0, 1], [0, 0, 0], [1, 0, 1]]

count_frequencies([10, 5, 10, 15, 10, 5])   # {10: 3, 5: 2, 15: 1}
```

The sorts return new lists and leave their input alone:

```python
from algodrills.sorting import insertion_sort, merge_sort

merge_sort([9, 6, 11, 13, 81, 15, 7, 4, 19])   # [4, 6, 7, 9, 11, 13, 15, 19, 81]
```

The counting drills are generators; the summing drills return integers:

```python
from algodrills.recursion import count_up, count_down, count_up_reversed, repeat
from algodrills.recursion import sum_of_n, factorial

list(count_up(1, 3))           # [1, 2, 3]
list(count_up_reversed(1, 3))  # [3, 2, 1]
list(count_down(3))            # [3, 2, 1]
list(repeat("hi", 2))          # ["hi", "hi"]
sum_of_n(5)                    # 15
factorial(5)                   # 120 (n < 1 raises ValueError)
```

## Command line

The package installs an `algodrills` command with four subcommands:

```
algodrills hello                       # Hello world
algodrills count-digits [NUMBER]       # default 12345
algodrills gcd [A] [B]                 # default 52 10, prints "GCD is 2"
algodrills sort {insertion,merge} [VALUES ...]
```

`sort` prints the sorted integers separated by spaces; with no values it
sorts `9 6 11 13 81 15 7 4 19`. See all options with:

```
algodrills --help
```