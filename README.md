# algonotes

A small collection of classic algorithm exercises written as plain,
dependency-free Python: bit tricks, array scans, string helpers and
singly linked list operations, plus a small command line front end.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library usage

### Numbers and bits (`algonotes.bits`)

```python
from algonotes.bits import is_power_of_two, count_ones, count_total_ones, is_palindrome_number

is_power_of_two(16)          # True
is_power_of_two(12)          # False
is_power_of_two(0)           # False
count_ones(7)                # 3
count_total_ones(5)          # 7  (set bits in 0..5)
is_palindrome_number(121)    # True
is_palindrome_number(-121)   # False
```

`count_ones` counts non-positive numbers as having no set bits.

### Sequences (`algonotes.sequences`)

```python
from algonotes.sequences import (
    equilibrium_index,
    majority_element,
    max_frequency_element,
    max_sliding_window,
    next_greater_elements,
)

max_frequency_element([1, 3, 2, 3, 3, 1, 4])      # 3
equilibrium_index([-7, 1, 5, 2, -4, 3, 0])        # 3
majority_element([1, 1, 2, 1, 3, 5, 1])           # 1
max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3) # [3, 3, 5, 5, 6, 7]
next_greater_elements([4, 5, 2, 10, 8])           # [5, 10, 10, None, None]
```

- `max_frequency_element` returns the most frequent value, the one seen
  first when several share the highest count, and `None` for an empty
  sequence.
- `equilibrium_index` returns the first index whose left and right sums are
  equal, or `None`.
- `majority_element` returns the value occurring more than `len(arr) // 2`
  times, or `None`.
- `max_sliding_window` raises `ValueError` when the window size is below 1.
- `next_greater_elements` uses `None` for positions with no strictly greater
  element to their right.

### Strings (`algonotes.strings`)

```python
from algonotes.strings import permutations, longest_common_prefix

list(permutations("abc"))
# ['abc', 'acb', 'bac', 'bca', 'cba', 'cab']

longest_common_prefix(["flower", "flow", "flight"])  # 'fl'
longest_common_prefix(["dog", "racecar", "car"])     # ''
```

`permutations` is a generator; repeated characters produce repeated
permutations.

### Linked lists (`algonotes.linked`)

```python
from algonotes.linked import Node, from_iterable, to_list, merge_two, remove_nth_from_end, intersect_point

merged = merge_two(from_iterable([1, 3, 5]), from_iterable([2, 4]))
to_list(merged)                       # [1, 2, 3, 4, 5]

head = remove_nth_from_end(from_iterable([1, 2, 3, 4, 5]), 2)
to_list(head)                         # [1, 2, 3, 5]

first = from_iterable([10, 15, 30])
second = from_iterable([3, 6, 9])
second.next.next.next = first.next    # join the lists at 15
intersect_point(first, second).data   # 15
```

- `Node` is a dataclass with `data` and `next`; nodes compare by identity
  and iterating a node yields the values from it to the end of the list.
- `merge_two` relinks the nodes of two sorted lists; on equal values the
  node from the first list comes first.
- `remove_nth_from_end` returns a list shorter than `n` unchanged and raises
  `ValueError` when `n` is below 1.
- `intersect_point` returns the first node of the second list that is also
  in the first, or `None` when they do not meet.

## Command line

The package installs an `algonotes` command with one sub-command per
exercise:

```
algonotes permutations abc
algonotes power-of-two 16
algonotes count-ones 5
algonotes equilibrium -- -7 1 5 2 -4 3 0
algonotes prefix flower flow flight
algonotes palindrome 121
```

Run `algonotes --help` for the full list. The sequence exercises other than
the equilibrium index, and the linked list operations, are available only
from Python, not from the command line.