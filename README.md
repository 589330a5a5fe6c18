# algokit

Small, dependency-free implementations of well-known algorithm exercises on
arrays and strings, binary search, and singly linked lists.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.arrays`

- `has_duplicates(nums)`: `True` as soon as any value is seen a second time.
- `encode(strs)` / `decode(s)`: turn a sequence of strings into a single
  length-prefixed string (`"4#neet4#code"`) and back again. `decode` raises
  `ValueError` when the input is not a valid encoding.
- `group_anagrams(strs)`: groups words that are anagrams of each other; groups
  and the words within them keep the order of first appearance.
- `top_k_frequent(nums, k)`: returns up to `k` values, most frequent first.
- `two_sum(nums, target)`: returns a tuple `(i, j)` with `i < j` of indices
  whose values add up to `target`, or `None` if there is no such pair.
- `is_anagram(s, t)`: checks whether `t` is a rearrangement of the characters
  of `s`.

```python
from algokit.arrays import decode, encode, two_sum

packed = encode(["neet", "code", "loves", "you"])
assert packed == "4#neet4#code5#loves3#you"
assert decode(packed) == ["neet", "code", "loves", "you"]
assert two_sum([2, 4, 5, 6], 11) == (2, 3)
```

### `algokit.binarysearch`

- `binary_search(nums, target)`: index of `target` in a sorted sequence, or -1.
- `min_eating_speed(piles, h)`: the smallest per-hour eating rate that finishes
  every pile within `h` hours. Raises `ValueError` for an empty `piles`.
- `find_min_rotated(nums)`: the minimum of a rotated sorted sequence. Raises
  `ValueError` for an empty sequence.
- `search_matrix(matrix, target)`: whether `target` is in a matrix whose rows
  are sorted and where each row starts after the previous one ends.
- `search_rotated(nums, target)`: index of `target` in a rotated sorted
  sequence, or -1.
- `find_first`, `find_last`, `count_occurrences`: first or last index of a
  value in a sorted sequence (-1 if absent), and how many times it occurs.

```python
from algokit.binarysearch import count_occurrences, search_rotated

assert count_occurrences([2, 4, 4, 4, 6, 7], 4) == 3
assert search_rotated([4, 5, 6, 7, 0, 1, 2], 0) == 4
```

### `algokit.linkedlists`

- `ListNode`: a singly linked list node with `val` and `next`; iterating over a
  node yields the values from it to the end of the list.
- `from_values(values)`: builds a list from an iterable and returns its head
  (`None` for no values).
- `format_list(head)`: renders a list as `10->20->30` (an empty string for
  `None`).
- `merge_two_lists(list1, list2)`: splices two sorted lists into one sorted
  list, reusing their nodes.
- `reverse_list(head)`: reverses a list in place and returns the new head.

```python
from algokit.linkedlists import format_list, from_values, reverse_list

head = from_values([10, 20, 30, 40, 50])
assert format_list(reverse_list(head)) == "50->40->30->20->10"
```

## What it does not do

`algokit` is a library only: it has no command-line program and does not read
input interactively. Call its functions from your own code.