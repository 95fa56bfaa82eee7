# dsadrills

Classic data-structure and algorithm drills as plain Python functions and
classes. Every function returns its result rather than printing it, so it
can be used from other code or checked in a test. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsadrills.arrays`

- `bubble_sort(values)`: a new ascending list, sorted by bubble sort.
- `nth_highest(values, n)`: the n-th highest value, with `n=1` as the
  maximum. Raises `IndexError` when `n` is out of range.
- `nth_lowest(values, n)`: the value with `n` values before it in ascending
  order, so `n=0` is the minimum. Raises `IndexError` when out of range.
- Two-pointer segregation, each returning a new list:
  `segregate_even_odd` (odd numbers before even ones),
  `segregate_zeros_ones` (every 1 moved to the back) and
  `segregate_negatives` (positive numbers moved behind negative ones).
- `rotate_right(values, k)` and `rotate_left(values, k)`: rotations by
  `k` places, with `0 <= k <= len(values)`; otherwise `ValueError`.
- `reversed_copy(values)`: the values in reverse order.
- `missing_ap_term(values)`: the term missing from an arithmetic
  progression whose first and last terms are present. Needs at least two
  terms.
- `matrix_sum(matrix)`, `row_sums(matrix)`, `column_sums(matrix)`: sums over
  a list of rows. `column_sums` requires rows of equal length.

### `dsadrills.text`

- `until_nul(chars)`: the characters before the first `"\0"`.
- `string_length(s)`: the number of characters before the first `"\0"`.
- `sort_chars(s)`: the characters ordered by code point.
- `compress(s)`: in-place run-length encoding. A run of 2 to 9 characters is
  written as the character and its count; longer runs keep only the
  character. Positions past the encoded prefix keep their original
  characters.
- `concatenate(first, second)`, `n_concatenate(first, second, n)` (at most
  `n` characters of `second`, stopping at a NUL) and
  `copy_string(source, destination)` (writes `source` over the start of
  `destination`).
- `max_occurring_char(s)`: the most frequent letter, case folded, and its
  count; ties go to the earliest letter. Only ASCII letters are accepted;
  anything else raises `ValueError`.
- `dictionary_order(first, second)`: the two words ordered by their first
  characters.
- `remove_adjacent_duplicates(s)`: repeatedly removes pairs of equal
  adjacent characters (`"abccbd"` gives `"ad"`).
- `replace_spaces(s)`: every space becomes `"@40"`.
- `reverse_string(s)`, `reverse_each_word(s)`, `reverse_word_order(s)`.
- `has_permutation(pattern, text)`: whether `text` opens with a
  rearrangement of `pattern`. Both must be lowercase ASCII letters in the
  compared part, otherwise `ValueError`.

### `dsadrills.search`

- `rabin_karp(pattern, text, modulus=DEFAULT_MODULUS)`: every index where
  `pattern` occurs in `text`, overlaps included, found with a radix-10
  rolling hash. Hash matches are confirmed character by character.
  `DEFAULT_MODULUS` is `2**31 - 1`. An empty pattern or a modulus below 1
  raises `ValueError`.

### `dsadrills.palindrome`

- `is_palindrome(s)`: exact comparison.
- `is_palindrome_ignore_case(s)`: ASCII letter case ignored.
- `is_alnum_palindrome(s)`: only ASCII letters and digits are kept, case
  ignored.

### `dsadrills.linked_list`

`Node` and `SinglyLinkedList`, which tracks its head and tail. Build one with
`SinglyLinkedList(values)` or `SinglyLinkedList.from_iterable(values)`; it
supports `iter()`, `len()` and `to_list()`.

- Positions are 1-based: `insert_at_head`, `insert_at_tail`,
  `insert_at_position(position, data)`, and `delete_at_position(position)`,
  which returns the removed data. Bad positions raise `IndexError`.
- `reverse()` and `k_reverse(k)` (every group of `k` nodes reversed,
  including a short last group).
- `middle()` and `middle_fast()`: the data at position `len // 2 + 1`.
- `is_circular()`: whether the links lead back to the head; an empty list
  counts as circular.
- Duplicate removal: `remove_sorted_duplicates()`, `remove_duplicates()`
  (pairwise) and `remove_duplicates_hashed()` (with a set). Each keeps the
  first node of each value.
- Cycles: `connect_tail_to(position)` makes a loop; `has_cycle()`,
  `floyd_meeting_node()`, `cycle_start()` and `remove_cycle()` (returns
  whether a loop was broken). Operations that walk the whole list raise
  `ValueError` on a list with a cycle.

### `dsadrills.doubly_linked_list`

`DoublyNode` and `DoublyLinkedList`, with `insert_at_head`,
`insert_at_tail`, `insert_at_position`, `delete_at_position` (1-based,
returning the removed data) and `to_list`. It supports `iter()`,
`reversed()` and `len()`.

### `dsadrills.circular_linked_list`

`CircularNode` and `CircularLinkedList`, held through its tail.
`insert_after(element, data)` inserts after the first node holding
`element` (on an empty list it simply creates the first node);
`delete(value)` removes the first node holding `value`; `to_list()` starts
at the tail; `is_circular()` checks the loop. Missing values raise
`ValueError`, deleting from an empty list raises `IndexError`.

### `dsadrills.stack`

`BoundedStack(size)` with `push`, `pop`, `peek`, `is_empty` and `len()`.
Pushing onto a full stack raises `StackOverflowError`; popping or peeking an
empty one raises `StackUnderflowError`, a subclass of `IndexError`.

### `dsadrills.binary_tree`

`TreeNode`, plus:

- `build_tree(values)`: builds from values in preorder, `-1` marking a
  missing child.
- `build_level_order_tree(values)`: builds level by level; each node reads
  its left then right child, `-1` marking a missing one.
- `level_order(root)` (a list of levels), `inorder(root)`, `preorder(root)`,
  `postorder(root)`.

Both builders raise `ValueError` if the values run out.

## Examples

```python
from dsadrills.arrays import nth_highest, rotate_right
from dsadrills.text import compress
from dsadrills.linked_list import SinglyLinkedList
from dsadrills.binary_tree import build_level_order_tree, level_order

rotate_right([1, 2, 3, 4, 5], 1)    # [5, 1, 2, 3, 4]
nth_highest([3, 2, 7, 6, 1, 5], 1)  # 7
compress("aabccddaa")               # "a2bc2d2a2"

lst = SinglyLinkedList.from_iterable([1, 2, 3, 4])
lst.reverse()
lst.to_list()                       # [4, 3, 2, 1]

root = build_level_order_tree([1, 2, 3, -1, -1, -1, -1])
level_order(root)                   # [[1], [2, 3]]
```

## What it does not do

This is a library only: it installs no command and prompts for nothing.
Inputs that an interactive drill would read from the keyboard, such as the
values for building a tree, are passed in as Python sequences instead.