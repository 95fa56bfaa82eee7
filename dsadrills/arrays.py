"""Exercises on lists of integers and small matrices."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with the values in ascending order, sorted by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def nth_highest(values: Iterable[int], n: int) -> int:
    """Return the n-th highest value, counting the maximum as the first."""
    ordered = bubble_sort(values)
    if not 1 <= n <= len(ordered):
        raise IndexError(f"n must be between 1 and {len(ordered)}, got {n}")
    return ordered[len(ordered) - n]


def nth_lowest(values: Iterable[int], n: int) -> int:
    """Return the value that has n values before it in ascending order."""
    ordered = bubble_sort(values)
    if not 0 <= n < len(ordered):
        raise IndexError(f"n must be between 0 and {len(ordered) - 1}, got {n}")
    return ordered[n]


def _segregate(
    values: Iterable[int],
    moves_back: Callable[[int], bool],
    moves_front: Callable[[int], bool],
) -> list[int]:
    """Swap elements from both ends inward, pushing some to the back."""
    items = list(values)
    i, j = 0, len(items) - 1
    while i < j:
        if moves_back(items[i]):
            if moves_front(items[j]):
                items[i], items[j] = items[j], items[i]
                i += 1
            j -= 1
        else:
            i += 1
    return items


def segregate_even_odd(values: Iterable[int]) -> list[int]:
    """Return the values with odd numbers before even ones."""
    return _segregate(values, lambda x: x % 2 == 0, lambda x: x % 2 != 0)


def segregate_zeros_ones(values: Iterable[int]) -> list[int]:
    """Return the values with every 1 moved behind the other values."""
    return _segregate(values, lambda x: x == 1, lambda x: x != 1)


def segregate_negatives(values: Iterable[int]) -> list[int]:
    """Return the values with positive numbers moved behind the negative ones."""
    return _segregate(values, lambda x: x > 0, lambda x: x < 0)


def _checked_shift(values: Sequence[int], k: int) -> list[int]:
    items = list(values)
    if not 0 <= k <= len(items):
        raise ValueError(f"rotation must be between 0 and {len(items)}, got {k}")
    return items


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return the values rotated k places to the right."""
    items = _checked_shift(values, k)
    split = len(items) - k
    return items[split:] + items[:split]


def rotate_left(values: Sequence[int], k: int) -> list[int]:
    """Return the values rotated k places to the left."""
    items = _checked_shift(values, k)
    return items[k:] + items[:k]


def reversed_copy(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(list(values)))


def missing_ap_term(values: Sequence[int]) -> int:
    """Return the term missing from an arithmetic progression.

    The first and last terms must be present; the sum of the complete
    progression is compared with the sum of the given terms.
    """
    items = list(values)
    if len(items) < 2:
        raise ValueError("at least two terms are needed")
    total = (len(items) + 1) * (items[0] + items[-1])
    full_sum = total // 2 if total >= 0 else -(-total // 2)
    return full_sum - sum(items)


def matrix_sum(matrix: Iterable[Iterable[int]]) -> int:
    """Return the sum of every element of the matrix."""
    return sum(sum(row) for row in matrix)


def row_sums(matrix: Iterable[Iterable[int]]) -> list[int]:
    """Return the sum of each row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Iterable[Iterable[int]]) -> list[int]:
    """Return the sum of each column; all rows must have the same length."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    return [sum(column) for column in zip(*rows, strict=True)]