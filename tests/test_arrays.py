from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsadrills.arrays import (
    bubble_sort,
    column_sums,
    matrix_sum,
    missing_ap_term,
    nth_highest,
    nth_lowest,
    reversed_copy,
    rotate_left,
    rotate_right,
    row_sums,
    segregate_even_odd,
    segregate_negatives,
    segregate_zeros_ones,
)

SOURCE_VALUES = [3, 2, 7, 6, 1, 5]
int_lists = st.lists(st.integers(-1000, 1000))
nonempty_lists = st.lists(st.integers(-1000, 1000), min_size=1)


@given(int_lists)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


def test_bubble_sort_leaves_input_alone():
    values = list(SOURCE_VALUES)
    result = bubble_sort(values)
    assert values == SOURCE_VALUES
    assert result == sorted(SOURCE_VALUES)


@given(nonempty_lists)
def test_extremes(values):
    assert nth_highest(values, 1) == max(values)
    assert nth_lowest(values, 0) == min(values)
    assert nth_highest(values, len(values)) == min(values)
    assert nth_lowest(values, len(values) - 1) == max(values)


@given(nonempty_lists, st.data())
def test_highest_and_lowest_agree(values, data):
    n = data.draw(st.integers(1, len(values)))
    assert nth_highest(values, n) == nth_lowest(values, len(values) - n)


@pytest.mark.parametrize("n", [0, 7, -1])
def test_nth_highest_out_of_range(n):
    with pytest.raises(IndexError):
        nth_highest(SOURCE_VALUES, n)


@pytest.mark.parametrize("n", [-1, 6])
def test_nth_lowest_out_of_range(n):
    with pytest.raises(IndexError):
        nth_lowest(SOURCE_VALUES, n)


def test_even_odd_source_example():
    assert segregate_even_odd([1, 2, 3, 4]) == [1, 3, 2, 4]


def _is_partitioned(items, is_front):
    flags = [is_front(x) for x in items]
    return flags == sorted(flags, reverse=True)


@given(int_lists)
def test_even_odd_partition(values):
    result = segregate_even_odd(values)
    assert Counter(result) == Counter(values)
    assert _is_partitioned(result, lambda x: x % 2 != 0)


@given(st.lists(st.integers(0, 1)))
def test_zeros_ones_partition(values):
    result = segregate_zeros_ones(values)
    assert Counter(result) == Counter(values)
    assert _is_partitioned(result, lambda x: x == 0)


@given(st.lists(st.integers(-1000, 1000).filter(lambda x: x != 0)))
def test_negatives_partition(values):
    result = segregate_negatives(values)
    assert Counter(result) == Counter(values)
    assert _is_partitioned(result, lambda x: x < 0)


def test_source_zeros_ones_example():
    source = [0, 0, 1, 0, 1, 0]
    result = segregate_zeros_ones(source)
    assert result == sorted(source)


def test_rotate_right_by_four():
    assert rotate_right([1, 2, 3, 4, 5], 4) == [2, 3, 4, 5, 1]


def test_rotate_right_once_equals_rotate_left_rest():
    values = [1, 2, 3, 4, 5]
    assert rotate_right(values, 1) == rotate_left(values, 4)
    assert rotate_right(values, 1)[0] == values[-1]


@given(int_lists, st.data())
def test_rotation_round_trip(values, data):
    k = data.draw(st.integers(0, len(values)))
    assert rotate_left(rotate_right(values, k), k) == values
    assert rotate_right(rotate_left(values, k), k) == values


@given(int_lists)
def test_full_rotation_is_identity(values):
    assert rotate_right(values, len(values)) == values
    assert rotate_left(values, 0) == values


@pytest.mark.parametrize("k", [-1, 6])
def test_rotation_out_of_range(k):
    with pytest.raises(ValueError):
        rotate_right([1, 2, 3, 4, 5], k)
    with pytest.raises(ValueError):
        rotate_left([1, 2, 3, 4, 5], k)


@given(int_lists)
def test_reversed_copy_round_trip(values):
    once = reversed_copy(values)
    assert reversed_copy(once) == values
    if values:
        assert once[0] == values[-1]


def test_missing_term_source_example():
    assert missing_ap_term([12, 15, 18, 24]) == 21


@given(
    st.integers(-500, 500),
    st.integers(-50, 50),
    st.integers(3, 30),
    st.data(),
)
def test_missing_term_recovered(first, step, length, data):
    full = [first + step * i for i in range(length)]
    gap = data.draw(st.integers(1, length - 2))
    missing = full[gap]
    assert missing_ap_term(full[:gap] + full[gap + 1:]) == missing


@pytest.mark.parametrize("values", [[], [4]])
def test_missing_term_needs_two_terms(values):
    with pytest.raises(ValueError):
        missing_ap_term(values)


matrices = st.integers(1, 5).flatmap(
    lambda width: st.lists(st.lists(st.integers(-100, 100), min_size=width, max_size=width))
)


@given(matrices)
def test_sums_agree(matrix):
    total = matrix_sum(matrix)
    assert sum(row_sums(matrix)) == total
    assert sum(column_sums(matrix)) == total


@given(matrices)
def test_columns_are_rows_of_transpose(matrix):
    transposed = [list(col) for col in zip(*matrix)]
    assert column_sums(matrix) == row_sums(transposed)


def test_source_matrix_shape():
    matrix = [[1, 2, 3], [2, 3, 4]]
    assert len(row_sums(matrix)) == 2
    assert len(column_sums(matrix)) == 3
    assert matrix_sum(matrix) == sum(column_sums(matrix))


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        column_sums([[1, 2, 3], [4, 5]])


def test_empty_matrix():
    assert column_sums([]) == []
    assert row_sums([]) == []
    assert matrix_sum([]) == 0