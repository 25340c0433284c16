import pytest

from prepatory.arrays import (
    binary_search_pivot,
    first_missing,
    largest_subarray,
    matrix_search,
    remove_duplicates,
    remove_element,
)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([0, 1, 2], 3),
        ([2, 1, 4], 3),
        ([2, 1, 3], 4),
        ([2, 3, 4, 1], 5),
    ],
)
def test_first_missing_source_cases(nums, expected):
    assert first_missing(nums) == expected


def test_first_missing_leaves_input_alone():
    nums = [2, 3, 4, 1]
    first_missing(nums)
    assert nums == [2, 3, 4, 1]


def test_first_missing_with_duplicates_terminates():
    assert first_missing([1, 1]) == 2


@pytest.mark.parametrize(
    "nums",
    [[], [7, 8, 9], [-1, -5, 3, 1], [3, 3, 1, 2, 2], [5, 4, 3, 2, 1], [1, 2, 6, 4]],
)
def test_first_missing_invariant(nums):
    result = first_missing(nums)
    assert result >= 1
    assert result not in nums
    assert all(k in nums for k in range(1, result))


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 1, 1, 1, 2, 2, 3], [1, 2, 3]),
        ([1, 2, 2, 3], [1, 2, 3]),
        ([0, 1, 2, 2, 3], [0, 1, 2, 3]),
        ([0, 1, 2, 3], [0, 1, 2, 3]),
        ([], []),
    ],
)
def test_remove_duplicates(nums, expected):
    assert remove_duplicates(nums) == expected


def test_remove_duplicates_has_no_equal_neighbours():
    result = remove_duplicates([4, 4, 5, 5, 5, 6, 7, 7])
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == {4, 5, 6, 7}


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 2, 3], [1, 2, 3]),
        ([1, 2, -2, 3], [1, 2, -2, 3]),
        ([-1, -2, -3], []),
    ],
)
def test_largest_subarray_source_cases(nums, expected):
    assert largest_subarray(nums) == expected


@pytest.mark.parametrize(
    "nums",
    [[-2, 1, -3, 4, -1, 2, 1, -5, 4], [5, -9, 6, -2, 3], [3, -1, -1, 4]],
)
def test_largest_subarray_is_maximal_contiguous(nums):
    result = largest_subarray(nums)
    best = max(
        sum(nums[i:j]) for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)
    )
    assert sum(result) == max(best, 0)
    windows = [nums[i : i + len(result)] for i in range(len(nums) - len(result) + 1)]
    assert result in windows


ROTATED = [4, 5, 6, 7, 0, 1, 2]


@pytest.mark.parametrize("index, value", list(enumerate(ROTATED)))
def test_binary_search_pivot_finds_each(index, value):
    assert binary_search_pivot(value, ROTATED) == index


def test_binary_search_pivot_missing():
    assert binary_search_pivot(-7, ROTATED) == -1


def test_binary_search_pivot_empty():
    assert binary_search_pivot(3, []) == -1


@pytest.mark.parametrize("shift", range(6))
def test_binary_search_pivot_all_rotations(shift):
    base = [1, 3, 5, 8, 10, 13]
    nums = base[shift:] + base[:shift]
    for index, value in enumerate(nums):
        assert binary_search_pivot(value, nums) == index
    for absent in (0, 2, 9, 14):
        assert binary_search_pivot(absent, nums) == -1


MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


def test_matrix_search_example():
    assert matrix_search(11, MATRIX) is True


def test_matrix_search_every_element_found():
    assert all(matrix_search(value, MATRIX) for row in MATRIX for value in row)


@pytest.mark.parametrize("target", [0, 2, 8, 12, 21, 61])
def test_matrix_search_absent(target):
    assert matrix_search(target, MATRIX) is False


@pytest.mark.parametrize("matrix", [[], [[]]])
def test_matrix_search_empty(matrix):
    assert matrix_search(1, matrix) is False


def test_remove_element():
    nums = [3, 2, 2, 3, None, None]
    assert remove_element(3, nums) == 2
    assert nums == [None, 2, 2, None, None, None]


def test_remove_element_absent_leaves_list():
    nums = [1, None, 2]
    assert remove_element(5, nums) == 0
    assert nums == [1, None, 2]