"""Array puzzles: missing positives, deduplication, maximum subarray and searches."""

from __future__ import annotations

from bisect import bisect_left
from itertools import groupby
from typing import Any, Optional, Sequence


def first_missing(nums: Sequence[int]) -> int:
    """The smallest positive integer absent from ``nums``.

    Works by placing each value ``v`` in ``1..len(nums)`` at slot ``v - 1`` of
    a copy; the input itself is left untouched.
    """
    slots = list(nums)
    size = len(slots)
    for i in range(size):
        while 0 < (elem := slots[i]) <= size and slots[elem - 1] != elem:
            slots[i], slots[elem - 1] = slots[elem - 1], elem
    return next(
        (position for position, value in enumerate(slots, start=1) if value != position),
        size + 1,
    )


def remove_duplicates(nums: Sequence[Any]) -> list[Any]:
    """The values of ``nums`` with each run of equal neighbours kept once."""
    return [value for value, _ in groupby(nums)]


def largest_subarray(nums: Sequence[int]) -> list[int]:
    """The contiguous run with the largest positive sum; empty if none is positive."""
    best = 0
    span = (0, 0)
    running = 0
    run_start = 0
    for i, num in enumerate(nums):
        if running < 0:
            running = num
            run_start = i
        else:
            running += num
        if running > best:
            best = running
            span = (run_start, i + 1)
    return list(nums[span[0] : span[1]])


def binary_search_pivot(val: int, nums: Sequence[int]) -> int:
    """Index of ``val`` in a rotated ascending sequence, or -1 if absent."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == val:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= val < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < val <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def matrix_search(target: int, matrix: Sequence[Sequence[int]]) -> bool:
    """Whether ``target`` is in a matrix whose rows, read in order, ascend."""
    if not matrix or not matrix[0]:
        return False
    row_index = bisect_left(matrix, target, key=lambda row: row[-1])
    if row_index == len(matrix) or matrix[row_index][0] > target:
        return False
    row = matrix[row_index]
    position = bisect_left(row, target)
    return position < len(row) and row[position] == target


def remove_element(target: Any, nums: list[Optional[Any]]) -> int:
    """Replace every occurrence of ``target`` in ``nums`` with None; return how many."""
    count = 0
    for i, elem in enumerate(nums):
        if elem is not None and elem == target:
            nums[i] = None
            count += 1
    return count