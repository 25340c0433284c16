"""Sum-finding puzzles: two, three, four and n values adding up to a target."""

from __future__ import annotations

from bisect import bisect_left
from typing import Optional, Sequence


def binary_search(target: int, nums: Sequence[int]) -> Optional[int]:
    """Return ``target`` if it occurs in the ascending ``nums``, else None."""
    position = bisect_left(nums, target)
    if position < len(nums) and nums[position] == target:
        return target
    return None


def three_sum_sorted(target: int, nums: Sequence[int]) -> Optional[tuple[int, int, int]]:
    """Three values of ``nums`` that add up to ``target``, in ascending order.

    The values are sorted first and the search stops as soon as every
    remaining triple is too large. Returns None when there is no such triple.
    """
    values = sorted(nums)
    size = len(values)
    for i in range(size - 2):
        if values[i] + values[i + 1] + values[i + 2] > target:
            return None
        for j in range(i + 1, size - 1):
            if values[i] + values[j] + values[j + 1] > target:
                break
            found = binary_search(target - values[i] - values[j], values[j + 1 :])
            if found is not None:
                return values[i], values[j], found
    return None


def three_sum(nums: Sequence[int]) -> Optional[tuple[int, int, int]]:
    """Indices of three values that add up to zero, or None.

    Pair sums seen so far are remembered by their last pair; the first index
    whose negation matches a remembered pair sum completes the triple.
    """
    pairs: dict[int, tuple[int, int]] = {}
    for i, value in enumerate(nums):
        pair = pairs.get(-value)
        if pair is not None:
            return pair[0], pair[1], i
        for j in range(i):
            pairs[value + nums[j]] = (j, i)
    return None


def four_sum(nums: Sequence[int]) -> Optional[tuple[int, int, int, int]]:
    """Indices of four values that add up to zero, or None."""
    triples: dict[int, tuple[int, int, int]] = {}
    for i, value in enumerate(nums):
        triple = triples.get(-value)
        if triple is not None:
            return triple[0], triple[1], triple[2], i
        for j in range(i):
            for k in range(j):
                triples[value + nums[j] + nums[k]] = (k, j, i)
    return None


def n_sum(n: int, target: int, nums: Sequence[int]) -> Optional[list[int]]:
    """Ascending indices of ``n`` values that add up to ``target``, or None."""
    if n < 1 or len(nums) < n:
        return None
    for i, value in enumerate(nums):
        if n == 1:
            if value == target:
                return [i]
            continue
        found = n_sum(n - 1, target - value, nums[:i])
        if found is not None:
            return [*found, i]
    return None


def three_sum_closest(target: int, nums: Sequence[int]) -> Optional[int]:
    """The sum of three values of ``nums`` closest to ``target``.

    Returns None when ``nums`` has fewer than three values. Among equally close
    sums the one found last wins.
    """
    if len(nums) < 3:
        return None
    values = sorted(nums)
    closest: Optional[int] = None
    distance: Optional[int] = None
    for i in range(2, len(values)):
        left, right = 0, i - 1
        while left < right:
            total = values[left] + values[i] + values[right]
            gap = abs(target - total)
            if total < target:
                left += 1
            elif total > target:
                right -= 1
            else:
                return total
            if distance is None or gap <= distance:
                distance = gap
                closest = total
    return closest


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Indices of the first pair of values adding up to ``target``, or None."""
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        j = seen.get(target - value)
        if j is not None:
            return j, i
        seen[value] = i
    return None


def find_candidates(target: int, candidates: Sequence[int]) -> list[list[int]]:
    """Combinations of candidates, in input order, that add up to ``target``.

    Partial sums below the target are kept one combination list per sum; a
    later combination reaching a sum already held replaces the earlier one,
    so not every combination is reported. A single candidate is never a
    result on its own.
    """
    result: list[list[int]] = []
    partial: dict[int, list[list[int]]] = {}
    for candy in candidates:
        fresh: dict[int, list[list[int]]] = {}
        if candy < target:
            fresh[candy] = [[candy]]
        for key, combos in partial.items():
            new_key = candy + key
            extended = [[*combo, candy] for combo in combos]
            if new_key < target:
                fresh[new_key] = extended
            elif new_key == target:
                result.extend(extended)
        partial.update(fresh)
    return result