"""Digit-list addition and the merge of two sorted sequences."""

from __future__ import annotations

from heapq import merge as _heap_merge
from itertools import zip_longest
from typing import Any, Iterable


def add_two_numbers(left: Iterable[int], right: Iterable[int]) -> list[int]:
    """Add two numbers given as digit sequences, least significant digit first.

    The result is in the same order. A final carry becomes an extra digit.
    """
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(left, right, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        result.append(digit)
    return result


def merge(base: Iterable[Any], other: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On equal values the one from ``base`` comes first.
    """
    return list(_heap_merge(base, other))