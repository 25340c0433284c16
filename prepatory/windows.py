"""Minimum window substring, by exhaustive search and by sliding window."""

from __future__ import annotations

from collections import Counter
from typing import Optional


def contains_all(needle: str, haystack: str) -> bool:
    """True if ``haystack`` holds every character of ``needle`` at least as often."""
    return not (Counter(needle) - Counter(haystack))


def minimum_window_brute(search: str, corpus: str) -> Optional[str]:
    """Shortest substring of ``corpus`` containing all of ``search``, by exhaustive search.

    Every window is examined, shortest first; a window that qualifies keeps the
    better of its two one-shorter sub-windows, preferring the one that drops
    the first character on a tie. Returns None when no window qualifies.
    """
    n = len(corpus)
    best: dict[tuple[int, int], Optional[tuple[int, int]]] = {}
    for length in range(1, n + 1):
        for start in range(n - length + 1):
            end = start + length
            if not contains_all(search, corpus[start:end]):
                best[start, end] = None
                continue
            left = best.get((start + 1, end))
            right = best.get((start, end - 1))
            if left is not None and right is not None:
                choice = left if left[1] - left[0] <= right[1] - right[0] else right
            elif left is not None:
                choice = left
            elif right is not None:
                choice = right
            else:
                choice = (start, end)
            best[start, end] = choice
    span = best.get((0, n))
    return None if span is None else corpus[span[0] : span[1]]


def minimum_window_substring(needle: str, haystack: str) -> Optional[str]:
    """Shortest window of ``haystack`` containing all of ``needle``, by two pointers.

    An empty needle gives an empty string. A window is only recorded while the
    right edge is still inside the haystack, so a window that completes on the
    last character is not reported; None is returned when nothing was recorded.
    """
    if not needle:
        return ""
    freq = {ch: -count for ch, count in Counter(needle).items()}
    need = len(freq)
    have = 0
    formed = False
    left = right = 0
    size = len(haystack)
    best = (0, size)
    while right < size:
        if formed:
            ch = haystack[left]
            if ch in freq:
                freq[ch] -= 1
                if freq[ch] < 0:
                    have -= 1
                    formed = False
            if right - left < best[1] - best[0]:
                best = (left, right)
            left += 1
        else:
            ch = haystack[right]
            if ch in freq:
                freq[ch] += 1
                if freq[ch] == 0:
                    have += 1
                if have == need:
                    formed = True
            right += 1
    start, end = best
    return haystack[start:end] if end < size else None