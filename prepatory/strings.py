"""String puzzles: word lengths, prefixes, run-length encoding, parsing, edit distance, search."""

from __future__ import annotations

from itertools import groupby

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

BASE = 256
MOD = 101


def last_word_length(s: str) -> int:
    """Length in bytes of the last space-separated word, ignoring trailing spaces."""
    stripped = s.encode().rstrip(b" ")
    return len(stripped) - (stripped.rfind(b" ") + 1)


def longest_prefix(strings: list[str]) -> str:
    """The longest prefix shared by every string; empty for an empty list."""
    common = []
    for chars in zip(*strings):
        if any(ch != chars[0] for ch in chars):
            break
        common.append(chars[0])
    return "".join(common)


def count_and_say(nums: str) -> str:
    """Run-length encode: each run becomes its count followed by the character."""
    return "".join(f"{len(list(run))}{ch}" for ch, run in groupby(nums))


def byte_distance(byte: int) -> int:
    """Numeric value of an ASCII digit byte."""
    if not ord("0") <= byte <= ord("9"):
        raise ValueError("Byte must be a digit")
    return byte - ord("0")


def _ceil_div10(value: int) -> int:
    return -((-value) // 10)


def string_to_integer(s: str) -> int:
    """Parse an optionally negative decimal string into a 32-bit signed integer.

    Raises ValueError for a misplaced minus sign, a non-digit byte, or a value
    outside the 32-bit range.
    """
    total = 0
    sign = 1
    started = False
    for byte in s.encode():
        if byte == ord("-"):
            if started:
                raise ValueError("found - in the middle of the number")
            sign = -1
            started = True
        elif ord("0") <= byte <= ord("9"):
            digit = byte - ord("0")
            if sign == -1:
                if total < _ceil_div10(I32_MIN + digit):
                    raise ValueError("Underflow")
            elif total > (I32_MAX - digit) // 10:
                raise ValueError("Overflow")
            started = True
            total = total * 10 + sign * digit
        else:
            raise ValueError("Byte out of range")
    return total


def levenshtein(word1: str, word2: str) -> int:
    """Edit distance between two strings, compared byte by byte."""
    w1 = word1.encode()
    w2 = word2.encode()
    previous = list(range(len(w2) + 1))
    for i, a in enumerate(w1, start=1):
        current = [i]
        for j, b in enumerate(w2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def rolling_hash(data: bytes) -> int:
    """Polynomial hash of ``data`` in base 256 modulo 101."""
    value = 0
    for byte in data:
        value = (value * BASE + byte) % MOD
    return value


def mod_pow(base: int, modulus: int, n: int) -> int:
    """``base ** n`` modulo ``modulus`` by repeated squaring."""
    result = 1
    base %= modulus
    while n > 0:
        if n % 2 == 1:
            result = (result * base) % modulus
        n //= 2
        base = (base * base) % modulus
    return result


def advance_hash_window(new: int, old: int, n: int, hash_value: int) -> int:
    """Slide a rolling hash of width ``n``: drop byte ``old``, append byte ``new``."""
    removed = (old * mod_pow(BASE, MOD, n - 1)) % MOD
    hash_value = (hash_value + MOD - removed) % MOD
    return (hash_value * BASE + new) % MOD


def substring_search(haystack: str, needle: str) -> int:
    """Byte offset of the first window whose rolling hash equals the needle's.

    Hash equality is taken as a match without comparing the bytes. Returns -1
    for an empty needle, a needle longer than the haystack, or no match.
    """
    hay = haystack.encode()
    pattern = needle.encode()
    width = len(pattern)
    if width == 0 or width > len(hay):
        return -1
    target = rolling_hash(pattern)
    window = rolling_hash(hay[:width])
    last = len(hay) - width
    for i in range(last + 1):
        if window == target:
            return i
        if i < last:
            window = advance_hash_window(hay[i + width], hay[i], width, window)
    return -1