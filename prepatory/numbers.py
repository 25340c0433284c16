"""Number puzzles: roots, powers, division, palindromes, stairs, Gray codes, permutations."""

from __future__ import annotations

from math import prod
from typing import Any, Iterator, Sequence


def integer_sqrt(x: int) -> int:
    """The largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    low, high = 0, (x + 1) // 2
    while True:
        mid = (low + high + 1) // 2
        square = mid * mid
        if low == high or square == x:
            return mid
        if square < x:
            low = mid
        else:
            high = mid - 1


def power(x: float, n: int) -> float:
    """``x`` raised to the integer ``n`` by repeated squaring."""
    result = 1.0
    exponent = abs(n)
    while exponent > 0:
        if exponent % 2 == 1:
            result = result * x if n > 0 else result / x
        exponent //= 2
        x *= x
    return result


def integer_divide(num: int, den: int) -> int:
    """Quotient of ``num`` by ``den`` truncated towards zero, by shifts and subtraction."""
    if den == 0:
        raise ZeroDivisionError("integer division by zero")
    remaining = abs(num)
    divisor = abs(den)
    result = 0
    while divisor <= remaining:
        chunk, multiple = divisor, 1
        while chunk << 1 <= remaining:
            chunk <<= 1
            multiple <<= 1
        result += multiple
        remaining -= chunk
    return -result if (num < 0) != (den < 0) else result


def is_palindrome(x: int) -> bool:
    """Whether the decimal digits of a non-negative integer read the same backwards."""
    if x < 0:
        raise ValueError("value must be non-negative")
    digits = str(x)
    return digits == digits[::-1]


def _check_u32(x: int) -> None:
    if not 0 <= x < 2**32:
        raise ValueError("value must fit in 32 unsigned bits")


def is_binary_palindrome_v1(x: int) -> bool:
    """Whether the binary digits of a 32-bit unsigned integer read the same backwards.

    Compares bit ``offset`` with its mirror for every offset from 1 upwards.
    """
    _check_u32(x)
    digits = x.bit_length()
    for offset in range(1, digits):
        mirrored = (x >> (digits - offset - 1)) & 1
        if mirrored != (x >> offset) & 1:
            return False
    return True


def is_binary_palindrome(x: int) -> bool:
    """Whether the binary digits of a 32-bit unsigned integer read the same backwards."""
    _check_u32(x)
    if x == 0:
        return True
    left, right = x.bit_length() - 1, 0
    while left > right:
        if (x >> left) & 1 != (x >> right) & 1:
            return False
        left -= 1
        right += 1
    return True


def climbing_stairs(n: int) -> int:
    """Ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError("number of stairs must be non-negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def generate_gray(n: int) -> list[int]:
    """The reflected binary Gray code of ``n`` bits."""
    return [i ^ (i >> 1) for i in range(1 << n)]


def _bits_changed(a: int, b: int) -> int:
    return ((a ^ b) & 0xFFFFFFFF).bit_count()


def is_gray_code(codes: Sequence[int]) -> bool:
    """Whether neighbours, and the last and first codes, differ in at most one bit."""
    if len(codes) <= 1:
        return True
    if any(_bits_changed(a, b) > 1 for a, b in zip(codes, codes[1:])):
        return False
    return _bits_changed(codes[0], codes[-1]) < 2


def next_permutation(perm: list[Any]) -> list[Any]:
    """Rearrange ``perm`` in place into the next lexicographic order and return it.

    The last permutation wraps around to the first.
    """
    if len(perm) < 2:
        return perm
    i = len(perm) - 2
    while i > 0 and perm[i] >= perm[i + 1]:
        i -= 1
    if i == 0 and perm[0] >= perm[1]:
        perm.reverse()
        return perm
    j = len(perm) - 1
    while perm[j] <= perm[i]:
        j -= 1
    perm[i], perm[j] = perm[j], perm[i]
    perm[i + 1 :] = reversed(perm[i + 1 :])
    return perm


def factorial(n: int) -> int:
    """The product of 1..n; 1 for zero."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return prod(range(1, n + 1))


def permutation_cycle(perm: Sequence[Any]) -> Iterator[list[Any]]:
    """Yield ``perm`` and its successors until the cycle returns to the start.

    ``factorial(len(perm)) + 1`` lists are yielded, each a fresh copy.
    """
    current = list(perm)
    for _ in range(factorial(len(current)) + 1):
        yield list(current)
        next_permutation(current)