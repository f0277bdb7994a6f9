"""Integer and bit-level helpers."""

from __future__ import annotations


def is_power_of_two(num: int) -> bool:
    """Return True if ``num`` is a positive power of two."""
    return num > 0 and num & (num - 1) == 0


def count_ones(num: int) -> int:
    """Count the set bits of ``num``; non-positive numbers count as zero."""
    count = 0
    while num > 0:
        num &= num - 1
        count += 1
    return count


def count_total_ones(n: int) -> int:
    """Total number of set bits over every integer from 0 to ``n`` inclusive."""
    return sum(count_ones(i) for i in range(n + 1))


def is_palindrome_number(num: int) -> bool:
    """Check whether ``num`` reads the same forwards and backwards.

    Negative numbers are never palindromes. The check reverses only the
    lower half of the digits.
    """
    if num < 0:
        return False
    if num < 10:
        return True

    reversed_half = 0
    while num > reversed_half:
        num, digit = divmod(num, 10)
        reversed_half = reversed_half * 10 + digit

    return num == reversed_half or num == reversed_half // 10