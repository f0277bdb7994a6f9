"""String algorithms."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def permutations(s: str) -> Iterator[str]:
    """Yield every arrangement of ``s`` in swap-recursion order.

    Repeated characters give repeated permutations.
    """
    chars = list(s)

    def permute(start: int) -> Iterator[str]:
        if start == len(chars):
            yield "".join(chars)
            return
        for i in range(start, len(chars)):
            chars[start], chars[i] = chars[i], chars[start]
            yield from permute(start + 1)
            chars[start], chars[i] = chars[i], chars[start]

    return permute(0)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings, or an empty string."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix