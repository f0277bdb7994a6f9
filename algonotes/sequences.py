"""Array and sequence algorithms."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence


def max_frequency_element(nums: Sequence[int]) -> int | None:
    """Return the most frequent element, the earliest one on ties.

    Returns None for an empty sequence.
    """
    counts = Counter(nums)
    if not counts:
        return None
    best, _ = max(counts.items(), key=lambda item: item[1])
    return best


def equilibrium_index(arr: Sequence[int]) -> int | None:
    """Return the first index whose left and right sums are equal, or None."""
    total = sum(arr)
    left = 0
    for index, value in enumerate(arr):
        if left == total - left - value:
            return index
        left += value
    return None


def majority_element(arr: Sequence[int]) -> int | None:
    """Return the element occurring more than ``len(arr) // 2`` times, or None."""
    if not arr:
        return None
    candidate, count = Counter(arr).most_common(1)[0]
    return candidate if count > len(arr) // 2 else None


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")

    result: list[int] = []
    window: deque[int] = deque()
    for i, value in enumerate(nums):
        if window and window[0] <= i - k:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def next_greater_elements(nums: Sequence[int]) -> list[int | None]:
    """For each element, the first later element strictly greater, else None."""
    result: list[int | None] = [None] * len(nums)
    pending: list[int] = []
    for i, value in enumerate(nums):
        while pending and nums[pending[-1]] < value:
            result[pending.pop()] = value
        pending.append(i)
    return result