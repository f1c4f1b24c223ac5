"""Searches and scans over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ascending ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] > target:
            high = mid - 1
        elif nums[mid] < target:
            low = mid + 1
        else:
            return mid
    return -1


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices ``[i, j]``, ``i < j``, of two values summing to ``target``.

    ``numbers`` must be sorted in non-decreasing order. Returns an empty list
    when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            return [left + 1, right + 1]
    return []


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by a later sell, or 0."""
    best = 0
    if not prices:
        return best
    lowest = prices[0]
    for price in prices[1:]:
        if lowest < price:
            best = max(best, price - lowest)
        else:
            lowest = price
    return best