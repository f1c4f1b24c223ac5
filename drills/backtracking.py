"""Exhaustive search over combinations and subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def combination_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset of ``nums`` (with repetition) that sums to ``target``.

    Each combination lists its numbers in the order they appear in ``nums``.
    """
    pool = list(nums)
    found: list[list[int]] = []

    def search(start: int, chosen: list[int], total: int) -> None:
        if total > target:
            return
        if total == target:
            found.append(chosen)
        for index, value in enumerate(pool[start:], start):
            search(index, chosen + [value], total + value)

    search(0, [], 0)
    return found


def _subsets_of(items: list[int]) -> Iterator[list[int]]:
    if not items:
        yield []
        return
    first, rest = items[0], items[1:]
    yield from ([first] + tail for tail in _subsets_of(rest))
    yield from _subsets_of(rest)


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets of ``nums``, those holding earlier items first."""
    return list(_subsets_of(list(nums)))