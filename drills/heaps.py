"""Order statistics kept with a bounded min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def find_kth_largest(nums: Iterable[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``, counting duplicates.

    When ``nums`` holds fewer than ``k`` values the smallest is returned.
    Raises ValueError for ``k < 1`` or an empty ``nums``.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    largest = heapq.nlargest(k, nums)
    if not largest:
        raise ValueError("nums is empty")
    return largest[-1]


class KthLargest:
    """Track the ``k``-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int] = ()) -> None:
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")
        self.k = k
        self._heap: list[int] = []
        for num in nums:
            self._push(num)

    def _push(self, val: int) -> None:
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, val)
        else:
            heapq.heappushpop(self._heap, val)

    def add(self, val: int) -> int:
        """Add ``val`` to the stream and return the current ``k``-th largest."""
        self._push(val)
        return self._heap[0]