"""Find the k pairs with the smallest sums across two sorted lists."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Sequence


def k_smallest_pairs(nums1: Sequence[int], nums2: Sequence[int], k: int) -> list[list[int]]:
    """Return the ``k`` pairs ``[u, v]`` with the smallest sums, enumerating every pair.

    Pairs of equal sum come in enumeration order: ``nums1`` outer, ``nums2`` inner.
    A non-positive ``k`` or an empty input gives an empty list.
    """
    if k <= 0 or not nums1 or not nums2:
        return []
    k = min(k, len(nums1) * len(nums2))
    by_sum: defaultdict[int, deque[list[int]]] = defaultdict(deque)
    for u in nums1:
        for v in nums2:
            by_sum[u + v].append([u, v])
    sums = sorted(u + v for u in nums1 for v in nums2)[:k]
    return [by_sum[total].popleft() for total in sums]


def k_smallest_pairs_fast(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[list[int]]:
    """Return the ``k`` pairs ``[u, v]`` with the smallest sums using a bounded max-heap.

    Both inputs must be sorted ascending. The pairs come ordered by sum.
    Raises ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0 or not nums1 or not nums2:
        return []
    heap: list[tuple[int, int, int]] = []  # (-sum, i, j): the root holds the largest sum
    for i, u in enumerate(nums1):
        for j, v in enumerate(nums2):
            total = u + v
            if len(heap) < k:
                heapq.heappush(heap, (-total, i, j))
            elif -heap[0][0] > total:
                heapq.heapreplace(heap, (-total, i, j))
            else:
                break
    chosen = sorted((-neg_total, i, j) for neg_total, i, j in heap)
    return [[nums1[i], nums2[j]] for _, i, j in chosen]