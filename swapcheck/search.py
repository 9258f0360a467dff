"""Binary search, heap sort with a comparison predicate, and integer square root."""

from __future__ import annotations

import math
from typing import Callable, Iterable, List, Optional, Sequence

Compare = Callable[[int, int], bool]


def ascending(a: int, b: int) -> bool:
    """True when ``a`` comes before ``b`` in ascending order."""
    return a < b


def descending(a: int, b: int) -> bool:
    """True when ``a`` comes before ``b`` in descending order."""
    return a > b


def binary_search(values: Sequence[int], target: int) -> Optional[int]:
    """Index of ``target`` in the ascending ``values``, or None if absent."""
    low, high = -1, len(values)
    while high - low > 1:
        mid = (low + high) // 2
        if values[mid] < target:
            low = mid
        elif values[mid] > target:
            high = mid
        else:
            return mid
    return None


def _sift_down(heap: List[int], index: int, size: int, cmp: Compare) -> None:
    while True:
        left = 2 * index + 1
        if left >= size:
            return
        right = left + 1
        child = right if right < size and cmp(heap[left], heap[right]) else left
        if cmp(heap[child], heap[index]):
            return
        heap[index], heap[child] = heap[child], heap[index]
        index = child


def heap_sort(values: Iterable[int], cmp: Optional[Compare] = None) -> List[int]:
    """A new list of ``values`` ordered by ``cmp`` (ascending when None)."""
    order = cmp or ascending
    heap = list(values)
    size = len(heap)
    for index in reversed(range(size)):
        _sift_down(heap, index, size, order)
    for end in reversed(range(1, size)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end, order)
    return heap


def isqrt(n: int) -> int:
    """Floor of the square root of ``n``; values of 1 or less come back unchanged."""
    if n <= 1:
        return n
    return math.isqrt(n)