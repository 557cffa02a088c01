"""
In-place Integer Sorting

Two unstable comparison sorts operating directly on a mutable list:

- QUICK: quicksort with median-of-three pivot, insertion sort for small
  ranges, and recursion only into the smaller side (stack depth O(log n))
- HEAP: classic bottom-up max-heap heapsort, O(n log n) guaranteed

Neither algorithm keeps equal values in their original relative order.
"""

from enum import Enum
from typing import MutableSequence

# Ranges with hi - lo below this are finished with insertion sort
INSERTION_SORT_THRESHOLD = 16


class SortStrategy(Enum):
    """Available sorting algorithms"""
    QUICK = "quick"
    HEAP = "heap"


def _insertion_sort(a: MutableSequence[int], lo: int, hi: int):
    """Sort a[lo..hi] inclusive by shifting larger values right"""
    for i in range(lo + 1, hi + 1):
        key = a[i]
        j = i - 1
        while j >= lo and a[j] > key:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = key


def _median_of_three(a: MutableSequence[int], lo: int, hi: int) -> int:
    """
    Order a[lo], a[mid], a[hi] and park the median at hi - 1

    Afterwards a[lo] <= pivot <= a[hi], so both ends act as sentinels for
    the partition scan.

    Returns:
        The pivot value
    """
    mid = lo + ((hi - lo) >> 1)
    if a[lo] > a[mid]:
        a[lo], a[mid] = a[mid], a[lo]
    if a[lo] > a[hi]:
        a[lo], a[hi] = a[hi], a[lo]
    if a[mid] > a[hi]:
        a[mid], a[hi] = a[hi], a[mid]

    a[mid], a[hi - 1] = a[hi - 1], a[mid]
    return a[hi - 1]


def _quick_sort(a: MutableSequence[int], lo: int, hi: int):
    while lo < hi:
        if hi - lo < INSERTION_SORT_THRESHOLD:
            _insertion_sort(a, lo, hi)
            return

        pivot = _median_of_three(a, lo, hi)
        i, j = lo, hi - 1
        while True:
            i += 1
            while a[i] < pivot:
                i += 1
            j -= 1
            while a[j] > pivot:
                j -= 1
            if i < j:
                a[i], a[j] = a[j], a[i]
            else:
                break

        # Restore pivot to its final slot
        a[i], a[hi - 1] = a[hi - 1], a[i]

        # Recurse into the smaller side, loop on the larger one
        if i - lo < hi - i:
            _quick_sort(a, lo, i - 1)
            lo = i + 1
        else:
            _quick_sort(a, i + 1, hi)
            hi = i - 1


def quick_sort(values: MutableSequence[int]):
    """Sort values in place with median-of-three quicksort"""
    if len(values) > 1:
        _quick_sort(values, 0, len(values) - 1)


def _sift_down(a: MutableSequence[int], size: int, i: int):
    """Push a[i] down until the max-heap property holds within a[:size]"""
    while True:
        left = 2 * i + 1
        right = left + 1
        largest = i
        if left < size and a[left] > a[largest]:
            largest = left
        if right < size and a[right] > a[largest]:
            largest = right
        if largest == i:
            break
        a[i], a[largest] = a[largest], a[i]
        i = largest


def heap_sort(values: MutableSequence[int]):
    """Sort values in place with heapsort"""
    n = len(values)

    # Build max-heap
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(values, n, i)

    # Extract max
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)


def sort_values(values: MutableSequence[int], strategy: SortStrategy = SortStrategy.QUICK):
    """
    Sort values in place using the selected strategy

    Anything other than SortStrategy.HEAP falls back to quicksort.
    """
    if strategy is SortStrategy.HEAP:
        heap_sort(values)
    else:
        quick_sort(values)
