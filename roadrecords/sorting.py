"""In-place sorting of road records by link id with several classic algorithms."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import MutableSequence
from enum import Enum

from .record import RoadRecord

BUCKET_COUNT = 600

Records = MutableSequence[RoadRecord]


def _swap(records: Records, first: int, second: int) -> None:
    records[first], records[second] = records[second], records[first]


def _write_back(records: Records, ordered: list[RoadRecord], start: int = 0) -> None:
    for offset, record in enumerate(ordered):
        records[start + offset] = record


def bubble_sort(records: Records) -> None:
    """Ascending bubble sort that skips the prefix already known to be in place."""
    size = len(records)
    last_swap = pending_swap = 0
    for _ in range(size - 1):
        last_swap = pending_swap
        for j in range(size - 1, last_swap, -1):
            if records[j - 1] > records[j]:
                _swap(records, j - 1, j)
                pending_swap = j
        if last_swap == pending_swap:
            break


def shell_sort(records: Records, ascending: bool = True) -> None:
    """Shell sort with the gap halved on every pass."""
    size = len(records)
    gap = size // 2
    while gap > 0:
        for k in range(gap, size):
            current = records[k]
            j = k - gap
            while j >= 0 and (
                current < records[j] if ascending else not current < records[j]
            ):
                records[j + gap] = records[j]
                j -= gap
            records[j + gap] = current
        gap //= 2


def bucket_sort(records: Records, ascending: bool = True) -> None:
    """Spread records over equal link-id ranges, shell sort each range, join them.

    The ranges are always joined from the lowest to the highest; ``ascending``
    only orders the records inside each range.
    """
    if not records:
        return
    limit = max(record.link_id for record in records) + 1
    width = limit / BUCKET_COUNT
    buckets: list[list[RoadRecord]] = [[] for _ in range(BUCKET_COUNT)]
    for record in records:
        index = min(math.floor(record.link_id / width), BUCKET_COUNT - 1)
        buckets[index].append(record)
    ordered: list[RoadRecord] = []
    for bucket in buckets:
        shell_sort(bucket, ascending)
        ordered.extend(bucket)
    _write_back(records, ordered)


def count_sort(records: Records) -> None:
    """Stable ascending counting sort on the link id."""
    snapshot = list(records)
    counts = Counter(record.link_id for record in snapshot)
    ends: dict[int, int] = {}
    total = 0
    for link_id in sorted(counts):
        total += counts[link_id]
        ends[link_id] = total
    ordered: list[RoadRecord | None] = [None] * len(snapshot)
    for record in reversed(snapshot):
        ends[record.link_id] -= 1
        ordered[ends[record.link_id]] = record
    _write_back(records, ordered)  # type: ignore[arg-type]


def _sift_down(records: Records, index: int, size: int) -> None:
    child = 2 * index + 1
    current = records[index]
    while child < size:
        if child + 1 < size and records[child] < records[child + 1]:
            child += 1
        if not current < records[child]:
            break
        records[index] = records[child]
        index = child
        child = 2 * index + 1
    records[index] = current


def heap_sort(records: Records) -> None:
    """Ascending heap sort using a max-heap."""
    size = len(records)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(records, index, size)
    for end in range(size - 1, 0, -1):
        _swap(records, end, 0)
        _sift_down(records, 0, end)


def _merge(records: Records, low: int, mid: int, high: int, ascending: bool) -> None:
    i, j = low, mid + 1
    merged: list[RoadRecord] = []
    while i <= mid and j <= high:
        left, right = records[i], records[j]
        take_left = left < right if ascending else not left < right
        if take_left:
            merged.append(left)
            i += 1
        else:
            merged.append(right)
            j += 1
    merged.extend(records[k] for k in range(i, mid + 1))
    merged.extend(records[k] for k in range(j, high + 1))
    _write_back(records, merged, low)


def merge_sort(records: Records, ascending: bool = True) -> None:
    """Bottom-up merge sort, doubling the run length on every pass."""
    size = len(records)
    length = 1
    while length < size:
        start = 0
        while start + 2 * length - 1 <= size - 1:
            _merge(records, start, start + length - 1, start + 2 * length - 1, ascending)
            start += 2 * length
        if start + length <= size - 1:
            _merge(records, start, start + length - 1, size - 1, ascending)
        length *= 2


def _partition(records: Records, low: int, high: int) -> int:
    pivot = records[low]
    while low < high:
        while low < high and records[high].link_id >= pivot.link_id:
            high -= 1
        records[low] = records[high]
        while low < high and records[low].link_id <= pivot.link_id:
            low += 1
        records[high] = records[low]
    records[low] = pivot
    return low


def quick_sort(records: Records) -> None:
    """Ascending quicksort with a median-of-three pivot."""
    pending = [(0, len(records) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        mid = (high - low) // 2 + low
        if records[high] < records[mid]:
            _swap(records, mid, high)
        if records[low] < records[mid]:
            _swap(records, mid, low)
        if records[low] > records[high]:
            _swap(records, high, low)
        bound = _partition(records, low, high)
        pending.append((low, bound - 1))
        pending.append((bound + 1, high))


class SortAlgorithm(Enum):
    """The available sorting algorithms, each sorting ascending by link id."""

    HEAP = "HeapSort"
    COUNT = "CountSort"
    BUCKET = "BucketSort"
    QUICK = "QuickSort"
    SHELL = "HillSort"
    BUBBLE = "BubbleSort"
    MERGE = "MergeSort"

    def sort(self, records: Records) -> None:
        """Sort ``records`` in place with this algorithm."""
        _IMPLEMENTATIONS[self](records)


_IMPLEMENTATIONS = {
    SortAlgorithm.HEAP: heap_sort,
    SortAlgorithm.COUNT: count_sort,
    SortAlgorithm.BUCKET: bucket_sort,
    SortAlgorithm.QUICK: quick_sort,
    SortAlgorithm.SHELL: shell_sort,
    SortAlgorithm.BUBBLE: bubble_sort,
    SortAlgorithm.MERGE: merge_sort,
}