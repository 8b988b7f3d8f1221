"""Classic comparison sorts, with optional pass-by-pass snapshots."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def _final(items: Iterable[Any], passes: Iterator[list[Any]]) -> list[Any]:
    result = list(items)
    for snapshot in passes:
        result = snapshot
    return result


def bubble_sort_passes(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Bubble-sort a copy of ``items``, yielding the list after every pass."""
    data = list(items)
    size = len(data)
    for _ in range(size):
        for j in range(size - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
        yield list(data)


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using bubble sort."""
    data = list(items)
    return _final(data, bubble_sort_passes(data))


def insertion_sort_passes(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Insertion-sort a copy of ``items``, yielding the list after every pass."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
        yield list(data)


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using insertion sort."""
    data = list(items)
    return _final(data, insertion_sort_passes(data))


def selection_sort_passes(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Selection-sort a copy of ``items``, yielding the list after every pass."""
    data = list(items)
    size = len(data)
    for i in range(size - 1):
        min_index = min(range(i, size), key=data.__getitem__)
        if min_index != i:
            data[i], data[min_index] = data[min_index], data[i]
        yield list(data)


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using selection sort."""
    data = list(items)
    return _final(data, selection_sort_passes(data))


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Lomuto-partition ``items[low:high + 1]`` in place around ``items[high]``.

    Returns the final index of the pivot.
    """
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quicksort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using quicksort."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pivot = partition(data, start, end)
            pending.append((start, pivot - 1))
            pending.append((pivot + 1, end))
    return data