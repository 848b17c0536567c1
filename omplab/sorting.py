"""Bubble, odd-even transposition and merge sorts on sequences of comparable values."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any


def bubble_sort(values: Sequence[Any]) -> list[Any]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def odd_even_sort(values: Sequence[Any], phases: int | None = None) -> list[Any]:
    """Return a copy of ``values`` after odd-even transposition phases.

    Each phase compares disjoint neighbour pairs, starting at index 0 on
    even phases and index 1 on odd ones. ``len(values)`` phases (the
    default) always produce a sorted result.
    """
    items = list(values)
    if phases is None:
        phases = len(items)
    if phases < 0:
        raise ValueError("number of phases must not be negative")
    for phase in range(phases):
        for j in range(phase % 2, len(items) - 1, 2):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On equal elements the one from ``right`` is taken first.
    """
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def _split(items: Sequence[Any]) -> tuple[Sequence[Any], Sequence[Any]]:
    mid = (len(items) + 1) // 2
    return items[:mid], items[mid:]


def merge_sort(values: Sequence[Any]) -> list[Any]:
    """Return a sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    left, right = _split(items)
    return merge(merge_sort(left), merge_sort(right))


def parallel_merge_sort(values: Sequence[Any]) -> list[Any]:
    """Return a sorted copy of ``values``, sorting the two halves concurrently."""
    items = list(values)
    if len(items) <= 1:
        return items
    left, right = _split(items)
    with ThreadPoolExecutor(max_workers=2) as pool:
        left_sorted = pool.submit(merge_sort, left)
        right_sorted = pool.submit(merge_sort, right)
        return merge(left_sorted.result(), right_sorted.result())