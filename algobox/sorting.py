"""Sorting routines and ranking of values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new, stably sorted list using merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def count_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new sorted list built from the counts of each distinct value."""
    counts = Counter(values)
    return [value for value in sorted(counts) for _ in range(counts[value])]


def selection_sort(values: Iterable[Any]) -> tuple[list[Any], int]:
    """Sort by selection; return the sorted list and the number of comparisons."""
    items = list(values)
    comparisons = 0
    for i in range(len(items) - 1):
        position = i
        for j in range(i + 1, len(items)):
            if items[position] > items[j]:
                position = j
            comparisons += 1
        if position != i:
            items[i], items[position] = items[position], items[i]
    return items, comparisons


def rank_positions(values: Sequence[Any]) -> list[int]:
    """Replace each value by its zero-based position in sorted order."""
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for rank, index in enumerate(order):
        ranks[index] = rank
    return ranks