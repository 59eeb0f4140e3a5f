"""Searching, pair finding and binary-search-on-answer routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(values: Iterable[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in ``values``."""
    return any(value == target for value in values)


def fibonacci_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of ``target`` in sorted ``values``, or -1 if absent."""
    n = len(values)
    if n == 0:
        return -1
    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < n:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1

    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, n - 1)
        if values[i] < target:
            fib_m = fib_m1
            fib_m1 = fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
        elif values[i] > target:
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return i

    if fib_m1 and offset + 1 < n and values[offset + 1] == target:
        return offset + 1
    return -1


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Return whether two distinct elements of ``values`` add up to ``target``."""
    items = sorted(values)
    i, j = 0, len(items) - 1
    while i < j:
        total = items[i] + items[j]
        if total == target:
            return True
        if total < target:
            i += 1
        else:
            j -= 1
    return False


def aggressive_cows(stalls: Iterable[int], cows: int) -> int:
    """Return the largest minimum distance at which ``cows`` can be placed.

    Returns -1 when no placement is found, which includes ``cows`` below 2.
    """
    positions = sorted(stalls)
    if not positions:
        raise ValueError("at least one stall is required")

    def possible(gap: int) -> bool:
        count = 1
        last = positions[0]
        for position in positions:
            if position - last >= gap:
                count += 1
                if count == cows:
                    return True
                last = position
        return False

    start, end = 0, max(positions)
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if possible(mid):
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def book_allocation(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum pages per student, or -1."""

    def possible(limit: int) -> bool:
        student_count = 1
        page_count = 0
        for book in pages:
            if page_count + book <= limit:
                page_count += book
            else:
                student_count += 1
                if student_count > students or book > limit:
                    return False
                page_count = book
        return True

    start, end = 0, sum(pages)
    answer = -1
    while start < end:
        mid = start + (end - start) // 2
        if possible(mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer