"""Array and matrix routines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any


def remove_duplicates(nums: Iterable[Any]) -> list[Any]:
    """Return ``nums`` with runs of equal adjacent elements collapsed to one."""
    result: list[Any] = []
    for value in nums:
        if not result or result[-1] != value:
            result.append(value)
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruplet of ``nums`` summing to ``target``."""
    items = sorted(nums)
    n = len(items)
    found: set[tuple[int, int, int, int]] = set()
    for i in range(n - 3):
        for j in range(i + 1, n - 2):
            wanted = target - (items[i] + items[j])
            p, q = j + 1, n - 1
            while p < q:
                total = items[p] + items[q]
                if total == wanted:
                    found.add((items[i], items[j], items[p], items[q]))
                    p += 1
                elif total < wanted:
                    p += 1
                else:
                    q -= 1
    return [list(quad) for quad in sorted(found)]


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two of the given wall heights."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        lh, rh = heights[left], heights[right]
        best = max(best, min(lh, rh) * (right - left))
        if lh < rh:
            left += 1
            while left < right and heights[left] <= lh:
                left += 1
        else:
            right -= 1
            while left < right and heights[right] <= rh:
                right -= 1
    return best


def can_jump(nums: Iterable[int]) -> bool:
    """Return whether the last index can be reached from the first."""
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
    return True


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or best < running:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def reverse_array(values: Iterable[Any]) -> list[Any]:
    """Return the elements of ``values`` in reverse order."""
    return list(values)[::-1]


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    result: list[Any] = []
    if not matrix:
        return result
    row_start, row_end = 0, len(matrix) - 1
    col_start, col_end = 0, len(matrix[0]) - 1
    while row_start <= row_end and col_start <= col_end:
        result.extend(matrix[row_start][c] for c in range(col_start, col_end + 1))
        row_start += 1
        result.extend(matrix[r][col_end] for r in range(row_start, row_end + 1))
        col_end -= 1
        if row_start <= row_end:
            result.extend(
                matrix[row_end][c] for c in range(col_end, col_start - 1, -1)
            )
            row_end -= 1
        if col_start <= col_end:
            result.extend(
                matrix[r][col_start] for r in range(row_end, row_start - 1, -1)
            )
            col_start += 1
    return result


def cards_to_remove(cards: Sequence[Any]) -> int:
    """Return how many cards must go so that all remaining cards are equal."""
    if not cards:
        return 0
    return len(cards) - max(Counter(cards).values())


def leading_ones(bits: str) -> int:
    """Return the number of '1' characters before the first other character."""
    return len(bits) - len(bits.lstrip("1"))


def can_form_mex(values: Sequence[int], m: int, k: int) -> bool:
    """Return whether ``m`` elements avoiding ``k`` can be kept with MEX ``k``.

    Every number from 0 to ``k - 1`` must occur, at least ``m`` elements must
    differ from ``k``, and ``m`` must be at least ``k``.
    """
    present = set(values)
    if any(i not in present for i in range(k)):
        return False
    usable = sum(1 for value in values if value != k)
    return usable >= m and m >= k