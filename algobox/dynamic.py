"""Dynamic-programming routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MOD = 10**9 + 7

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def knapsack(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Return the best total value of items fitting in ``capacity`` (0/1 knapsack).

    As soon as the remaining capacity reaches zero no further item is taken,
    including items of weight zero.
    """
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def find_paths(
    m: int, n: int, max_move: int, start_row: int, start_column: int
) -> int:
    """Count paths leaving an ``m`` x ``n`` grid in at most ``max_move`` moves.

    The count is taken modulo 10**9 + 7. A start outside the grid counts as
    one path.
    """

    def outside(row: int, column: int) -> bool:
        return not (0 <= row < m and 0 <= column < n)

    if outside(start_row, start_column):
        return 1
    if max_move <= 0:
        return 0

    ways = [[0] * n for _ in range(m)]
    for _ in range(max_move):
        ways = [
            [
                sum(
                    1 if outside(r + dr, c + dc) else ways[r + dr][c + dc]
                    for dr, dc in _STEPS
                )
                % MOD
                for c in range(n)
            ]
            for r in range(m)
        ]
    return ways[start_row][start_column]


def wiggle_max_length(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly alternating subsequence."""
    items = list(nums)
    if not items:
        return 0
    up = down = 1
    for previous, current in zip(items, items[1:]):
        if current > previous:
            up = down + 1
        elif current < previous:
            down = up + 1
    return max(up, down)


def count_texts(pressed_keys: str) -> int:
    """Count the texts a sequence of phone key presses may stand for.

    Keys 7 and 9 carry four letters, every other key three. The count is
    taken modulo 10**9 + 7.
    """
    n = len(pressed_keys)
    ways = [1] * (n + 1)
    for i in reversed(range(n)):
        key = pressed_keys[i]
        longest = 4 if key in "79" else 3
        total = ways[i + 1]
        for run in range(2, longest + 1):
            last = i + run - 1
            if last < n and pressed_keys[last] == key:
                total += ways[i + run]
            else:
                break
        ways[i] = total % MOD
    return ways[0]


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health needed to cross ``dungeon``.

    The knight starts top-left, moves only right or down, and must keep at
    least one health point at every cell.
    """
    if not dungeon or not dungeon[0]:
        raise ValueError("dungeon must have at least one cell")
    rows, cols = len(dungeon), len(dungeon[0])
    need = [[0] * cols for _ in range(rows)]
    for i in reversed(range(rows)):
        for j in reversed(range(cols)):
            if i == rows - 1 and j == cols - 1:
                following = 1
            elif i == rows - 1:
                following = need[i][j + 1]
            elif j == cols - 1:
                following = need[i + 1][j]
            else:
                following = min(need[i + 1][j], need[i][j + 1])
            need[i][j] = max(1, following - dungeon[i][j])
    return need[0][0]


def rod_cutting(prices: Sequence[int]) -> int:
    """Return the best revenue from cutting a rod of length ``len(prices)``.

    ``prices[i]`` is the price of a piece of length ``i + 1``.
    """
    revenue = [0]
    for length in range(1, len(prices) + 1):
        revenue.append(
            max(prices[cut - 1] + revenue[length - cut] for cut in range(1, length + 1))
        )
    return revenue[-1]


@dataclass(frozen=True)
class Box:
    """A box given by the length and width of its base and its height."""

    length: int
    width: int
    height: int

    @property
    def base_area(self) -> int:
        return self.length * self.width

    def rotations(self) -> tuple[Box, Box, Box]:
        """Return the box itself and its two rotations onto other faces."""
        return (
            self,
            Box(
                max(self.length, self.height),
                min(self.length, self.height),
                self.width,
            ),
            Box(
                max(self.width, self.height),
                min(self.width, self.height),
                self.length,
            ),
        )


def max_stack_height(boxes: Iterable[Box]) -> int:
    """Return the tallest stack of boxes, each strictly smaller than the one below.

    Every box may be used in any of its rotations, any number of times.
    """
    rotations = [rotation for box in boxes for rotation in box.rotations()]
    if not rotations:
        return 0
    rotations.sort(key=lambda box: box.base_area, reverse=True)

    heights: list[int] = []
    for i, top in enumerate(rotations):
        below = max(
            (
                heights[j]
                for j, lower in enumerate(rotations[:i])
                if top.length < lower.length and top.width < lower.width
            ),
            default=0,
        )
        heights.append(below + top.height)
    return max(heights)