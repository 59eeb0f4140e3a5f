"""Text patterns drawn with '#' characters."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def _row(i: int, n: int) -> str:
    return " " * (i - 1) + "#" * i + " " * (4 * n - 4 * i) + "#" * i


def h_pattern(n: int) -> str:
    """Return the H pattern of size ``n`` as newline-terminated lines.

    The pattern grows for ``n`` rows and then shrinks back, giving ``2 * n``
    lines. A non-positive ``n`` yields an empty string.
    """
    rows = list(range(1, n + 1))
    lines = [_row(i, n) for i in rows] + [_row(i, n) for i in reversed(rows)]
    return "".join(line + "\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the H pattern for a size given as argument or on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else sys.stdin.readline()
    n = int(text.strip())
    print(h_pattern(n), end="")
    return 0