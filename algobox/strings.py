"""String routines: palindromes and path normalisation."""

from __future__ import annotations


def is_palindrome(s: str) -> bool:
    """Return whether ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic pieces.

    Partitions are ordered by the length of their first piece, then of the
    next, and so on. An empty string has one partition with no pieces.
    """
    result: list[list[str]] = []
    pieces: list[str] = []

    def split_from(start: int) -> None:
        if start == len(s):
            result.append(list(pieces))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if is_palindrome(piece):
                pieces.append(piece)
                split_from(end)
                pieces.pop()

    split_from(0)
    return result


def simplify_path(path: str) -> str:
    """Return the canonical form of an absolute Unix-style ``path``."""
    stack: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if stack:
                stack.pop()
        else:
            stack.append(part)
    return "/" + "/".join(stack)