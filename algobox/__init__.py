"""Classic algorithms and data structures: sorting, searching, arrays,
dynamic programming, strings, linked lists, trees, backtracking and an
H-pattern printer."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "dynamic",
    "linked_list",
    "patterns",
    "searching",
    "sorting",
    "strings",
    "trees",
]