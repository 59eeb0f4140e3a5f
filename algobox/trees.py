"""Binary trees: structural comparison and vertical ordering."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"


def identical_trees(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return whether two trees have the same shape and the same values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.value == second.value
        and identical_trees(first.left, second.left)
        and identical_trees(first.right, second.right)
    )


def vertical_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the tree's values grouped by column, from left to right.

    A node's column is its parent's minus one for a left child and plus one
    for a right child. Within a column values appear in pre-order.
    """
    columns: defaultdict[int, list[Any]] = defaultdict(list)

    def visit(node: TreeNode | None, distance: int) -> None:
        if node is None:
            return
        columns[distance].append(node.value)
        visit(node.left, distance - 1)
        visit(node.right, distance + 1)

    visit(root, 0)
    return [columns[distance] for distance in sorted(columns)]