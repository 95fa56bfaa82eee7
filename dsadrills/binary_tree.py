"""Binary trees built from value sequences, with the standard traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values given in preorder, with -1 marking a missing child."""
    stream = iter(values)

    def build() -> TreeNode | None:
        data = _take(stream)
        if data == NULL_MARKER:
            return None
        node = TreeNode(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order_tree(values: Iterable[Any]) -> TreeNode:
    """Build a tree from values given level by level.

    The first value is the root; then each node in turn reads its left and
    right child, with -1 marking a missing child.
    """
    stream = iter(values)
    root = TreeNode(_take(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _take(stream)
        if left != NULL_MARKER:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _take(stream)
        if right != NULL_MARKER:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the data of the tree level by level."""
    levels: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the data in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, right, node order."""
    return list(_postorder(root))