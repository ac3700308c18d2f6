"""Binary trees: search-tree and level-order insertion, reading and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

NO_CHILD = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def bst_insert(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Insert ``value`` into a binary search tree; equal values go right. Return the root."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a binary search tree by inserting ``values`` in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = bst_insert(root, value)
    return root


def level_insert(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Put ``value`` in the first free child slot in level order. Return the root."""
    node = TreeNode(value)
    if root is None:
        return node
    pending = deque([root])
    while pending:
        current = pending.popleft()
        if current.left is None:
            current.left = node
            return root
        pending.append(current.left)
        if current.right is None:
            current.right = node
            return root
        pending.append(current.right)
    return root


def build_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a complete binary tree by inserting ``values`` in level order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = level_insert(root, value)
    return root


def read_preorder(tokens: Iterable[Any]) -> Optional[TreeNode]:
    """Read a tree from values in preorder, where -1 marks a missing child."""
    stream = iter(tokens)

    def read() -> Optional[TreeNode]:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("input ended before the tree was complete") from None
        value = int(token)
        if value == NO_CHILD:
            return None
        node = TreeNode(value)
        node.left = read()
        node.right = read()
        return node

    return read()


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in root, left, right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, root, right order."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.data)
        current = current.right
    return result


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, right, root order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result