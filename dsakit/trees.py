"""Binary tree nodes and the usual measurements, traversals and serialization."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

_NULL_TOKEN = "#"


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def _postorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[tuple[TreeNode | None, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if node is None:
            continue
        if expanded:
            yield node
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))


def _heights(root: TreeNode | None) -> tuple[dict[int, int], int]:
    """Height of every node keyed by identity, plus the largest left+right sum."""
    heights: dict[int, int] = {}
    widest = 0
    for node in _postorder(root):
        left = heights.get(id(node.left), 0) if node.left is not None else 0
        right = heights.get(id(node.right), 0) if node.right is not None else 0
        heights[id(node)] = max(left, right) + 1
        widest = max(widest, left + right)
    return heights, widest


def count_leaves(root: TreeNode | None) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _postorder(root) if node.is_leaf)


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    heights, _ = _heights(root)
    return heights[id(root)]


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    _, widest = _heights(root)
    return widest


def level_order(root: TreeNode | None) -> list[Any]:
    """Node values level by level, left to right."""
    if root is None:
        return []
    values: list[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values


def preorder(root: TreeNode | None) -> list[Any]:
    """Node values in root, left, right order."""
    values: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        values.append(node.value)
        stack.append(node.right)
        stack.append(node.left)
    return values


def lowest_common_ancestor(root: TreeNode | None, a: Any, b: Any) -> TreeNode | None:
    """Deepest node having nodes valued ``a`` and ``b`` in its subtree.

    A node holding either value is returned as soon as it is met, so if only
    one of the values is present its node is returned; None if neither is.
    """
    if root is None:
        return None
    if root.value == a or root.value == b:
        return root
    left = lowest_common_ancestor(root.left, a, b)
    right = lowest_common_ancestor(root.right, a, b)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def serialize(root: TreeNode | None) -> str:
    """Preorder text form: each value or ``#`` for a missing child, followed by a space."""
    tokens: list[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            tokens.append(_NULL_TOKEN)
            continue
        tokens.append(str(node.value))
        stack.append(node.right)
        stack.append(node.left)
    return "".join(f"{token} " for token in tokens)


def _node_from(token: str | None) -> TreeNode | None:
    if token is None or token == _NULL_TOKEN:
        return None
    try:
        return TreeNode(int(token))
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def deserialize(data: str) -> TreeNode | None:
    """Rebuild a tree of integers from :func:`serialize` output.

    Missing trailing tokens stand for empty children; a token that is neither
    ``#`` nor an integer raises ValueError.
    """
    tokens = iter(data.split())
    root = _node_from(next(tokens, None))
    if root is None:
        return None
    stack: list[list[Any]] = [[root, 0]]
    while stack:
        entry = stack[-1]
        node, filled = entry
        if filled == 2:
            stack.pop()
            continue
        child = _node_from(next(tokens, None))
        if filled == 0:
            node.left = child
        else:
            node.right = child
        entry[1] += 1
        if child is not None:
            stack.append([child, 0])
    return root


def size(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _postorder(root))