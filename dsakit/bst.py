"""Binary search tree operations on :class:`~dsakit.trees.TreeNode` nodes."""

from __future__ import annotations

from typing import Any

from .trees import TreeNode


def bst_insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` and return the root; a value already present is ignored."""
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right
        else:
            return root


def bst_search(root: TreeNode | None, target: Any) -> bool:
    """Tell whether ``target`` is in the tree."""
    node = root
    while node is not None:
        if target == node.value:
            return True
        node = node.left if target < node.value else node.right
    return False


def bst_min(root: TreeNode | None) -> TreeNode | None:
    """Node with the smallest value, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.left is not None:
        node = node.left
    return node


def bst_max(root: TreeNode | None) -> TreeNode | None:
    """Node with the largest value, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.right is not None:
        node = node.right
    return node


def bst_delete(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Remove ``key`` if present and return the new root.

    A node with two children takes the value of its in-order successor.
    """
    if root is None:
        return None
    if key < root.value:
        root.left = bst_delete(root.left, key)
    elif key > root.value:
        root.right = bst_delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = bst_min(root.right)
        root.value = successor.value
        root.right = bst_delete(root.right, successor.value)
    return root