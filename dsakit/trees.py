"""Binary trees, binary-search lookup and AVL height bounds."""

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from values in level order; ``None`` marks a missing child."""
    stream = iter(values)
    first = next(stream, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(stream, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(stream, None)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def level_order_lines(root: Optional[TreeNode]) -> list[str]:
    """Describe each node in level order as ``value:L<left>R<right>``."""
    lines = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        line = f"{node.value}:"
        if node.left is not None:
            line += f"L{node.left.value}"
            queue.append(node.left)
        if node.right is not None:
            line += f"R{node.right.value}"
            queue.append(node.right)
        lines.append(line)
    return lines


def bst_contains(root: Optional[TreeNode], value: int) -> bool:
    """Return whether ``value`` is in the binary search tree."""
    node = root
    while node is not None:
        if value == node.value:
            return True
        node = node.left if value < node.value else node.right
    return False


def avl_min_nodes(height: int) -> int:
    """Return the fewest nodes an AVL tree of ``height`` can have (single node = 0)."""
    if height < 0:
        raise ValueError("height must be non-negative")
    previous, current = 1, 2
    if height == 0:
        return previous
    for _ in range(height - 1):
        previous, current = current, previous + current + 1
    return current


def avl_min_height(n: int) -> int:
    """Return the least height of an AVL tree with ``n`` nodes (single node = 0).

    Add one for the convention in which a single node has height 1.
    """
    if n < 1:
        raise ValueError("node count must be positive")
    return n.bit_length() - 1


def avl_max_height(n: int) -> int:
    """Return the greatest height of an AVL tree with ``n`` nodes (single node = 0).

    Add one for the convention in which a single node has height 1.
    """
    if n < 1:
        raise ValueError("node count must be positive")
    height = 0
    while avl_min_nodes(height) <= n:
        height += 1
    return height - 1