# Traversal orders over a node hierarchy. Every order is written with an explicit
# stack or queue so that the traversal depth is not limited by the recursion limit.
from __future__ import annotations
from collections import deque
from typing import TYPE_CHECKING, Any, Callable, Iterator

if TYPE_CHECKING:
    from .tree import BalancedSearchTree

ORDERS = ("level", "in", "pre", "post")

def iter_level_order(root: BalancedSearchTree.Node | None) -> Iterator[BalancedSearchTree.Node]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)

def iter_in_order(root: BalancedSearchTree.Node | None) -> Iterator[BalancedSearchTree.Node]:
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right

def iter_pre_order(root: BalancedSearchTree.Node | None) -> Iterator[BalancedSearchTree.Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        # Right goes on first so that left comes off first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)

def iter_post_order(root: BalancedSearchTree.Node | None) -> Iterator[BalancedSearchTree.Node]:
    stack: list[tuple[BalancedSearchTree.Node, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))

_ITERATORS = {
    "level": iter_level_order,
    "in": iter_in_order,
    "pre": iter_pre_order,
    "post": iter_post_order,
}

def iter_nodes(order: str, root: BalancedSearchTree.Node | None) -> Iterator[BalancedSearchTree.Node]:
    """Iterates over the nodes under root in the given order. order is one of "level", "in", "pre" or "post"."""
    if order not in _ITERATORS:
        raise ValueError(f"Unknown traversal order: {order}. Expected one of {ORDERS}")
    return _ITERATORS[order](root)

def walk(order: str, root: BalancedSearchTree.Node | None, visitor: Callable[[BalancedSearchTree.Node], Any]) -> None:
    """Calls visitor once per node in traversal order. Whatever the visitor returns is discarded."""
    for node in iter_nodes(order, root):
        visitor(node)

def collect(order: str, root: BalancedSearchTree.Node | None) -> list:
    return [node.key for node in iter_nodes(order, root)]
