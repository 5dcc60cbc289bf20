from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator
from .traversal import iter_nodes, walk, collect

class InvalidKeyError(ValueError):
    """Raised when a key is not a real, orderable number."""
    pass

def check_key(key: Any):
    if isinstance(key, bool) or not isinstance(key, numbers.Real):
        raise InvalidKeyError(f"Keys must be real numbers, found: {key!r}")
    # NaN is the only real number not equal to itself. No float conversion, so huge ints and Fractions pass
    if key != key:
        raise InvalidKeyError("NaN cannot be ordered and is not a valid key")
    return key

def height(x: BalancedSearchTree.Node | None) -> int:
    """Height of the subtree rooted at x. An absent subtree has height -1 and a leaf has height 0."""
    if x is None:
        return -1
    # Post-order pass so that drifted trees do not exhaust the call stack
    heights: dict[int, int] = {}
    for node in iter_nodes("post", x):
        left = heights.pop(id(node.left)) if node.left is not None else -1
        right = heights.pop(id(node.right)) if node.right is not None else -1
        heights[id(node)] = 1 + max(left, right)
    return heights[id(x)]

def is_balanced(x: BalancedSearchTree.Node | None) -> bool:
    """A node is balanced if its children's heights differ by at most one and both children are balanced."""
    heights: dict[int, int] = {}
    for node in iter_nodes("post", x):
        left = heights.pop(id(node.left)) if node.left is not None else -1
        right = heights.pop(id(node.right)) if node.right is not None else -1
        if abs(left - right) > 1:
            return False
        heights[id(node)] = 1 + max(left, right)
    return True

def build_subtree(keys: list, start: int, end: int) -> BalancedSearchTree.Node | None:
    """Builds a minimal height tree out of keys[start:end + 1]. keys must be sorted and unique."""
    if start > end:
        return None
    mid = (start + end) // 2
    node = BalancedSearchTree.Node(keys[mid])
    node.left = build_subtree(keys, start, mid - 1)
    node.right = build_subtree(keys, mid + 1, end)
    return node

def build(items: Iterable) -> BalancedSearchTree.Node | None:
    items = [check_key(x) for x in items]
    keys = sorted(set(items))
    return build_subtree(keys, 0, len(keys) - 1)

def find(node: BalancedSearchTree.Node | None, key) -> BalancedSearchTree.Node | None:
    while node is not None and node.key != key:
        node = node.left if key < node.key else node.right
    return node

def insert(node: BalancedSearchTree.Node | None, key) -> BalancedSearchTree.Node:
    """Inserts key under node and returns the new subtree root. Existing keys are left alone."""
    if node is None:
        return BalancedSearchTree.Node(key)

    x = node
    while True:
        if key < x.key:
            if x.left is None:
                x.left = BalancedSearchTree.Node(key)
                break
            x = x.left
        elif key > x.key:
            if x.right is None:
                x.right = BalancedSearchTree.Node(key)
                break
            x = x.right
        else:
            break
    return node

def delete(node: BalancedSearchTree.Node | None, key) -> BalancedSearchTree.Node | None:
    """Deletes key from the subtree rooted at node and returns the new subtree root."""
    parent = None
    x = node
    while x is not None and x.key != key:
        parent = x
        x = x.left if key < x.key else x.right

    if x is None:
        return node

    if x.left is not None and x.right is not None:
        # Copy the successor up, then unlink the successor. It has no left child.
        x.key = x.right.min_key()
        parent = x
        key = x.key
        x = x.right
        while x.key != key:
            parent = x
            x = x.left

    child = x.left if x.left is not None else x.right
    if parent is None:
        return child
    if parent.left is x:
        parent.left = child
    else:
        parent.right = child
    return node

def depth(target: BalancedSearchTree.Node | None, start: BalancedSearchTree.Node | None) -> int:
    """Number of edges from start down to target, or -1 if target is not under start or does not hold a valid key."""
    if target is None:
        return -1
    try:
        check_key(target.key)
    except InvalidKeyError:
        return -1
    d = 0
    x = start
    while x is not None:
        if x is target:
            return d
        if target.key == x.key:
            return -1
        x = x.left if target.key < x.key else x.right
        d += 1
    return -1

@dataclass(frozen=True)
class Diagnostics:
    is_balanced: bool
    level_order: list
    pre_order: list
    post_order: list
    in_order: list

class BalancedSearchTree:
    class Node:
        def __init__(self, key):
            self.key = key
            self.left: BalancedSearchTree.Node | None = None
            self.right: BalancedSearchTree.Node | None = None

        def min_key(self):
            x = self
            while x.left is not None:
                x = x.left
            return x.key

        def max_key(self):
            x = self
            while x.right is not None:
                x = x.right
            return x.key

        def __repr__(self):
            return f"Node({self.key})"

    def __init__(self, items: Iterable = ()):
        self.root = build(items)

    @classmethod
    def build(cls, items: Iterable) -> BalancedSearchTree:
        """Builds a balanced tree from an unsorted collection of numbers. Duplicates are dropped."""
        return cls(items)

    def insert(self, key) -> None:
        """Inserts key at a leaf. Does nothing if the key is already present. Does not rebalance."""
        self.root = insert(self.root, check_key(key))

    def delete(self, key) -> None:
        """Deletes key if present. Does not rebalance."""
        self.root = delete(self.root, check_key(key))

    def find(self, key) -> BalancedSearchTree.Node | None:
        return find(self.root, check_key(key))

    def walk(self, order: str, visitor: Callable[[BalancedSearchTree.Node], Any]) -> None:
        """Calls visitor on every node in the given order"""
        walk(order, self.root, visitor)

    def collect(self, order: str) -> list:
        """Returns the keys in the given order"""
        return collect(order, self.root)

    def _traverse(self, order: str, callback: Callable[[BalancedSearchTree.Node], Any] | None):
        if callback is not None:
            return self.walk(order, callback)
        return self.collect(order)

    def level_order(self, callback: Callable[[BalancedSearchTree.Node], Any] | None = None) -> list | None:
        """Breadth first, left to right within a level. Returns the keys if no callback is given."""
        return self._traverse("level", callback)

    def in_order(self, callback: Callable[[BalancedSearchTree.Node], Any] | None = None) -> list | None:
        """Left subtree, node, right subtree. The keys come out sorted."""
        return self._traverse("in", callback)

    def pre_order(self, callback: Callable[[BalancedSearchTree.Node], Any] | None = None) -> list | None:
        return self._traverse("pre", callback)

    def post_order(self, callback: Callable[[BalancedSearchTree.Node], Any] | None = None) -> list | None:
        return self._traverse("post", callback)

    def height(self, node: BalancedSearchTree.Node | None = ...) -> int:
        # Ellipsis stands for the root since None is a legitimate (empty) subtree
        return height(self.root if node is ... else node)

    def depth(self, node: BalancedSearchTree.Node | None, start: BalancedSearchTree.Node | None = ...) -> int:
        return depth(node, self.root if start is ... else start)

    def is_balanced(self, node: BalancedSearchTree.Node | None = ...) -> bool:
        return is_balanced(self.root if node is ... else node)

    def rebalance(self) -> None:
        """Flattens the tree and rebuilds it with minimal height. The key set is unchanged."""
        keys = self.in_order()
        assert keys is not None
        self.root = build_subtree(keys, 0, len(keys) - 1)

    def collect_diagnostics(self) -> Diagnostics:
        return Diagnostics(
            is_balanced=self.is_balanced(),
            level_order=self.level_order(),
            pre_order=self.pre_order(),
            post_order=self.post_order(),
            in_order=self.in_order(),
        )

    def empty(self):
        return self.root is None

    def min_key(self):
        if self.root is None:
            raise ValueError("min_key() of an empty tree")
        return self.root.min_key()

    def max_key(self):
        if self.root is None:
            raise ValueError("max_key() of an empty tree")
        return self.root.max_key()

    def __contains__(self, key):
        return find(self.root, check_key(key)) is not None

    def __len__(self):
        return sum(1 for _ in iter_nodes("in", self.root))

    def __iter__(self) -> Iterator:
        return (node.key for node in iter_nodes("in", self.root))

    def __repr__(self):
        return f"BalancedSearchTree({self.in_order()})"

Node = BalancedSearchTree.Node
