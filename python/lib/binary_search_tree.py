#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
binary_search_tree.py
---------------------

An ordered key store built on a plain (not self-balancing) **binary search
tree**.  The tree holds a set of unique, totally ordered keys and is rebuilt
to minimal height on demand with :meth:`BinarySearchTree.rebalance`.

Features
~~~~~~~~
* Height-minimal construction from any iterable (duplicates dropped, keys sorted).
* ``find``, ``insert`` (reports an existing key instead of duplicating it),
  ``delete`` (leaf / single child / in-order successor cases).
* Five traversals returning key lists: level order (iterative and recursive),
  preorder, inorder and postorder.
* ``visit(visitor, order)`` / ``walk(order)`` when you want the nodes instead of
  a materialised list of keys.
* ``height``, ``depth``, ``is_balanced`` and ``rebalance``.
* ``key in tree``, ``len(tree)``, iteration in ascending order,
  ``min_key`` / ``max_key`` and ``validate`` for debugging.

Keys only need ``==`` and ``<``; they are never hashed.

Recursion
~~~~~~~~~
``find``, ``insert``, ``depth``, ``tree_height``, the iterative level order and
the depth-first traversals use explicit loops; ``rebalance`` rebuilds with
recursion only as deep as the new, minimal tree.  ``delete``,
``height``, ``is_balanced`` and ``level_order_recursive`` recurse once per
level, so a tree degenerated by long runs of sorted inserts can hit Python's
recursion limit.  Call ``rebalance()`` after bulk skewed insertion.

Typical usage
~~~~~~~~~~~~~
>>> from binary_search_tree import BinarySearchTree
>>> tree = BinarySearchTree([5, 3, 8, 3, 1])
>>> tree.inorder()
[1, 3, 5, 8]
>>> tree.insert(6)
6
>>> tree.find(6) is not None
True
>>> tree.delete(5)
>>> tree.inorder()
[1, 3, 6, 8]
>>> tree.is_balanced()
True
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from typing import (
    Callable,
    Deque,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Type variable (keys must support == and <)
# ----------------------------------------------------------------------
K = TypeVar("K")


# ----------------------------------------------------------------------
#  Errors
# ----------------------------------------------------------------------
class KeyNotFoundError(KeyError):
    """Raised when an operation needs a key that is not stored in the tree."""


class EmptyTreeError(ValueError):
    """Raised when an operation needs a root and the tree is empty."""


class TraversalOrder(enum.Enum):
    """The orders understood by :meth:`BinarySearchTree.walk`."""

    LEVEL_ITERATIVE = "level_order_iterative"
    LEVEL_RECURSIVE = "level_order_recursive"
    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"


class Node(Generic[K]):
    """A key plus two owned child links.  Holds data only."""

    __slots__ = ("key", "left", "right")

    def __init__(
        self,
        key: K,
        left: Optional["Node[K]"] = None,
        right: Optional["Node[K]"] = None,
    ) -> None:
        self.key = key
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"<Node {self.key!r}>"


class BinarySearchTree(Generic[K]):
    """
    A set of unique keys kept in binary-search-tree order.

    Mutations (``insert`` / ``delete``) edit the structure node by node and do
    not rebalance; ``rebalance`` rebuilds the whole tree at minimal height.
    Node references returned by ``find`` or handed to visitors are only valid
    until the next mutating call.
    """

    __slots__ = ("_root", "_size")

    # ------------------------------------------------------------------
    #   Construction
    # ------------------------------------------------------------------
    def __init__(self, keys: Optional[Iterable[K]] = None) -> None:
        """
        Build a height-minimal tree from *keys*.

        Parameters
        ----------
        keys : iterable of K, optional
            Any iterable of mutually comparable keys.  Duplicates are dropped
            and the remaining keys are sorted before the tree is built, so the
            resulting shape depends only on the key set, not on input order.
        """
        self._root: Optional[Node[K]] = None
        self._size: int = 0

        if keys is not None:
            self._replace_with(self._sorted_unique(keys))

    @staticmethod
    def _sorted_unique(keys: Iterable[K]) -> List[K]:
        """Return *keys* sorted ascending with duplicates removed."""
        result: List[K] = []
        for key in sorted(keys):  # type: ignore[type-var]
            # equal keys are adjacent once sorted
            if not result or result[-1] != key:
                result.append(key)
        return result

    def _build(self, keys: Sequence[K], start: int, end: int) -> Optional[Node[K]]:
        """Build the subtree for ``keys[start:end + 1]`` around its midpoint."""
        if start > end:
            return None
        mid = (start + end) // 2
        node = Node(keys[mid])
        node.left = self._build(keys, start, mid - 1)
        node.right = self._build(keys, mid + 1, end)
        return node

    def _replace_with(self, keys: Sequence[K]) -> None:
        """Discard the current structure and build one from sorted unique *keys*."""
        self._root = self._build(keys, 0, len(keys) - 1)
        self._size = len(keys)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("built tree of %d keys, height %d", self._size, self.tree_height())

    # ------------------------------------------------------------------
    #   Container protocol
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[Node[K]]:
        """The root node, or ``None`` for an empty tree."""
        return self._root

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        """Yield keys in ascending order."""
        return (node.key for node in self._walk_inorder())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"

    # ------------------------------------------------------------------
    #   Search
    # ------------------------------------------------------------------
    def find(self, key: K) -> Optional[Node[K]]:
        """Return the node holding *key*, or ``None`` if it is not stored."""
        cur = self._root
        while cur is not None:
            if key == cur.key:
                return cur
            elif key < cur.key:  # type: ignore[operator]
                cur = cur.left
            else:
                cur = cur.right
        return None

    def _smallest(self, node: Node[K]) -> Node[K]:
        """Return the left-most node of the subtree rooted at *node*."""
        while node.left is not None:
            node = node.left
        return node

    def _largest(self, node: Node[K]) -> Node[K]:
        while node.right is not None:
            node = node.right
        return node

    def min_key(self) -> K:
        """Return the smallest stored key."""
        if self._root is None:
            raise EmptyTreeError("min_key() on an empty tree")
        return self._smallest(self._root).key

    def max_key(self) -> K:
        """Return the largest stored key."""
        if self._root is None:
            raise EmptyTreeError("max_key() on an empty tree")
        return self._largest(self._root).key

    # ------------------------------------------------------------------
    #   Mutation
    # ------------------------------------------------------------------
    def insert(self, key: K) -> K:
        """
        Add *key* as a new leaf and return it.

        If *key* is already stored, nothing changes and the stored key is
        returned instead.  Inserting into an empty tree creates the root.
        """
        if self._root is None:
            self._root = Node(key)
            self._size = 1
            return key

        cur = self._root
        while True:
            if key == cur.key:
                return cur.key
            if key < cur.key:  # type: ignore[operator]
                if cur.left is None:
                    cur.left = Node(key)
                    break
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = Node(key)
                    break
                cur = cur.right

        self._size += 1
        return key

    def delete(self, key: K) -> None:
        """Remove *key* if it is stored; do nothing otherwise."""
        if self.find(key) is None:
            return
        if key == self._root.key:  # type: ignore[union-attr]
            logger.debug("deleting root key %r", key)
        self._root = self._delete(self._root, key)
        self._size -= 1

    def _delete(self, node: Optional[Node[K]], key: K) -> Optional[Node[K]]:
        """
        Remove *key* from the subtree rooted at *node* and return the new
        subtree root.

        A node with two children keeps its place: it takes the key of its
        in-order successor, and the successor (which has no left child) is
        removed from the right subtree instead.
        """
        if node is None:
            return None

        if key == node.key:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            node.key = self._smallest(node.right).key
            node.right = self._delete(node.right, node.key)
        elif key < node.key:  # type: ignore[operator]
            node.left = self._delete(node.left, key)
        else:
            node.right = self._delete(node.right, key)
        return node

    # ------------------------------------------------------------------
    #   Traversals (node generators)
    # ------------------------------------------------------------------
    def _walk_level_iterative(self) -> Iterator[Node[K]]:
        """Breadth-first, driven by a FIFO queue."""
        if self._root is None:
            return
        queue: Deque[Node[K]] = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _walk_level_recursive(self, queue: Deque[Node[K]]) -> Iterator[Node[K]]:
        """
        Breadth-first, one recursive call per level.

        Drains *queue* (the current level) and hands the queue of the next
        level to the recursive call, so the call depth is the height plus one.
        """
        if not queue:
            return
        following: Deque[Node[K]] = deque()
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                following.append(node.left)
            if node.right is not None:
                following.append(node.right)
        yield from self._walk_level_recursive(following)

    def _walk_preorder(self) -> Iterator[Node[K]]:
        stack: List[Node[K]] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            # right first so the left subtree is popped first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _walk_inorder(self) -> Iterator[Node[K]]:
        stack: List[Node[K]] = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur
            cur = cur.right

    def _walk_postorder(self) -> Iterator[Node[K]]:
        stack: List[Node[K]] = []
        last: Optional[Node[K]] = None
        cur = self._root
        while stack or cur is not None:
            if cur is not None:
                stack.append(cur)
                cur = cur.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last:
                cur = top.right
            else:
                yield top
                last = stack.pop()

    def walk(self, order: TraversalOrder = TraversalOrder.INORDER) -> Iterator[Node[K]]:
        """Lazily yield the nodes of the tree in the given *order*."""
        if order is TraversalOrder.LEVEL_RECURSIVE:
            start: Deque[Node[K]] = deque([self._root] if self._root is not None else [])
            return self._walk_level_recursive(start)
        walkers: Dict[TraversalOrder, Callable[[], Iterator[Node[K]]]] = {
            TraversalOrder.LEVEL_ITERATIVE: self._walk_level_iterative,
            TraversalOrder.PREORDER: self._walk_preorder,
            TraversalOrder.INORDER: self._walk_inorder,
            TraversalOrder.POSTORDER: self._walk_postorder,
        }
        return walkers[order]()

    def visit(
        self,
        visitor: Callable[[Node[K]], object],
        order: TraversalOrder = TraversalOrder.INORDER,
    ) -> None:
        """Call ``visitor(node)`` once per node, in the given *order*."""
        for node in self.walk(order):
            visitor(node)

    # ------------------------------------------------------------------
    #   Traversals (key lists)
    # ------------------------------------------------------------------
    def level_order_iterative(self) -> List[K]:
        """Keys breadth-first, left to right within a level."""
        return [node.key for node in self.walk(TraversalOrder.LEVEL_ITERATIVE)]

    def level_order_recursive(self) -> List[K]:
        """Same order as :meth:`level_order_iterative`, computed recursively."""
        return [node.key for node in self.walk(TraversalOrder.LEVEL_RECURSIVE)]

    def preorder(self) -> List[K]:
        """Keys in node, left, right order."""
        return [node.key for node in self.walk(TraversalOrder.PREORDER)]

    def inorder(self) -> List[K]:
        """Keys in left, node, right order, i.e. ascending."""
        return [node.key for node in self.walk(TraversalOrder.INORDER)]

    def postorder(self) -> List[K]:
        """Keys in left, right, node order."""
        return [node.key for node in self.walk(TraversalOrder.POSTORDER)]

    # ------------------------------------------------------------------
    #   Height / depth / balance
    # ------------------------------------------------------------------
    def height(self, node: Optional[Node[K]]) -> int:
        """
        Edges on the longest downward path from *node* to a leaf.

        ``None`` has height -1, so a single leaf has height 0.
        """
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def tree_height(self) -> int:
        """
        Height of the root; -1 for an empty tree.

        Counts levels breadth-first, so it also works on degenerate trees
        deeper than the recursion limit.
        """
        levels = -1
        frontier: List[Node[K]] = [self._root] if self._root is not None else []
        while frontier:
            levels += 1
            frontier = [
                child
                for node in frontier
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def depth(self, key: K) -> int:
        """
        Edges from the root down to the node holding *key*.

        Raises ``EmptyTreeError`` on an empty tree and ``KeyNotFoundError``
        if *key* is not stored.
        """
        if self._root is None:
            raise EmptyTreeError("depth() on an empty tree")
        cur: Optional[Node[K]] = self._root
        count = 0
        while cur is not None:
            if key == cur.key:
                return count
            cur = cur.left if key < cur.key else cur.right  # type: ignore[operator]
            count += 1
        raise KeyNotFoundError(key)

    def _check_balance(self, node: Optional[Node[K]]) -> Tuple[bool, int]:
        """Return ``(subtree is balanced, subtree height)``."""
        if node is None:
            return True, -1
        left_ok, left_height = self._check_balance(node.left)
        right_ok, right_height = self._check_balance(node.right)
        ok = left_ok and right_ok and abs(left_height - right_height) <= 1
        return ok, 1 + max(left_height, right_height)

    def is_balanced(self) -> bool:
        """
        True when, at every node, the heights of the two subtrees differ by
        at most one.  An empty tree is balanced.
        """
        return self._check_balance(self._root)[0]

    def rebalance(self) -> None:
        """Rebuild the tree at minimal height from its (ascending) inorder keys."""
        debug = logger.isEnabledFor(logging.DEBUG)
        before = self.tree_height() if debug else None
        self._replace_with(self.inorder())
        if debug:
            logger.debug("rebalanced: height %d -> %d", before, self.tree_height())

    # ------------------------------------------------------------------
    #   Validation - useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify the ordering invariant, that the links form a tree and that the
        size counter matches.  Raises ``AssertionError`` on the first problem.
        """
        seen: Set[int] = set()
        # (node, exclusive lower bound, exclusive upper bound)
        stack: List[Tuple[Node[K], Optional[Node[K]], Optional[Node[K]]]] = []
        if self._root is not None:
            stack.append((self._root, None, None))

        while stack:
            node, low, high = stack.pop()
            assert id(node) not in seen, f"Node {node.key!r} reachable twice"
            seen.add(id(node))
            if low is not None:
                assert low.key < node.key, (  # type: ignore[operator]
                    f"BST property violated ({node.key!r} not greater than {low.key!r})"
                )
            if high is not None:
                assert node.key < high.key, (  # type: ignore[operator]
                    f"BST property violated ({node.key!r} not less than {high.key!r})"
                )
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))

        assert len(seen) == self._size, (
            f"Size mismatch: counter says {self._size}, found {len(seen)} nodes"
        )
