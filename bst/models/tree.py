"""
Binary search tree over any totally-ordered key type.

No rebalancing: the shape of the tree is a function of insertion order.
Keys equal to a node's key are routed to its right subtree.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from bst.interfaces.ordered_container import OrderedContainer
from bst.models.exceptions import EmptyTreeError

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class Node:
    """
    Node in the tree.

    ``left`` holds keys strictly less than ``value``, ``right`` holds keys
    greater than or equal to it. ``value`` is not reassigned once the node
    is linked into a tree.
    """

    value: Any
    left: "Node | None" = None
    right: "Node | None" = None


class Tree(OrderedContainer):
    """
    Unbalanced binary search tree implementation of OrderedContainer.

    Properties maintained:
    1. Every key in a node's left subtree is less than the node's key
    2. Every key in a node's right subtree is not less than the node's key
    3. Each subtree is owned by exactly one parent

    A tree may be empty. ``find_min`` and ``find_max`` raise EmptyTreeError
    in that state while ``inorder`` returns an empty list.
    """

    def __init__(self, value: Any = _MISSING) -> None:
        """
        Initialize the tree.

        Args:
            value: Key for the root node. When omitted the tree starts empty.
        """
        self._root: Node | None = None
        self._size: int = 0
        if value is not _MISSING:
            self._root = Node(value=value)
            self._size = 1

    @classmethod
    def new(cls, value: Any) -> "Tree":
        """Create a single-node tree holding ``value``."""
        return cls(value)

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> "Tree":
        """
        Create a tree by inserting ``values`` one by one, in order.

        The first value becomes the root. Different orderings of the same
        keys give differently shaped trees with the same in-order output.
        An empty iterable gives an empty tree.
        """
        tree = cls()
        for value in values:
            tree.insert(value)
        logger.debug("Built tree from %d keys in insertion order", tree._size)
        return tree

    @classmethod
    def build(cls, values: Iterable[Any]) -> "Tree":
        """
        Create a height-balanced tree from unsorted ``values``.

        Keys are sorted, then each sub-range contributes its midpoint as the
        subtree root (the lower one on even lengths). O(N log N) for the sort,
        O(N) for the build.
        """
        data = sorted(values)
        tree = cls()
        # (start, end, parent, is_left) for every subtree still to place
        pending: list[tuple[int, int, Node | None, bool]] = [
            (0, len(data) - 1, None, False)
        ]

        while pending:
            start, end, parent, is_left = pending.pop()
            if start > end:
                continue

            mid = (start + end) // 2
            # Equal keys must end up on the right
            while mid > start and data[mid - 1] == data[mid]:
                mid -= 1

            node = Node(value=data[mid])
            if parent is None:
                tree._root = node
            elif is_left:
                parent.left = node
            else:
                parent.right = node

            pending.append((mid + 1, end, node, False))
            pending.append((start, mid - 1, node, True))

        tree._size = len(data)
        logger.debug("Built balanced tree from %d keys", tree._size)
        return tree

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, value: Any) -> None:
        """Insert a key, growing the tree by one leaf. O(H)"""
        parent = None
        current = self._root
        go_left = False

        # Find insertion point
        while current is not None:
            parent = current
            go_left = value < current.value
            current = current.left if go_left else current.right

        new_node = Node(value=value)
        if parent is None:
            self._root = new_node
        elif go_left:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1

    def has(self, value: Any) -> bool:
        """Check whether an equal key is stored. O(H)"""
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif current.value < value:
                current = current.right
            else:
                return True
        return False

    def inorder(self) -> list[Any]:
        """Return all keys in ascending order as a new list. O(N)"""
        return list(self)

    def find_min(self) -> Any:
        """Return the leftmost key. O(H)"""
        if self._root is None:
            raise EmptyTreeError("find_min")

        current = self._root
        while current.left is not None:
            current = current.left
        return current.value

    def find_max(self) -> Any:
        """Return the rightmost key. O(H)"""
        if self._root is None:
            raise EmptyTreeError("find_max")

        current = self._root
        while current.right is not None:
            current = current.right
        return current.value

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path, 0 when empty."""
        if self._root is None:
            return 0

        best = 0
        stack: list[tuple[Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.has(value)

    def __iter__(self) -> Iterator[Any]:
        return _InorderIterator(self._root)

    def __aiter__(self) -> AsyncIterator[Any]:
        return _AsyncInorderIterator(self._root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"


class _InorderIterator(Iterator[Any]):
    """Lazy in-order iterator over a subtree."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node.value

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left


class _AsyncInorderIterator(AsyncIterator[Any]):
    """Async in-order iterator (in-memory, no I/O)."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __aiter__(self) -> "_AsyncInorderIterator":
        return self

    async def __anext__(self) -> Any:
        if not self._stack:
            raise StopAsyncIteration

        node = self._stack.pop()
        self._push_left_path(node.right)
        return node.value

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left
