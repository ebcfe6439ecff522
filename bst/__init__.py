"""
Unbalanced binary search tree over any totally-ordered key type.

This package provides an in-memory ordered container with:
- insert(value) - O(H), duplicates routed to the right subtree
- inorder() - all keys in ascending order
- find_min() / find_max() - extreme keys, EmptyTreeError when empty
- Tree.from_iterable(values) - insertion-order construction
- Tree.build(values) - height-balanced construction from unsorted values
"""

from bst.interfaces import InorderIterable, OrderedContainer
from bst.models import EmptyTreeError, Node, Tree

__all__ = ["EmptyTreeError", "InorderIterable", "Node", "OrderedContainer", "Tree"]
