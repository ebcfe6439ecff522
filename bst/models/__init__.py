"""
Data models for the tree library.
"""

from bst.models.exceptions import EmptyTreeError
from bst.models.tree import Node, Tree

__all__ = [
    "EmptyTreeError",
    "Node",
    "Tree",
]
