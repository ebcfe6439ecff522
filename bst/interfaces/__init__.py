"""
Abstract base classes for ordered containers.
"""

from bst.interfaces.inorder_iterable import InorderIterable
from bst.interfaces.ordered_container import OrderedContainer

__all__ = ["InorderIterable", "OrderedContainer"]
