"""
OrderedContainer abstract base class for ordered key collections.
"""

from abc import abstractmethod
from typing import Any

from bst.interfaces.inorder_iterable import InorderIterable


class OrderedContainer(InorderIterable):
    """
    Abstract base class for ordered key containers.

    Keys only need to support ``<`` and ``==`` against each other.
    Inherits in-order iteration from InorderIterable.

    Implementations:
    - Tree: unbalanced binary search tree
    """

    @abstractmethod
    def insert(self, value: Any) -> None:
        """
        Add a key. Equal keys are kept, not merged.

        Args:
            value: The key to insert.

        Time complexity: O(H), H = height
        """
        pass

    @abstractmethod
    def has(self, value: Any) -> bool:
        """
        Check if an equal key exists.

        Args:
            value: The key to look for.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(H)
        """
        pass

    @abstractmethod
    def find_min(self) -> Any:
        """
        Return the smallest key.

        Raises:
            EmptyTreeError: If the container holds no keys.

        Time complexity: O(H)
        """
        pass

    @abstractmethod
    def find_max(self) -> Any:
        """
        Return the largest key.

        Raises:
            EmptyTreeError: If the container holds no keys.

        Time complexity: O(H)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored keys.

        Time complexity: O(1)
        """
        pass
