"""
InorderIterable protocol for containers that yield their keys in order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class InorderIterable(ABC):
    """
    Protocol for containers that can be walked in ascending key order.

    Implementations must support:
    - Lazy iteration via __iter__
    - Eager traversal via inorder()
    - Async iteration via __aiter__
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in ascending order."""
        pass

    @abstractmethod
    def inorder(self) -> list[Any]:
        """
        Collect every key in ascending order.

        Returns:
            A new list holding all keys, duplicates included.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all keys in ascending order."""
        pass
