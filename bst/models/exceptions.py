"""
Custom exceptions for the tree containers.
"""


class EmptyTreeError(ValueError):
    """
    Raised when a query needs at least one key but the tree is empty.
    """

    def __init__(self, operation: str):
        """
        Initialize empty tree error.

        Args:
            operation: Name of the query that was attempted.
        """
        self.operation = operation
        super().__init__(f"{operation}() called on an empty tree")
