"""Error taxonomy for OrderedTree.

Every condition here is local and recoverable. Absence of a key is not an
error at all: ``lookup`` and ``delete`` simply return False.
"""

from typing import Optional


class OrderedTreeError(Exception):
    """Base class for all errors raised by orderedtree."""
    pass


class EmptyTreeError(OrderedTreeError, LookupError):
    """Raised when an extremal value is requested from an empty tree."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}() on an empty tree")
        self.operation = operation


class OutOfRangeError(OrderedTreeError, IndexError):
    """Raised when a rank query asks for k outside [1, size]."""

    def __init__(self, k: int, size: Optional[int] = None):
        if size is None:
            message = f"k must be at least 1, got {k}"
        else:
            message = f"k={k} is outside the valid range [1, {size}]"
        super().__init__(message)
        self.k = k
        self.size = size


class EmptyOrSingletonError(OrderedTreeError, ValueError):
    """Raised when a pairwise query runs on fewer than two keys."""

    def __init__(self, size: int):
        super().__init__(
            f"minimum absolute difference needs at least 2 keys, tree has {size}"
        )
        self.size = size


class ConfigurationError(OrderedTreeError, ValueError):
    """Raised for an invalid TreeConfig or an unknown traversal order."""
    pass
