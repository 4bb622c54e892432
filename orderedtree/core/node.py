"""TreeNode for OrderedTree.

The TreeNode is intentionally kept simple - it is a key plus two child
links. Every node exclusively owns its children; ``None`` marks an absent
link. Ordering logic lives in OrderedTree, walking logic in the traversers.
"""

from typing import Iterator, Optional


class TreeNode:
    """A node of an unbalanced binary search tree of integers.

    Nodes compare by identity, not by key: duplicate keys are legal, so two
    distinct nodes may carry the same key.
    """

    __slots__ = ('key', 'left', 'right')

    def __init__(self,
                 key: int,
                 left: Optional['TreeNode'] = None,
                 right: Optional['TreeNode'] = None):
        self.key = key
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['TreeNode']:
        """Yield the present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def child_count(self) -> int:
        """Return the number of present children (0, 1 or 2)."""
        return (self.left is not None) + (self.right is not None)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        left = self.left.key if self.left is not None else None
        right = self.right.key if self.right is not None else None
        return f"{self.__class__.__name__}(key={self.key!r}, left={left!r}, right={right!r})"
