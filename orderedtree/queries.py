"""Order-statistic queries over a binary search tree.

Each query creates its own state object and threads it through a single
lazy traversal, so repeated or interleaved calls never share counters.
The walk is abandoned as soon as the answer is known.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .config import TraversalMode
from .core.node import TreeNode
from .core.traverser import InOrderTraverser, ReverseInOrderTraverser
from .errors import EmptyOrSingletonError, OutOfRangeError


@dataclass
class RankState:
    """Running state of a rank query (k-th largest or k-th smallest)."""

    k: int
    count: int = 0
    result: Optional[int] = None

    def visit(self, key: int) -> bool:
        """Record one visited key. Returns True once rank k is reached."""
        self.count += 1
        if self.count == self.k:
            self.result = key
            return True
        return False


@dataclass
class MinDifferenceState:
    """Running state of a minimum absolute difference query."""

    previous: Optional[int] = None
    minimum: Optional[int] = None
    seen: int = 0

    def visit(self, key: int) -> bool:
        """Record one key in ascending order. Returns True when no smaller
        difference is possible."""
        self.seen += 1
        if self.previous is not None:
            diff = key - self.previous
            if self.minimum is None or diff < self.minimum:
                self.minimum = diff
        self.previous = key
        return self.minimum == 0


def _check_rank(k: int) -> None:
    if isinstance(k, bool) or not isinstance(k, int):
        raise TypeError(f"k must be an int, got {type(k).__name__}")
    if k < 1:
        raise OutOfRangeError(k)


def _rank_query(traverser, root: Optional[TreeNode], k: int) -> int:
    _check_rank(k)
    state = RankState(k=k)
    for node, _ in traverser.traverse(root):
        if state.visit(node.key):
            return state.result
    # The walk ran out, so count now equals the tree size
    raise OutOfRangeError(k, state.count)


def kth_largest(root: Optional[TreeNode],
                k: int,
                mode: Union[TraversalMode, str] = TraversalMode.ITERATIVE) -> int:
    """Return the k-th largest key (k=1 is the maximum).

    Uses one reverse in-order walk (right, node, left) that stops at the
    k-th visited node.

    Args:
        root: Root of the tree (None = empty)
        k: Rank, 1-based
        mode: Iterative or recursive walk

    Returns:
        The key at rank k in descending order

    Raises:
        OutOfRangeError: If k < 1 or k exceeds the number of keys
        TypeError: If k is not an int
    """
    return _rank_query(ReverseInOrderTraverser(mode), root, k)


def kth_smallest(root: Optional[TreeNode],
                 k: int,
                 mode: Union[TraversalMode, str] = TraversalMode.ITERATIVE) -> int:
    """Return the k-th smallest key (k=1 is the minimum)."""
    return _rank_query(InOrderTraverser(mode), root, k)


def min_absolute_difference(root: Optional[TreeNode],
                            mode: Union[TraversalMode, str] = TraversalMode.ITERATIVE) -> int:
    """Return the minimum absolute difference between any two keys.

    In-order yields keys sorted, so only adjacent pairs need comparing.
    Duplicate keys give a difference of 0.

    Args:
        root: Root of the tree (None = empty)
        mode: Iterative or recursive walk

    Returns:
        The smallest difference between two keys

    Raises:
        EmptyOrSingletonError: If the tree holds fewer than two keys
    """
    state = MinDifferenceState()
    for node, _ in InOrderTraverser(mode).traverse(root):
        if state.visit(node.key):
            break
    if state.seen < 2:
        raise EmptyOrSingletonError(state.seen)
    return state.minimum
