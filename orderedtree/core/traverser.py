"""Tree traversal strategies for OrderedTree.

Traversers implement the different visiting orders for walking a binary
search tree. Each depth-first traverser has an explicit-stack walk and a
recursive walk; the TraversalMode chosen at construction picks one.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalMode, TraversalOrder, parse_mode, parse_order
from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversals are lazy: nothing is visited until the returned iterator is
    consumed, and every call to ``traverse`` starts a fresh walk over the
    live tree.
    """

    def __init__(self, mode: Union[TraversalMode, str] = TraversalMode.ITERATIVE):
        """Initialize traverser.

        Args:
            mode: Whether depth-first walks use an explicit stack or recursion
        """
        self.mode = parse_mode(mode)

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        if root is None:
            return
        if self.mode is TraversalMode.RECURSIVE:
            yield from self._traverse_recursive(root, min_depth, max_depth)
        else:
            yield from self._traverse_iterative(root, min_depth, max_depth)

    @abstractmethod
    def _traverse_iterative(self,
                            root: TreeNode,
                            min_depth: int,
                            max_depth: Optional[int]) -> Iterator[Tuple[TreeNode, int]]:
        pass

    @abstractmethod
    def _traverse_recursive(self,
                            root: TreeNode,
                            min_depth: int,
                            max_depth: Optional[int]) -> Iterator[Tuple[TreeNode, int]]:
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded.

        Args:
            depth: Current depth
            min_depth: Minimum depth for yielding
            max_depth: Maximum depth for yielding

        Returns:
            True if node should be yielded
        """
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored.

        Args:
            depth: Current depth
            max_depth: Maximum depth limit

        Returns:
            True if children should be explored
        """
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a binary search tree this yields keys in ascending order, which makes
    it the primary correctness check for the structure.
    """

    _first = 'left'
    _second = 'right'

    def _traverse_iterative(self, root, min_depth, max_depth):
        first, second = self._first, self._second
        stack: List[Tuple[TreeNode, int]] = []
        node: Optional[TreeNode] = root
        depth = 0

        while stack or node is not None:
            # Slide down the near edge, remembering every node passed
            while node is not None:
                stack.append((node, depth))
                if self._should_explore(depth, max_depth):
                    node, depth = getattr(node, first), depth + 1
                else:
                    node = None

            current, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (current, depth)

            if self._should_explore(depth, max_depth):
                node, depth = getattr(current, second), depth + 1

    def _traverse_recursive(self, root, min_depth, max_depth):
        first, second = self._first, self._second

        def _recurse(node: Optional[TreeNode], depth: int) -> Iterator[Tuple[TreeNode, int]]:
            if node is None:
                return
            explore = self._should_explore(depth, max_depth)
            if explore:
                yield from _recurse(getattr(node, first), depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if explore:
                yield from _recurse(getattr(node, second), depth + 1)

        yield from _recurse(root, 0)


class ReverseInOrderTraverser(InOrderTraverser):
    """Reverse in-order traversal: right subtree, node, left subtree.

    Yields keys in descending order; used for k-th largest queries.
    """

    _first = 'right'
    _second = 'left'


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: node, left subtree, right subtree.

    Re-inserting keys in this order rebuilds an identically shaped tree.
    """

    def _traverse_iterative(self, root, min_depth, max_depth):
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right pushed first so that left is popped first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))

    def _traverse_recursive(self, root, min_depth, max_depth):
        def _recurse(node: Optional[TreeNode], depth: int) -> Iterator[Tuple[TreeNode, int]]:
            if node is None:
                return
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                yield from _recurse(node.left, depth + 1)
                yield from _recurse(node.right, depth + 1)

        yield from _recurse(root, 0)


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal: left subtree, right subtree, node.

    Visits children before their parent, which is the order nodes must be
    released in when tearing a tree down.
    """

    def _traverse_iterative(self, root, min_depth, max_depth):
        # Each entry carries whether its children have already been scheduled
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1, False))
                if node.left is not None:
                    stack.append((node.left, depth + 1, False))

    def _traverse_recursive(self, root, min_depth, max_depth):
        def _recurse(node: Optional[TreeNode], depth: int) -> Iterator[Tuple[TreeNode, int]]:
            if node is None:
                return
            if self._should_explore(depth, max_depth):
                yield from _recurse(node.left, depth + 1)
                yield from _recurse(node.right, depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _recurse(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1, left to
    right within a level. Both modes use the same queue-based walk.
    """

    def _traverse_iterative(self, root, min_depth, max_depth):
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))

    def _traverse_recursive(self, root, min_depth, max_depth):
        return self._traverse_iterative(root, min_depth, max_depth)


_TRAVERSERS = {
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.REVERSE_IN_ORDER: ReverseInOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str],
                     mode: Union[TraversalMode, str] = TraversalMode.ITERATIVE) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: Traversal order (enum member or name such as 'in', 'pre', 'post')
        mode: Iterative or recursive execution

    Returns:
        TreeTraverser instance

    Raises:
        ConfigurationError: If the order or mode name is not recognized
    """
    return _TRAVERSERS[parse_order(order)](mode)
