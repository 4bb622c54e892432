"""OrderedTree - an unbalanced binary search tree of integer keys.

The tree owns its node graph outright: every node is reachable from
exactly one parent and is created only by insert() and released only by
delete() or clear(). Keys equal to a node's key are placed in its left
subtree, so duplicates are kept as separate nodes.

Insertion, lookup, deletion and min/max are loops rather than recursion,
and so are the structural walks behind size(), height() and clear().
Traversals and order-statistic queries follow ``TreeConfig.mode``.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .config import TraversalMode, TraversalOrder, TreeConfig
from .core.node import TreeNode
from .core.traverser import (
    PostOrderTraverser,
    PreOrderTraverser,
    TreeTraverser,
    create_traverser,
)
from .errors import ConfigurationError, EmptyTreeError
from . import queries

logger = logging.getLogger(__name__)

_MISSING = object()


def _check_key(key: Any) -> None:
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"keys must be int, got {type(key).__name__}")


class OrderedTree:
    """Unbalanced binary search tree over integers.

    Example:
        >>> tree = OrderedTree([41, 20, 65, 11])
        >>> tree.render()
        '11 20 41 65'
        >>> tree.kth_largest(2)
        41
    """

    def __init__(self,
                 keys: Iterable[int] = (),
                 config: Optional[TreeConfig] = None):
        """Create a tree, optionally seeded with keys.

        Args:
            keys: Keys inserted in iteration order
            config: Traversal and rendering configuration

        Raises:
            ConfigurationError: If config is invalid
            TypeError: If a key is not an int
        """
        self.config = config if config is not None else TreeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.root: Optional[TreeNode] = None
        self.insert_many(keys)

    # Mutation

    def insert(self, key: int) -> None:
        """Insert key. Keys equal to an existing key go to its left.

        No rebalancing is performed, so sorted input degrades the tree into
        a chain.
        """
        _check_key(key)
        new = TreeNode(key)
        if self.root is None:
            self.root = new
            logger.debug("inserted %d as root", key)
            return

        node = self.root
        while True:
            if key <= node.key:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
        logger.debug("inserted %d under %d", key, node.key)

    def insert_many(self, keys: Iterable[int]) -> None:
        """Insert every key from an iterable, in order."""
        for key in keys:
            self.insert(key)

    def delete(self, key: int) -> bool:
        """Remove one node holding key.

        A node with two children takes the key of its in-order successor,
        and the successor's node (which has no left child) is unlinked
        instead. If the successor's key also sits on the successor's parent,
        moving it up would leave an equal key in the right subtree, so the
        in-order predecessor is used for that case.

        Returns:
            True if a node was removed, False if key was absent
        """
        _check_key(key)
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right

        if node is None:
            logger.debug("delete %d: not present", key)
            return False

        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left

            if succ_parent is not node and succ_parent.key == succ.key:
                pred_parent, pred = node, node.left
                while pred.right is not None:
                    pred_parent, pred = pred, pred.right
                node.key = pred.key
                self._replace_child(pred_parent, pred, pred.left)
                logger.debug("delete %d: replaced by predecessor %d", key, pred.key)
            else:
                node.key = succ.key
                self._replace_child(succ_parent, succ, succ.right)
                logger.debug("delete %d: replaced by successor %d", key, succ.key)
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
            logger.debug("delete %d: unlinked node with %d child(ren)",
                         key, 0 if child is None else 1)
        return True

    def _replace_child(self,
                       parent: Optional[TreeNode],
                       node: TreeNode,
                       replacement: Optional[TreeNode]) -> None:
        """Put replacement in the link that currently holds node, then
        release node."""
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        node.left = node.right = None

    def clear(self) -> int:
        """Release every node, children before parents.

        Returns:
            Number of nodes released
        """
        released = 0
        teardown = PostOrderTraverser(TraversalMode.ITERATIVE)
        for node, _ in teardown.traverse(self.root):
            node.left = node.right = None
            released += 1
        self.root = None
        logger.debug("cleared tree, released %d nodes", released)
        return released

    # Queries

    def lookup(self, key: int) -> bool:
        """Return whether key is present. O(height)."""
        _check_key(key)
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def size(self) -> int:
        """Count the nodes currently in the tree."""
        return sum(1 for _ in PreOrderTraverser(TraversalMode.ITERATIVE).traverse(self.root))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        walk = PreOrderTraverser(TraversalMode.ITERATIVE).traverse(self.root)
        depths = (depth for _, depth in walk)
        return max(depths, default=-1) + 1

    def is_empty(self) -> bool:
        return self.root is None

    def find_min(self, default: Any = _MISSING) -> int:
        """Return the smallest key by following left links from the root.

        Args:
            default: Returned instead of raising when the tree is empty

        Raises:
            EmptyTreeError: If the tree is empty and no default was given
        """
        if self.root is None:
            if default is _MISSING:
                raise EmptyTreeError("find_min")
            return default
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def find_max(self, default: Any = _MISSING) -> int:
        """Return the largest key by following right links from the root.

        Args:
            default: Returned instead of raising when the tree is empty

        Raises:
            EmptyTreeError: If the tree is empty and no default was given
        """
        if self.root is None:
            if default is _MISSING:
                raise EmptyTreeError("find_max")
            return default
        node = self.root
        while node.right is not None:
            node = node.right
        return node.key

    def kth_largest(self, k: int) -> int:
        """Return the k-th largest key (k=1 is the maximum).

        Raises:
            OutOfRangeError: If k is outside [1, size()]
        """
        return queries.kth_largest(self.root, k, self.config.mode)

    def kth_smallest(self, k: int) -> int:
        """Return the k-th smallest key (k=1 is the minimum).

        Raises:
            OutOfRangeError: If k is outside [1, size()]
        """
        return queries.kth_smallest(self.root, k, self.config.mode)

    def min_absolute_difference(self) -> int:
        """Return the minimum absolute difference between any two keys.

        Raises:
            EmptyOrSingletonError: If the tree has fewer than two keys
        """
        return queries.min_absolute_difference(self.root, self.config.mode)

    # Traversal

    def _traverser(self, order: Union[TraversalOrder, str]) -> TreeTraverser:
        return create_traverser(order, self.config.mode)

    def walk(self,
             order: Union[TraversalOrder, str, None] = None,
             max_depth: Optional[int] = None,
             min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Yield (node, depth) pairs in the given order.

        Args:
            order: Traversal order (defaults to config.default_order)
            max_depth: Maximum depth to visit (None = unlimited)
            min_depth: Minimum depth before yielding nodes
        """
        if order is None:
            order = self.config.default_order
        return self._traverser(order).traverse(self.root, max_depth=max_depth, min_depth=min_depth)

    def traverse(self,
                 order: Union[TraversalOrder, str, None] = None,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[int]:
        """Yield keys in the given order.

        The sequence is lazy and single-use, call again to walk again.
        An unknown order name raises ConfigurationError immediately.
        """
        walk = self.walk(order, max_depth=max_depth, min_depth=min_depth)
        return (node.key for node, _ in walk)

    def render(self,
               order: Union[TraversalOrder, str, None] = None,
               separator: Optional[str] = None,
               trailing_separator: Optional[bool] = None) -> str:
        """Render a traversal as decimal keys joined by a separator.

        separator and trailing_separator default to the tree's config.
        """
        if separator is None:
            separator = self.config.separator
        if trailing_separator is None:
            trailing_separator = self.config.trailing_separator

        text = separator.join(str(key) for key in self.traverse(order))
        if trailing_separator and text:
            text += separator
        return text

    # Integrity

    def validate(self) -> List[str]:
        """Check the order invariant and that no node has two parents.

        Returns:
            List of problems found (empty if the tree is sound)
        """
        errors = []
        seen = set()
        # (node, exclusive lower bound, inclusive upper bound)
        stack: List[Tuple[TreeNode, Optional[int], Optional[int]]] = []
        if self.root is not None:
            stack.append((self.root, None, None))

        while stack:
            node, lower, upper = stack.pop()
            if id(node) in seen:
                errors.append(f"node {node.key} is reachable from more than one parent")
                continue
            seen.add(id(node))

            if lower is not None and node.key <= lower:
                errors.append(f"key {node.key} in right subtree of {lower} must be greater")
            if upper is not None and node.key > upper:
                errors.append(f"key {node.key} in left subtree of {upper} must not be greater")

            if node.right is not None:
                stack.append((node.right, node.key, upper))
            if node.left is not None:
                stack.append((node.left, lower, node.key))

        return errors

    # Python protocols

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, key: object) -> bool:
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return self.lookup(key)

    def __iter__(self) -> Iterator[int]:
        return self.traverse(TraversalOrder.IN_ORDER)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"
