"""High-level API for OrderedTree.

This module provides simple, functional interfaces for common operations.
These functions wrap the OrderedTree / traverser / collector classes for
ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Union

from .config import TraversalOrder, TreeConfig
from .core.collector import DataCollector, KeyCollector
from .tree import OrderedTree


def build_tree(keys: Iterable[int], config: Optional[TreeConfig] = None) -> OrderedTree:
    """Build a tree by inserting keys in iteration order.

    Example:
        >>> tree = build_tree([-5, -4, -1, 1, 41, 20])
        >>> tree.size()
        6
    """
    return OrderedTree(keys, config=config)


def traverse_tree(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[int]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to traverse
        order: Traversal order (in, pre, post, reverse, level)
        max_depth: Maximum depth to traverse (root = 0)
        min_depth: Minimum depth before yielding keys

    Yields:
        Keys in the requested order

    Example:
        >>> tree = build_tree([2, 1, 3])
        >>> list(traverse_tree(tree, 'pre'))
        [2, 1, 3]
    """
    yield from tree.traverse(order, max_depth=max_depth, min_depth=min_depth)


def collect_tree_data(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    collector: Optional[DataCollector] = None,
    **kwargs
) -> Iterator[Any]:
    """Traverse tree and collect data from every node.

    Args:
        tree: Tree to traverse
        order: Traversal order
        collector: What to extract per node (default KeyCollector)
        **kwargs: max_depth / min_depth (see traverse_tree)

    Yields:
        Whatever the collector returns for each node

    Example:
        >>> tree = build_tree([2, 1, 3])
        >>> from orderedtree import KeyDepthCollector
        >>> list(collect_tree_data(tree, 'level', KeyDepthCollector()))
        [(2, 0), (1, 1), (3, 1)]
    """
    if collector is None:
        collector = KeyCollector()
    for node, depth in tree.walk(order, **kwargs):
        yield collector.collect(node, depth)


def render_traversal(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    separator: Optional[str] = None,
    trailing_separator: Optional[bool] = None,
) -> str:
    """Render a traversal as decimal keys separated by single spaces.

    Args:
        tree: Tree to render
        order: Traversal order
        separator: Overrides the tree's configured separator
        trailing_separator: Overrides whether a separator ends the text

    Returns:
        Rendered traversal ('' for an empty tree)
    """
    return tree.render(order, separator=separator, trailing_separator=trailing_separator)


def count_nodes(
    tree: OrderedTree,
    predicate: Optional[Callable[[int], bool]] = None,
) -> int:
    """Count keys that match a predicate (all keys when predicate is None)."""
    if predicate is None:
        return tree.size()
    return sum(1 for key in tree.traverse(TraversalOrder.PRE_ORDER) if predicate(key))


def find_keys(
    tree: OrderedTree,
    predicate: Callable[[int], bool],
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[int]:
    """Find keys that match a predicate.

    Example:
        >>> tree = build_tree([5, 2, 8, 3])
        >>> list(find_keys(tree, lambda k: k % 2 == 0))
        [2, 8]
    """
    for key in tree.traverse(order):
        if predicate(key):
            yield key


def get_leaf_keys(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[int]:
    """Yield the keys of all leaf nodes."""
    for node, _ in tree.walk(order):
        if node.is_leaf():
            yield node.key


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        min, max (None when empty) and depths (node count per depth)

    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['total_nodes'], stats['height']
        (3, 2)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {},
    }

    for node, depth in tree.walk(TraversalOrder.LEVEL_ORDER):
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        stats['height'] = max(stats['height'], depth + 1)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['min'] = tree.find_min(default=None)
    stats['max'] = tree.find_max(default=None)
    return stats

