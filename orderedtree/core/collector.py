"""Data collection strategies for OrderedTree.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce bare keys, keys with depths, or
per-node structure summaries.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Tuple

from .node import TreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only node keys. The default for textual rendering."""

    def collect(self, node: TreeNode, depth: int) -> int:
        return node.key


class KeyDepthCollector(DataCollector):
    """Collects (key, depth) pairs."""

    def collect(self, node: TreeNode, depth: int) -> Tuple[int, int]:
        return (node.key, depth)


class FullNodeCollector(DataCollector):
    """Collects the node objects themselves.

    The nodes remain owned by the tree; mutating their links from outside
    breaks the ordering invariant.
    """

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class ChildCountCollector(DataCollector):
    """Collects nodes with child count information.

    Useful for tree structure analysis.
    """

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        return {
            'key': node.key,
            'depth': depth,
            'child_count': node.child_count(),
            'is_leaf': node.is_leaf(),
        }


class CustomCollector(DataCollector):
    """Collector driven by a user-provided function.

    Example:
        >>> collector = CustomCollector(lambda node, depth: node.key * 2)
    """

    def __init__(self, collect_func: Callable[[TreeNode, int], Any]):
        """Initialize with a collection function.

        Args:
            collect_func: Called as collect_func(node, depth) for every node
        """
        self.collect_func = collect_func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.collect_func(node, depth)
