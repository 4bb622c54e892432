"""Core abstractions for OrderedTree.

This package contains the node type, the traversal strategies and the
data collectors that OrderedTree is built from.
"""

from .node import TreeNode
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    ReverseInOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    KeyCollector,
    KeyDepthCollector,
    FullNodeCollector,
    ChildCountCollector,
    CustomCollector,
)

__all__ = [
    "TreeNode",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "ReverseInOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "KeyCollector",
    "KeyDepthCollector",
    "FullNodeCollector",
    "ChildCountCollector",
    "CustomCollector",
]
