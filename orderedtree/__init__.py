"""OrderedTree - an unbalanced binary search tree of integer keys.

Supports insertion, deletion, lookup, in/pre/post-order traversal and two
order-statistic queries (k-th largest key, minimum absolute difference).

    from orderedtree import OrderedTree

    tree = OrderedTree([41, 20, 11, 90])
    tree.render()          # '11 20 41 90'
    tree.kth_largest(2)    # 41
"""

__version__ = "0.1.0"

from .config import (
    TraversalOrder,
    TraversalMode,
    TreeConfig,
    parse_order,
)
from .errors import (
    OrderedTreeError,
    EmptyTreeError,
    OutOfRangeError,
    EmptyOrSingletonError,
    ConfigurationError,
)
from .core import (
    TreeNode,
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    ReverseInOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    DataCollector,
    KeyCollector,
    KeyDepthCollector,
    FullNodeCollector,
    ChildCountCollector,
    CustomCollector,
)
from .tree import OrderedTree
from .api import (
    build_tree,
    traverse_tree,
    collect_tree_data,
    render_traversal,
    count_nodes,
    find_keys,
    get_leaf_keys,
    get_tree_stats,
)

__all__ = [
    '__version__',
    # Tree
    'OrderedTree',
    'TreeNode',
    # Config
    'TraversalOrder',
    'TraversalMode',
    'TreeConfig',
    'parse_order',
    # Errors
    'OrderedTreeError',
    'EmptyTreeError',
    'OutOfRangeError',
    'EmptyOrSingletonError',
    'ConfigurationError',
    # Traversal
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'ReverseInOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'KeyCollector',
    'KeyDepthCollector',
    'FullNodeCollector',
    'ChildCountCollector',
    'CustomCollector',
    # API
    'build_tree',
    'traverse_tree',
    'collect_tree_data',
    'render_traversal',
    'count_nodes',
    'find_keys',
    'get_leaf_keys',
    'get_tree_stats',
]
