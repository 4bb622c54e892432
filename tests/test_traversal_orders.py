"""Tests for traversal orders, depth filtering and traverser construction.

Every test taking the ``mode`` or ``scenario_tree`` fixture runs once with
the explicit-stack walk and once with the recursive walk.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import (
    OrderedTree,
    TreeConfig,
    TraversalMode,
    TraversalOrder,
    ConfigurationError,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    ReverseInOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_order,
)

IN_ORDER = [-5, -4, -1, 1, 11, 20, 29, 30, 32, 41, 65, 70, 75, 90]
PRE_ORDER = [-5, -4, -1, 1, 41, 20, 11, 29, 32, 30, 90, 65, 70, 75]
POST_ORDER = [11, 30, 32, 29, 20, 75, 70, 65, 90, 41, 1, -1, -4, -5]
LEVEL_ORDER = [-5, -4, -1, 1, 41, 20, 90, 11, 29, 65, 32, 70, 30, 75]


@pytest.mark.parametrize("order, expected", [
    (TraversalOrder.IN_ORDER, IN_ORDER),
    (TraversalOrder.PRE_ORDER, PRE_ORDER),
    (TraversalOrder.POST_ORDER, POST_ORDER),
    (TraversalOrder.REVERSE_IN_ORDER, IN_ORDER[::-1]),
    (TraversalOrder.LEVEL_ORDER, LEVEL_ORDER),
])
def test_scenario_orders(scenario_tree, order, expected):
    assert list(scenario_tree.traverse(order)) == expected


def test_default_order_is_in_order(scenario_tree):
    assert list(scenario_tree.traverse()) == IN_ORDER
    assert list(scenario_tree) == IN_ORDER


def test_default_order_from_config(mode):
    tree = OrderedTree([2, 1, 3], config=TreeConfig(mode=mode, default_order=TraversalOrder.POST_ORDER))
    assert list(tree.traverse()) == [1, 3, 2]
    # Iteration is always ascending
    assert list(tree) == [1, 2, 3]


def test_small_tree_orders(mode):
    tree = OrderedTree([2, 1, 3], config=TreeConfig(mode=mode))
    assert list(tree.traverse('pre')) == [2, 1, 3]
    assert list(tree.traverse('post')) == [1, 3, 2]
    assert list(tree.traverse('in')) == [1, 2, 3]
    assert list(tree.traverse('level')) == [2, 1, 3]


def test_string_aliases(scenario_tree):
    assert list(scenario_tree.traverse('inorder')) == IN_ORDER
    assert list(scenario_tree.traverse('Pre-Order')) == PRE_ORDER
    assert list(scenario_tree.traverse('postorder')) == POST_ORDER
    assert list(scenario_tree.traverse('bfs')) == LEVEL_ORDER
    assert list(scenario_tree.traverse('desc')) == IN_ORDER[::-1]


def test_unknown_order_rejected(scenario_tree):
    with pytest.raises(ConfigurationError):
        list(scenario_tree.traverse('zigzag'))
    with pytest.raises(ConfigurationError):
        scenario_tree.traverse('zigzag')
    with pytest.raises(ConfigurationError):
        scenario_tree.walk('zigzag')
    with pytest.raises(ValueError):
        parse_order('sideways')


def test_traversal_is_rederivable(scenario_tree):
    first = list(scenario_tree.traverse())
    second = list(scenario_tree.traverse())
    assert first == second == IN_ORDER


def test_traversal_sees_mutations(scenario_tree):
    scenario_tree.insert(0)
    scenario_tree.delete(90)
    keys = list(scenario_tree.traverse())
    assert keys == sorted(IN_ORDER[:-1] + [0])


def test_pre_order_rebuilds_same_shape(scenario_tree, mode):
    copy = OrderedTree(scenario_tree.traverse('pre'), config=TreeConfig(mode=mode))
    assert list(copy.traverse('pre')) == PRE_ORDER
    assert list(copy.traverse('level')) == LEVEL_ORDER


def test_render_orders(scenario_tree):
    assert scenario_tree.render('post') == " ".join(str(k) for k in POST_ORDER)
    assert scenario_tree.render('in', separator=", ") == ", ".join(str(k) for k in IN_ORDER)


def test_render_trailing_separator():
    tree = OrderedTree([2, 1, 3], config=TreeConfig.legacy_output())
    assert tree.render() == "1 2 3 "
    assert OrderedTree(config=TreeConfig.legacy_output()).render() == ""


# Depth filtering


def test_max_depth(scenario_tree):
    assert list(scenario_tree.traverse('in', max_depth=4)) == [-5, -4, -1, 1, 41]
    assert list(scenario_tree.traverse('pre', max_depth=0)) == [-5]


def test_min_depth(scenario_tree):
    assert list(scenario_tree.traverse('in', min_depth=6)) == [11, 29, 30, 32, 65, 70, 75]


def test_depth_window(scenario_tree):
    assert list(scenario_tree.traverse('level', min_depth=5, max_depth=6)) == [20, 90, 11, 29, 65]


def test_walk_reports_depths(scenario_tree):
    depths = {node.key: depth for node, depth in scenario_tree.walk('pre')}
    assert depths[-5] == 0
    assert depths[41] == 4
    assert depths[30] == 8
    assert depths[75] == 8


# Traversers used directly


@pytest.mark.parametrize("traverser_class", [
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    ReverseInOrderTraverser,
    LevelOrderTraverser,
])
def test_traverser_on_empty_root(traverser_class, mode):
    assert list(traverser_class(mode).traverse(None)) == []


def test_traversers_are_lazy(mode):
    tree = OrderedTree(range(10), config=TreeConfig(mode=mode))
    walk = InOrderTraverser(mode).traverse(tree.root)
    node, depth = next(walk)
    assert (node.key, depth) == (0, 0)


def test_create_traverser():
    traverser = create_traverser('post', 'recursive')
    assert isinstance(traverser, PostOrderTraverser)
    assert traverser.mode is TraversalMode.RECURSIVE

    traverser = create_traverser(TraversalOrder.REVERSE_IN_ORDER)
    assert isinstance(traverser, ReverseInOrderTraverser)
    assert traverser.mode is TraversalMode.ITERATIVE


def test_create_traverser_rejects_unknown():
    with pytest.raises(ConfigurationError):
        create_traverser('sideways')
    with pytest.raises(ConfigurationError):
        create_traverser('in', 'parallel')


def test_modes_agree_on_random_tree():
    import random

    rng = random.Random(1234)
    keys = [rng.randint(-500, 500) for _ in range(300)]
    iterative = OrderedTree(keys)
    recursive = OrderedTree(keys, config=TreeConfig.recursive())

    for order in TraversalOrder:
        assert list(iterative.traverse(order)) == list(recursive.traverse(order))
    assert list(iterative) == sorted(keys)
