"""Shared fixtures for the OrderedTree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import OrderedTree, TraversalMode, TreeConfig

# Insertion order used by the walkthrough in examples/basic_usage.py
SCENARIO_VALUES = [-5, -4, -1, 1, 41, 20, 11, 90, 29, 32, 65, 70, 30, 75]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running stress tests (deselect with '-m \"not slow\"')")


@pytest.fixture(params=[TraversalMode.ITERATIVE, TraversalMode.RECURSIVE], ids=lambda m: m.value)
def mode(request):
    """Run a test once per traversal mode."""
    return request.param


@pytest.fixture
def scenario_tree(mode):
    """The 14-key walkthrough tree, built in the requested mode."""
    return OrderedTree(SCENARIO_VALUES, config=TreeConfig(mode=mode))
