#!/usr/bin/env python3
"""
Basic OrderedTree walkthrough.

This example demonstrates:
- Building a tree from a sequence of integers
- Traversal rendering, size and height
- k-th largest key and minimum absolute difference
- Deleting a key and tearing the whole tree down
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import (
    OrderedTree,
    OrderedTreeError,
    TreeConfig,
    get_tree_stats,
)

DEFAULT_VALUES = [-5, -4, -1, 1, 41, 20, 11, 90, 29, 32, 65, 70, 30, 75]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="OrderedTree demonstration")
    parser.add_argument("--values", type=int, nargs="+", default=DEFAULT_VALUES,
                        help="keys to insert, in order")
    parser.add_argument("--k", type=int, default=3,
                        help="rank for the k-th largest query")
    parser.add_argument("--delete", type=int, default=20,
                        help="key to delete")
    parser.add_argument("--order", default="in",
                        help="traversal order to print (in, pre, post, reverse, level)")
    parser.add_argument("--verbose", action="store_true",
                        help="show debug logging from the tree")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = OrderedTree(args.values, config=TreeConfig.legacy_output())

    print(f"Traversal ({args.order}): {tree.render(args.order)}")
    print(f"Tree size: {tree.size()}, Height: {tree.height()}")

    try:
        print(f"\nLargest value of rank {args.k}: {tree.kth_largest(args.k)}")
    except OrderedTreeError as e:
        print(f"\nLargest value of rank {args.k}: unavailable ({e})")

    try:
        print(f"Minimum absolute difference: {tree.min_absolute_difference()}")
    except OrderedTreeError as e:
        print(f"Minimum absolute difference: unavailable ({e})")

    print(f"\nDeleting node with value {args.delete}...")
    if tree.delete(args.delete):
        print(f"After deletion (In-Order): {tree.render()}")
    else:
        print(f"Value {args.delete} not found")

    stats = get_tree_stats(tree)
    print(f"\nLeaves: {stats['leaf_nodes']}, internal nodes: {stats['internal_nodes']}")

    print("\nDeleting all nodes...")
    released = tree.clear()
    if tree.is_empty():
        print(f"Tree successfully cleared ({released} nodes released).")
    else:
        print("Error: Tree not cleared.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
