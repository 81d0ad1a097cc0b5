#!/usr/bin/env python3
"""
Basic walkthrough of dazzlebst.

This example demonstrates:
- Building a balanced tree from random keys
- Printing the four traversal orders
- Unbalancing the tree with large inserts
- Restoring balance with rebalance()

Usage:
    python examples/basic_usage.py [--seed N] [--size N]
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlebst import Tree, get_tree_stats, pretty_print
from dazzlebst.config import RandomInputConfig
from dazzlebst.testing import random_keys


def report(tree: Tree) -> None:
    """Print balance and all four traversals."""
    print(f"Level order traversal: {tree.level_order()}")
    print(f"Pre-order traversal: {tree.preorder()}")
    print(f"Post-order traversal: {tree.postorder()}")
    print(f"In-order traversal: {tree.inorder()}")


def main():
    parser = argparse.ArgumentParser(description="dazzlebst walkthrough")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random keys")
    parser.add_argument("--size", type=int, default=15, help="How many random keys to draw")
    args = parser.parse_args()

    tree = Tree(random_keys(RandomInputConfig(size=args.size, seed=args.seed)))

    print("=" * 60)
    print("Initially")
    print("=" * 60)
    print(f"Is the tree balanced? {tree.is_balanced()}")
    report(tree)
    pretty_print(tree)

    for key in (101, 1001, 200, 999):
        tree.insert(key)

    print("\n" + "=" * 60)
    print("After adding new nodes")
    print("=" * 60)
    print(f"Is the tree balanced now after adding new node: {tree.is_balanced()}")
    pretty_print(tree)

    tree.rebalance()

    print("\n" + "=" * 60)
    print("After rebalancing")
    print("=" * 60)
    print(f"Is the tree balanced now after rebalancing? {tree.is_balanced()}")
    report(tree)
    pretty_print(tree)

    stats = get_tree_stats(tree)
    print(f"\nNodes: {stats['total_nodes']}  Leaves: {stats['leaf_nodes']}  "
          f"Height: {stats['height']} (minimal {stats['minimal_height']})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
