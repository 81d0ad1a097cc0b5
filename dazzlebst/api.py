"""High-level API for dazzlebst.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the Tree, traverser and collector classes
for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import TraversalOrder, TreeConfig
from .core.collector import DataCollector, DepthCollector, KeyCollector, ShapeCollector
from .core.node import Node
from .core.traverser import create_traverser
from .core.tree import Tree


def build_tree_from(keys: Iterable[Any], verbose: bool = False, **kwargs) -> Tree:
    """Build a balanced tree from any collection of keys.

    Args:
        keys: Keys to store (duplicates dropped)
        verbose: Warn on stderr when operations turn out to be no-ops
        **kwargs: Additional TreeConfig fields

    Returns:
        Tree holding the unique keys

    Example:
        >>> tree = build_tree_from([5, 3, 8, 3])
        >>> tree.inorder()
        [3, 5, 8]
    """
    return Tree(keys, config=TreeConfig(verbose=verbose, **kwargs))


def traverse_tree(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        order: Traversal order (level, pre, in, post)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Only yield nodes for which this returns True

    Yields:
        Node instances that match the criteria

    Example:
        >>> for node in traverse_tree(tree, 'level', max_depth=1):
        ...     print(node.data)
    """
    traverser = create_traverser(order)
    for node, _ in traverser.traverse(tree.root, max_depth, min_depth):
        if include_filter is None or include_filter(node):
            yield node


def collect_keys(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    collector: Optional[DataCollector] = None,
    **kwargs
) -> List[Any]:
    """Traverse tree and collect one item per node.

    Args:
        tree: Tree to walk
        order: Traversal order
        collector: What to collect (defaults to keys)
        **kwargs: max_depth / min_depth limits

    Returns:
        List of collected items in traversal order
    """
    collector = collector or KeyCollector()
    traverser = create_traverser(order)
    return [
        collector.collect(node, depth)
        for node, depth in traverser.traverse(tree.root, **kwargs)
    ]


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count nodes in the tree, optionally within a depth range.

    Args:
        tree: Tree to count
        **kwargs: max_depth / min_depth limits

    Returns:
        Number of nodes
    """
    return sum(1 for _ in traverse_tree(tree, TraversalOrder.PRE_ORDER, **kwargs))


def find_keys(tree: Tree, predicate: Callable[[Any], bool]) -> List[Any]:
    """Return the keys satisfying predicate, in ascending order.

    Example:
        >>> find_keys(tree, lambda key: key % 2 == 0)
    """
    return [node.data for node in traverse_tree(tree) if predicate(node.data)]


def get_leaf_keys(tree: Tree) -> List[Any]:
    """Return the keys of all leaf nodes, in ascending order."""
    return tree.leaf_keys()


def get_keys_by_depth(tree: Tree) -> Dict[int, List[Any]]:
    """Group keys by their depth below the root.

    Returns:
        Mapping of depth to the keys at that depth, left to right
    """
    levels: Dict[int, List[Any]] = {}
    for key, depth in collect_keys(tree, TraversalOrder.LEVEL_ORDER, DepthCollector()):
        levels.setdefault(depth, []).append(key)
    return levels


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about tree structure.

    Args:
        tree: Tree to analyse

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Balanced: {stats['balanced']}")
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': tree.height(),
        'balanced': tree.is_balanced(),
        'min_key': tree.min_key(),
        'max_key': tree.max_key(),
        'depths': {}
    }

    for info in collect_keys(tree, TraversalOrder.LEVEL_ORDER, ShapeCollector()):
        stats['total_nodes'] += 1

        if info['is_leaf']:
            stats['leaf_nodes'] += 1

        depth = info['depth']
        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['minimal_height'] = _minimal_height(stats['total_nodes'])

    return stats


def _minimal_height(node_count: int) -> int:
    """Smallest height any binary tree with node_count nodes can have."""
    return node_count.bit_length() - 1


def compare_shapes(first: Tree, second: Tree) -> Tuple[bool, bool]:
    """Compare two trees by contents and by shape.

    Returns:
        (same_keys, same_shape) where same_shape means identical pre-order
        key sequences, which fixes the structure for a binary search tree
    """
    same_keys = first.inorder() == second.inorder()
    same_shape = same_keys and first.preorder() == second.preorder()
    return same_keys, same_shape
