"""dazzlebst - Ordered Binary Search Tree Library.

dazzlebst stores unique, totally-ordered keys in a binary search tree built
balanced from an initial collection. Keys can then be inserted, deleted and
looked up, the tree walked in level, pre, in or post order, and its shape
checked and restored with ``is_balanced()`` and ``rebalance()``.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzlebst import Tree

    tree = Tree([2, 100, 78, 45, 20, 4])
    tree.insert(999)
    tree.rebalance()
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import (
    ConfigurationError,
    RandomInputConfig,
    TraversalOrder,
    TreeConfig,
)
from .core import (
    Node,
    Tree,
    TreeTraverser,
    LevelOrderTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    DataCollector,
    KeyCollector,
    NodeCollector,
    DepthCollector,
    ShapeCollector,
    CustomCollector,
)
from .api import (
    build_tree_from,
    traverse_tree,
    collect_keys,
    count_nodes,
    find_keys,
    get_leaf_keys,
    get_keys_by_depth,
    get_tree_stats,
    compare_shapes,
)
from .display import render_tree, pretty_print

__all__ = [
    "__version__",
    # Core
    "Node",
    "Tree",
    "TreeTraverser",
    "LevelOrderTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "KeyCollector",
    "NodeCollector",
    "DepthCollector",
    "ShapeCollector",
    "CustomCollector",
    # Config
    "ConfigurationError",
    "RandomInputConfig",
    "TraversalOrder",
    "TreeConfig",
    # API
    "build_tree_from",
    "traverse_tree",
    "collect_keys",
    "count_nodes",
    "find_keys",
    "get_leaf_keys",
    "get_keys_by_depth",
    "get_tree_stats",
    "compare_shapes",
    # Display
    "render_tree",
    "pretty_print",
]
