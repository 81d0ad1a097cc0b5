"""Core building blocks for dazzlebst.

This module contains the node type, the key comparison, the traversal and
collection strategies, and the Tree that ties them together.
"""

from .node import Node
from .compare import compare, LESS, EQUAL, GREATER
from .traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    KeyCollector,
    NodeCollector,
    DepthCollector,
    ShapeCollector,
    CustomCollector,
)
from .tree import Tree

__all__ = [
    "Node",
    "compare",
    "LESS",
    "EQUAL",
    "GREATER",
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
    "Tree",
]
