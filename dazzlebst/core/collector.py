"""Data collection strategies for dazzlebst.

DataCollectors define what a collecting traversal returns for each node it
visits. The tree's ``inorder()`` and friends collect keys; the functional
API can collect nodes, ``(key, depth)`` pairs or anything a caller computes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Tuple

from .node import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    Separating collection from traversal lets the same walk serve different
    purposes (listing keys, gathering nodes, annotating depth).
    """

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only the key held by each node."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.data


class NodeCollector(DataCollector):
    """Collects the node objects themselves."""

    def collect(self, node: Node, depth: int) -> Node:
        return node


class DepthCollector(DataCollector):
    """Collects ``(key, depth)`` pairs."""

    def collect(self, node: Node, depth: int) -> Tuple[Any, int]:
        return (node.data, depth)


class ShapeCollector(DataCollector):
    """Collects a small structural summary of each node.

    Useful for tree shape analysis and for the stats helpers.
    """

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        return {
            'key': node.data,
            'depth': depth,
            'child_count': sum(1 for _ in node.children()),
            'is_leaf': node.is_leaf(),
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[Node, int], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
        """
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node, depth)
