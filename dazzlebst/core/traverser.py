"""Tree traversal strategies for dazzlebst.

Traversers implement the four orders in which a binary search tree can be
walked. They only read ``left_child``/``right_child``, so every traversal
is pure and can be restarted any number of times.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, Optional, Tuple, Type, Union

from .node import Node
from ..config import TraversalOrder, parse_order


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Subclasses yield ``(node, depth)`` pairs, where depth counts edges from
    the node the traversal started at.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal (None means an empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1, left to
    right within a level.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree breadth-first using a FIFO queue seeded with root."""
        if root is None:
            return

        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a node, then its left subtree, then its right subtree. Rebuilding
    a tree by inserting keys in this order reproduces its shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        def _traverse_recursive(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                yield from _traverse_recursive(node.left_child, depth + 1)
                yield from _traverse_recursive(node.right_child, depth + 1)

        yield from _traverse_recursive(root, 0)


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal.

    Visits the left subtree, the node, then the right subtree. On a binary
    search tree this yields keys in ascending order, which is what
    ``Tree.rebalance`` relies on.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        def _traverse_recursive(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return

            explore = self._should_explore(depth, max_depth)
            if explore:
                yield from _traverse_recursive(node.left_child, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if explore:
                yield from _traverse_recursive(node.right_child, depth + 1)

        yield from _traverse_recursive(root, 0)


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits both subtrees before the node itself. Good for releasing a tree
    or computing values that depend on the children (like heights).
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        def _traverse_recursive(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return

            if self._should_explore(depth, max_depth):
                yield from _traverse_recursive(node.left_child, depth + 1)
                yield from _traverse_recursive(node.right_child, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


_TRAVERSERS = {
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or one of its names (level, pre, in, post, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If the order name is not recognized
    """
    traverser_class: Type[TreeTraverser] = _TRAVERSERS[parse_order(order)]
    return traverser_class()
