"""Binary search tree for dazzlebst.

The Tree owns its root node and, through it, every node in the structure.
All algorithms are recursive and top-down: each public operation forwards
the root to an explicit ``*_from(..., node)`` helper that works on any
subtree.

Insert and delete never rebalance. Skewed insertion sequences can push the
height toward the number of keys until ``rebalance()`` is called, which
rebuilds a height-minimal tree from the sorted keys.
"""

import sys
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Union

from .compare import EQUAL, LESS, compare
from .collector import DataCollector, KeyCollector
from .node import Node
from .traverser import create_traverser
from ..config import TraversalOrder, TreeConfig, ensure_valid

Visitor = Callable[[Node], Any]


class Tree:
    """Ordered binary search tree over unique keys.

    Attributes:
        root: Root node, or None for an empty tree
        input: Sorted, duplicate-free keys the current structure was last
            built from. Not updated by insert() or delete().
        config: Behavioural settings (default traversal order, verbosity)

    Example:
        >>> tree = Tree([2, 100, 78, 45, 20, 4, 67, 35, 19, 99, 48])
        >>> tree.root.data
        45
        >>> tree.height()
        3
    """

    def __init__(self,
                 keys: Optional[Iterable[Any]] = None,
                 config: Optional[TreeConfig] = None):
        """Build a balanced tree from a collection of keys.

        Args:
            keys: Keys to store. Duplicates are dropped and the rest sorted
                before building. None or an empty collection gives an
                empty tree.
            config: Tree settings (defaults to TreeConfig())

        Raises:
            ConfigurationError: If config fails validation
        """
        self.config = config or TreeConfig()
        ensure_valid(self.config)

        supplied = list(keys) if keys is not None else []
        self.input = self._preprocess(supplied)
        if self.config.verbose and len(self.input) < len(supplied):
            self._warn(f"Dropped {len(supplied) - len(self.input)} duplicate key(s) on construction")

        self.root = self.build_tree(self.input, 0, len(self.input) - 1)

    @classmethod
    def from_sorted(cls, keys: Sequence[Any], config: Optional[TreeConfig] = None) -> 'Tree':
        """Build a tree from keys the caller already sorted.

        Args:
            keys: Strictly ascending keys
            config: Tree settings

        Raises:
            ValueError: If keys are not strictly ascending
        """
        keys = list(keys)
        for previous, current in zip(keys, keys[1:]):
            if not previous < current:
                raise ValueError(
                    f"Keys must be strictly ascending: {previous!r} is followed by {current!r}"
                )

        tree = cls(config=config)
        tree.input = keys
        tree.root = tree.build_tree(keys, 0, len(keys) - 1)
        return tree

    # Construction

    def build_tree(self, array: Sequence[Any], first: int, last: int) -> Optional[Node]:
        """Build a height-balanced subtree from ``array[first..last]``.

        The middle element (lower middle for even-length ranges) becomes the
        subtree root; the halves on either side become its children.

        Args:
            array: Sorted, duplicate-free keys
            first: Index of the first key to include
            last: Index of the last key to include (inclusive)

        Returns:
            Root of the new subtree, or None for an empty range
        """
        if first > last:
            return None

        mid = first + (last - first) // 2

        node = Node(array[mid])
        node.left_child = self.build_tree(array, first, mid - 1)
        node.right_child = self.build_tree(array, mid + 1, last)
        return node

    # Lookup

    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding key, or None if it is not in the tree."""
        return self.find_from(key, self.root)

    def find_from(self, key: Any, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None

        comparison = compare(key, node.data)
        if comparison == EQUAL:
            return node
        if comparison == LESS:
            return self.find_from(key, node.left_child)
        return self.find_from(key, node.right_child)

    # Insertion

    def insert(self, key: Any) -> None:
        """Insert key as a new leaf. Inserting a present key does nothing."""
        self.root = self.insert_from(key, self.root)

    def insert_from(self, key: Any, node: Optional[Node]) -> Node:
        """Insert key into the subtree rooted at node.

        Returns:
            The subtree root the caller should link in place of node: a new
            leaf when node is None, otherwise node itself
        """
        if node is None:
            return Node(key)

        comparison = compare(key, node.data)
        if comparison == EQUAL:
            if self.config.verbose:
                self._warn(f"Ignoring insert of duplicate key {key!r}")
            return node

        if comparison == LESS:
            node.left_child = self.insert_from(key, node.left_child)
        else:
            node.right_child = self.insert_from(key, node.right_child)
        return node

    # Deletion

    def delete(self, key: Any) -> None:
        """Remove key from the tree. Deleting an absent key does nothing."""
        self.root = self.delete_from(key, self.root)

    def delete_from(self, key: Any, node: Optional[Node]) -> Optional[Node]:
        """Delete key from the subtree rooted at node.

        A node with two children keeps its place: it takes over the key of
        its in-order successor, and the successor is then deleted from the
        right subtree.

        Returns:
            The subtree root the caller should link in place of node
        """
        if node is None:
            if self.config.verbose:
                self._warn(f"Ignoring delete of absent key {key!r}")
            return None

        comparison = compare(key, node.data)
        if comparison == LESS:
            node.left_child = self.delete_from(key, node.left_child)
            return node
        if comparison != EQUAL:
            node.right_child = self.delete_from(key, node.right_child)
            return node

        if node.left_child is None:
            return node.right_child
        if node.right_child is None:
            return node.left_child

        successor = self.successor_of(node)
        node.data = successor.data
        node.right_child = self.delete_from(successor.data, node.right_child)
        return node

    def successor_of(self, node: Node) -> Optional[Node]:
        """Return the in-order successor inside node's right subtree.

        That is the leftmost node of the right subtree, or None when node
        has no right child.
        """
        return self._leftmost(node.right_child)

    # Traversals: collecting form

    def level_order(self) -> List[Any]:
        """Keys in breadth-first order."""
        return self.collect(TraversalOrder.LEVEL_ORDER)

    def preorder(self) -> List[Any]:
        """Keys with each node before its subtrees."""
        return self.collect(TraversalOrder.PRE_ORDER)

    def inorder(self) -> List[Any]:
        """Keys in ascending order."""
        return self.collect(TraversalOrder.IN_ORDER)

    def postorder(self) -> List[Any]:
        """Keys with each node after its subtrees."""
        return self.collect(TraversalOrder.POST_ORDER)

    def collect(self,
                order: Union[TraversalOrder, str],
                collector: Optional[DataCollector] = None) -> List[Any]:
        """Walk the whole tree in the given order and gather one item per node.

        Args:
            order: Traversal order
            collector: What to gather from each node (defaults to its key)

        Returns:
            A new list on every call
        """
        collector = collector or KeyCollector()
        return [
            collector.collect(node, depth)
            for node, depth in create_traverser(order).traverse(self.root)
        ]

    # Traversals: visitor form

    def level_order_each(self, visitor: Visitor) -> None:
        self.visit(TraversalOrder.LEVEL_ORDER, visitor)

    def preorder_each(self, visitor: Visitor) -> None:
        self.visit(TraversalOrder.PRE_ORDER, visitor)

    def inorder_each(self, visitor: Visitor) -> None:
        self.visit(TraversalOrder.IN_ORDER, visitor)

    def postorder_each(self, visitor: Visitor) -> None:
        self.visit(TraversalOrder.POST_ORDER, visitor)

    def visit(self, order: Union[TraversalOrder, str], visitor: Visitor) -> None:
        """Call visitor(node) for every node in the given order."""
        for node, _ in create_traverser(order).traverse(self.root):
            visitor(node)

    def traverse(self,
                 order: Union[TraversalOrder, str, None] = None,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Node]:
        """Lazily yield nodes in the given order (config default if None).

        Args:
            order: Traversal order
            max_depth: Do not go below this depth (None = unlimited)
            min_depth: Skip nodes above this depth
        """
        order = order if order is not None else self.config.default_order
        for node, _ in create_traverser(order).traverse(self.root, max_depth, min_depth):
            yield node

    # Structural queries

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return self.height_from(self.root)

    def height_from(self, node: Optional[Node]) -> int:
        if node is None:
            return -1

        left_height = self.height_from(node.left_child)
        right_height = self.height_from(node.right_child)
        return max(left_height, right_height) + 1

    def depth(self, target: Optional[Node]) -> int:
        """Edges from the root down to the target node instance.

        Nodes are matched by identity. Returns -1 if target is not in the tree.
        """
        return self.depth_from(target, self.root)

    def depth_from(self, target: Optional[Node], node: Optional[Node]) -> int:
        if node is None:
            return -1
        if target is node:
            return 0

        left_depth = self.depth_from(target, node.left_child)
        if left_depth != -1:
            return left_depth + 1

        right_depth = self.depth_from(target, node.right_child)
        if right_depth != -1:
            return right_depth + 1

        return -1

    def depth_of_key(self, key: Any) -> int:
        """Edges from the root down to the node holding key; -1 if absent."""
        return self._depth_of_key(key, self.root)

    def _depth_of_key(self, key: Any, node: Optional[Node]) -> int:
        if node is None:
            return -1

        comparison = compare(key, node.data)
        if comparison == EQUAL:
            return 0

        child = node.left_child if comparison == LESS else node.right_child
        below = self._depth_of_key(key, child)
        return below + 1 if below != -1 else -1

    def is_balanced(self) -> bool:
        """Check that no node's subtrees differ in height by more than one."""
        return self.balanced_from(self.root)

    def balanced_from(self, node: Optional[Node]) -> bool:
        if node is None:
            return True

        left_height = self.height_from(node.left_child)
        right_height = self.height_from(node.right_child)
        return (abs(left_height - right_height) <= 1
                and self.balanced_from(node.left_child)
                and self.balanced_from(node.right_child))

    def rebalance(self) -> None:
        """Rebuild a height-minimal tree from the current keys."""
        self.input = self.inorder()
        self.root = self.build_tree(self.input, 0, len(self.input) - 1)

    # Convenience queries

    def min_key(self) -> Any:
        """Smallest key, or None for an empty tree."""
        node = self._leftmost(self.root)
        return node.data if node is not None else None

    def max_key(self) -> Any:
        """Largest key, or None for an empty tree."""
        node = self.root
        while node is not None and node.right_child is not None:
            node = node.right_child
        return node.data if node is not None else None

    def leaf_keys(self) -> List[Any]:
        """Keys held by leaf nodes, in ascending order."""
        return [node.data for node in self.traverse(TraversalOrder.IN_ORDER) if node.is_leaf()]

    # Container protocol

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Iterate over keys in the configured default order."""
        for node in self.traverse():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self.traverse(TraversalOrder.PRE_ORDER))

    def __repr__(self) -> str:
        root = self.root.data if self.root is not None else None
        return f"{self.__class__.__name__}(root={root!r}, height={self.height()})"

    # Helpers

    @staticmethod
    def _preprocess(keys: List[Any]) -> List[Any]:
        """Sort keys and drop duplicates. Keys need not be hashable."""
        unique: List[Any] = []
        for key in sorted(keys):
            if not unique or compare(key, unique[-1]) != EQUAL:
                unique.append(key)
        return unique

    @staticmethod
    def _leftmost(node: Optional[Node]) -> Optional[Node]:
        while node is not None and node.left_child is not None:
            node = node.left_child
        return node

    def _warn(self, message: str) -> None:
        print(f"\nWARNING: {message}", file=sys.stderr)
