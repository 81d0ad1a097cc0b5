"""Node type for dazzlebst.

A Node is intentionally kept simple - it holds one key and owns up to two
children. There is no parent reference; every walk through the tree starts
at the root and moves downward. The Tree is responsible for the ordering
rules, the node is only a data container.
"""

from typing import Any, Iterator, Optional


class Node:
    """A single key with exclusive ownership of its left and right subtrees.

    Attributes:
        data: The key stored in this node
        left_child: Root of the subtree holding smaller keys (or None)
        right_child: Root of the subtree holding larger keys (or None)

    Equality is identity: two nodes holding equal keys are still two
    different nodes, which is what node-based depth lookup relies on.
    """

    __slots__ = ('data', 'left_child', 'right_child')

    def __init__(self,
                 data: Any = None,
                 left_child: Optional['Node'] = None,
                 right_child: Optional['Node'] = None):
        self.data = data
        self.left_child = left_child
        self.right_child = right_child

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left_child is None and self.right_child is None

    def children(self) -> Iterator['Node']:
        """Yield the existing children, left before right."""
        if self.left_child is not None:
            yield self.left_child
        if self.right_child is not None:
            yield self.right_child

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        left = self.left_child.data if self.left_child is not None else None
        right = self.right_child.data if self.right_child is not None else None
        return f"{self.__class__.__name__}(data={self.data!r}, left={left!r}, right={right!r})"

    def __str__(self) -> str:
        return str(self.data)
