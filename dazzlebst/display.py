"""Text rendering of a tree's shape.

The drawing is sideways: the root sits at the left margin, right subtrees
are drawn above their parent and left subtrees below, so reading the keys
from bottom to top gives them in ascending order.

    │       ┌── 100
    │   ┌── 99
    │   │   └── 78
    └── 45
        └── 19
"""

import sys
from typing import List, Optional, TextIO

from .core.node import Node
from .core.tree import Tree


def render_tree(tree: Tree) -> str:
    """Return a multi-line drawing of the tree (empty string if empty)."""
    lines: List[str] = []
    _render(tree.root, '', True, lines)
    return '\n'.join(lines)


def pretty_print(tree: Tree, file: Optional[TextIO] = None) -> None:
    """Print the drawing produced by render_tree.

    Args:
        tree: Tree to draw
        file: Stream to write to (defaults to stdout)
    """
    print(render_tree(tree), file=file or sys.stdout)


def _render(node: Optional[Node], prefix: str, is_left: bool, lines: List[str]) -> None:
    if node is None:
        return

    if node.right_child is not None:
        _render(node.right_child, prefix + ('│   ' if is_left else '    '), False, lines)

    lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.data}")

    if node.left_child is not None:
        _render(node.left_child, prefix + ('    ' if is_left else '│   '), True, lines)
