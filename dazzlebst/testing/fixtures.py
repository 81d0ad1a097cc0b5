"""Test fixtures for dazzlebst consumers.

These helpers generate input and verify structural invariants without
reaching into the Tree's algorithms. They are meant for the test suites of
projects that build on dazzlebst as much as for this package's own tests.
"""

import random
from typing import Any, Dict, List, Optional

from ..config import RandomInputConfig, ensure_valid
from ..core.node import Node
from ..core.tree import Tree


def random_keys(config: Optional[RandomInputConfig] = None, **kwargs) -> List[int]:
    """Draw random integer keys for demos and tests.

    Duplicates are possible; the Tree drops them on construction.

    Args:
        config: Generation settings (defaults to RandomInputConfig())
        **kwargs: Overrides for individual RandomInputConfig fields

    Returns:
        List of config.size integers in [config.low, config.high]

    Raises:
        ConfigurationError: If the settings are inconsistent

    Example:
        >>> tree = Tree(random_keys(seed=42))
    """
    config = config or RandomInputConfig(**kwargs)
    ensure_valid(config)

    rng = random.Random(config.seed)
    return [rng.randint(config.low, config.high) for _ in range(config.size)]


class TreeTestHelper:
    """Public test fixture for tree verification.

    Example:
        tree = Tree([5, 3, 8])
        helper = TreeTestHelper(tree)

        assert helper.check_invariants() == []
        summary = helper.get_summary()
        assert summary['balanced']
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree under test.

        Args:
            tree: Tree to inspect
        """
        self._tree = tree

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: Number of nodes
            - height: Tree height (-1 when empty)
            - balanced: Result of is_balanced()
            - input_in_sync: Whether ``input`` still matches the keys
        """
        keys = self._tree.inorder()
        return {
            'size': len(keys),
            'height': self._tree.height(),
            'balanced': self._tree.is_balanced(),
            'input_in_sync': keys == list(self._tree.input),
        }

    def check_invariants(self) -> List[str]:
        """Check ordering, uniqueness and single ownership of every node.

        Returns:
            List of problems found (empty if the tree is valid)
        """
        problems: List[str] = []
        seen = set()
        self._check_subtree(self._tree.root, None, None, seen, problems)
        return problems

    def _check_subtree(self,
                       node: Optional[Node],
                       low: Any,
                       high: Any,
                       seen: set,
                       problems: List[str]) -> None:
        if node is None:
            return

        if id(node) in seen:
            problems.append(f"Node {node.data!r} is reachable more than once")
            return
        seen.add(id(node))

        if low is not None and not low.data < node.data:
            problems.append(f"Key {node.data!r} is not greater than ancestor {low.data!r}")
        if high is not None and not node.data < high.data:
            problems.append(f"Key {node.data!r} is not less than ancestor {high.data!r}")

        self._check_subtree(node.left_child, low, node, seen, problems)
        self._check_subtree(node.right_child, node, high, seen, problems)


def assert_bst_invariant(tree: Tree) -> None:
    """Fail with a readable message if the tree breaks an invariant.

    Raises:
        AssertionError: Listing every problem found
    """
    problems = TreeTestHelper(tree).check_invariants()
    assert not problems, "Invalid tree: " + "; ".join(problems)
