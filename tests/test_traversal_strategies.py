"""Unit tests for traversal strategies and collectors.

Tests the four traversal orders through both the collecting and the
visitor API, the traverser factory, depth limits and the collectors.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlebst import (
    Node,
    Tree,
    TreeConfig,
    TraversalOrder,
    create_traverser,
)
from dazzlebst.core.traverser import (
    LevelOrderTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
)
from dazzlebst.core.collector import (
    CustomCollector,
    DepthCollector,
    NodeCollector,
    ShapeCollector,
)


SCENARIO_KEYS = [2, 100, 78, 45, 20, 4, 67, 35, 19, 99, 48]

# Built shape:
#            45
#        /        \
#      19          78
#     /  \        /  \
#    2    20    48    99
#     \     \     \     \
#      4    35    67    100
LEVEL = [45, 19, 78, 2, 20, 48, 99, 4, 35, 67, 100]
PRE = [45, 19, 2, 4, 20, 35, 78, 48, 67, 99, 100]
IN = [2, 4, 19, 20, 35, 45, 48, 67, 78, 99, 100]
POST = [4, 2, 35, 20, 19, 67, 48, 100, 99, 78, 45]


class TestCollectingTraversals(unittest.TestCase):
    """Test traversals that return lists of keys."""

    def setUp(self):
        self.tree = Tree(SCENARIO_KEYS)

    def test_level_order(self):
        self.assertEqual(self.tree.level_order(), LEVEL)

    def test_preorder(self):
        self.assertEqual(self.tree.preorder(), PRE)

    def test_inorder(self):
        self.assertEqual(self.tree.inorder(), IN)

    def test_postorder(self):
        self.assertEqual(self.tree.postorder(), POST)

    def test_traversals_are_restartable(self):
        """Test that repeated calls return fresh, equal lists."""
        first = self.tree.inorder()
        first.append(-1)

        self.assertEqual(self.tree.inorder(), IN)

    def test_traversals_do_not_mutate(self):
        """Test that walking the tree leaves its shape alone."""
        for _ in range(3):
            self.tree.level_order()
            self.tree.postorder()

        self.assertEqual(self.tree.preorder(), PRE)

    def test_collect_with_string_order(self):
        """Test collect() with an order alias."""
        self.assertEqual(self.tree.collect('post'), POST)
        self.assertEqual(self.tree.collect('bfs'), LEVEL)

    def test_collect_with_depth_collector(self):
        """Test collecting (key, depth) pairs."""
        pairs = self.tree.collect(TraversalOrder.LEVEL_ORDER, DepthCollector())

        self.assertEqual(pairs[:3], [(45, 0), (19, 1), (78, 1)])
        self.assertEqual(pairs[-1], (100, 3))


class TestVisitorTraversals(unittest.TestCase):
    """Test traversals that call a visitor per node."""

    def setUp(self):
        self.tree = Tree(SCENARIO_KEYS)

    def _visited(self, method):
        seen = []
        result = method(lambda node: seen.append(node.data))
        self.assertIsNone(result)
        return seen

    def test_each_order(self):
        """Test that visitors see the same order as the collecting form."""
        self.assertEqual(self._visited(self.tree.level_order_each), LEVEL)
        self.assertEqual(self._visited(self.tree.preorder_each), PRE)
        self.assertEqual(self._visited(self.tree.inorder_each), IN)
        self.assertEqual(self._visited(self.tree.postorder_each), POST)

    def test_visitor_receives_nodes(self):
        """Test that the visitor is handed the tree's own nodes."""
        nodes = []
        self.tree.preorder_each(nodes.append)

        self.assertIs(nodes[0], self.tree.root)
        self.assertTrue(all(isinstance(node, Node) for node in nodes))

    def test_visitor_on_empty_tree(self):
        """Test that a visitor is never called for an empty tree."""
        calls = []
        tree = Tree()
        for method in (tree.level_order_each, tree.preorder_each,
                       tree.inorder_each, tree.postorder_each):
            method(calls.append)

        self.assertEqual(calls, [])


class TestLazyTraversal(unittest.TestCase):
    """Test traverse() and iteration."""

    def setUp(self):
        self.tree = Tree(SCENARIO_KEYS)

    def test_traverse_yields_nodes(self):
        keys = [node.data for node in self.tree.traverse('level')]
        self.assertEqual(keys, LEVEL)

    def test_traverse_depth_limits(self):
        """Test max_depth and min_depth."""
        top = [node.data for node in self.tree.traverse('level', max_depth=1)]
        bottom = [node.data for node in self.tree.traverse('in', min_depth=3)]

        self.assertEqual(top, [45, 19, 78])
        self.assertEqual(bottom, [4, 35, 67, 100])

    def test_iteration_uses_default_order(self):
        """Test that iterating follows the configured default order."""
        self.assertEqual(list(self.tree), IN)

        level_tree = Tree(SCENARIO_KEYS, config=TreeConfig(default_order=TraversalOrder.LEVEL_ORDER))
        self.assertEqual(list(level_tree), LEVEL)


class TestTraverserFactory(unittest.TestCase):
    """Test create_traverser."""

    def test_names(self):
        """Test that enum values and aliases map to the right class."""
        cases = {
            'level': LevelOrderTraverser,
            'bfs': LevelOrderTraverser,
            'pre': PreOrderTraverser,
            'preorder': PreOrderTraverser,
            'in': InOrderTraverser,
            'IN_ORDER': InOrderTraverser,
            'post': PostOrderTraverser,
            TraversalOrder.POST_ORDER: PostOrderTraverser,
        }
        for name, expected in cases.items():
            self.assertIsInstance(create_traverser(name), expected, name)

    def test_unknown_name(self):
        """Test that an unknown order lists the valid names."""
        with self.assertRaises(ValueError) as ctx:
            create_traverser('zigzag')

        self.assertIn("Unknown traversal order: zigzag", str(ctx.exception))
        self.assertIn("level", str(ctx.exception))

    def test_empty_root(self):
        """Test that every traverser yields nothing for None."""
        for order in TraversalOrder:
            self.assertEqual(list(create_traverser(order).traverse(None)), [])

    def test_depths_reported(self):
        """Test that depths are relative to the starting node."""
        tree = Tree(SCENARIO_KEYS)
        start = tree.find(78)
        pairs = [(node.data, depth) for node, depth in PostOrderTraverser().traverse(start)]

        self.assertEqual(pairs, [(67, 2), (48, 1), (100, 2), (99, 1), (78, 0)])


class TestCollectors(unittest.TestCase):
    """Test the collector classes."""

    def setUp(self):
        self.tree = Tree([1, 2, 3])

    def test_node_collector(self):
        nodes = self.tree.collect('pre', NodeCollector())
        self.assertIs(nodes[0], self.tree.root)

    def test_shape_collector(self):
        info = self.tree.collect('level', ShapeCollector())

        self.assertEqual(info[0], {'key': 2, 'depth': 0, 'child_count': 2, 'is_leaf': False})
        self.assertEqual(info[1], {'key': 1, 'depth': 1, 'child_count': 0, 'is_leaf': True})

    def test_custom_collector(self):
        collector = CustomCollector(lambda node, depth: f"{node.data}@{depth}")
        self.assertEqual(self.tree.collect('in', collector), ["1@1", "2@0", "3@1"])


class TestNode(unittest.TestCase):
    """Test the Node container."""

    def test_leaf_and_children(self):
        left, right = Node(1), Node(3)
        node = Node(2, left, right)

        self.assertFalse(node.is_leaf())
        self.assertTrue(left.is_leaf())
        self.assertEqual(list(node.children()), [left, right])
        self.assertEqual(list(Node(5, right_child=right).children()), [right])

    def test_identity_equality(self):
        """Test that equal keys do not make nodes equal."""
        self.assertNotEqual(Node(1), Node(1))

    def test_repr(self):
        node = Node(2, Node(1))
        self.assertEqual(repr(node), "Node(data=2, left=1, right=None)")
        self.assertEqual(str(node), "2")


if __name__ == "__main__":
    unittest.main()
