"""Testing utilities for dazzlebst consumers."""

from .fixtures import TreeTestHelper, assert_bst_invariant, random_keys

__all__ = ['TreeTestHelper', 'assert_bst_invariant', 'random_keys']
