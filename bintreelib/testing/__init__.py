"""Testing utilities for bintreelib consumers."""

from .fixtures import BorrowTestHelper, build_tree, sample_tree, tree_shape

__all__ = ['BorrowTestHelper', 'build_tree', 'sample_tree', 'tree_shape']
