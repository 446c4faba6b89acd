"""Core types for bintreelib.

This module contains the node storage, the owning tree and the two view
types used to walk it.
"""

from .node import BinaryNode, ChildPair, Direction, Dir, ReadOnlyNode
from .tree import BinaryTree
from .view import BinaryView, BinaryViewMut, ViewResult

__all__ = [
    "BinaryNode",
    "ChildPair",
    "Direction",
    "Dir",
    "ReadOnlyNode",
    "BinaryTree",
    "BinaryView",
    "BinaryViewMut",
    "ViewResult",
]
