"""bintreelib - Binary trees with parent back-links and checked views.

A BinaryTree owns its nodes; each node owns up to two children and keeps a
weak back-reference to its parent. Walking the tree goes through views:

    from bintreelib import BinaryTree, Direction

    tree = BinaryTree(0)
    tree.root_mut().add_child(Direction.LEFT, 1)

    ok, view = tree.view().descend(Direction.LEFT)   # shared, read-only
    ok, view = view.into_mut(tree)                   # checked upgrade
    with view:
        view.set_value(10)

Every move returns a ViewResult (``ok, view``) instead of raising, so
running off the tree is an ordinary branch for the caller.
"""

import logging

__version__ = "0.1.0"

from .config import TreeConfig
from .core import (
    BinaryNode,
    BinaryTree,
    BinaryView,
    BinaryViewMut,
    ChildPair,
    Dir,
    Direction,
    ReadOnlyNode,
    ViewResult,
)
from .exceptions import (
    BinaryTreeError,
    BorrowError,
    ConfigError,
    ConsumedViewError,
    DepthLimitError,
    InvalidViewError,
    ViewMoveError,
)

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "BinaryNode",
    "BinaryTree",
    "BinaryView",
    "BinaryViewMut",
    "ChildPair",
    "Dir",
    "Direction",
    "ReadOnlyNode",
    "ViewResult",
    # Config
    "TreeConfig",
    # Errors
    "BinaryTreeError",
    "BorrowError",
    "ConfigError",
    "ConsumedViewError",
    "DepthLimitError",
    "InvalidViewError",
    "ViewMoveError",
]
