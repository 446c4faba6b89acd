"""Test fixtures for bintreelib consumers.

These helpers give tests controlled access to borrow and view state without
making that state part of the public API.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from ..config import TreeConfig
from ..core.node import BinaryNode, Direction, ReadOnlyNode
from ..core.tree import BinaryTree
from ..core.view import _BaseView

# (value, left_shape, right_shape); either side may be None
Shape = Optional[Tuple[Any, Any, Any]]


def build_tree(shape: Tuple[Any, Any, Any], config: Optional[TreeConfig] = None) -> BinaryTree:
    """Build a tree from nested ``(value, left, right)`` tuples.

    Example:
        # 0 with left child 1 (whose left child is 2) and right child 3
        tree = build_tree((0, (1, (2, None, None), None), (3, None, None)))

    Args:
        shape: Root triple; children are triples or None
        config: Optional TreeConfig for the new tree

    Returns:
        The populated BinaryTree
    """
    value, left, right = shape
    tree = BinaryTree(value, config)
    _fill(tree.root_mut(), left, right)
    return tree


def _fill(node: BinaryNode, left: Shape, right: Shape) -> None:
    for direction, sub in ((Direction.LEFT, left), (Direction.RIGHT, right)):
        if sub is None:
            continue
        value, sub_left, sub_right = sub
        node.add_child(direction, value)
        _fill(node.child(direction), sub_left, sub_right)


def sample_tree() -> BinaryTree:
    """The four-node tree used across the bintreelib test suite.

        0
       / \\
      1   3
     /
    2
    """
    return build_tree((0, (1, (2, None, None), None), (3, None, None)))


def tree_shape(node: Union[BinaryNode, ReadOnlyNode]) -> Tuple[Any, Any, Any]:
    """Inverse of build_tree for a subtree: nested (value, left, right)."""
    left, right = node.children()
    return (
        node.value(),
        tree_shape(left) if left is not None else None,
        tree_shape(right) if right is not None else None,
    )


class BorrowTestHelper:
    """Public test fixture for borrow and view verification.

    Example:
        tree = sample_tree()
        helper = BorrowTestHelper(tree)

        view = tree.view_mut()
        assert helper.get_summary()['borrowed_mut']
        view.release()
        assert not helper.get_summary()['borrowed_mut']
    """

    def __init__(self, tree: BinaryTree):
        """Initialize with the tree under test.

        Args:
            tree: The BinaryTree whose borrow state is inspected
        """
        self._tree = tree

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level borrow state for testing.

        Returns:
            Dictionary containing:
            - borrowed_mut: Whether an exclusive view is active
            - enforce_borrows: Whether the tree tracks borrows at all
            - max_depth: Configured depth limit (None if unlimited)
        """
        return {
            'borrowed_mut': self._tree.is_borrowed_mut(),
            'enforce_borrows': self._tree.config.enforce_borrows,
            'max_depth': self._tree.config.max_depth,
        }

    def is_consumed(self, view: _BaseView) -> bool:
        """Check whether a view has been moved or upgraded away."""
        return view._consumed

    def is_dangling(self, view: _BaseView) -> bool:
        """Check whether the node a view points at has been dropped."""
        return view._node() is None

    def node_at(self, view: _BaseView) -> Optional[BinaryNode]:
        """Get the node a view points at without any borrow checks."""
        return view._node()

    def path_to(self, view: _BaseView) -> Optional[List[Direction]]:
        """Directions leading from this tree's root to the view's node.

        Returns:
            List of directions (empty for the root), or None if the node is
            not reachable from this tree's root
        """
        node = view._node()
        if node is None:
            return None

        path = []
        root = self._tree._root
        while node is not root:
            parent = node.parent()
            if parent is None:
                return None
            left, _ = parent.children()
            path.append(Direction.LEFT if left is node else Direction.RIGHT)
            node = parent
        path.reverse()
        return path
