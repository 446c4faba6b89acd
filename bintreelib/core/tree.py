"""BinaryTree, the owner of a graph of BinaryNodes."""

import logging
from typing import Any, Optional

from ..config import TreeConfig
from ..exceptions import BorrowError, ConfigError
from .borrow import BorrowCell, ExclusiveBorrow
from .node import BinaryNode, ReadOnlyNode
from .view import BinaryView, BinaryViewMut

logger = logging.getLogger(__name__)


class BinaryTree:
    """A tree where each node has 0, 1 or 2 children.

    The tree always has a root; no operation removes it. Nodes are reached
    either directly through root()/root_mut() or through views, which are
    the only way to move up and down without holding node references.

    Example:
        tree = BinaryTree(0)
        tree.root_mut().add_child(Direction.LEFT, 1)

        ok, view = tree.view().descend(Direction.LEFT)
        assert ok and view.value() == 1
    """

    def __init__(self, value: Any, config: Optional[TreeConfig] = None):
        """Build a one-node tree.

        Args:
            value: Payload of the root node
            config: Borrow and depth settings (defaults to TreeConfig())

        Raises:
            ConfigError: If the config does not validate
        """
        self.config = config or TreeConfig()
        errors = self.config.validate()
        if errors:
            raise ConfigError(f"Invalid configuration: {'; '.join(errors)}")

        self._root = BinaryNode(value)
        self._cell = BorrowCell(self.config)

    def root(self) -> ReadOnlyNode:
        """Get a read-only handle on the root node.

        Reads are always allowed; modification goes through root_mut() or
        an exclusive view.
        """
        return ReadOnlyNode(self._root)

    def root_mut(self) -> BinaryNode:
        """Get the root node for direct modification.

        This bypasses views entirely, so it is refused while an exclusive
        view is out.

        Raises:
            BorrowError: An exclusive view is still active
        """
        if self._cell.is_borrowed_mut():
            raise BorrowError("Cannot take root_mut() while an exclusive view is active")
        return self._root

    def view(self) -> BinaryView:
        """Get a shared view positioned at the root.

        Any number of shared views may exist, but none of them can be used
        while an exclusive view is out.

        Raises:
            BorrowError: An exclusive view is active
        """
        self._cell.check_shared()
        return BinaryView(self._root, self._cell)

    def view_mut(self) -> BinaryViewMut:
        """Get the exclusive view, positioned at the root.

        The returned view holds the tree's exclusive borrow until it is
        released, downgraded, or its ``with`` block ends.

        Raises:
            BorrowError: Another exclusive view is active
        """
        return BinaryViewMut(self._root, self._borrow_mut())

    def is_borrowed_mut(self) -> bool:
        return self._cell.is_borrowed_mut()

    def _borrow_mut(self) -> ExclusiveBorrow:
        return self._cell.acquire_mut()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self._root.value()!r})"
