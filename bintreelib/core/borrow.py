"""Runtime borrow tracking for a BinaryTree.

Python has no borrow checker, so the "many readers XOR one writer" rule is
kept by an explicit flag per tree. The BorrowCell is that flag; every view
carries a reference to the cell of the tree that issued it and consults it
before touching a node.
"""

import logging
from typing import Optional

from ..config import TreeConfig
from ..exceptions import BorrowError

logger = logging.getLogger(__name__)


class ExclusiveBorrow:
    """Token for the single exclusive borrow out on a tree.

    The token is passed from view to view as an exclusive view climbs and
    descends, so releasing it through any of them ends the borrow.
    """

    def __init__(self, cell: 'BorrowCell'):
        self.cell = cell
        self.active = True

    def release(self) -> None:
        """End the borrow. Releasing twice is a no-op."""
        if not self.active:
            return
        self.active = False
        if self.cell._exclusive is self:
            self.cell._exclusive = None
        logger.debug("Released exclusive borrow on cell %#x", id(self.cell))

    def __repr__(self) -> str:
        state = "active" if self.active else "released"
        return f"ExclusiveBorrow(cell={id(self.cell):#x}, {state})"


class BorrowCell:
    """Borrow state shared between a tree and the views it issues."""

    def __init__(self, config: TreeConfig):
        self.config = config
        self._exclusive: Optional[ExclusiveBorrow] = None

    def is_borrowed_mut(self) -> bool:
        return self._exclusive is not None

    def acquire_mut(self) -> ExclusiveBorrow:
        """Take the exclusive borrow.

        Returns:
            A fresh ExclusiveBorrow token

        Raises:
            BorrowError: Another exclusive borrow is still active
        """
        if self._exclusive is not None:
            raise BorrowError("Tree is already mutably borrowed by another view")

        borrow = ExclusiveBorrow(self)
        if self.config.enforce_borrows:
            self._exclusive = borrow
        logger.debug("Acquired exclusive borrow on cell %#x", id(self))
        return borrow

    def check_shared(self) -> None:
        """Raise BorrowError if shared access is not allowed right now."""
        if self._exclusive is not None:
            raise BorrowError(
                "Tree is mutably borrowed; shared views cannot be used until "
                "the exclusive view is released"
            )
