"""Views: movable position handles into a BinaryTree.

A view stands for a position in a tree without owning any node. It keeps a
weak reference to the node it is focused on and a reference to the borrow
cell of the tree that issued it.

Moving a view consumes it. climb() and descend() return a ViewResult: on
success a new view at the new position, on failure the very same view,
untouched. A consumed view raises ConsumedViewError if used again, so there
is never more than one live handle for a given walk.

Two kinds exist:
- BinaryView: shared and read-only. Any number may coexist.
- BinaryViewMut: exclusive and read-write. It holds the tree's exclusive
  borrow and exposes the node at its position for modification.

A shared view becomes exclusive through BinaryView.into_mut(), which proves
that the view's position is reachable from the root of the tree presented.
"""

import logging
import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

from ..exceptions import (
    BorrowError,
    ConsumedViewError,
    DepthLimitError,
    InvalidViewError,
    ViewMoveError,
)
from .borrow import BorrowCell, ExclusiveBorrow
from .node import BinaryNode, ChildPair, Direction, ReadOnlyNode, read_only

if TYPE_CHECKING:
    from .tree import BinaryTree

logger = logging.getLogger(__name__)


class ViewResult(NamedTuple):
    """Outcome of a move or an upgrade.

    Unpacks as ``ok, view``. When ``ok`` is False, ``view`` is the original
    view, unchanged, so the caller can carry on from where it was. Truth
    testing the result gives ``ok``.
    """
    ok: bool
    view: Any

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Return the new view, raising ViewMoveError if the step failed."""
        if not self.ok:
            raise ViewMoveError(f"Move or upgrade failed; view stayed at {self.view!r}")
        return self.view

    def unwrap_err(self) -> Any:
        """Return the original view, raising ViewMoveError if the step succeeded."""
        if self.ok:
            raise ViewMoveError(f"Expected a failed step, but view moved to {self.view!r}")
        return self.view

    def into_inner(self) -> Any:
        """Return the carried view whatever the outcome."""
        return self.view


class _BaseView(ABC):
    """Traversal shared by both kinds of view."""

    def __init__(self, node: BinaryNode):
        self._node = weakref.ref(node)
        self._consumed = False

    @abstractmethod
    def _check_access(self) -> None:
        """Raise if this view may not be used right now."""
        pass

    @abstractmethod
    def _spawn(self, node: BinaryNode) -> '_BaseView':
        """Build a view of the same kind at ``node``, carrying the same tag."""
        pass

    def _current(self) -> BinaryNode:
        """Resolve the focused node after checking the view may be used."""
        if self._consumed:
            raise ConsumedViewError("View was already moved or upgraded")
        self._check_access()
        node = self._node()
        if node is None:
            raise InvalidViewError("View pointed to an invalid tree")
        return node

    def _consume(self) -> None:
        self._consumed = True

    def _move_to(self, node: BinaryNode) -> '_BaseView':
        moved = self._spawn(node)
        self._consume()
        return moved

    def climb(self) -> ViewResult:
        """Try to move to the parent of the current node.

        Returns:
            ViewResult(True, new_view) on success, or ViewResult(False, self)
            when the view is at a root

        Raises:
            InvalidViewError: The view's node (or its parent) no longer exists
        """
        node = self._current()
        parent = node.parent()
        if parent is None:
            return ViewResult(False, self)
        return ViewResult(True, self._move_to(parent))

    def descend(self, direction: Direction) -> ViewResult:
        """Try to move to the child in the given direction.

        Returns:
            ViewResult(True, new_view) on success, or ViewResult(False, self)
            when that slot is empty

        Raises:
            InvalidViewError: The view's node no longer exists
        """
        node = self._current()
        child = node.child(direction)
        if child is None:
            return ViewResult(False, self)
        return ViewResult(True, self._move_to(child))

    def value(self) -> Any:
        return self._current().value()

    def children(self) -> ChildPair:
        """Both child slots as read-only handles."""
        left, right = self._current().children()
        return ChildPair(read_only(left), read_only(right))

    def child(self, direction: Direction) -> Optional[ReadOnlyNode]:
        return read_only(self._current().child(direction))

    def is_root(self) -> bool:
        return self._current().is_root()

    def depth(self) -> int:
        """Number of climbs needed to reach the root (root = 0)."""
        node = self._current()
        depth = 0
        parent = node.parent()
        while parent is not None:
            depth += 1
            parent = parent.parent()
        return depth

    def same_position(self, other: '_BaseView') -> bool:
        """True if both views are focused on the same node."""
        return self._current() is other._current()

    def __repr__(self) -> str:
        if self._consumed:
            return f"{self.__class__.__name__}(<consumed>)"
        node = self._node()
        if node is None:
            return f"{self.__class__.__name__}(<dangling>)"
        return f"{self.__class__.__name__}(value={node.value()!r})"


class BinaryView(_BaseView):
    """Shared, read-only view into a BinaryTree."""

    def __init__(self, node: BinaryNode, cell: BorrowCell):
        super().__init__(node)
        self._cell = cell

    def _check_access(self) -> None:
        self._cell.check_shared()

    def _spawn(self, node: BinaryNode) -> 'BinaryView':
        return BinaryView(node, self._cell)

    def into_mut(self, tree: 'BinaryTree') -> ViewResult:
        """Upgrade to an exclusive view at the same position.

        Takes ``tree``'s exclusive borrow, then walks up from this view's
        node until it reaches a root. The upgrade succeeds only if that root
        is the root of ``tree`` itself. The returned view sits on the original
        node; the walk does not move it.

        Time complexity: O(k), where k is the depth of the view.

        Args:
            tree: The tree this view is expected to belong to

        Returns:
            ViewResult(True, BinaryViewMut) on success. ViewResult(False, self)
            if the view is not inside ``tree`` (another tree, or a subtree
            that has since been detached); the borrow is released again.

        Raises:
            BorrowError: ``tree`` already has an exclusive view out
        """
        node = self._current()
        borrow = tree._borrow_mut()
        try:
            steps = _walk_to_root(node, tree._root)
        except BaseException:
            borrow.release()
            raise

        if steps is None:
            borrow.release()
            logger.debug("Upgrade refused: view at %r is not reachable from %r", node, tree)
            return ViewResult(False, self)

        self._consume()
        logger.debug("Upgraded view at %r after a %d-step membership walk", node, steps)
        return ViewResult(True, BinaryViewMut(node, borrow))

    def into_mut_unchecked(self, tree: 'BinaryTree') -> 'BinaryViewMut':
        """Upgrade to an exclusive view WITHOUT checking membership.

        Unsafe escape hatch. Nothing verifies that this view belongs to
        ``tree``. If it does not, the result holds ``tree``'s borrow while
        writing to a node of some other tree, which silently breaks the
        aliasing rules of that other tree. Only use this when the caller
        already knows the view came from ``tree`` and the subtree has not
        been detached since.

        Raises:
            BorrowError: ``tree`` already has an exclusive view out
        """
        node = self._current()
        borrow = tree._borrow_mut()
        self._consume()
        return BinaryViewMut(node, borrow)


class BinaryViewMut(_BaseView):
    """Exclusive, read-write view into a BinaryTree.

    There is at most one active exclusive view per tree. It keeps the
    tree's borrow until released, either explicitly or by a ``with`` block:

        with tree.view_mut() as view:
            view.add_child(Direction.LEFT, 1)
            view = view.descend(Direction.LEFT).unwrap()
            view.set_value(2)
    """

    def __init__(self, node: BinaryNode, borrow: ExclusiveBorrow):
        super().__init__(node)
        self._borrow = borrow

    def _check_access(self) -> None:
        if not self._borrow.active:
            raise BorrowError("Exclusive view used after its borrow was released")

    def _spawn(self, node: BinaryNode) -> 'BinaryViewMut':
        return BinaryViewMut(node, self._borrow)

    def node(self) -> BinaryNode:
        """Get the node at the current position for modification."""
        return self._current()

    def set_value(self, value: Any) -> Any:
        """Replace the payload here and return the old one."""
        return self._current().set_value(value)

    def add_child(self, direction: Direction, value: Any) -> Optional[BinaryNode]:
        """Attach a new child here, returning the node it replaced.

        Raises:
            DepthLimitError: The child would be deeper than config.max_depth
        """
        node = self._current()
        max_depth = self._borrow.cell.config.max_depth
        if max_depth is not None:
            child_depth = self.depth() + 1
            if child_depth > max_depth:
                raise DepthLimitError(
                    f"Adding a child at depth {child_depth} exceeds max_depth={max_depth}"
                )
        return node.add_child(direction, value)

    def into_view(self) -> BinaryView:
        """Downgrade to a shared view at the same position.

        The exclusive borrow is released.
        """
        node = self._current()
        self._consume()
        self._borrow.release()
        return BinaryView(node, self._borrow.cell)

    def release(self) -> None:
        """End the exclusive borrow held by this view (and its ancestors in the walk)."""
        self._borrow.release()

    def __enter__(self) -> 'BinaryViewMut':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()


def _walk_to_root(node: BinaryNode, root: BinaryNode) -> Optional[int]:
    """Climb from ``node`` until a root is found.

    A dead back-reference on the way up means an ancestor was replaced and
    dropped, so ``node`` no longer hangs off ``root``.

    Returns:
        Number of steps taken if the root reached is ``root`` by identity,
        otherwise None
    """
    steps = 0
    current = node
    while current is not root:
        try:
            parent = current.parent()
        except InvalidViewError:
            return None
        if parent is None:
            return None
        current = parent
        steps += 1
    return steps
