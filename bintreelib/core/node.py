"""BinaryNode, the storage unit of a BinaryTree.

A node owns its two children outright and refers back to its parent through
a weak reference. The back-reference lets a view climb in O(1) without the
child keeping its parent alive; it carries no guarantee on its own, which is
why traversal goes through BinaryView/BinaryViewMut instead of raw nodes.
"""

import weakref
from enum import Enum
from typing import Any, NamedTuple, Optional

from ..exceptions import InvalidViewError


class Direction(Enum):
    """Which child slot to use.

    LEFT is the first slot, RIGHT the second.
    """
    LEFT = 0
    RIGHT = 1


# Short alias
Dir = Direction


class ChildPair(NamedTuple):
    """The two child slots of a node, either of which may be empty."""
    left: Optional['BinaryNode']
    right: Optional['BinaryNode']

    def get(self, direction: Direction) -> Optional['BinaryNode']:
        return self[direction.value]


class BinaryNode:
    """A node with 0, 1 or 2 children and maybe a parent.

    A node without a parent is the root of its tree. Nodes are only built by
    BinaryTree (for the root) and by add_child (for everything else), so the
    parent back-reference of a child always resolves to the node holding it.
    """

    __slots__ = ('_value', '_children', '_parent', '__weakref__')

    def __init__(self, value: Any):
        self._value = value
        self._children = [None, None]
        self._parent: Optional[weakref.ref] = None

    def value(self) -> Any:
        """Get the payload stored in this node."""
        return self._value

    def set_value(self, value: Any) -> Any:
        """Replace the payload.

        Returns:
            The payload that was there before
        """
        old = self._value
        self._value = value
        return old

    def children(self) -> ChildPair:
        """Get both child slots as a (left, right) pair."""
        return ChildPair(self._children[0], self._children[1])

    def child(self, direction: Direction) -> Optional['BinaryNode']:
        return self._children[direction.value]

    def parent(self) -> Optional['BinaryNode']:
        """Resolve the back-reference to the parent node.

        The result is only trustworthy when reached through a view that was
        issued by a live tree. Used directly, there is no proof the node is
        still attached where the caller thinks it is.

        Returns:
            The parent node, or None if this node is a root

        Raises:
            InvalidViewError: The parent has been garbage collected
        """
        if self._parent is None:
            return None
        parent = self._parent()
        if parent is None:
            raise InvalidViewError("Node refers to a parent that no longer exists")
        return parent

    def is_root(self) -> bool:
        return self._parent is None

    def is_leaf(self) -> bool:
        return self._children[0] is None and self._children[1] is None

    def add_child(self, direction: Direction, value: Any) -> Optional['BinaryNode']:
        """Put a new node holding ``value`` in the given slot.

        Whatever was in the slot is detached and returned. A detached node
        becomes the root of its own subtree; if the caller drops it, the
        whole subtree goes with it.

        Args:
            direction: Slot to fill
            value: Payload for the new child

        Returns:
            The previous child in that slot, or None
        """
        node = BinaryNode(value)
        node._parent = weakref.ref(self)

        old = self._children[direction.value]
        self._children[direction.value] = node
        if old is not None:
            old._parent = None
        return old

    def __repr__(self) -> str:
        left, right = self._children
        return (f"{self.__class__.__name__}(value={self._value!r}, "
                f"left={left is not None}, right={right is not None})")


class ReadOnlyNode:
    """Read-only handle on a BinaryNode.

    Handed out by BinaryTree.root() and by views for child access. It reads
    through to the node but has no set_value/add_child, so holding one
    does not let the caller change the tree. Two handles compare equal
    when they wrap the same node.
    """

    __slots__ = ('_node',)

    def __init__(self, node: BinaryNode):
        self._node = node

    def value(self) -> Any:
        return self._node.value()

    def children(self) -> ChildPair:
        left, right = self._node.children()
        return ChildPair(read_only(left), read_only(right))

    def child(self, direction: Direction) -> Optional['ReadOnlyNode']:
        return read_only(self._node.child(direction))

    def parent(self) -> Optional['ReadOnlyNode']:
        """Parent handle, or None at a root.

        Raises:
            InvalidViewError: The parent has been garbage collected
        """
        return read_only(self._node.parent())

    def is_root(self) -> bool:
        return self._node.is_root()

    def is_leaf(self) -> bool:
        return self._node.is_leaf()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyNode):
            return self._node is other._node
        if isinstance(other, BinaryNode):
            return self._node is other
        return NotImplemented

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._node!r})"


def read_only(node: Optional[BinaryNode]) -> Optional[ReadOnlyNode]:
    """Wrap ``node`` in a ReadOnlyNode, passing None through."""
    if node is None:
        return None
    return ReadOnlyNode(node)
