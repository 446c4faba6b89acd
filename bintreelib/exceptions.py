"""Exceptions raised by bintreelib.

Boundary outcomes (climbing past the root, descending into an empty slot,
upgrading a view against the wrong tree) are NOT exceptions. They come back
as a failed ViewResult carrying the original view. The classes here cover
the cases that indicate misuse or a bug.
"""


class BinaryTreeError(Exception):
    """Base class for all bintreelib errors."""
    pass


class ConfigError(BinaryTreeError):
    """Raised when a TreeConfig fails validation."""
    pass


class BorrowError(BinaryTreeError):
    """Raised when a request would break the one-writer-or-many-readers rule."""
    pass


class DepthLimitError(BinaryTreeError):
    """Raised when adding a child would exceed the configured max_depth."""
    pass


class ViewMoveError(BinaryTreeError):
    """Raised by ViewResult.unwrap() on a failed move or upgrade."""
    pass


class InvalidViewError(BinaryTreeError):
    """Raised when a view points at a node that no longer exists.

    This is never an expected outcome of the public API. It means a node was
    dropped while a view still observed it, i.e. a bug in the caller's
    bookkeeping or misuse of an unchecked operation.
    """
    pass


class ConsumedViewError(InvalidViewError):
    """Raised when a view that was already moved or upgraded is used again."""
    pass
