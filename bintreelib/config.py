"""Configuration for bintreelib trees.

A TreeConfig controls how strictly a BinaryTree polices the views it hands
out. The defaults enforce the full borrow discipline.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class TreeConfig:
    """Per-tree settings.

    Attributes:
        enforce_borrows: Track the outstanding exclusive borrow and refuse
            shared access while it is out. Turning this off leaves only the
            membership walk of ``into_mut`` as a safety check.
        max_depth: Deepest level (root = 0) that ``BinaryViewMut.add_child``
            may create. ``None`` means unlimited.
    """

    enforce_borrows: bool = True
    max_depth: Optional[int] = None

    @classmethod
    def strict(cls, max_depth: Optional[int] = None) -> 'TreeConfig':
        """Config with every dynamic check enabled.

        Args:
            max_depth: Optional depth limit for views adding children

        Returns:
            TreeConfig with borrow enforcement on
        """
        return cls(enforce_borrows=True, max_depth=max_depth)

    @classmethod
    def unchecked(cls) -> 'TreeConfig':
        """Config for callers that manage aliasing themselves."""
        return cls(enforce_borrows=False, max_depth=None)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.enforce_borrows, bool):
            errors.append("enforce_borrows must be a bool")

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an int or None")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        return errors
