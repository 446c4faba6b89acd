#!/usr/bin/env python3
"""
Basic example of walking a bintreelib tree with views.

This example demonstrates:
- Building a small tree
- Moving a shared view up and down
- Upgrading to an exclusive view and editing through it
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import BinaryTree, Direction


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = BinaryTree(0)
    root = tree.root_mut()
    root.add_child(Direction.LEFT, 1)
    root.add_child(Direction.RIGHT, 3)
    root.child(Direction.LEFT).add_child(Direction.LEFT, 2)

    view = tree.view()
    for direction in (Direction.LEFT, Direction.LEFT, Direction.RIGHT):
        ok, view = view.descend(direction)
        print(f"descend {direction.name:<5} -> ok={ok!s:<5} value={view.value()}")

    ok, view = view.climb()
    print(f"climb          -> ok={ok!s:<5} value={view.value()}")

    other = BinaryTree(0)
    ok, view = view.into_mut(other)
    print(f"into_mut other -> ok={ok}")

    ok, view_mut = view.into_mut(tree)
    print(f"into_mut own   -> ok={ok}")
    with view_mut:
        old = view_mut.set_value(10)
        print(f"set_value      -> replaced {old} with {view_mut.value()}")


if __name__ == "__main__":
    main()
