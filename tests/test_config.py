"""Tests for TreeConfig validation and its effect on BinaryTree."""

import pytest

from bintreelib import BinaryTree, ConfigError, TreeConfig


def test_defaults():
    config = TreeConfig()
    assert config.enforce_borrows is True
    assert config.max_depth is None
    assert config.validate() == []


def test_convenience_constructors():
    strict = TreeConfig.strict(max_depth=4)
    assert strict.enforce_borrows and strict.max_depth == 4

    unchecked = TreeConfig.unchecked()
    assert not unchecked.enforce_borrows
    assert unchecked.max_depth is None


@pytest.mark.parametrize("config, message", [
    (TreeConfig(max_depth=-1), "max_depth cannot be negative"),
    (TreeConfig(max_depth=2.5), "max_depth must be an int or None"),
    (TreeConfig(max_depth=True), "max_depth must be an int or None"),
    (TreeConfig(enforce_borrows="yes"), "enforce_borrows must be a bool"),
])
def test_validate_reports_errors(config, message):
    assert message in config.validate()


def test_tree_rejects_invalid_config():
    with pytest.raises(ConfigError, match="max_depth cannot be negative"):
        BinaryTree(0, TreeConfig(max_depth=-3))


def test_tree_uses_default_config():
    tree = BinaryTree(0)
    assert tree.config == TreeConfig()
    assert repr(tree) == "BinaryTree(root=0)"
