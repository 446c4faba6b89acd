"""Shared pytest configuration for the bintreelib suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib.testing import sample_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep-tree tests excluded from the default run")


@pytest.fixture
def tree():
    """The sample tree: 0 with left 1 (left 2) and right 3."""
    return sample_tree()
