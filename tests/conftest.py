"""
Shared pytest fixtures for tree tests.
"""

import pytest

from bst.models.tree import Tree


@pytest.fixture
def empty_tree():
    """Provide a fresh empty Tree instance."""
    return Tree()


@pytest.fixture
def sample_tree():
    """Provide the tree built from [5, 3, 8, 1, 4] in insertion order."""
    return Tree.from_iterable([5, 3, 8, 1, 4])


@pytest.fixture
def skewed_keys():
    """Provide enough ascending keys to exceed the default recursion limit."""
    return list(range(10_000))
