"""Pytest configuration and shared fixtures for arfluent tests."""

import pytest


@pytest.fixture
def letters():
    """Sample list-shaped input."""
    return ['a', 'b', 'c', 'd']


@pytest.fixture
def sparse():
    """Sample map-shaped input with sparse int keys."""
    return {5: 'a', 6: 'b', 8: 'c', 10: 'd'}


@pytest.fixture
def labelled():
    """Sample map-shaped input with string keys."""
    return {'a': 1, 'b': 2, 'c': 3, 'd': 4}
