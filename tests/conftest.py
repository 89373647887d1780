"""Shared pytest configuration for the DazzleQuery test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlequery.testing import sample_document


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep-tree stress tests (deselect with -m 'not slow')")


@pytest.fixture
def doc():
    """Fresh copy of the sample page for each test."""
    return sample_document()
