"""Pytest configuration for academic blog tests.

This module configures the Python path for tests to find the academic_blog package.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the Python path for test imports
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture
def content_dir() -> Path:
    """Path to the bundled site content."""
    return ROOT_DIR / "academic_blog" / "content"
