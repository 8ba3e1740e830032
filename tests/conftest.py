"""
Pytest configuration and shared fixtures for gibson tests.

This module provides:
- Paths to the sample GIB files
- Fixtures for the sample game record
"""

from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_path() -> Path:
    """Path of a real-shaped Tygem game record."""
    return DATA_DIR / "test.gib"


@pytest.fixture
def sample_text(sample_path: Path) -> str:
    return sample_path.read_text(encoding="utf-8")
