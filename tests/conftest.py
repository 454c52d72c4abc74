"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tunings_library_path() -> Path:
    """Path to the built-in tunings library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_fretboard" / "tunings" / "library"
