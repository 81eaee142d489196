"""Pytest configuration and fixtures for unixtime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so unixtime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from unixtime.config import reset_config  # noqa: E402


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default process-wide configuration."""
    config = reset_config()
    yield config
    reset_config()
