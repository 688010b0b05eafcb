"""
DevWatch Test Configuration.

Pytest fixtures and configuration.
Requires Python 3.11+.
"""

from pathlib import Path

import pytest

from helpers import FakeRunner, RecordingNotifier, RecordingSleep, touch


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Create a recording notifier."""
    return RecordingNotifier()


@pytest.fixture
def runner() -> FakeRunner:
    """Create a fake command runner."""
    return FakeRunner()


@pytest.fixture
def sleep() -> RecordingSleep:
    """Create a recording sleep function."""
    return RecordingSleep()


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small project tree with matching and non-matching files."""
    root = tmp_path / "project"
    touch(root / "app.py", 1_000)
    touch(root / "pkg" / "models.py", 1_000)
    touch(root / "pkg" / "deep" / "helpers.py", 1_000)
    touch(root / "README.md", 1_000)
    touch(root / "pkg" / "data.json", 1_000)
    touch(root / "__pycache__" / "app.cpython-311.py", 1_000)
    return root
