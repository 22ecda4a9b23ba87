"""
pytest configuration and shared fixtures for vueforge tests.

Fixtures
--------
temp_project_dir : Path
    A temporary directory projects are generated into.

make_tree : Callable
    Writes a mapping of relative path -> content under a directory.

clean_user_agent : None
    Removes npm_config_user_agent so the package manager defaults to npm.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def temp_project_dir(tmp_path: Path) -> Path:
    """
    Create a temporary directory for project creation tests.

    Returns
    -------
    Path
        Path to the temporary directory.
    """
    project_dir = tmp_path / "test_projects"
    project_dir.mkdir()
    return project_dir


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> text) below ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree() -> Callable[[Path, dict[str, str]], Path]:
    """Provide the write_tree helper to tests."""
    return write_tree


@pytest.fixture
def clean_user_agent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make package manager detection deterministic (npm)."""
    monkeypatch.delenv("npm_config_user_agent", raising=False)


def list_files(root: Path) -> list[str]:
    """All files below ``root`` as sorted POSIX-style relative paths."""
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the test suite."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def tree_files() -> Callable[[Path], list[str]]:
    """Provide the list_files helper to tests."""
    return list_files
