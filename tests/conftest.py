"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit

from auto_bump.models import RepositoryIdentity


@pytest.fixture
def repo() -> RepositoryIdentity:
    return RepositoryIdentity(owner="acme", repo="widgets")


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml with a [tool.auto-bump] table."""
    content = """\
[project]
name = "widgets"
version = "1.0.0"

[tool.auto-bump]
repo = "acme/widgets"
bump-command = "npx standard-version"
push-only = true

[tool.auto-bump.head]
name = "release/$VERSION"

[tool.auto-bump.exports]
CHANGES = "git log --oneline"
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def sample_toml_doc() -> tomlkit.TOMLDocument:
    """A pyproject document without any auto-bump configuration."""
    content = """\
[project]
name = "my-package"
version = "2.0.0"

[tool.ruff]
line-length = 88
"""
    return tomlkit.parse(content)
