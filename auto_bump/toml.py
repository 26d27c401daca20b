"""pyproject.toml configuration for auto-bump.

Options live in a [tool.auto-bump] table. Keys use kebab-case in TOML and
map onto the snake_case fields of BumpRequest. tomlkit keeps formatting and
comments intact when the table is written back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import ValidationError

from .bump import DEFAULTS
from .models import BumpRequest, RepositoryIdentity

TABLE_NAME = "auto-bump"


class ConfigError(ValueError):
    """The [tool.auto-bump] table is malformed."""


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file.

    Returns a TOMLDocument that preserves formatting when modified and saved.
    """
    return tomlkit.parse(path.read_text())


def save_pyproject(path: Path, doc: tomlkit.TOMLDocument) -> None:
    """Save a TOMLDocument back to disk, preserving original formatting."""
    path.write_text(tomlkit.dumps(doc))


def _normalize_keys(value: Any) -> Any:
    # Only top-level and nested option tables are renamed; exports keys are
    # variable names and stay as written.
    if isinstance(value, dict):
        return {key.replace("-", "_"): item for key, item in value.items()}
    return value


def _get_tool_table(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    tool = doc.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError("[tool] must be a table")
    return tool


def get_bump_table(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    """Return [tool.auto-bump] as plain data with snake_case keys.

    Returns an empty dict when the table is absent.

    Raises:
        ConfigError: If tool.auto-bump is present but not a table.
    """
    table = _get_tool_table(doc).get(TABLE_NAME)
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TABLE_NAME}] must be a table")
    data = _normalize_keys(table.unwrap())
    for key in ("head", "base"):
        if key in data:
            data[key] = _normalize_keys(data[key])
    return data


def get_repo(doc: tomlkit.TOMLDocument) -> RepositoryIdentity | None:
    """Read the ``repo = "owner/name"`` option, if set.

    Raises:
        ConfigError: If the value is not an owner/name string.
    """
    slug = get_bump_table(doc).get("repo")
    if slug is None:
        return None
    if not isinstance(slug, str):
        raise ConfigError(f"tool.{TABLE_NAME}.repo must be a string")
    try:
        return RepositoryIdentity.parse(slug)
    except ValueError as exc:
        raise ConfigError(f"tool.{TABLE_NAME}.repo: {exc}") from exc


def load_bump_request(doc: tomlkit.TOMLDocument) -> BumpRequest:
    """Build a BumpRequest from [tool.auto-bump].

    Raises:
        ConfigError: If the table contains unknown keys or values of the
                     wrong type.
    """
    data = get_bump_table(doc)
    data.pop("repo", None)
    try:
        return BumpRequest.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.{TABLE_NAME}] table:\n{exc}") from exc


def write_default_table(doc: tomlkit.TOMLDocument) -> bool:
    """Add a [tool.auto-bump] table holding the default options.

    Returns:
        False if the table already exists (the document is left untouched),
        True if it was added.

    Raises:
        ConfigError: If tool is present but not a table.
    """
    if "tool" not in doc:
        doc["tool"] = tomlkit.table(is_super_table=True)
    tool = _get_tool_table(doc)
    if TABLE_NAME in tool:
        return False

    table = tomlkit.table()
    table.add("bump-command", DEFAULTS.bump_command)
    table.add("version-command", DEFAULTS.version_command)
    table.add("title", DEFAULTS.title)
    head = tomlkit.table()
    head.add("name", DEFAULTS.branch)
    table.add("head", head)
    tool[TABLE_NAME] = table
    return True
