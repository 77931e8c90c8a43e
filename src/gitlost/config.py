# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for gitlost."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .models import LostObjectType

CONFIG_FILENAME: Final[str] = ".gitlost.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "gitlost"


class VerifyConfig(BaseModel):
    """Options controlling the ``git fsck`` invocation and result filtering."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    unreachable: bool = True
    no_reflogs: bool = False
    full: bool = False
    lost_found: bool = False
    object_types: tuple[LostObjectType, ...] = Field(default_factory=lambda: tuple(LostObjectType))


class GitLostConfig(BaseModel):
    """Top-level configuration for repository access and verification."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    git_executable: str = "git"
    timeout: float | None = Field(default=None, ge=0)
    log_output_encoding: str | None = None
    commit_encoding: str | None = None
    verify: VerifyConfig = Field(default_factory=VerifyConfig)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _pyproject_section(path: Path) -> Mapping[str, Any]:
    tool = _read_toml(path).get(PYPROJECT_TOOL_KEY, {})
    section = tool.get(PYPROJECT_SECTION_KEY, {}) if isinstance(tool, Mapping) else {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def load_config(root: Path) -> GitLostConfig:
    """Load configuration for the repository at ``root``.

    ``.gitlost.toml`` takes precedence over ``[tool.gitlost]`` in ``pyproject.toml``;
    built-in defaults apply when neither exists.

    Raises:
        ConfigError: If a configuration file is malformed or has invalid values.
    """

    dedicated = root / CONFIG_FILENAME
    pyproject = root / PYPROJECT_FILENAME
    if dedicated.is_file():
        source, data = dedicated, _read_toml(dedicated)
    elif pyproject.is_file():
        source, data = pyproject, dict(_pyproject_section(pyproject))
    else:
        return GitLostConfig()

    try:
        return GitLostConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "GitLostConfig",
    "VerifyConfig",
    "load_config",
]
