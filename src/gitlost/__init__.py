# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse lost object diagnostics emitted by ``git fsck`` into structured records."""

from __future__ import annotations

from .errors import (
    ConfigError,
    EnrichmentExecutionError,
    FileSystemLookupError,
    GitLostError,
    InvalidInputError,
    ParseIssue,
)
from .models import LostObject, LostObjectType
from .parser import LostObjectParser
from .parsing import ClassifiedLine, classify_line

__all__ = [
    "ClassifiedLine",
    "ConfigError",
    "EnrichmentExecutionError",
    "FileSystemLookupError",
    "GitLostError",
    "InvalidInputError",
    "LostObject",
    "LostObjectParser",
    "LostObjectType",
    "ParseIssue",
    "classify_line",
]
