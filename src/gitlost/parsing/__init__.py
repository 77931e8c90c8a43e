# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Text grammars for verification diagnostics and enrichment output."""

from __future__ import annotations

from .classifier import ClassifiedLine, classify_line
from .commit_log import COMMIT_LOG_FORMAT, UNIT_SEPARATOR, CommitLogFields, parse_commit_log, parse_unix_time
from .tag_object import TagFields, parse_tag_object

__all__ = [
    "COMMIT_LOG_FORMAT",
    "UNIT_SEPARATOR",
    "ClassifiedLine",
    "CommitLogFields",
    "TagFields",
    "classify_line",
    "parse_commit_log",
    "parse_tag_object",
    "parse_unix_time",
]
