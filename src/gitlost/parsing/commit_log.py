# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sub-grammar for the single-line ``git log`` query describing a lost commit."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final

UNIT_SEPARATOR: Final[str] = "\x1f"

# %aN author name, %s subject, %ct committer date (unix seconds), %P parent hashes.
COMMIT_LOG_FORMAT: Final[str] = UNIT_SEPARATOR.join(("%aN", "%s", "%ct", "%P"))

_LOG_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<author>[^\x1f]+)\x1f"
    r"(?P<subject>.*)\x1f"
    r"(?P<date>\d+)\x1f"
    r"(?P<first_parent>[0-9a-f]{40})?"
    r"(?: .+)?$",
    re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class CommitLogFields:
    """Raw fields captured from a lost commit's log line."""

    author: str
    subject: str
    timestamp: datetime
    first_parent: str | None


def parse_unix_time(value: str) -> datetime | None:
    """Return an aware UTC datetime for Unix seconds, or ``None`` when out of range."""

    try:
        return datetime.fromtimestamp(int(value), tz=UTC)
    except (ValueError, OverflowError, OSError):
        return None


def parse_commit_log(output: str) -> CommitLogFields | None:
    """Parse the output of the lost commit log query.

    Args:
        output: Text produced by ``git log -n1`` using :data:`COMMIT_LOG_FORMAT`.

    Returns:
        CommitLogFields | None: Parsed fields, or ``None`` when ``output`` does not
        follow the expected layout or carries an unrepresentable date.
    """

    match = _LOG_PATTERN.match(output)
    if match is None:
        return None
    timestamp = parse_unix_time(match.group("date"))
    if timestamp is None:
        return None
    return CommitLogFields(
        author=match.group("author"),
        subject=match.group("subject"),
        timestamp=timestamp,
        first_parent=match.group("first_parent") or None,
    )


__all__ = [
    "COMMIT_LOG_FORMAT",
    "UNIT_SEPARATOR",
    "CommitLogFields",
    "parse_commit_log",
    "parse_unix_time",
]
