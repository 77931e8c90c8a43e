# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy and absorbed parse issues for lost object handling."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class GitLostError(Exception):
    """Base class for errors surfaced to callers of the gitlost package."""


class InvalidInputError(GitLostError, ValueError):
    """Raised when a caller supplies an empty diagnostic line."""


class ConfigError(GitLostError):
    """Raised when configuration input is invalid."""


class EnrichmentExecutionError(GitLostError):
    """Raised when the command executor fails to run an enrichment query."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stdout: str | None = None,
        stderr: str | None = None,
    ) -> None:
        """Initialise the error with the failing command metadata.

        Args:
            command: Command sequence that was executed.
            returncode: Exit status, or ``None`` when the process never started.
            stdout: Captured standard output, when available.
            stderr: Captured standard error, when available.
        """

        status = "could not be started" if returncode is None else f"exited with status {returncode}"
        super().__init__(f"Command '{' '.join(command)}' {status}. stderr: {stderr or '<none>'}")
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class FileSystemLookupError(GitLostError, FileNotFoundError):
    """Raised when a loose object file cannot be found on disk."""


class ParseIssue(str, Enum):
    """Conditions that are logged and absorbed rather than raised."""

    UNRECOGNIZED_FORMAT = "unrecognized-format"
    ENRICHMENT_PARSE_FAILURE = "enrichment-parse-failure"


__all__ = [
    "ConfigError",
    "EnrichmentExecutionError",
    "FileSystemLookupError",
    "GitLostError",
    "InvalidInputError",
    "ParseIssue",
]
