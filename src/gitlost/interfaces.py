# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols for the collaborators consumed by :class:`~gitlost.parser.LostObjectParser`."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandExecutor(Protocol):
    """Run git commands against a single repository."""

    def run(self, args: Sequence[str], *, check: bool = True, merge_stderr: bool = False) -> str:
        """Execute ``git <args>`` and return its output decoded losslessly.

        Args:
            args: Git sub-command and arguments, without the executable.
            check: When ``True`` a non-zero exit raises
                :class:`~gitlost.errors.EnrichmentExecutionError`.
            merge_stderr: When ``True`` standard error is appended to the output.

        Returns:
            str: Output text decoded with a byte-preserving encoding.
        """
        ...


@runtime_checkable
class TextReencoder(Protocol):
    """Turn losslessly decoded repository text into display strings."""

    def from_lossless(self, text: str) -> str:
        """Re-encode log output text such as author names."""
        ...

    def commit_message(self, text: str) -> str:
        """Re-encode commit subjects and tag messages."""
        ...


@runtime_checkable
class FileMetadataAccessor(Protocol):
    """Read filesystem metadata for loose object files."""

    def creation_time(self, path: Path) -> datetime:
        """Return the creation time of ``path``.

        Raises:
            FileSystemLookupError: If ``path`` does not exist.
        """
        ...


__all__ = ["CommandExecutor", "FileMetadataAccessor", "TextReencoder"]
