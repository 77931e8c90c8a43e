# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures providing in-memory collaborators for the parser."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path

import pytest

from gitlost.errors import EnrichmentExecutionError, FileSystemLookupError
from gitlost.parser import LostObjectParser


class FakeExecutor:
    """Return canned output per command and record every invocation."""

    def __init__(self, responses: dict[tuple[str, ...], str] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[tuple[str, ...], bool, bool]] = []
        self.failures: set[tuple[str, ...]] = set()

    def run(self, args: Sequence[str], *, check: bool = True, merge_stderr: bool = False) -> str:
        key = tuple(args)
        self.calls.append((key, check, merge_stderr))
        if key in self.failures:
            raise EnrichmentExecutionError(["git", *key], 128, "", "fatal: bad object")
        return self.responses.get(key, "")


class TaggingReencoder:
    """Mark re-encoded text so tests can see which channel each field used."""

    def from_lossless(self, text: str) -> str:
        return f"L[{text}]"

    def commit_message(self, text: str) -> str:
        return f"C[{text}]"


class IdentityReencoder:
    """Pass text through unchanged."""

    def from_lossless(self, text: str) -> str:
        return text

    def commit_message(self, text: str) -> str:
        return text


class FakeFilesystem:
    """Serve creation times from a mapping and fail for unknown paths."""

    def __init__(self, times: dict[Path, datetime] | None = None) -> None:
        self.times = dict(times or {})
        self.requested: list[Path] = []

    def creation_time(self, path: Path) -> datetime:
        self.requested.append(path)
        try:
            return self.times[path]
        except KeyError as exc:
            raise FileSystemLookupError(2, "Loose object file not found", str(path)) from exc


@pytest.fixture
def executor() -> FakeExecutor:
    """Return an executor with no canned responses."""
    return FakeExecutor()


@pytest.fixture
def filesystem() -> FakeFilesystem:
    """Return a filesystem accessor with no known files."""
    return FakeFilesystem()


@pytest.fixture
def git_dir(tmp_path: Path) -> Path:
    """Return a throwaway git directory path."""
    return tmp_path / ".git"


@pytest.fixture
def make_parser(
    executor: FakeExecutor,
    filesystem: FakeFilesystem,
    git_dir: Path,
) -> Callable[..., LostObjectParser]:
    """Return a factory building parsers around the shared fakes."""

    def _factory(*, reencoder: object | None = None) -> LostObjectParser:
        return LostObjectParser(
            executor=executor,
            reencoder=reencoder or IdentityReencoder(),  # type: ignore[arg-type]
            filesystem=filesystem,
            git_dir=git_dir,
        )

    return _factory


@pytest.fixture
def epoch() -> datetime:
    """Return the timestamp used by canned enrichment output."""
    return datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


@pytest.fixture
def tagging_reencoder() -> TaggingReencoder:
    """Return a re-encoder that marks which channel each field passed through."""
    return TaggingReencoder()
