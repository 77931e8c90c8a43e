# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve working-tree relative paths and the git directory of a repository."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Final

GITDIR_PREFIX: Final[str] = "gitdir:"


class FullPathResolver:
    """Resolve paths against the working directory of the current repository."""

    def __init__(self, get_working_dir: Callable[[], str | os.PathLike[str] | None]) -> None:
        self._get_working_dir = get_working_dir

    def resolve(self, path: str | os.PathLike[str] | None) -> Path | None:
        """Return ``path`` unchanged when absolute, otherwise resolved under the working directory.

        Args:
            path: File or folder path to resolve.

        Returns:
            Path | None: Resolved path, or ``None`` when ``path`` is blank.
        """

        if path is None or not str(path).strip():
            return None
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate

        working_dir = self._get_working_dir()
        if working_dir is None or not str(working_dir).strip():
            working_dir = Path.cwd()
        return Path(os.path.normpath(Path(working_dir).absolute() / candidate))


def _read_pointer(path: Path, base: Path) -> Path:
    """Resolve a ``gitdir:``/``commondir`` style pointer file relative to ``base``."""

    content = path.read_text(encoding="utf-8").strip()
    if content.startswith(GITDIR_PREFIX):
        content = content[len(GITDIR_PREFIX) :].strip()
    resolved = FullPathResolver(lambda: base).resolve(content)
    return resolved if resolved is not None else base


def resolve_git_dir(work_tree: Path) -> Path:
    """Return the directory holding ``work_tree``'s object store.

    Handles plain repositories, bare repositories, ``.git`` files written for
    submodules and linked worktrees, and the ``commondir`` indirection linked
    worktrees use to share the main repository's ``objects``.

    Args:
        work_tree: Working tree (or bare repository) root.

    Returns:
        Path: Directory expected to contain ``objects/``.
    """

    dot_git = work_tree / ".git"
    if dot_git.is_file():
        git_dir = _read_pointer(dot_git, work_tree)
    elif dot_git.is_dir():
        git_dir = dot_git
    else:
        git_dir = work_tree

    commondir = git_dir / "commondir"
    if commondir.is_file():
        return _read_pointer(commondir, git_dir)
    return git_dir


__all__ = ["FullPathResolver", "resolve_git_dir"]
