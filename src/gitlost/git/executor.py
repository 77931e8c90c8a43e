# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run git commands for a repository and return losslessly decoded output."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from ..errors import EnrichmentExecutionError
from ..process import CommandOptions, SubprocessExecutionError, run_command

LOGGER = logging.getLogger(__name__)

# Latin-1 maps every byte to one code point, so output survives decoding unchanged.
LOSSLESS_ENCODING: Final[str] = "latin-1"

# fsck diagnostics are translated under other locales.
GIT_LOCALE_ENV: Final[dict[str, str]] = {"LC_ALL": "C"}


class GitCommandExecutor:
    """Execute ``git`` sub-commands inside a working tree."""

    def __init__(self, work_tree: Path, *, git_executable: str = "git", timeout: float | None = None) -> None:
        self._work_tree = work_tree
        self._git_executable = git_executable
        self._options = CommandOptions(encoding=LOSSLESS_ENCODING, timeout=timeout)

    def command(self, args: Sequence[str]) -> list[str]:
        """Return the full argument list used to run ``git <args>``."""

        return [self._git_executable, "-C", str(self._work_tree), *args]

    def run(self, args: Sequence[str], *, check: bool = True, merge_stderr: bool = False) -> str:
        """Run ``git <args>`` and return its output.

        Args:
            args: Git sub-command and arguments.
            check: Raise on non-zero exit when ``True``.
            merge_stderr: Append standard error to the returned text.

        Returns:
            str: Output decoded with :data:`LOSSLESS_ENCODING`.

        Raises:
            EnrichmentExecutionError: If git cannot be started, or exits non-zero
                while ``check`` is ``True``.
        """

        command = self.command(args)
        options = self._options.with_overrides(env=git_environment())
        LOGGER.debug("running %s", " ".join(command))
        try:
            completed = run_command(command, options=options, check=check)
        except SubprocessExecutionError as exc:
            raise EnrichmentExecutionError(command, exc.returncode, exc.stdout, exc.stderr) from exc
        except OSError as exc:
            raise EnrichmentExecutionError(command, None, None, str(exc)) from exc

        output = completed.stdout or ""
        if merge_stderr and completed.stderr:
            separator = "" if not output or output.endswith("\n") else "\n"
            output = f"{output}{separator}{completed.stderr}"
        return output

    def config_value(self, key: str) -> str | None:
        """Return the value of git configuration ``key``, or ``None`` when unset."""

        value = self.run(("config", "--get", key), check=False).strip()
        return value or None


def git_environment() -> dict[str, str]:
    """Return the current environment with git's messages forced to the C locale."""

    return {**os.environ, **GIT_LOCALE_ENV}


__all__ = ["GIT_LOCALE_ENV", "LOSSLESS_ENCODING", "GitCommandExecutor", "git_environment"]
