# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (console, logging, errors)."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Literal, TypeAlias

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER = logging.getLogger("gitlost")

MessageKind: TypeAlias = Literal["fail", "warn", "ok", "info"]

# kind -> (emoji prefix, style)
_MESSAGE_STYLES: Final[dict[MessageKind, tuple[str, str]]] = {
    "fail": ("❌ ", "red"),
    "warn": ("⚠️ ", "yellow"),
    "ok": ("✅ ", "green"),
    "info": ("ℹ️ ", "cyan"),
}


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@lru_cache(maxsize=4)
def build_console(*, color: bool, emoji: bool) -> Console:
    """Return the Rich console shared by command messages and record tables.

    Args:
        color: ``False`` disables ANSI styling even on a terminal.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Cached console matching the preferences.
    """

    color_system: Literal["auto"] | None = "auto" if color else None
    return Console(color_system=color_system, no_color=not color, emoji=emoji, highlight=False, soft_wrap=True)


@dataclass(slots=True)
class CLILogger:
    """Adapter printing command messages with the CLI's emoji and colour settings."""

    use_emoji: bool
    use_color: bool = True

    @property
    def console(self) -> Console:
        """Return the console used for both messages and rendered records."""

        return build_console(color=self.use_color, emoji=self.use_emoji)

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        self._emit("fail", message)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        self._emit("warn", message)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        self._emit("ok", message)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        self._emit("info", message)

    def _emit(self, kind: MessageKind, message: str) -> None:
        prefix, style = _MESSAGE_STYLES[kind]
        text = Text(f"{prefix if self.use_emoji else ''}{message}")
        if self.use_color:
            text.stylize(style)
        self.console.print(text)


def build_cli_logger(*, emoji: bool, color: bool = True) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji and colour preferences."""

    return CLILogger(use_emoji=emoji, use_color=color)


def configure_verbose_logging(enabled: bool) -> None:
    """Attach a stderr handler emitting package debug events when ``enabled``."""

    if not enabled or getattr(PACKAGE_LOGGER, "_gitlost_verbose_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    PACKAGE_LOGGER.addHandler(handler)
    PACKAGE_LOGGER.setLevel(logging.DEBUG)
    setattr(PACKAGE_LOGGER, "_gitlost_verbose_configured", True)


__all__ = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "build_console",
    "configure_verbose_logging",
]
