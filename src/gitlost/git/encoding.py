# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Re-encode losslessly decoded git output into display strings."""

from __future__ import annotations

import codecs
import logging
from typing import Final

from .executor import LOSSLESS_ENCODING, GitCommandExecutor

LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING: Final[str] = "utf-8"
LOG_OUTPUT_ENCODING_KEY: Final[str] = "i18n.logOutputEncoding"
COMMIT_ENCODING_KEY: Final[str] = "i18n.commitEncoding"


def resolve_encoding(name: str | None) -> str:
    """Return the canonical codec name for ``name``, falling back to UTF-8."""

    if not name:
        return DEFAULT_ENCODING
    try:
        return codecs.lookup(name).name
    except LookupError:
        LOGGER.warning("unknown encoding %r in git configuration; using %s", name, DEFAULT_ENCODING)
        return DEFAULT_ENCODING


class LosslessReencoder:
    """Decode latin-1 round-tripped bytes with the repository's configured encodings."""

    def __init__(
        self,
        log_output_encoding: str | None = DEFAULT_ENCODING,
        commit_encoding: str | None = DEFAULT_ENCODING,
    ) -> None:
        self.log_output_encoding = resolve_encoding(log_output_encoding)
        self.commit_encoding = resolve_encoding(commit_encoding)

    @classmethod
    def from_repository(
        cls,
        executor: GitCommandExecutor,
        *,
        log_output_encoding: str | None = None,
        commit_encoding: str | None = None,
    ) -> LosslessReencoder:
        """Build a re-encoder, reading unset encodings from git configuration.

        ``i18n.logOutputEncoding`` falls back to ``i18n.commitEncoding`` as git does.
        """

        commit = commit_encoding or executor.config_value(COMMIT_ENCODING_KEY)
        log_output = log_output_encoding or executor.config_value(LOG_OUTPUT_ENCODING_KEY) or commit
        return cls(log_output_encoding=log_output, commit_encoding=commit)

    @staticmethod
    def _decode(text: str, encoding: str) -> str:
        return text.encode(LOSSLESS_ENCODING, errors="replace").decode(encoding, errors="replace")

    def from_lossless(self, text: str) -> str:
        """Re-encode log output text such as author names."""

        return self._decode(text, self.log_output_encoding)

    def commit_message(self, text: str) -> str:
        """Re-encode commit subjects and tag messages."""

        return self._decode(text, self.commit_encoding)


__all__ = [
    "COMMIT_ENCODING_KEY",
    "DEFAULT_ENCODING",
    "LOG_OUTPUT_ENCODING_KEY",
    "LosslessReencoder",
    "resolve_encoding",
]
