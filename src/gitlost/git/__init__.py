# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default git-backed collaborators for :class:`gitlost.parser.LostObjectParser`."""

from __future__ import annotations

from .encoding import LosslessReencoder, resolve_encoding
from .executor import LOSSLESS_ENCODING, GitCommandExecutor
from .filesystem import LocalFileMetadata

__all__ = [
    "LOSSLESS_ENCODING",
    "GitCommandExecutor",
    "LocalFileMetadata",
    "LosslessReencoder",
    "resolve_encoding",
]
