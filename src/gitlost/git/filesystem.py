# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem metadata lookups for loose object files."""

from __future__ import annotations

import errno
from datetime import UTC, datetime
from pathlib import Path

from ..errors import FileSystemLookupError


class LocalFileMetadata:
    """Read creation times from the local filesystem."""

    def creation_time(self, path: Path) -> datetime:
        """Return the creation time of ``path`` as an aware UTC datetime.

        Uses ``st_birthtime`` where the platform records it and ``st_ctime`` otherwise.

        Raises:
            FileSystemLookupError: If ``path`` does not exist.
        """

        try:
            stat_result = path.stat()
        except FileNotFoundError as exc:
            raise FileSystemLookupError(errno.ENOENT, "Loose object file not found", str(path)) from exc
        created = getattr(stat_result, "st_birthtime", None)
        if created is None:
            created = stat_result.st_ctime
        return datetime.fromtimestamp(created, tz=UTC)


__all__ = ["LocalFileMetadata"]
