# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for validating SHA-1 object identifiers."""

from __future__ import annotations

from typing import Final

OBJECT_ID_LENGTH: Final[int] = 40
_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdef")


def is_object_id(value: str) -> bool:
    """Return ``True`` when ``value`` is exactly 40 lowercase hex characters."""

    return len(value) == OBJECT_ID_LENGTH and all(char in _HEX_DIGITS for char in value)


def normalize_object_id(value: str) -> str:
    """Return ``value`` lowercased after validating it as an object id.

    Args:
        value: Candidate hash in upper or lower case.

    Returns:
        str: Lowercase 40-character hexadecimal object id.

    Raises:
        ValueError: If ``value`` is not a 40-character hexadecimal string.
    """

    lowered = value.lower()
    if not is_object_id(lowered):
        raise ValueError(f"'{value}' is not a {OBJECT_ID_LENGTH}-character hexadecimal object id")
    return lowered


def split_object_path(object_id: str) -> tuple[str, str]:
    """Return the loose-object ``(directory, filename)`` pair for ``object_id``."""

    return object_id[:2], object_id[2:OBJECT_ID_LENGTH]


__all__ = ["OBJECT_ID_LENGTH", "is_object_id", "normalize_object_id", "split_object_path"]
