# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify raw ``git fsck`` diagnostic lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from ..errors import InvalidInputError, ParseIssue
from ..models import LostObjectType
from ..object_id import OBJECT_ID_LENGTH, is_object_id

LOGGER = logging.getLogger(__name__)

_STATES: Final[tuple[str, ...]] = ("dangling", "missing", "unreachable")
_TYPE_TOKENS: Final[tuple[str, ...]] = ("commit", "blob", "tree", "tag")
_TREE_WARNING: Final[str] = "warning in tree"

# (prefix, type token); the tree warning carries no type token of its own.
_PREFIXES: Final[tuple[tuple[str, str | None], ...]] = (
    *((f"{state} {token}", token) for state in _STATES for token in _TYPE_TOKENS),
    (_TREE_WARNING, None),
)


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """Fields extracted from a recognised diagnostic line."""

    object_type: LostObjectType
    object_id: str
    raw_type: str


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _match_prefix(line: str) -> tuple[str, str | None, str] | None:
    """Return ``(raw_type, type_token, remainder)`` for the first matching prefix."""

    for prefix, token in _PREFIXES:
        head = f"{prefix} "
        if line.startswith(head):
            return prefix, token, line[len(head) :]
    return None


def classify_line(raw: str | None) -> ClassifiedLine | None:
    """Classify a single diagnostic line emitted by ``git fsck``.

    Args:
        raw: One line of verification output.

    Returns:
        ClassifiedLine | None: Extracted fields, or ``None`` when the line does not
        describe a lost object.

    Raises:
        InvalidInputError: If ``raw`` is empty or ``None``.
    """

    if not raw:
        raise InvalidInputError("Raw diagnostic line must be a non-empty string")

    line = _strip_terminator(raw)
    matched = _match_prefix(line)
    if matched is not None:
        raw_type, token, remainder = matched
        object_id = remainder[:OBJECT_ID_LENGTH]
        trailing = remainder[OBJECT_ID_LENGTH:]
        if is_object_id(object_id) and "\n" not in trailing:
            return ClassifiedLine(
                object_type=LostObjectType.from_token(token),
                object_id=object_id,
                raw_type=raw_type,
            )

    LOGGER.debug("%s: lost object diagnostic format not handled: %r", ParseIssue.UNRECOGNIZED_FORMAT.value, raw)
    return None


__all__ = ["ClassifiedLine", "classify_line"]
