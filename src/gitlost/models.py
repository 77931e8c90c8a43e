# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Record types describing lost objects reported by repository verification."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from .object_id import normalize_object_id


class LostObjectType(str, Enum):
    """Object kinds recognised in verification diagnostics."""

    COMMIT = "commit"
    BLOB = "blob"
    TREE = "tree"
    TAG = "tag"
    OTHER = "other"

    @classmethod
    def from_token(cls, token: str | None) -> LostObjectType:
        """Return the member matching ``token``; unknown or missing tokens map to ``OTHER``."""

        if not token:
            return cls.OTHER
        try:
            member = cls(token)
        except ValueError:
            return cls.OTHER
        return member


class LostObject(BaseModel):
    """Immutable description of a dangling, missing or unreachable object."""

    model_config = ConfigDict(frozen=True)

    object_type: LostObjectType
    object_id: str
    raw_type: str
    parent_id: str | None = None
    author: str | None = None
    subject: str | None = None
    timestamp: datetime | None = None
    tag_name: str | None = None

    @field_validator("object_id")
    @classmethod
    def _validate_object_id(cls, value: str) -> str:
        """Ensure the object id is a 40-character hex hash.

        Args:
            value: Object id supplied at construction.

        Returns:
            str: Lowercase object id.
        """

        return normalize_object_id(value)

    @field_validator("parent_id")
    @classmethod
    def _validate_parent_id(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_object_id(value)


__all__ = ["LostObject", "LostObjectType"]
