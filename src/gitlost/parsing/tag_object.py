# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sub-grammar for raw annotated tag objects printed by ``git cat-file -p``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Final

from .commit_log import parse_unix_time

_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\Aobject (?P<object>[0-9a-f]{40})\n"
    r"type (?P<type>[a-z]+)\n"
    r"tag (?P<tag>[^\n]+)\n"
    r"tagger (?P<tagger>[^\n]+?) <[^\n]*> (?P<date>\d+) [^\n]*\n"
    r"\n"
    r"(?P<message>.*)\Z",
    re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class TagFields:
    """Raw fields captured from an annotated tag object."""

    target_id: str
    target_type: str
    tag_name: str
    tagger: str
    timestamp: datetime
    message: str


def parse_tag_object(output: str) -> TagFields | None:
    """Parse the raw content of an annotated tag object.

    The tagger line contributes the display name only; the angle-bracketed email
    and the trailing ``<seconds> <timezone>`` pair are split off. The message is the
    text following the first blank line with trailing whitespace removed.

    Args:
        output: Text produced by ``git cat-file -p <tag>``.

    Returns:
        TagFields | None: Parsed fields, or ``None`` when ``output`` is not a tag object
        or its tagger date cannot be represented.
    """

    match = _TAG_PATTERN.match(output)
    if match is None:
        return None
    timestamp = parse_unix_time(match.group("date"))
    if timestamp is None:
        return None
    return TagFields(
        target_id=match.group("object"),
        target_type=match.group("type"),
        tag_name=match.group("tag"),
        tagger=match.group("tagger"),
        timestamp=timestamp,
        message=match.group("message").rstrip(),
    )


__all__ = ["TagFields", "parse_tag_object"]
