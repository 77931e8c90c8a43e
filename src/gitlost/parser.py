# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build :class:`LostObject` records from verification diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Final, TypeAlias

from .errors import ParseIssue
from .interfaces import CommandExecutor, FileMetadataAccessor, TextReencoder
from .models import LostObject, LostObjectType
from .object_id import split_object_path
from .parsing import COMMIT_LOG_FORMAT, ClassifiedLine, classify_line, parse_commit_log, parse_tag_object

LOGGER = logging.getLogger(__name__)

OBJECT_ID_PLACEHOLDER: Final[str] = "{object_id}"

RecordFields: TypeAlias = dict[str, object]


@dataclass(frozen=True, slots=True)
class CommandTemplate:
    """Git argument template with an object id placeholder."""

    args: tuple[str, ...]

    def render(self, object_id: str) -> tuple[str, ...]:
        """Return the arguments with ``object_id`` substituted for the placeholder."""

        return tuple(arg.replace(OBJECT_ID_PLACEHOLDER, object_id) for arg in self.args)


COMMIT_LOG_COMMAND: Final[CommandTemplate] = CommandTemplate(
    ("log", "-n1", f"--pretty=format:{COMMIT_LOG_FORMAT}", OBJECT_ID_PLACEHOLDER),
)
TAG_OBJECT_COMMAND: Final[CommandTemplate] = CommandTemplate(("cat-file", "-p", OBJECT_ID_PLACEHOLDER))


class LostObjectParser:
    """Classify diagnostic lines and enrich them through injected collaborators."""

    def __init__(
        self,
        *,
        executor: CommandExecutor,
        reencoder: TextReencoder,
        filesystem: FileMetadataAccessor,
        git_dir: Path,
    ) -> None:
        """Bind the parser to a repository.

        Args:
            executor: Runs git enrichment queries.
            reencoder: Converts lossless repository text into display strings.
            filesystem: Reads creation times of loose object files.
            git_dir: Repository directory containing ``objects/``.
        """

        self._executor = executor
        self._reencoder = reencoder
        self._filesystem = filesystem
        self._git_dir = git_dir
        self._enrichers: dict[LostObjectType, Callable[[str], RecordFields]] = {
            LostObjectType.COMMIT: self._enrich_commit,
            LostObjectType.TAG: self._enrich_tag,
            LostObjectType.BLOB: self._enrich_blob,
        }

    def parse(self, raw: str | None) -> LostObject | None:
        """Return a record for ``raw``, or ``None`` when the line is not recognised.

        Args:
            raw: One line of ``git fsck`` output.

        Returns:
            LostObject | None: Populated record, or ``None`` for unrecognised lines.

        Raises:
            InvalidInputError: If ``raw`` is empty.
            EnrichmentExecutionError: If an enrichment command fails.
            FileSystemLookupError: If a blob's loose object file is missing.
        """

        classified = classify_line(raw)
        if classified is None:
            return None
        return self.build(classified)

    def build(self, classified: ClassifiedLine) -> LostObject:
        """Return the record for an already classified line, running its enrichment."""

        fields: RecordFields = {
            "object_type": classified.object_type,
            "object_id": classified.object_id,
            "raw_type": classified.raw_type,
        }
        enricher = self._enrichers.get(classified.object_type)
        if enricher is not None:
            fields.update(enricher(classified.object_id))
        return LostObject.model_validate(fields)

    def blob_path(self, object_id: str) -> Path:
        """Return the loose object path for ``object_id`` inside the git directory."""

        directory, filename = split_object_path(object_id)
        return self._git_dir / "objects" / directory / filename

    def _enrich_commit(self, object_id: str) -> RecordFields:
        output = self._executor.run(COMMIT_LOG_COMMAND.render(object_id))
        parsed = parse_commit_log(output)
        if parsed is None:
            _log_parse_failure(LostObjectType.COMMIT, object_id, output)
            return {}
        fields: RecordFields = {
            "author": self._reencoder.from_lossless(parsed.author),
            "subject": self._reencoder.commit_message(parsed.subject) or "",
            "timestamp": parsed.timestamp,
        }
        if parsed.first_parent:
            fields["parent_id"] = parsed.first_parent
        return fields

    def _enrich_tag(self, object_id: str) -> RecordFields:
        output = self._executor.run(TAG_OBJECT_COMMAND.render(object_id))
        parsed = parse_tag_object(output)
        if parsed is None:
            _log_parse_failure(LostObjectType.TAG, object_id, output)
            return {}
        message = self._reencoder.commit_message(parsed.message)
        return {
            "parent_id": parsed.target_id,
            "author": self._reencoder.from_lossless(parsed.tagger),
            "tag_name": parsed.tag_name,
            "subject": f"{parsed.tag_name}: {message}",
            "timestamp": parsed.timestamp,
        }

    def _enrich_blob(self, object_id: str) -> RecordFields:
        return {"timestamp": self._filesystem.creation_time(self.blob_path(object_id))}


def _log_parse_failure(object_type: LostObjectType, object_id: str, output: str) -> None:
    LOGGER.debug(
        "%s: %s %s enrichment output did not match: %r",
        ParseIssue.ENRICHMENT_PARSE_FAILURE.value,
        object_type.value,
        object_id,
        output,
    )


__all__ = [
    "COMMIT_LOG_COMMAND",
    "OBJECT_ID_PLACEHOLDER",
    "TAG_OBJECT_COMMAND",
    "CommandTemplate",
    "LostObjectParser",
]
