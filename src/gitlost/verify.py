# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run repository verification and collect lost object records."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .config import GitLostConfig, VerifyConfig
from .errors import EnrichmentExecutionError, FileSystemLookupError
from .git import GitCommandExecutor, LocalFileMetadata, LosslessReencoder
from .interfaces import CommandExecutor
from .models import LostObject
from .parser import LostObjectParser
from .parsing import classify_line
from .paths import resolve_git_dir

LOGGER = logging.getLogger(__name__)


def build_fsck_arguments(options: VerifyConfig) -> tuple[str, ...]:
    """Return the ``git fsck`` arguments matching ``options``."""

    args = ["fsck", "--no-progress"]
    if options.unreachable:
        args.append("--unreachable")
    if options.no_reflogs:
        args.append("--no-reflogs")
    if options.full:
        args.append("--full")
    if options.lost_found:
        args.append("--lost-found")
    return tuple(args)


@dataclass(frozen=True, slots=True)
class FailedLine:
    """Recognised diagnostic whose enrichment could not be completed."""

    line: str
    error: EnrichmentExecutionError | FileSystemLookupError


@dataclass(slots=True)
class VerifyResult:
    """Records produced by a verification run alongside skipped and failed lines."""

    records: list[LostObject] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[FailedLine] = field(default_factory=list)


def _sort_key(record: LostObject) -> tuple[bool, float, str]:
    stamp = record.timestamp
    return (stamp is None, -stamp.timestamp() if stamp is not None else 0.0, record.object_id)


def parse_lines(parser: LostObjectParser, lines: Iterable[str], options: VerifyConfig) -> VerifyResult:
    """Parse every non-blank line, enriching only the object types ``options`` selects.

    Records are ordered newest first; records without a timestamp come last. Lines
    whose enrichment query fails, such as a ``missing blob`` without a loose file, are
    collected in :attr:`VerifyResult.failed` and the remaining lines are still parsed.
    """

    result = VerifyResult()
    wanted = set(options.object_types)
    for line in lines:
        if not line.strip():
            continue
        classified = classify_line(line)
        if classified is None:
            result.skipped.append(line)
            continue
        if classified.object_type not in wanted:
            continue
        try:
            record = parser.build(classified)
        except (EnrichmentExecutionError, FileSystemLookupError) as exc:
            LOGGER.debug("could not enrich %s %s: %s", classified.raw_type, classified.object_id, exc)
            result.failed.append(FailedLine(line=line, error=exc))
            continue
        result.records.append(record)
    result.records.sort(key=_sort_key)
    return result


def collect_lost_objects(
    parser: LostObjectParser,
    executor: CommandExecutor,
    options: VerifyConfig,
) -> VerifyResult:
    """Run ``git fsck`` through ``executor`` and parse its combined output.

    ``git fsck`` exits non-zero whenever it reports problems, so the exit status is
    not treated as a failure here.
    """

    output = executor.run(build_fsck_arguments(options), check=False, merge_stderr=True)
    result = parse_lines(parser, output.splitlines(), options)
    LOGGER.debug(
        "verification produced %d record(s), skipped %d line(s), %d enrichment failure(s)",
        len(result.records),
        len(result.skipped),
        len(result.failed),
    )
    return result


def build_parser(work_tree: Path, config: GitLostConfig) -> tuple[LostObjectParser, GitCommandExecutor]:
    """Wire the default git collaborators for ``work_tree`` into a parser."""

    executor = GitCommandExecutor(work_tree, git_executable=config.git_executable, timeout=config.timeout)
    reencoder = LosslessReencoder.from_repository(
        executor,
        log_output_encoding=config.log_output_encoding,
        commit_encoding=config.commit_encoding,
    )
    parser = LostObjectParser(
        executor=executor,
        reencoder=reencoder,
        filesystem=LocalFileMetadata(),
        git_dir=resolve_git_dir(work_tree),
    )
    return parser, executor


__all__ = [
    "FailedLine",
    "VerifyResult",
    "build_fsck_arguments",
    "build_parser",
    "collect_lost_objects",
    "parse_lines",
]
