# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for record construction and enrichment dispatch."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from gitlost.errors import EnrichmentExecutionError, FileSystemLookupError, InvalidInputError
from gitlost.models import LostObjectType
from gitlost.parser import COMMIT_LOG_COMMAND, TAG_OBJECT_COMMAND, CommandTemplate

COMMIT_ID = "1234567890abcdef1234567890abcdef12345678"
PARENT_ID = "abcdef1234567890abcdef1234567890abcdef12"
TAG_ID = "fedcba0987654321fedcba0987654321fedcba09"
BLOB_ID = "0123456789abcdef0123456789abcdef01234567"
EPOCH = datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


def _commit_response(parent: str = PARENT_ID) -> str:
    return f"Alice\x1ffix bug\x1f1700000000\x1f{parent}"


def _tag_response() -> str:
    return f"object {PARENT_ID}\ntype commit\ntag v1.0\ntagger Bob <bob@x.com> 1700000000 +0000\n\nRelease\n"


def test_command_template_substitutes_object_id() -> None:
    template = CommandTemplate(("cat-file", "-p", "{object_id}"))
    assert template.render(TAG_ID) == ("cat-file", "-p", TAG_ID)
    assert COMMIT_LOG_COMMAND.render(COMMIT_ID) == (
        "log",
        "-n1",
        "--pretty=format:%aN\x1f%s\x1f%ct\x1f%P",
        COMMIT_ID,
    )


def test_commit_record_is_enriched(executor, make_parser) -> None:
    executor.responses[COMMIT_LOG_COMMAND.render(COMMIT_ID)] = _commit_response()
    record = make_parser().parse(f"dangling commit {COMMIT_ID}")

    assert record is not None
    assert record.object_type is LostObjectType.COMMIT
    assert record.object_id == COMMIT_ID
    assert record.raw_type == "dangling commit"
    assert record.author == "Alice"
    assert record.subject == "fix bug"
    assert record.timestamp == EPOCH
    assert record.parent_id == PARENT_ID
    assert record.tag_name is None
    assert len(executor.calls) == 1


def test_commit_fields_use_expected_reencoding_channels(executor, make_parser, tagging_reencoder) -> None:
    executor.responses[COMMIT_LOG_COMMAND.render(COMMIT_ID)] = _commit_response()
    record = make_parser(reencoder=tagging_reencoder).parse(f"dangling commit {COMMIT_ID}")

    assert record is not None
    assert record.author == "L[Alice]"
    assert record.subject == "C[fix bug]"


def test_root_commit_leaves_parent_unset(executor, make_parser) -> None:
    executor.responses[COMMIT_LOG_COMMAND.render(COMMIT_ID)] = _commit_response(parent="")
    record = make_parser().parse(f"unreachable commit {COMMIT_ID}")

    assert record is not None
    assert record.parent_id is None
    assert record.author == "Alice"


def test_unparseable_commit_log_leaves_fields_unset(executor, make_parser, caplog) -> None:
    executor.responses[COMMIT_LOG_COMMAND.render(COMMIT_ID)] = "garbage"
    with caplog.at_level(logging.DEBUG, logger="gitlost.parser"):
        record = make_parser().parse(f"dangling commit {COMMIT_ID}")

    assert record is not None
    assert record.object_id == COMMIT_ID
    assert (record.author, record.subject, record.timestamp, record.parent_id) == (None, None, None, None)
    assert "enrichment-parse-failure" in caplog.text


def test_out_of_range_commit_date_leaves_fields_unset(executor, make_parser, caplog) -> None:
    executor.responses[COMMIT_LOG_COMMAND.render(COMMIT_ID)] = f"Alice\x1ffix\x1f99999999999999\x1f{PARENT_ID}"
    with caplog.at_level(logging.DEBUG, logger="gitlost.parser"):
        record = make_parser().parse(f"dangling commit {COMMIT_ID}")

    assert record is not None
    assert record.object_type is LostObjectType.COMMIT
    assert (record.author, record.subject, record.timestamp, record.parent_id, record.tag_name) == (
        None,
        None,
        None,
        None,
        None,
    )
    assert "enrichment-parse-failure" in caplog.text


def test_tag_record_is_enriched(executor, make_parser) -> None:
    executor.responses[TAG_OBJECT_COMMAND.render(TAG_ID)] = _tag_response()
    record = make_parser().parse(f"dangling tag {TAG_ID}")

    assert record is not None
    assert record.object_type is LostObjectType.TAG
    assert record.parent_id == PARENT_ID
    assert record.tag_name == "v1.0"
    assert record.subject == "v1.0: Release"
    assert record.author == "Bob"
    assert record.timestamp == EPOCH


def test_tag_fields_use_expected_reencoding_channels(executor, make_parser, tagging_reencoder) -> None:
    executor.responses[TAG_OBJECT_COMMAND.render(TAG_ID)] = _tag_response()
    record = make_parser(reencoder=tagging_reencoder).parse(f"dangling tag {TAG_ID}")

    assert record is not None
    assert record.author == "L[Bob]"
    assert record.subject == "v1.0: C[Release]"
    assert record.tag_name == "v1.0"


def test_unparseable_tag_leaves_fields_unset(executor, make_parser) -> None:
    executor.responses[TAG_OBJECT_COMMAND.render(TAG_ID)] = "not a tag"
    record = make_parser().parse(f"dangling tag {TAG_ID}")

    assert record is not None
    assert record.tag_name is None
    assert record.subject is None


def test_blob_uses_loose_object_creation_time(executor, filesystem, git_dir, make_parser) -> None:
    path = git_dir / "objects" / BLOB_ID[:2] / BLOB_ID[2:]
    filesystem.times[path] = EPOCH
    record = make_parser().parse(f"dangling blob {BLOB_ID}")

    assert record is not None
    assert record.object_type is LostObjectType.BLOB
    assert record.timestamp == EPOCH
    assert filesystem.requested == [path]
    assert executor.calls == []


def test_missing_blob_file_propagates(make_parser) -> None:
    with pytest.raises(FileSystemLookupError):
        make_parser().parse(f"dangling blob {BLOB_ID}")


@pytest.mark.parametrize("line", [f"unreachable tree {BLOB_ID}", f"warning in tree {BLOB_ID}: bad mode"])
def test_tree_and_other_records_are_not_enriched(executor, filesystem, make_parser, line: str) -> None:
    record = make_parser().parse(line)

    assert record is not None
    assert record.timestamp is None
    assert executor.calls == []
    assert filesystem.requested == []


def test_execution_failure_propagates(executor, make_parser) -> None:
    executor.failures.add(COMMIT_LOG_COMMAND.render(COMMIT_ID))
    with pytest.raises(EnrichmentExecutionError):
        make_parser().parse(f"dangling commit {COMMIT_ID}")


def test_unrecognised_line_returns_none_without_queries(executor, make_parser) -> None:
    assert make_parser().parse("Checking connectivity: 42, done.") is None
    assert executor.calls == []


def test_empty_line_is_invalid(make_parser) -> None:
    with pytest.raises(InvalidInputError):
        make_parser().parse("")


def test_reparsing_yields_identical_records(executor, make_parser) -> None:
    executor.responses[COMMIT_LOG_COMMAND.render(COMMIT_ID)] = _commit_response()
    parser = make_parser()
    line = f"dangling commit {COMMIT_ID}"

    first = parser.parse(line)
    second = parser.parse(line)
    assert first == second
    assert first is not None and second is not None
    assert first.model_dump() == second.model_dump()
