# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for CLI console messages and record rendering."""

from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from gitlost.cli.rendering import build_table, records_to_json, render_records, row_style
from gitlost.cli.shared import build_cli_logger
from gitlost.models import LostObject, LostObjectType

COMMIT_ID = "1234567890abcdef1234567890abcdef12345678"


def _record(raw_type: str = "dangling commit", **fields: object) -> LostObject:
    return LostObject(object_type=LostObjectType.COMMIT, object_id=COMMIT_ID, raw_type=raw_type, **fields)


def test_logger_honours_colour_and_emoji(capsys: pytest.CaptureFixture[str]) -> None:
    logger = build_cli_logger(emoji=False, color=False)
    assert logger.console.no_color is True
    logger.warn("careful")
    logger.ok("done")
    assert capsys.readouterr().out == "careful\ndone\n"

    emoji_logger = build_cli_logger(emoji=True, color=True)
    assert emoji_logger.use_color is True
    assert emoji_logger.console.no_color is False
    emoji_logger.fail("broken")
    assert "❌ broken" in capsys.readouterr().out


def test_records_and_messages_share_a_console(capsys: pytest.CaptureFixture[str]) -> None:
    logger = build_cli_logger(emoji=False, color=False)
    render_records([_record()], as_json=False, logger=logger)
    logger.info("1 record(s) parsed")

    out = capsys.readouterr().out
    assert "Lost objects" in out
    assert out.rstrip().endswith("1 record(s) parsed")
    assert "\x1b[" not in out


def test_json_output_bypasses_the_console(capsys: pytest.CaptureFixture[str]) -> None:
    render_records([_record(author="Alice")], as_json=True, logger=build_cli_logger(emoji=True, color=True))
    payload = json.loads(capsys.readouterr().out)
    assert payload == json.loads(records_to_json([_record(author="Alice")]))
    assert payload[0]["author"] == "Alice"


@pytest.mark.parametrize(
    ("raw_type", "expected"),
    [
        ("missing blob", "red"),
        ("warning in tree", "yellow"),
        ("unreachable commit", "dim"),
        ("dangling commit", ""),
    ],
)
def test_row_style_follows_diagnostic_state(raw_type: str, expected: str) -> None:
    assert row_style(_record(raw_type)) == expected


def test_table_cells_are_not_markup() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=240, no_color=True)
    console.print(build_table([_record(author="dependabot[bot]", subject="[skip ci] bump")]))
    rendered = buffer.getvalue()
    assert "dependabot[bot]" in rendered
    assert "[skip ci] bump" in rendered
