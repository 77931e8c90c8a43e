# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render lost object records for the terminal or as JSON."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Final

import typer
from rich.table import Table
from rich.text import Text

from ..models import LostObject
from .shared import CLILogger

_COLUMNS = ("Type", "Object", "Date", "Author", "Subject", "Parent")

# Leading word of the diagnostic -> row style.
_ROW_STYLES: Final[dict[str, str]] = {
    "missing": "red",
    "warning": "yellow",
    "dangling": "",
    "unreachable": "dim",
}


def records_to_json(records: Sequence[LostObject]) -> str:
    """Return ``records`` serialised as an indented JSON array."""

    return json.dumps([record.model_dump(mode="json") for record in records], indent=2)


def row_style(record: LostObject) -> str:
    """Return the table style for ``record`` based on how verification reported it."""

    state, _, _ = record.raw_type.partition(" ")
    return _ROW_STYLES.get(state, "")


def build_table(records: Sequence[LostObject]) -> Table:
    """Return a Rich table with one row per record."""

    table = Table(title="Lost objects", show_lines=False)
    for column in _COLUMNS:
        table.add_column(column, overflow="fold")
    for record in records:
        # Text cells keep brackets in author names and subjects out of Rich markup.
        table.add_row(
            Text(record.raw_type),
            Text(record.object_id),
            Text(record.timestamp.isoformat(sep=" ", timespec="seconds") if record.timestamp else ""),
            Text(record.author or ""),
            Text(record.subject or ""),
            Text(record.parent_id[:8] if record.parent_id else ""),
            style=row_style(record) or None,
        )
    return table


def render_records(records: Sequence[LostObject], *, as_json: bool, logger: CLILogger) -> None:
    """Print ``records`` as JSON, or as a table on the console ``logger`` writes to."""

    if as_json:
        typer.echo(records_to_json(records))
        return
    logger.console.print(build_table(records))


__all__ = ["build_table", "records_to_json", "render_records", "row_style"]
