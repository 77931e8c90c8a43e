# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the ``verify`` and ``parse`` commands."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from ..config import GitLostConfig, VerifyConfig, load_config
from ..errors import ConfigError, EnrichmentExecutionError, FileSystemLookupError, InvalidInputError
from ..models import LostObject, LostObjectType
from ..paths import FullPathResolver
from ..verify import build_parser, collect_lost_objects
from .rendering import render_records
from .shared import CLIError, CLILogger, build_cli_logger, configure_verbose_logging

app = typer.Typer(
    name="gitlost",
    help="Inspect dangling, missing and unreachable git objects.",
    no_args_is_help=True,
    add_completion=False,
)

ResultT = TypeVar("ResultT")

RootOption = Annotated[Path, typer.Option("--root", "-r", help="Repository working tree.")]
JsonOption = Annotated[bool, typer.Option("--json", help="Emit records as JSON.")]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")]
ColorOption = Annotated[bool, typer.Option("--color/--no-color", help="Toggle coloured output.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log parser diagnostics to stderr.")]


def _resolve_root(root: Path) -> Path:
    resolved = FullPathResolver(Path.cwd).resolve(root)
    if resolved is None or not resolved.is_dir():
        raise CLIError(f"Repository root '{root}' is not a directory", exit_code=2)
    return resolved


def _load_config(root: Path) -> GitLostConfig:
    try:
        return load_config(root)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def _guard(logger: CLILogger, action: Callable[[], ResultT]) -> ResultT:
    """Run ``action`` and translate domain failures into ``typer.Exit``."""

    try:
        return action()
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except (EnrichmentExecutionError, FileSystemLookupError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc


@app.command("verify")
def verify_command(
    root: RootOption = Path(),
    unreachable: Annotated[
        bool | None,
        typer.Option("--unreachable/--no-unreachable", help="Report objects unreachable from any reference."),
    ] = None,
    no_reflogs: Annotated[
        bool | None,
        typer.Option("--no-reflogs/--with-reflogs", help="Ignore reflog entries when computing reachability."),
    ] = None,
    full: Annotated[bool | None, typer.Option("--full/--no-full", help="Check packs and alternates too.")] = None,
    lost_found: Annotated[
        bool | None,
        typer.Option("--lost-found/--no-lost-found", help="Write dangling objects into .git/lost-found."),
    ] = None,
    object_types: Annotated[
        list[LostObjectType] | None,
        typer.Option("--type", "-t", help="Only report these object types (repeatable)."),
    ] = None,
    as_json: JsonOption = False,
    emoji: EmojiOption = True,
    color: ColorOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Run ``git fsck`` and list the lost objects it reports."""

    configure_verbose_logging(verbose)
    logger = build_cli_logger(emoji=emoji, color=color)

    def _run() -> int:
        work_tree = _resolve_root(root)
        config = _load_config(work_tree)
        overrides = {
            key: value
            for key, value in {
                "unreachable": unreachable,
                "no_reflogs": no_reflogs,
                "full": full,
                "lost_found": lost_found,
                "object_types": tuple(object_types) if object_types else None,
            }.items()
            if value is not None
        }
        options = VerifyConfig.model_validate({**config.verify.model_dump(), **overrides})
        parser, executor = build_parser(work_tree, config)
        result = collect_lost_objects(parser, executor, options)
        render_records(result.records, as_json=as_json, logger=logger)
        if not as_json:
            logger.ok(f"{len(result.records)} lost object(s) found")
            if result.skipped:
                logger.warn(f"{len(result.skipped)} line(s) of verification output were not recognised")
            for failure in result.failed:
                logger.warn(f"{failure.line.strip()}: {failure.error}")
            if result.failed:
                logger.warn(f"{len(result.failed)} lost object(s) could not be enriched")
        return 0

    raise typer.Exit(code=_guard(logger, _run))


def _read_lines(lines: Sequence[str]) -> list[str]:
    if list(lines) == ["-"]:
        return [line for line in sys.stdin.read().splitlines() if line.strip()]
    return list(lines)


@app.command("parse")
def parse_command(
    lines: Annotated[list[str], typer.Argument(help="Verification output lines, or '-' to read stdin.")],
    root: RootOption = Path(),
    as_json: JsonOption = False,
    emoji: EmojiOption = True,
    color: ColorOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Parse individual ``git fsck`` lines against the repository at ``--root``."""

    configure_verbose_logging(verbose)
    logger = build_cli_logger(emoji=emoji, color=color)

    def _run() -> int:
        work_tree = _resolve_root(root)
        parser, _ = build_parser(work_tree, _load_config(work_tree))
        records: list[LostObject] = []
        unrecognised = 0
        for line in _read_lines(lines):
            try:
                record = parser.parse(line)
            except InvalidInputError as exc:
                raise CLIError(str(exc), exit_code=2) from exc
            if record is None:
                unrecognised += 1
                if not as_json:
                    logger.warn(f"Not a lost object diagnostic: {line}")
                continue
            records.append(record)
        render_records(records, as_json=as_json, logger=logger)
        if not as_json:
            logger.info(f"{len(records)} record(s) parsed")
        return 1 if unrecognised and not records else 0

    raise typer.Exit(code=_guard(logger, _run))


__all__ = ["app"]
