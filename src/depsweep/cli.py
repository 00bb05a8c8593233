"""CLI interface for depsweep."""

from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path

import click

from depsweep import __version__
from depsweep.core.aggregator import summary_line
from depsweep.core.rules import DEFAULT_RULES
from depsweep.core.walker import TreeWalker
from depsweep.errors import DeletionError, PathError, PathNotFoundError
from depsweep.models.scan_result import MatchEntry
from depsweep.utils import bytes_to_human, format_elapsed


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(verbose: int) -> None:
    """depsweep — find and remove regenerable dependency folders."""
    _setup_logging(verbose)


# ── clean ────────────────────────────────────────────────────────────────

def _on_match_dry_run(entry: MatchEntry) -> None:
    click.echo(
        f"{click.style('[MATCH]', fg='cyan', bold=True)} Found {entry.rule.folder_name:<12} at {entry.path} "
        f"({entry.description}) - size: {click.style(bytes_to_human(entry.size_bytes), fg='green')}"
    )


def _on_match_force(entry: MatchEntry) -> None:
    click.echo(
        f"{click.style('🗑️', bold=True)}  Deleting {entry.path} ({entry.description}) "
        f"- freeing {bytes_to_human(entry.size_bytes)}..."
    )


def _on_deleted(entry: MatchEntry) -> None:
    click.echo(f"   {click.style('✓', fg='green')} done: {entry.path}")


def _on_error(entry: MatchEntry, error: DeletionError) -> None:
    click.echo(f"   {click.style('✗', fg='red')} FAILED to delete {entry.path}: {error.cause}")


@main.command()
@click.argument("root", required=False, type=click.Path(path_type=Path))
@click.option("--path", "-p", "path_opt", default=None, type=click.Path(path_type=Path),
              help="Root path to start scanning from (default: current directory)")
@click.option("--force", "-f", is_flag=True, help="Actually delete the folders (default is dry run)")
@click.option("--workers", "-j", default=None, type=click.IntRange(min=1), envvar="DEPSWEEP_WORKERS",
              help="Number of scanning threads (default: CPU count)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def clean(root: Path | None, path_opt: Path | None, force: bool, workers: int | None, as_json: bool) -> None:
    """Scan for dependency folders and optionally delete them."""
    root = root or path_opt or Path(".")

    if as_json:
        walker = TreeWalker(DEFAULT_RULES, workers=workers)
    else:
        walker = TreeWalker(
            DEFAULT_RULES,
            workers=workers,
            on_match=_on_match_force if force else _on_match_dry_run,
            on_deleted=_on_deleted,
            on_error=_on_error,
        )
        click.echo(f"\n{click.style('🔍', bold=True)} Scanning path: {root}")
        if force:
            click.echo(click.style("⚠️  DELETING MODE: Folders will be permanently removed.\n", fg="red", bold=True))
        else:
            click.echo(click.style("⚠️  DRY RUN: No folders will be deleted. Use --force to delete.\n", fg="yellow"))

    started = time.monotonic()
    try:
        result = walker.scan(root, force=force)
    except PathError as e:
        click.echo(f"{click.style('Error:', fg='red', bold=True)} {e}", err=True)
        if isinstance(e, PathNotFoundError):
            click.echo(
                "Hint: on Windows, use forward slashes (/) or quote paths that contain backslashes (\\).",
                err=True,
            )
        sys.exit(1)
    elapsed = time.monotonic() - started

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.failures:
        click.echo(
            f"\n  {click.style('!', fg='yellow')} {len(result.failures)} folder(s) could not be deleted"
        )
    if result.listing_errors:
        click.echo(
            f"  {click.style('·', fg='bright_black')} {len(result.listing_errors)} "
            f"director{'y' if len(result.listing_errors) == 1 else 'ies'} could not be read"
        )
    click.echo(f"\n{click.style(summary_line(result), bold=True)} ({format_elapsed(elapsed)})\n")


# ── rules ────────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def rules(as_json: bool) -> None:
    """List the folders depsweep knows how to clean."""
    if as_json:
        data = [
            {
                "folder_name": r.folder_name,
                "project_indicator": r.project_indicator,
                "description": r.description,
            }
            for r in DEFAULT_RULES
        ]
        click.echo(json.dumps(data, indent=2))
        return

    for rule in DEFAULT_RULES:
        indicator = rule.project_indicator or click.style("(always)", fg="bright_black")
        click.echo(f"  {click.style(rule.folder_name, fg='cyan', bold=True):25s}  {indicator:15s}  {rule.description}")


# ── version ──────────────────────────────────────────────────────────────

@main.command()
def version() -> None:
    """Show version information."""
    click.echo(f"depsweep v{__version__}")
