"""CLI command implementations"""

import re
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdtoc.config import Settings, load_config
from mdtoc.core.pipeline import update_file


STATUS_LABELS = {
    "updated":   "updated",
    "unchanged": "unchanged",
    "no-region": "no TOC region",
}


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def toc_cmd(
    path: Annotated[Path, typer.Argument(
        exists=True, dir_okay=False, help="Markdown document to update in place")],
    start: Annotated[Optional[str], typer.Argument(help="TOC start marker (default: a 'TOC:' line)")] = None,
    stop: Annotated[Optional[str], typer.Argument(help="TOC stop marker (default: next blank line)")] = None,
    regex: Annotated[bool, typer.Option("--regex", help="Treat markers as regular expressions")] = False,
    min_depth: Annotated[Optional[int], typer.Option("--min-depth", help="Fewest '#' markers to list")] = None,
    skip_fences: Annotated[bool, typer.Option("--skip-fences", help="Ignore headings inside code blocks")] = False,
    ):
    """Insert or refresh the table of contents between the start and stop markers.

    Settings are read from mdtoc.yaml in the working directory, then MDTOC_<FIELD>
    environment variables, then the arguments and options given here.
    """
    settings = _settings(overrides={
        "start_marker": start, "stop_marker": stop, "min_depth": min_depth,
        "regex": regex or None, "skip_fences": skip_fences or None,
    })

    try:
        result = update_file(path, settings)
    except re.error as e:
        _fail("Invalid marker pattern", e)
    except OSError as e:
        _fail(f"Could not update {path}", e)

    typer.echo(f"{STATUS_LABELS[result.status]}: {result.path}")
