"""Pipeline composition: extract -> render -> replace -> rewrite"""

import re
from pathlib import Path
from typing import Optional

from mdtoc.config import Settings
from mdtoc.core.extract.headings import extract_headings
from mdtoc.core.models import LiteralMarker, Marker, PatternMarker, UpdateResult
from mdtoc.core.region import DEFAULT_START, DEFAULT_STOP, find_region, replace_region
from mdtoc.core.render import render_toc
from mdtoc.util.fs import atomic_rewrite, read_document


def _marker(value: Optional[str], regex: bool, default: Marker) -> Marker:
    """Build a marker from a settings string; re.error propagates for bad patterns."""
    if value is None:
        return default
    if regex:
        return PatternMarker(re.compile(value, re.MULTILINE))
    return LiteralMarker(value)


def markers_from_settings(settings: Settings) -> tuple[Marker, Marker]:
    """Return (start, stop) markers, falling back to the 'TOC:' line and next blank line."""
    return (
        _marker(settings.start_marker, settings.regex, DEFAULT_START),
        _marker(settings.stop_marker, settings.regex, DEFAULT_STOP),
    )


def build_toc(
    document: str,
    start_marker: Marker = DEFAULT_START,
    stop_marker: Marker = DEFAULT_STOP,
    min_depth: int = 2,
    skip_fences: bool = False,
    ) -> str:
    """Return document with its TOC region refreshed from its own headings."""
    headings = extract_headings(document, min_depth, skip_fences=skip_fences)
    return replace_region(document, render_toc(headings), start_marker, stop_marker)


def update_file(path: Path, settings: Settings = None) -> UpdateResult:
    """Refresh the TOC of one file in place.

    The file is only rewritten when the result differs. A missing region is a
    no-op, not an error. OSError propagates for unreadable/unwritable paths.
    """
    settings = settings or Settings()
    path = Path(path)
    start, stop = markers_from_settings(settings)

    document = read_document(path)
    if find_region(document, start, stop) is None:
        return UpdateResult(path=path, status="no-region")

    new_document = build_toc(document, start, stop, settings.min_depth, settings.skip_fences)
    if new_document == document:
        return UpdateResult(path=path, status="unchanged")

    atomic_rewrite(path, new_document)
    return UpdateResult(path=path, status="updated")
