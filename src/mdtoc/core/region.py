"""Locate and replace the text between a start and a stop marker"""

import re
from typing import Optional

from mdtoc.core.models import Marker, PatternMarker, Region, as_marker


# A line that is exactly 'TOC:' (trailing blanks allowed).
DEFAULT_START = PatternMarker(re.compile(r'^TOC:[ \t]*\r?\n', re.MULTILINE))
# The first blank (or whitespace-only) line.
DEFAULT_STOP = PatternMarker(re.compile(r'^[ \t]*\r?\n', re.MULTILINE))


def find_region(document: str, start_marker: Marker, stop_marker: Marker) -> Optional[Region]:
    """Return the interior span between the markers, or None if either is missing.

    The stop marker is searched from the end of the full start match, so it can
    never overlap the start marker.
    """
    start = as_marker(start_marker).search(document)
    if start is None:
        return None
    boundary = start[1]
    stop = as_marker(stop_marker).search(document, boundary)
    if stop is None:
        return None
    return Region(start=boundary, stop=stop[0])


def replace_region(
    document: str,
    replacement: str,
    start_marker: Marker = DEFAULT_START,
    stop_marker: Marker = DEFAULT_STOP,
    ) -> str:
    """Replace everything strictly between the markers; no-op if a marker is absent."""
    region = find_region(document, start_marker, stop_marker)
    if region is None:
        return document
    return document[:region.start] + replacement + document[region.stop:]
