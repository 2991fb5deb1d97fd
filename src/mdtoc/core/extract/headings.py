"""Line-pattern heading extraction"""

import re

from mdtoc.core.extract.fences import code_line_ranges
from mdtoc.core.models import Heading


def _heading_re(min_marker_count: int) -> re.Pattern:
    """Match '##+ text' lines with at least min_marker_count markers."""
    return re.compile(rf'^(#{{{min_marker_count},}}) +([^\r\n]*)', re.MULTILINE)


def _in_ranges(line: int, ranges: list[tuple[int, int]]) -> bool:
    return any(start <= line < end for start, end in ranges)


def extract_headings(
    document: str,
    min_marker_count: int = 2,
    skip_fences: bool = False,
    ) -> list[Heading]:
    """Return headings at depth >= min_marker_count in document order.

    The scan is purely line based: '## x' inside a fenced code block counts as a
    heading unless skip_fences is set. Duplicates are kept.
    """
    if min_marker_count < 1:
        raise ValueError(f"min_marker_count must be >= 1, got {min_marker_count}")

    ranges = code_line_ranges(document) if skip_fences else []
    headings = []
    for m in _heading_re(min_marker_count).finditer(document):
        if ranges and _in_ranges(document.count('\n', 0, m.start()), ranges):
            continue
        headings.append(Heading(depth=len(m.group(1)), text=m.group(2)))
    return headings
