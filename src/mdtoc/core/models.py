"""Value types shared by the extract, render, and region steps"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class Heading:
    """A sub-section heading line: marker count and literal text."""
    depth: int      # number of '#' characters (2 for '##')
    text:  str      # content after the marker and spaces, inline markup included


@dataclass(frozen=True)
class Region:
    """Interior span of a TOC region: [start, stop) in document offsets."""
    start: int
    stop:  int


@dataclass(frozen=True)
class LiteralMarker:
    """Marker matched as a plain substring."""
    text: str

    def search(self, document: str, pos: int = 0) -> Optional[tuple[int, int]]:
        idx = document.find(self.text, pos)
        if idx < 0:
            return None
        return idx, idx + len(self.text)


@dataclass(frozen=True)
class PatternMarker:
    """Marker matched by a compiled regular expression."""
    pattern: re.Pattern

    def search(self, document: str, pos: int = 0) -> Optional[tuple[int, int]]:
        m = self.pattern.search(document, pos)
        if m is None:
            return None
        return m.span()


Marker = Union[LiteralMarker, PatternMarker]


def as_marker(value: Union[str, re.Pattern, Marker]) -> Marker:
    """Coerce a str to a LiteralMarker and a compiled pattern to a PatternMarker."""
    if isinstance(value, (LiteralMarker, PatternMarker)):
        return value
    if isinstance(value, re.Pattern):
        return PatternMarker(value)
    if isinstance(value, str):
        return LiteralMarker(value)
    raise TypeError(f"Marker must be str or compiled pattern, got {type(value).__name__}")


@dataclass
class UpdateResult:
    """Outcome of one update_file run."""
    path:   Path
    status: str     # 'updated' | 'unchanged' | 'no-region'
