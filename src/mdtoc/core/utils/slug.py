"""Heading identifier (anchor) generation"""

import re


_NON_WORD_RE = re.compile(r'\W+')


def derive_identifier(text: str) -> str:
    """Lowercase text and collapse each run of non-word characters to one hyphen.

    Leading/trailing hyphens are kept so anchors match the renderer's own
    fragment ids (e.g. 'C++ & Go!' -> 'c-go-').
    """
    return _NON_WORD_RE.sub('-', text.lower())
