"""Bullet-list rendering of extracted headings"""

from typing import Iterable

from mdtoc.core.models import Heading
from mdtoc.core.utils.slug import derive_identifier


INDENT = '  '


def render_item(heading: Heading) -> str:
    """Render one '* [text](#id)' line, indented one step per level below 2."""
    indent = INDENT * (heading.depth - 2)
    return f"{indent}* [{heading.text}](#{derive_identifier(heading.text)})\n"


def render_toc(headings: Iterable[Heading]) -> str:
    """Concatenate rendered items in input order; empty input gives ''."""
    return ''.join(render_item(h) for h in headings)
