"""Code block line ranges via markdown-it tokens"""

from markdown_it import MarkdownIt


CODE_TOKENS = {'fence', 'code_block'}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset)


def code_line_ranges(document: str, preset: str = 'commonmark') -> list[tuple[int, int]]:
    """Return [start, end) source line ranges covered by fenced or indented code."""
    return [
        (tok.map[0], tok.map[1])
        for tok in _make_parser(preset).parse(document)
        if tok.type in CODE_TOKENS and tok.map
    ]
