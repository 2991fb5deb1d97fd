"""Unit tests for core/extract/fences.py"""

from mdtoc.core.extract.fences import code_line_ranges


def test_code_line_ranges_fence():
    """A fenced block covers its opening fence through its closing fence."""
    doc = "text\n\n```\n## x\n```\n"
    assert code_line_ranges(doc) == [(2, 5)]


def test_code_line_ranges_none():
    """A document without code has no ranges."""
    assert code_line_ranges("## a\n\ntext\n") == []


def test_code_line_ranges_preset():
    """A named markdown-it preset can be used for the scan."""
    doc = "text\n\n~~~\n## x\n~~~\n"
    assert code_line_ranges(doc, "js-default") == [(2, 5)]
