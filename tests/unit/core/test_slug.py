"""Unit tests for core/utils/slug.py"""

import pytest

from mdtoc.core.utils.slug import derive_identifier


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("C++ & Go!", "c-go-"),
    ("my_file_name", "my_file_name"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("`code` and **bold**", "-code-and-bold-"),
    ("Version 2.0", "version-2-0"),
    ("", ""),
])
def test_derive_identifier_basic(text, expected):
    """derive_identifier lowercases and collapses non-word runs to one hyphen."""
    assert derive_identifier(text) == expected


def test_derive_identifier_keeps_leading_hyphen():
    """Leading punctuation becomes a leading hyphen; nothing is trimmed."""
    assert derive_identifier("!leading") == "-leading"


def test_derive_identifier_is_deterministic():
    """Identical text always yields the identical identifier."""
    assert derive_identifier("Same Title") == derive_identifier("Same Title")
