"""Tests for documentation comment line recognition."""

from luadocs.comment_line import comment_payload


def test_comment_payload_strips_marker() -> None:
    """Verify the marker and one following space are removed."""
    assert comment_payload("--- hello") == "hello"
    assert comment_payload("---hello") == "hello"
    assert comment_payload("  ---@class Foo") == "@class Foo"


def test_comment_payload_keeps_extra_indent() -> None:
    """Verify only a single space after the marker is consumed."""
    assert comment_payload("---   indented") == "  indented"


def test_comment_payload_blank() -> None:
    """Verify a bare marker yields an empty payload."""
    assert comment_payload("---") == ""
    assert comment_payload("--- ") == ""


def test_comment_payload_rejects_other_lines() -> None:
    """Verify ordinary comments and code are not documentation lines."""
    assert comment_payload("-- plain comment") is None
    assert comment_payload("local x = 1") is None
    assert comment_payload("") is None
