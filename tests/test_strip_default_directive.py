"""Tests for default value extraction."""

from luadocs.apply_field_doc_line import apply_field_doc_line
from luadocs.field_doc import FieldDoc
from luadocs.read_default_value import read_default_value
from luadocs.strip_default_directive import strip_default_directive


def test_strip_quoted_default() -> None:
    """Verify delimiters inside quotes do not end the value early."""
    assert strip_default_directive("Some text default = 'a, b' more text") == (
        "Some text  more text",
        "'a, b'",
    )


def test_strip_nested_table_default() -> None:
    """Verify nested brackets and quoted closers are balanced."""
    text = "Defaults to default={ a = { 1, 2 }, b = '}' } ok"
    assert strip_default_directive(text) == (
        "Defaults to  ok",
        "{ a = { 1, 2 }, b = '}' }",
    )


def test_strip_mixed_brackets() -> None:
    """Verify any bracket kind may nest inside another."""
    assert strip_default_directive("default=[1, (2, {3})]") == ("", "[1, (2, {3})]")


def test_strip_bare_token_case_insensitive() -> None:
    """Verify bare tokens end at whitespace and the keyword ignores case."""
    assert strip_default_directive("DEFAULT = 42 seconds") == (" seconds", "42")


def test_strip_escaped_quote() -> None:
    """Verify escaped quotes stay inside the string literal."""
    text = 'default = "say \\"hi\\"" end'
    assert strip_default_directive(text) == (" end", '"say \\"hi\\""')


def test_strip_without_value_keeps_text() -> None:
    """Verify a dangling directive is left as plain text."""
    assert strip_default_directive("default = ") == ("default = ", None)
    assert strip_default_directive("no directive here") == ("no directive here", None)


def test_strip_requires_word_boundary() -> None:
    """Verify words merely ending in `default` are not directives."""
    assert strip_default_directive("nodefault = 3") == ("nodefault = 3", None)


def test_strip_only_first_directive() -> None:
    """Verify a second directive on the same line stays in the text."""
    assert strip_default_directive("default = 1 or default = 2") == (
        " or default = 2",
        "1",
    )


def test_read_default_value_unterminated() -> None:
    """Verify unterminated literals run to the end of the text."""
    assert read_default_value("'open", 0) == ("'open", 5)
    assert read_default_value("{ a = 1", 0) == ("{ a = 1", 7)


def test_read_default_value_skips_leading_space() -> None:
    """Verify leading whitespace before the literal is skipped."""
    assert read_default_value("   true rest", 0) == ("true", 7)
    assert read_default_value("   ", 0) is None


def test_apply_field_doc_line_first_default_wins() -> None:
    """Verify later directives in a field are kept as description text."""
    field = FieldDoc(name="x", type="integer", line=1)
    apply_field_doc_line(field, "default = 1 first")
    apply_field_doc_line(field, "default = 2 second")
    assert field.default_value == "1"
    assert field.description_lines == [" first", "default = 2 second"]


def test_apply_field_doc_line_drops_blank_remainder() -> None:
    """Verify a line holding only a directive adds no description."""
    field = FieldDoc(name="x", type="integer", line=1)
    apply_field_doc_line(field, "default = {}")
    assert field.default_value == "{}"
    assert field.description_lines == []
