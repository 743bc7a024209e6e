"""Logic for parsing the text after an `@field` tag."""

import re

from luadocs.apply_field_doc_line import apply_field_doc_line
from luadocs.field_doc import FieldDoc
from luadocs.normalize_whitespace import normalize_whitespace
from luadocs.split_type_and_description import (
    UNKNOWN_TYPE,
    split_type_and_description,
)

NIL_RE = re.compile(r"\bnil\b")


def ensure_nil_in_type(type_expr: str) -> str:
    """Append `| nil` unless the type already mentions nil."""
    if NIL_RE.search(type_expr):
        return type_expr
    return f"{type_expr} | nil"


def normalize_field_optionality(raw_name: str, raw_type: str) -> tuple[str, str]:
    """Strip a trailing `?` from the name and make the type nilable for it."""
    optional = raw_name.endswith("?")
    name = raw_name[:-1] if optional else raw_name
    type_expr = normalize_whitespace(raw_type)
    if optional:
        type_expr = ensure_nil_in_type(type_expr)
    return name, type_expr


def parse_field_signature(signature: str, line: int) -> FieldDoc | None:
    """Parse `name[?] type [description]` into a FieldDoc."""
    text = signature.strip()
    if not text:
        return None

    parts = text.split(maxsplit=1)
    if len(parts) == 1:
        name, type_expr = normalize_field_optionality(text, UNKNOWN_TYPE)
        return FieldDoc(name=name, type=type_expr, line=line)

    raw_name, remainder = parts
    raw_type, description = split_type_and_description(remainder)
    name, type_expr = normalize_field_optionality(raw_name, raw_type)

    field = FieldDoc(name=name, type=type_expr, line=line)
    if description:
        apply_field_doc_line(field, description)
    return field
