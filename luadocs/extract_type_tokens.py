"""Logic for pulling identifier tokens out of a type expression."""

import re

QUOTED_RE = re.compile(r""""(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'""")
IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")


def extract_type_tokens(type_expr: str) -> list[str]:
    """Return identifier-like tokens, ignoring anything inside string literals."""
    without_strings = QUOTED_RE.sub(" ", type_expr)
    return IDENTIFIER_RE.findall(without_strings)
