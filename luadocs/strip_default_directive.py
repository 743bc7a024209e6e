"""Logic for extracting `default = <value>` directives from field text."""

import re

from luadocs.read_default_value import read_default_value

DEFAULT_DIRECTIVE_RE = re.compile(r"\bdefault\s*=\s*", re.IGNORECASE)


def strip_default_directive(text: str) -> tuple[str, str | None]:
    """Remove the first default directive from `text`.

    Returns the remaining text and the trimmed literal. Text with no directive,
    or a directive with nothing after `=`, comes back unchanged with None.
    """
    m = DEFAULT_DIRECTIVE_RE.search(text)
    if not m:
        return text, None

    parsed = read_default_value(text, m.end())
    if parsed is None:
        return text, None

    value, end = parsed
    return text[: m.start()] + text[end:], value.strip()
