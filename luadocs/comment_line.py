"""Logic for recognizing documentation comment lines."""

import re

COMMENT_LINE_RE = re.compile(r"^\s*---\s?(.*)$")


def comment_payload(line: str) -> str | None:
    """Return the text after a `---` marker, or None for other lines."""
    m = COMMENT_LINE_RE.match(line)
    if not m:
        return None
    return m.group(1)
