"""Logic for parsing `@docs` directives into documentation tags."""

PRIMARY = "primary"
INCLUDED = "included"

DOCS_DIRECTIVE = "@docs "

_TAG_WORDS = {
    "base": PRIMARY,
    "include": INCLUDED,
    "included": INCLUDED,
}


def parse_docs_tag(text: str) -> str | None:
    """Map `@docs base` / `@docs include(d)` to a tag; anything else is None."""
    if not text.startswith(DOCS_DIRECTIVE):
        return None

    words = text[len(DOCS_DIRECTIVE) :].split()
    if not words:
        return None
    return _TAG_WORDS.get(words[0].lower())
