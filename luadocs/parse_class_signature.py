"""Logic for parsing the text after an `@class` tag."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassSignature:
    """Name, optional supertype and inline description of a class."""

    name: str
    extends_type: str | None
    description: str | None


def parse_class_signature(signature: str) -> ClassSignature | None:
    """Parse `Name[: Super] [description]`; None when there is no name."""
    text = signature.strip()
    n = len(text)

    cursor = 0
    while cursor < n and not text[cursor].isspace() and text[cursor] != ":":
        cursor += 1

    name = text[:cursor]
    if not name:
        return None

    rest = text[cursor:].strip()
    extends_type = None

    if rest.startswith(":"):
        rest = rest[1:].strip()
        end = 0
        while end < len(rest) and not rest[end].isspace():
            end += 1
        extends_type = rest[:end]
        rest = rest[end:].strip()

    return ClassSignature(
        name=name,
        extends_type=extends_type,
        description=rest or None,
    )
