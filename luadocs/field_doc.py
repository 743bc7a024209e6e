"""Data model for a documented class field."""

from dataclasses import dataclass, field


@dataclass
class FieldDoc:
    """Represents one `@field` entry of a class."""

    name: str
    type: str
    line: int
    description_lines: list[str] = field(default_factory=list)
    default_value: str | None = None
