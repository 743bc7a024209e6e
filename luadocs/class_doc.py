"""Data model for a documented class."""

from dataclasses import dataclass, field

from luadocs.field_doc import FieldDoc


@dataclass
class ClassDoc:
    """Represents one `@class` declaration and its fields."""

    name: str
    extends_type: str | None
    line: int
    file_path: str
    tags: set[str] = field(default_factory=set)  # primary/included
    description_lines: list[str] = field(default_factory=list)
    fields: list[FieldDoc] = field(default_factory=list)
    references: list[str] = field(default_factory=list)  # set by attach_references
