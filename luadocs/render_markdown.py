"""Logic for rendering documented classes as a Markdown reference."""

from luadocs.class_doc import ClassDoc
from luadocs.field_doc import FieldDoc
from luadocs.md_table import escape_table_cell, md_table
from luadocs.trim_edge_blank_lines import trim_edge_blank_lines

DEFAULT_TITLE = "99"
DEFAULT_TAGLINE = "The AI Neovim experience"

NO_DESCRIPTION = "No description."
NO_PROPERTIES = "No properties."
NO_TYPES = "No documented types found."
TABLE_HEADERS = ["Name", "Type", "Default Value"]


def render_markdown(
    documented_names: list[str],
    classes_by_name: dict[str, ClassDoc],
    *,
    title: str = DEFAULT_TITLE,
    tagline: str = DEFAULT_TAGLINE,
) -> str:
    """Render the documented classes, in the given order, to one document."""
    parts = [f"# {title}", tagline]

    if not documented_names:
        parts += ["", NO_TYPES]
        return "\n".join(parts) + "\n"

    for name in documented_names:
        cls = classes_by_name.get(name)
        if cls is None:
            continue
        parts.extend(_render_class(cls))

    return "\n".join(parts) + "\n"


def _render_description(lines: list[str]) -> list[str]:
    return trim_edge_blank_lines(lines) or [NO_DESCRIPTION]


def _render_class(cls: ClassDoc) -> list[str]:
    parts = ["", f"## {cls.name}"]
    parts.extend(_render_description(cls.description_lines))

    rows = [
        [
            f"`{escape_table_cell(f.name)}`",
            f"`{escape_table_cell(f.type)}`",
            escape_table_cell(f.default_value or "-"),
        ]
        for f in cls.fields
    ]
    parts += ["", "### Description"]
    parts.extend(md_table(TABLE_HEADERS, rows))

    parts += ["", "### API"]
    if not cls.fields:
        parts.append(NO_PROPERTIES)
    for f in cls.fields:
        parts.extend(_render_field(f))
    return parts


def _render_field(field: FieldDoc) -> list[str]:
    parts = ["", f"#### {field.name}"]
    parts.extend(_render_description(field.description_lines))
    if field.default_value:
        parts += ["", f"**default**: {field.default_value}"]
    return parts
