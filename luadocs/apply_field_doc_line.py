"""Logic for adding a description line to a field."""

from luadocs.field_doc import FieldDoc
from luadocs.strip_default_directive import strip_default_directive


def apply_field_doc_line(field: FieldDoc, line: str) -> None:
    """Append `line` to the field description, capturing its default value.

    Only the first default directive of a field is captured and cut from the
    text; once a default is set, later lines are kept verbatim.
    """
    if field.default_value is None:
        line, default_value = strip_default_directive(line)
        if default_value is not None:
            field.default_value = default_value

    if line.strip():
        field.description_lines.append(line)
