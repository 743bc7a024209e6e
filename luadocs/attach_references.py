"""Logic for linking classes to the other classes their types mention."""

from luadocs.class_doc import ClassDoc
from luadocs.extract_type_tokens import extract_type_tokens


def attach_references(classes_by_name: dict[str, ClassDoc]) -> None:
    """Set `references` on every class from its supertype and field types."""
    for cls in classes_by_name.values():
        type_exprs = [f.type for f in cls.fields]
        if cls.extends_type:
            type_exprs.insert(0, cls.extends_type)

        refs = {
            token
            for expr in type_exprs
            for token in extract_type_tokens(expr)
            if token != cls.name and token in classes_by_name
        }
        cls.references = sorted(refs)
