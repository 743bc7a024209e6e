"""Logic for walking the class reference graph."""

from collections import deque

from luadocs.class_doc import ClassDoc
from luadocs.docs_tag import PRIMARY


def primary_class_names(classes_by_name: dict[str, ClassDoc]) -> list[str]:
    """Return the sorted names of classes tagged `@docs base`."""
    return sorted(name for name, cls in classes_by_name.items() if PRIMARY in cls.tags)


def resolve_reachable_types(
    roots: list[str], classes_by_name: dict[str, ClassDoc]
) -> list[str]:
    """Breadth-first walk from `roots`; returns names in discovery order."""
    visited: set[str] = set()
    order: list[str] = []
    queue = deque(roots)

    while queue:
        name = queue.popleft()
        if name in visited:
            continue
        cls = classes_by_name.get(name)
        if cls is None:
            continue

        visited.add(name)
        order.append(name)
        queue.extend(ref for ref in cls.references if ref not in visited)

    return order


def documented_names(classes_by_name: dict[str, ClassDoc]) -> list[str]:
    """Return reachable, tagged class names in the order they are rendered."""
    reachable = resolve_reachable_types(
        primary_class_names(classes_by_name), classes_by_name
    )
    return [name for name in reachable if classes_by_name[name].tags]
