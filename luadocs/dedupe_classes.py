"""Logic for choosing one record per class name."""

import logging
from collections.abc import Iterable

from luadocs.class_doc import ClassDoc

logger = logging.getLogger(__name__)

DOCS_WEIGHT = 1000
TEST_PENALTY = 100
DEFAULT_TEST_PATH_MARKERS = ("/test/",)


def class_score(cls: ClassDoc, test_path_markers: Iterable[str]) -> int:
    """Score a declaration: documented beats undocumented, then field count."""
    score = len(cls.fields)
    if cls.tags:
        score += DOCS_WEIGHT
    if any(marker in cls.file_path for marker in test_path_markers):
        score -= TEST_PENALTY
    return score


def dedupe_classes(
    parsed: list[ClassDoc],
    test_path_markers: Iterable[str] = DEFAULT_TEST_PATH_MARKERS,
    dropped: list[ClassDoc] | None = None,
) -> dict[str, ClassDoc]:
    """Fold duplicate declarations into one ClassDoc per name.

    Records are visited in (name, path, line) order. A later record replaces
    the current pick only with a strictly higher score. Losers are appended
    to `dropped` when given.
    """
    markers = tuple(test_path_markers)
    ordered = sorted(parsed, key=lambda c: (c.name, c.file_path, c.line))

    classes_by_name: dict[str, ClassDoc] = {}
    for cls in ordered:
        existing = classes_by_name.get(cls.name)
        if existing is None:
            classes_by_name[cls.name] = cls
            continue

        if class_score(cls, markers) > class_score(existing, markers):
            winner, loser = cls, existing
        else:
            winner, loser = existing, cls
        classes_by_name[cls.name] = winner

        logger.debug(
            "Duplicate class %s: keeping %s:%s, dropping %s:%s",
            cls.name,
            winner.file_path,
            winner.line,
            loser.file_path,
            loser.line,
        )
        if dropped is not None:
            dropped.append(loser)

    return classes_by_name
