"""Pipeline from annotated source texts to the rendered document."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from luadocs.attach_references import attach_references
from luadocs.class_doc import ClassDoc
from luadocs.comment_block_parser import parse_lua_doc_classes
from luadocs.dedupe_classes import dedupe_classes
from luadocs.load_config import DEFAULT_CONFIG
from luadocs.render_markdown import render_markdown
from luadocs.resolve_reachable_types import documented_names

logger = logging.getLogger(__name__)


@dataclass
class DocsBuild:
    """Model and output of one generation run."""

    markdown: str
    classes_by_name: dict[str, ClassDoc]
    documented: list[str]
    dropped: list[ClassDoc]


def build_docs(
    sources: Iterable[tuple[str, str]], config: dict[str, Any] | None = None
) -> DocsBuild:
    """Parse every (text, path) pair, then dedupe, link, walk and render.

    Model construction starts only after every source is parsed, since
    duplicate scores depend on all declarations of a name.
    """
    config = config or DEFAULT_CONFIG

    parsed: list[ClassDoc] = []
    file_count = 0
    for text, path in sources:
        parsed.extend(parse_lua_doc_classes(text, path))
        file_count += 1

    dropped: list[ClassDoc] = []
    classes_by_name = dedupe_classes(
        parsed, config["dedupe"]["test_path_markers"], dropped
    )
    attach_references(classes_by_name)
    names = documented_names(classes_by_name)

    logger.info(
        "Parsed %s classes from %s files; documenting %s",
        len(classes_by_name),
        file_count,
        len(names),
    )

    markdown = render_markdown(
        names,
        classes_by_name,
        title=config["document"]["title"],
        tagline=config["document"]["tagline"],
    )
    return DocsBuild(
        markdown=markdown,
        classes_by_name=classes_by_name,
        documented=names,
        dropped=dropped,
    )


def generate_markdown(
    sources: Iterable[tuple[str, str]], config: dict[str, Any] | None = None
) -> str:
    """Return only the rendered document for the given sources."""
    return build_docs(sources, config).markdown
