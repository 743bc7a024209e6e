"""State machine that turns `---` annotation blocks into class records."""

import logging
import re
from dataclasses import dataclass

from luadocs.apply_field_doc_line import apply_field_doc_line
from luadocs.class_doc import ClassDoc
from luadocs.comment_line import comment_payload
from luadocs.docs_tag import parse_docs_tag
from luadocs.field_doc import FieldDoc
from luadocs.parse_class_signature import parse_class_signature
from luadocs.parse_field_signature import parse_field_signature

logger = logging.getLogger(__name__)

CLASS_TAG = "@class "
FIELD_TAG = "@field "
TAG_SIGIL = "@"

LINE_SPLIT_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class Idle:
    """No class is open."""


@dataclass(frozen=True)
class InClass:
    """A class is open; description text goes to the class."""

    cls: ClassDoc


@dataclass(frozen=True)
class InField:
    """A class is open and one of its fields receives description text."""

    cls: ClassDoc
    field: FieldDoc


ParserState = Idle | InClass | InField

IDLE = Idle()


class CommentBlockParser:
    """Parses one source file, line by line, into ClassDoc records."""

    def __init__(self, file_path: str) -> None:
        """Initialize the parser for a file (used for record origins)."""
        self.file_path = file_path
        self.state: ParserState = IDLE
        self.pending_tags: set[str] = set()
        self.classes: list[ClassDoc] = []

    def parse(self, source: str) -> list[ClassDoc]:
        """Parse the whole source text and return the classes found."""
        for index, line in enumerate(LINE_SPLIT_RE.split(source)):
            self.feed(line, index + 1)
        self.flush()
        return self.classes

    def flush(self) -> None:
        """Close the open class, if any, and return to Idle."""
        if not isinstance(self.state, Idle):
            self.classes.append(self.state.cls)
        self.state = IDLE

    def feed(self, line: str, line_no: int) -> None:
        """Advance the state machine by one source line."""
        text = comment_payload(line)
        if text is None:
            self.flush()
            self.pending_tags = set()
            return

        tag_text = text.strip()

        if tag_text.startswith(CLASS_TAG):
            self._open_class(tag_text[len(CLASS_TAG) :], line_no)
            return

        docs_tag = parse_docs_tag(tag_text)
        if docs_tag:
            if isinstance(self.state, Idle):
                self.pending_tags.add(docs_tag)
            else:
                self.state.cls.tags.add(docs_tag)
            return

        state = self.state
        if isinstance(state, Idle):
            return

        if tag_text.startswith(FIELD_TAG):
            field = parse_field_signature(tag_text[len(FIELD_TAG) :], line_no)
            if field:
                state.cls.fields.append(field)
                self.state = InField(state.cls, field)
            return

        if tag_text.startswith(TAG_SIGIL):
            logger.debug(
                "%s:%s: %r ends the block of class %s",
                self.file_path,
                line_no,
                tag_text.split()[0],
                state.cls.name,
            )
            self.flush()
            self.pending_tags = set()
            return

        if not tag_text:
            if isinstance(state, InField):
                state.field.description_lines.append("")
            else:
                state.cls.description_lines.append("")
            return

        if isinstance(state, InField):
            apply_field_doc_line(state.field, text)
        else:
            state.cls.description_lines.append(text)

    def _open_class(self, signature: str, line_no: int) -> None:
        self.flush()

        parsed = parse_class_signature(signature)
        tags = self.pending_tags
        self.pending_tags = set()
        if parsed is None:
            logger.debug("%s:%s: skipping unnamed @class", self.file_path, line_no)
            return

        cls = ClassDoc(
            name=parsed.name,
            extends_type=parsed.extends_type,
            line=line_no,
            file_path=self.file_path,
            tags=tags,
            description_lines=[parsed.description] if parsed.description else [],
        )
        self.state = InClass(cls)


def parse_lua_doc_classes(source: str, file_path: str) -> list[ClassDoc]:
    """Parse all annotated classes declared in one source file."""
    return CommentBlockParser(file_path).parse(source)
