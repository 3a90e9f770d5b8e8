"""Line-oriented parser for the ``_headers`` format.

The grammar is indentation sensitive::

    # comment
    /path
      # nested comment
      Header-Name: value

Every nested line uses the same indent unit, inferred from the first
indented line of the document. Parsing stops at the first violation.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from edgeheaders.headers.errors import (
    BadSyntaxError,
    UnableToInferIndentationError,
    UnexpectedIndentationError,
)
from edgeheaders.headers.models import (
    DEFAULT_INDENT_UNIT,
    Blank,
    Comment,
    Directive,
    HeadersDocument,
    PathBlock,
    TopLevelEntry,
)

_COMMENT_RE = re.compile(r"^(?P<indent>\s*)(?P<text>#.*)$")
_DIRECTIVE_RE = re.compile(
    r"^(?P<indent>\s*)(?P<name>[A-Za-z0-9_-]+)(?P<separator>\s*:\s*)(?P<value>.*)$"
)


class LineKind(str, enum.Enum):
    blank = "blank"
    comment = "comment"
    path = "path"
    directive = "directive"
    indented = "indented"
    other = "other"


@dataclass(frozen=True, slots=True)
class LineShape:
    """Classification of a single line of text."""

    kind: LineKind
    indent: str = ""
    text: str = ""
    name: str = ""
    value: str = ""
    separator: str = ""


def classify_line(line: str) -> LineShape:
    """Map one line (without its newline) to its shape."""
    if not line.strip():
        return LineShape(LineKind.blank, indent=line)

    m = _COMMENT_RE.match(line)
    if m:
        return LineShape(LineKind.comment, indent=m["indent"], text=m["text"])

    m = _DIRECTIVE_RE.match(line)
    if m:
        return LineShape(
            LineKind.directive,
            indent=m["indent"],
            name=m["name"],
            value=m["value"],
            separator=m["separator"],
        )

    if line.startswith("/"):
        return LineShape(LineKind.path, text=line)
    if line[0].isspace():
        return LineShape(LineKind.indented, text=line)
    return LineShape(LineKind.other, text=line)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class ParserState(str, enum.Enum):
    TOP_LEVEL = "top_level"
    IN_BLOCK = "in_block"


class HeadersParser:
    """Two-state scanner producing a :class:`HeadersDocument`.

    While a block is open the parser keeps the block's index in the
    document entries rather than a reference to the block itself.
    """

    def __init__(self) -> None:
        self._entries: list[TopLevelEntry] = []
        self._indent_unit: str | None = None
        self._state = ParserState.TOP_LEVEL
        self._block_index: int | None = None
        self._block_line_number = 0

    def parse(self, text: str) -> HeadersDocument:
        for line_number, line in enumerate(_split_lines(text), start=1):
            shape = classify_line(line)
            if self._state is ParserState.IN_BLOCK:
                self._feed_block(line_number, line, shape)
            else:
                self._feed_top_level(line_number, line, shape)

        if self._state is ParserState.IN_BLOCK and not self._open_block().entries:
            # A path declared on the last line never received any headers.
            raise BadSyntaxError(
                self._block_line_number,
                self._open_block().path,
                "path block has no headers",
            )

        if self._entries and isinstance(self._entries[-1], Blank):
            self._entries.pop()

        return HeadersDocument(
            entries=self._entries,
            indent_unit=self._indent_unit or DEFAULT_INDENT_UNIT,
        )

    def _open_block(self) -> PathBlock:
        return self._entries[self._block_index]

    def _feed_top_level(self, line_number: int, line: str, shape: LineShape) -> None:
        if shape.kind is LineKind.blank:
            self._entries.append(Blank())
        elif line[0].isspace():
            raise UnexpectedIndentationError(line_number, line)
        elif shape.kind is LineKind.comment:
            self._entries.append(Comment(shape.text))
        elif shape.kind is LineKind.path:
            self._entries.append(PathBlock(path=line))
            self._block_index = len(self._entries) - 1
            self._block_line_number = line_number
            self._state = ParserState.IN_BLOCK
        else:
            raise BadSyntaxError(line_number, line)

    def _feed_block(self, line_number: int, line: str, shape: LineShape) -> None:
        if shape.kind not in (LineKind.comment, LineKind.directive):
            self._close_block(line_number, line)
            self._feed_top_level(line_number, line, shape)
            return

        if self._indent_unit is None:
            if not shape.indent:
                raise UnableToInferIndentationError(line_number, line)
            self._indent_unit = shape.indent

        if not shape.indent:
            self._close_block(line_number, line)
            self._feed_top_level(line_number, line, shape)
            return

        if shape.indent != self._indent_unit:
            raise UnexpectedIndentationError(line_number, line)

        if shape.kind is LineKind.comment:
            entry = Comment(shape.text)
        else:
            entry = Directive(shape.name, shape.value, shape.separator)
        self._open_block().entries.append(entry)

    def _close_block(self, line_number: int, line: str) -> None:
        if not self._open_block().entries:
            raise BadSyntaxError(line_number, line, "path block has no headers")
        self._block_index = None
        self._state = ParserState.TOP_LEVEL


def parse_headers(text: str) -> HeadersDocument:
    """Parse ``_headers`` text into a document.

    Raises a :class:`~edgeheaders.headers.errors.HeadersParseError`
    subclass identifying the first offending line.
    """
    return HeadersParser().parse(text)
