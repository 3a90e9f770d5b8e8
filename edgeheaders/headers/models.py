"""Document model for the static-host ``_headers`` file format.

A document is an ordered list of top-level entries (blank lines, comments
and path blocks) plus the single indent unit used for every nested line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DEFAULT_INDENT_UNIT = "\t"


@dataclass(frozen=True, slots=True)
class Blank:
    """A blank top-level line."""


@dataclass(frozen=True, slots=True)
class Comment:
    """A comment line. ``text`` keeps the leading ``#``."""

    text: str


@dataclass(frozen=True, slots=True)
class Directive:
    """A single ``name: value`` header line inside a path block.

    ``separator`` is the text between name and value as it was read; it does
    not take part in equality.
    """

    name: str
    value: str
    separator: str = field(default=": ", compare=False)


BlockEntry = Union[Comment, Directive]


@dataclass(slots=True)
class PathBlock:
    """Headers applied to requests matching ``path``."""

    path: str
    entries: list[BlockEntry] = field(default_factory=list)

    @property
    def directives(self) -> list[Directive]:
        return [e for e in self.entries if isinstance(e, Directive)]


TopLevelEntry = Union[Blank, Comment, PathBlock]


@dataclass(slots=True)
class HeadersDocument:
    """Parsed or generated ``_headers`` document."""

    entries: list[TopLevelEntry] = field(default_factory=list)
    indent_unit: str = DEFAULT_INDENT_UNIT

    @property
    def blocks(self) -> list[PathBlock]:
        return [e for e in self.entries if isinstance(e, PathBlock)]
