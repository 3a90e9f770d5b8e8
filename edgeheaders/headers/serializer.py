"""Render a :class:`HeadersDocument` back to ``_headers`` text."""

from __future__ import annotations

from edgeheaders.headers.models import Blank, Comment, HeadersDocument, PathBlock


def _block_lines(block: PathBlock, indent: str) -> list[str]:
    lines = [block.path]
    for entry in block.entries:
        if isinstance(entry, Comment):
            lines.append(f"{indent}{entry.text}")
        else:
            lines.append(f"{indent}{entry.name}{entry.separator}{entry.value}")
    return lines


def serialize_headers(document: HeadersDocument) -> str:
    """Serialize ``document``; every emitted line is newline-terminated."""
    lines: list[str] = []
    for entry in document.entries:
        if isinstance(entry, Blank):
            lines.append("")
        elif isinstance(entry, Comment):
            lines.append(entry.text)
        else:
            lines.extend(_block_lines(entry, document.indent_unit))
    return "".join(f"{line}\n" for line in lines)
