"""Errors raised while parsing a ``_headers`` document."""

from __future__ import annotations


class HeadersParseError(Exception):
    """Base class for all parse failures.

    ``line_number`` is 1-based and points at the offending line.
    """

    code = "parse_error"
    reason = "Unable to parse headers file"

    def __init__(self, line_number: int, line: str, detail: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        self.detail = detail
        message = self.reason if detail is None else f"{self.reason} ({detail})"
        super().__init__(f"{message} at line {line_number}: {line!r}")


class BadSyntaxError(HeadersParseError):
    code = "bad_syntax"
    reason = "Bad syntax"


class UnexpectedIndentationError(HeadersParseError):
    code = "unexpected_indentation"
    reason = "Unexpected indentation"


class UnableToInferIndentationError(HeadersParseError):
    code = "unable_to_infer_indentation"
    reason = "Unable to infer indentation"
