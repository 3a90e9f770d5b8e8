"""Parser, serializer and builder for ``_headers`` files."""

from edgeheaders.headers.builder import build_headers
from edgeheaders.headers.errors import (
    BadSyntaxError,
    HeadersParseError,
    UnableToInferIndentationError,
    UnexpectedIndentationError,
)
from edgeheaders.headers.models import (
    Blank,
    Comment,
    Directive,
    HeadersDocument,
    PathBlock,
)
from edgeheaders.headers.parser import classify_line, parse_headers
from edgeheaders.headers.serializer import serialize_headers

__all__ = [
    "BadSyntaxError",
    "Blank",
    "Comment",
    "Directive",
    "HeadersDocument",
    "HeadersParseError",
    "PathBlock",
    "UnableToInferIndentationError",
    "UnexpectedIndentationError",
    "build_headers",
    "classify_line",
    "parse_headers",
    "serialize_headers",
]
