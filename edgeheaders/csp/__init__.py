"""Content-Security-Policy helpers."""

from edgeheaders.csp.csp_builder import (
    build_csp,
    directives_from_policy,
    format_directives,
    merge_csp,
    merge_digests_into_directive,
    parse_csp,
)

__all__ = [
    "build_csp",
    "directives_from_policy",
    "format_directives",
    "merge_csp",
    "merge_digests_into_directive",
    "parse_csp",
]
