"""Pure-function CSP (Content-Security-Policy) utilities."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping


def parse_csp(csp_string: str) -> dict[str, list[str]]:
    """Parse a CSP string into {directive: [values]} dict.

    Example:
        >>> parse_csp("default-src 'self'; script-src 'self' https:")
        {"default-src": ["'self'"], "script-src": ["'self'", "https:"]}
    """
    result: dict[str, list[str]] = {}
    if not csp_string or not csp_string.strip():
        return result
    for part in csp_string.split(";"):
        tokens = part.split()
        if not tokens:
            continue
        result[tokens[0].lower()] = tokens[1:]
    return result


def merge_csp(base: dict[str, list[str]], override: dict[str, list[str]]) -> dict[str, list[str]]:
    """Merge override CSP directives into base, deduplicating values.

    Override values are appended to base values for each directive.
    New directives from override are added.
    """
    merged: dict[str, list[str]] = {directive: list(values) for directive, values in base.items()}
    for directive, values in override.items():
        existing = merged.setdefault(directive, [])
        for v in values:
            if v not in existing:
                existing.append(v)
    return merged


def build_csp(directives: dict[str, list[str]]) -> str:
    """Build a CSP string from {directive: [values]} dict.

    Example:
        >>> build_csp({"default-src": ["'self'"], "script-src": ["'self'", "https:"]})
        "default-src 'self'; script-src 'self' https:"
    """
    parts = []
    for directive, values in directives.items():
        if values:
            parts.append(f"{directive} {' '.join(values)}")
        else:
            parts.append(directive)
    return "; ".join(parts)


def quote_digest(digest: str) -> str:
    """Wrap an SRI digest in single quotes as CSP source expressions require."""
    if digest.startswith("'") and digest.endswith("'"):
        return digest
    return f"'{digest}'"


def merge_digests_into_directive(
    directives: MutableMapping[str, str],
    directive: str,
    digests: Iterable[str],
) -> None:
    """Add integrity digests to a source directive, in place.

    An existing directive keeps its sources and gains the digests; a missing
    one starts from ``'self'``.
    """
    quoted = [quote_digest(d) for d in sorted(digests)]
    base = directives.get(directive)
    sources = base.split() if base else ["'self'"]
    merged = merge_csp({directive: sources}, {directive: quoted})
    directives[directive] = " ".join(merged[directive])


def format_directives(directives: dict[str, str]) -> str:
    """Format a {directive: value} mapping as a header value, sorted by directive."""
    return build_csp({name: directives[name].split() for name in sorted(directives)})


def directives_from_policy(csp_string: str) -> dict[str, str]:
    """Convert a CSP header string into a {directive: value} mapping."""
    return {directive: " ".join(values) for directive, values in parse_csp(csp_string).items()}
