"""Build a ``_headers`` document carrying a per-page Content-Security-Policy."""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from edgeheaders.csp.csp_builder import format_directives, merge_digests_into_directive
from edgeheaders.headers.models import Directive, HeadersDocument, PathBlock
from edgeheaders.models.integrity import CspConfig, PageHashes

logger = structlog.get_logger()

CSP_HEADER = "content-security-policy"


def _page_directives(csp_config: CspConfig | None, hashes: PageHashes) -> dict[str, str]:
    if csp_config is None:
        return {}

    # Each page works on its own copy of the base directives.
    directives = dict(csp_config.csp_directives)

    for directive, digests in (("script-src", hashes.scripts), ("style-src", hashes.styles)):
        if digests:
            merge_digests_into_directive(directives, directive, digests)
        else:
            directives[directive] = "'none'"
    return directives


def build_headers(
    csp_config: CspConfig | None,
    integrity: Mapping[str, PageHashes],
) -> HeadersDocument:
    """Produce one path block per page with a ``content-security-policy`` header.

    Pages whose directive mapping ends up empty are skipped. That only
    happens when no CSP is configured; a configured CSP always yields
    ``script-src`` and ``style-src`` (``'none'`` when the page has no
    digests of that kind).
    """
    document = HeadersDocument()
    skipped = 0
    for page, hashes in integrity.items():
        directives = _page_directives(csp_config, hashes)
        if not directives:
            skipped += 1
            logger.debug("csp_page_skipped", page=page)
            continue
        document.entries.append(PathBlock(
            path=f"/{page}",
            entries=[Directive(CSP_HEADER, format_directives(directives))],
        ))

    logger.info("csp_headers_built", pages=len(document.blocks), skipped=skipped)
    return document
