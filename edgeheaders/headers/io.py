"""File helpers around the parser, serializer and builder inputs."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import structlog
import yaml

from edgeheaders.headers.errors import HeadersParseError
from edgeheaders.headers.models import HeadersDocument
from edgeheaders.headers.parser import parse_headers
from edgeheaders.headers.serializer import serialize_headers
from edgeheaders.models.integrity import CspConfig, SriHashesManifest

logger = structlog.get_logger()

CSP_CONFIG_KEY = "content_security_policy"


def _read_text(path: Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


async def read_and_parse(path: str | Path, missing_ok: bool = True) -> HeadersDocument:
    """Read and parse a ``_headers`` file.

    A missing file is an empty document unless ``missing_ok`` is False, in
    which case FileNotFoundError is raised.
    """
    path = Path(path)
    if not path.exists():
        if not missing_ok:
            raise FileNotFoundError(f"Headers file not found: {path}")
        logger.debug("headers_file_missing", path=str(path))
        return HeadersDocument()

    text = await asyncio.to_thread(_read_text, path)
    try:
        document = parse_headers(text)
    except HeadersParseError as exc:
        logger.warning(
            "headers_parse_failed",
            path=str(path),
            code=exc.code,
            line_number=exc.line_number,
        )
        raise
    logger.debug("headers_parsed", path=str(path), blocks=len(document.blocks))
    return document


async def write_headers(path: str | Path, document: HeadersDocument) -> None:
    """Serialize ``document`` to ``path``, creating parent directories."""
    path = Path(path)
    await asyncio.to_thread(_write_text, path, serialize_headers(document))
    logger.info("headers_written", path=str(path), blocks=len(document.blocks))


def load_integrity_manifest(path: str | Path) -> SriHashesManifest:
    """Load an SRI manifest JSON file."""
    with open(path, encoding="utf-8") as f:
        return SriHashesManifest.model_validate(json.load(f))


def load_csp_config(path: str | Path) -> CspConfig | None:
    """Load the base CSP from a YAML file.

    Returns None when the file or its ``content_security_policy`` key is
    missing. The section may be a policy string or a mapping with
    ``csp_directives``; an empty section configures CSP with no base
    directives.
    """
    path = Path(path)
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if CSP_CONFIG_KEY not in data:
        return None

    section = data[CSP_CONFIG_KEY]
    if isinstance(section, str):
        return CspConfig.from_policy(section)
    return CspConfig.model_validate(section or {})
