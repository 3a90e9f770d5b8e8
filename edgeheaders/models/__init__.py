"""Input models for the header builder."""

from edgeheaders.models.integrity import (
    CspConfig,
    PageHashes,
    PerPageIntegrity,
    PerResourceSriHashes,
    SriHashesManifest,
)

__all__ = [
    "CspConfig",
    "PageHashes",
    "PerPageIntegrity",
    "PerResourceSriHashes",
    "SriHashesManifest",
]
