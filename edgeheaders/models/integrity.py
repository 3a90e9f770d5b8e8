"""Pydantic models for SRI manifests and CSP configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from edgeheaders.csp.csp_builder import directives_from_policy


class PageHashes(BaseModel):
    """Integrity digests of the scripts and styles a single page loads."""

    scripts: set[str] = Field(default_factory=set)
    styles: set[str] = Field(default_factory=set)


PerPageIntegrity = dict[str, PageHashes]


class PerResourceSriHashes(BaseModel):
    """Resource URL -> digest, per resource type."""

    scripts: dict[str, str] = Field(default_factory=dict)
    styles: dict[str, str] = Field(default_factory=dict)


class SriHashesManifest(BaseModel):
    """SRI manifest emitted by a site build.

    Only ``per_page_sri_hashes`` feeds the header builder; the remaining
    fields are carried so a manifest round-trips unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)

    inline_script_hashes: list[str] = Field(default_factory=list, alias="inlineScriptHashes")
    inline_style_hashes: list[str] = Field(default_factory=list, alias="inlineStyleHashes")
    ext_script_hashes: list[str] = Field(default_factory=list, alias="extScriptHashes")
    ext_style_hashes: list[str] = Field(default_factory=list, alias="extStyleHashes")
    per_page_sri_hashes: dict[str, PageHashes] = Field(
        default_factory=dict, alias="perPageSriHashes"
    )
    per_resource_sri_hashes: PerResourceSriHashes = Field(
        default_factory=PerResourceSriHashes, alias="perResourceSriHashes"
    )


class CspConfig(BaseModel):
    """Base CSP directives applied to every page before digests are merged.

    Unknown keys are rejected so a misplaced directive is reported rather
    than dropped.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    csp_directives: dict[str, str] = Field(default_factory=dict, alias="cspDirectives")

    @classmethod
    def from_policy(cls, policy: str) -> CspConfig:
        """Build a config from a full CSP header string."""
        return cls(csp_directives=directives_from_policy(policy))
