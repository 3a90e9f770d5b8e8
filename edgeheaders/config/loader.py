"""Env var config loading with pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


class HeadersSettings(BaseSettings):
    """CLI configuration, overridden by ``EDGEHEADERS_*`` env vars."""

    model_config = SettingsConfigDict(
        env_prefix="EDGEHEADERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "info"
    log_json: bool = False

    # Build inputs and output
    headers_file: str = "dist/_headers"
    sri_hashes_file: str = "sriHashes.json"
    csp_config_file: str = str(_DEFAULTS_PATH)


_settings: HeadersSettings | None = None


def get_settings() -> HeadersSettings:
    """Get or create the singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def load_settings() -> HeadersSettings:
    """Load settings from env vars (env vars override model defaults)."""
    global _settings
    _settings = HeadersSettings()
    return _settings
