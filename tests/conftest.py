"""Shared test fixtures."""

from __future__ import annotations

import logging
import os

import pytest
import structlog


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    """Provide default settings for all tests."""
    for key in list(os.environ):
        if key.startswith("EDGEHEADERS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("EDGEHEADERS_LOG_JSON", "false")
    monkeypatch.setenv("EDGEHEADERS_LOG_LEVEL", "debug")

    # Reset cached settings
    import edgeheaders.config.loader as loader
    loader._settings = None
    yield
    loader._settings = None

    # Undo any logging setup done by the CLI
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)


@pytest.fixture
def scenario_a_text():
    """Two path blocks indented with two spaces, separated by a blank line."""
    return (
        "/a\n"
        "  x-frame: DENY\n"
        "  x-content-type: nosniff\n"
        "\n"
        "/b\n"
        "  x-frame: SAMEORIGIN\n"
    )


@pytest.fixture
def sri_manifest():
    return {
        "inlineScriptHashes": ["sha256-INLINE"],
        "inlineStyleHashes": [],
        "extScriptHashes": ["sha256-AAA"],
        "extStyleHashes": ["sha256-CSS"],
        "perPageSriHashes": {
            "index.html": {"scripts": ["sha256-AAA"], "styles": []},
            "about/index.html": {"scripts": [], "styles": ["sha256-CSS"]},
        },
        "perResourceSriHashes": {
            "scripts": {"/app.js": "sha256-AAA"},
            "styles": {"/site.css": "sha256-CSS"},
        },
    }
