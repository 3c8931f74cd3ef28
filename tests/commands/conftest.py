"""Fixtures shared by CLI command tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Drop handlers the CLI binds to CliRunner's streams."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("layers_showcase")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.reset_defaults()
