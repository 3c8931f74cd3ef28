"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, layers.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    """[database] section.

    An empty ``url`` means the default file database under the resolved
    root directory (see :attr:`ShowcaseSettings.database_url`).
    """

    model_config = {"frozen": True}

    url: str = ""


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    json_output: bool = False
