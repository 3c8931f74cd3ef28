"""ServiceResult and ServiceError: the envelope returned to outer callers.

Actions translate every facade call into a ServiceResult so that the CLI
and any future adapter branch on ``ok`` and ``error.code`` instead of on
exception types. The error code is always the raising error's own kind.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for outer-boundary operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_user"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
