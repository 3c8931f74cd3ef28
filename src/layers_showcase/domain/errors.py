"""Error taxonomy shared by every layer.

Each kind is raised by exactly one layer and propagates unchanged:

- :class:`ValidationError`: facade, before any service call.
- :class:`UserNotFoundError`: domain service strict methods.
- :class:`StorageError`: persistence gateway.

:class:`RecordMappingError` is deliberately outside the hierarchy: a
stored record that cannot become a User is a broken invariant, not a
condition callers are expected to handle.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

Operation = Literal["fetch", "update", "delete"]


class ShowcaseError(Exception):
    """Base for every recoverable error surfaced to external callers."""

    code: str = "ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict[str, Any]:
        """Structured payload for result envelopes and logs."""
        return {}


@dataclass(frozen=True)
class FieldViolation:
    """One violated constraint on one input field."""

    field: str
    constraint: str
    message: str


class ValidationError(ShowcaseError):
    """Untrusted input failed a schema check at the facade."""

    code = "VALIDATION_FAILED"

    def __init__(self, violations: tuple[FieldViolation, ...] | list[FieldViolation]) -> None:
        self.violations = tuple(violations)
        super().__init__("; ".join(f"{v.field}: {v.message}" for v in self.violations))

    def to_detail(self) -> dict[str, Any]:
        return {"violations": [asdict(v) for v in self.violations]}


class UserNotFoundError(ShowcaseError):
    """A strict service operation referenced a user that does not exist."""

    code = "NOT_FOUND"

    def __init__(self, user_id: str, operation: Operation) -> None:
        self.user_id = user_id
        self.operation = operation
        super().__init__(f"User with id {user_id} not found ({operation})")

    def to_detail(self) -> dict[str, Any]:
        return {"user_id": self.user_id, "operation": self.operation}


class StorageError(ShowcaseError):
    """Opaque failure from the storage engine. Never retried here."""

    code = "STORAGE_ERROR"

    def __init__(self, operation: str, message: str = "Storage operation failed") -> None:
        self.operation = operation
        super().__init__(f"{message} ({operation})")

    def to_detail(self) -> dict[str, Any]:
        return {"operation": self.operation}


class RecordMappingError(RuntimeError):
    """A stored record could not be projected onto a User."""
