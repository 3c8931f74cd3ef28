"""Schema validation producing a tagged result.

:func:`validate` is the single choke point for untrusted data entering
the domain. It never raises: callers receive either :class:`Valid` or
:class:`Invalid` and decide what to do. The facade raises
:class:`ValidationError` from an ``Invalid`` via :meth:`Invalid.raise_for`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, Literal, NoReturn, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from layers_showcase.domain.errors import FieldViolation, ValidationError
from layers_showcase.facade.schemas import MESSAGES

# pydantic error type -> violated constraint
_CONSTRAINTS: dict[str, str] = {
    "missing": "required",
    "string_too_short": "too_short",
    "string_too_long": "too_long",
    "string_pattern_mismatch": "invalid_uuid",
    "string_type": "invalid_type",
}

T = TypeVar("T")
S = TypeVar("S", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Validation passed; ``value`` is the parsed schema instance."""

    value: T
    ok: Literal[True] = True


@dataclass(frozen=True)
class Invalid:
    """Validation failed with one or more field violations."""

    violations: tuple[FieldViolation, ...]
    ok: Literal[False] = False

    def raise_for(self) -> NoReturn:
        raise ValidationError(self.violations)


def _to_violation(error: Any) -> FieldViolation:
    loc = error.get("loc") or ()
    field = ".".join(str(part) for part in loc) or "input"
    constraint = _CONSTRAINTS.get(error["type"], "invalid_input")
    message = MESSAGES.get((field, constraint), str(error.get("msg", "Invalid value")))
    return FieldViolation(field=field, constraint=constraint, message=message)


def validate(schema: type[S], data: object) -> Valid[S] | Invalid:
    """Check *data* against *schema* without raising."""
    if not isinstance(data, Mapping):
        return Invalid(
            (FieldViolation(field="input", constraint="invalid_input", message="Expected an object"),)
        )
    try:
        return Valid(schema.model_validate(dict(data)))
    except PydanticValidationError as exc:
        return Invalid(tuple(_to_violation(error) for error in exc.errors()))


def raise_all(*results: Valid[Any] | Invalid) -> NoReturn:
    """Raise one ValidationError carrying the violations of every failed result."""
    violations = tuple(v for r in results if isinstance(r, Invalid) for v in r.violations)
    raise ValidationError(violations)
