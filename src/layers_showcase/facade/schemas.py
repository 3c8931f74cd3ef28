"""Pydantic schemas for facade input and output.

Inputs are strict (no coercion of non-strings) and ignore unknown keys,
so a caller-supplied ``id`` on create is dropped rather than trusted.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from layers_showcase.domain.models import NAME_MAX_LENGTH

# RFC 9562: version nibble 1-8, variant 10xx; nil and max ids are also accepted.
UUID_PATTERN = (
    r"^(?:[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-8][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$"
)

UserName = Annotated[str, Field(min_length=1, max_length=NAME_MAX_LENGTH)]
UserId = Annotated[str, StringConstraints(pattern=UUID_PATTERN, to_lower=True)]

_INPUT_CONFIG = ConfigDict(extra="ignore", strict=True, frozen=True)

# (field, constraint) -> human message
MESSAGES: dict[tuple[str, str], str] = {
    ("name", "required"): "Name is required",
    ("name", "too_short"): "Name is required",
    ("name", "too_long"): f"Name must be at most {NAME_MAX_LENGTH} characters",
    ("name", "invalid_type"): "Name must be a string",
    ("id", "required"): "User ID is required",
    ("id", "invalid_uuid"): "User ID must be a valid UUID",
    ("id", "invalid_type"): "User ID must be a string",
}


class CreateUserSchema(BaseModel):
    """Shape of a create request."""

    model_config = _INPUT_CONFIG

    name: UserName


class UpdateUserSchema(BaseModel):
    """Shape of an update request. Only ``name`` is mutable."""

    model_config = _INPUT_CONFIG

    name: UserName


class UserIdSchema(BaseModel):
    """A user id as supplied by an external caller."""

    model_config = _INPUT_CONFIG

    id: UserId


class UserOutput(BaseModel):
    """External-safe view of a user.

    Kept distinct from the domain ``User`` so the internal entity can
    evolve without changing the external contract.
    """

    model_config = {"frozen": True}

    id: str
    name: str
