"""Actions: outer-boundary operations returning ServiceResult.

Each action calls exactly one facade method and folds the outcome into a
:class:`ServiceResult`. Showcase errors become ``ok=False`` results whose
``error.code`` is the raising error's own code (``VALIDATION_FAILED``,
``NOT_FOUND``, ``STORAGE_ERROR``); the specific kind is never replaced by
a generic message. Anything else propagates. Payload keys the input
schemas drop (such as a caller-supplied ``id``) are reported as warnings.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

import structlog

from layers_showcase.domain.errors import ShowcaseError
from layers_showcase.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from layers_showcase.facade.user import UserFacade

log = structlog.get_logger(__name__)

DEFAULT_SEED_NAMES: tuple[str, ...] = (
    "Alice Johnson",
    "Bob Smith",
    "Charlie Davis",
    "Diana Prince",
    "Ethan Hunt",
)


def failure(
    op: str, exc: ShowcaseError, *, meta: dict[str, Any] | None = None, **data: Any
) -> ServiceResult:
    """Build a failed result that preserves the error's code and detail."""
    log.warning(op, code=exc.code, error=exc.message, **exc.to_detail())
    return ServiceResult(
        ok=False,
        op=op,
        data=data,
        error=ServiceError(code=exc.code, message=exc.message, detail=exc.to_detail()),
        meta=meta,
    )


def ignored_fields(data: object) -> list[str]:
    """Warnings for payload keys the input schemas drop instead of applying."""
    if not isinstance(data, Mapping):
        return []
    return [
        "Ignored caller-supplied 'id': ids are assigned on create and never change"
        if key == "id"
        else f"Ignored unknown field {key!r}"
        for key in data
        if key != "name"
    ]


def _run(
    op: str, call: Callable[[], dict[str, Any]], warnings: list[str] | None = None
) -> ServiceResult:
    try:
        data = call()
    except ShowcaseError as exc:
        return failure(op, exc)
    log.debug(op, ok=True)
    return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])


def get_all_users(facade: UserFacade) -> ServiceResult:
    def call() -> dict[str, Any]:
        items = [user.model_dump() for user in facade.get_all_users()]
        return {"count": len(items), "items": items}

    return _run("list_users", call)


def get_user(facade: UserFacade, user_id: str) -> ServiceResult:
    """Fetch one user. A missing user is a successful ``{"user": None}``."""

    def call() -> dict[str, Any]:
        user = facade.get_user_by_id_or_none(user_id)
        return {"user": user.model_dump() if user is not None else None}

    return _run("get_user", call)


def create_user(facade: UserFacade, data: object) -> ServiceResult:
    return _run(
        "create_user",
        lambda: {"user": facade.create_user(data).model_dump()},
        ignored_fields(data),
    )


def update_user(facade: UserFacade, user_id: str, data: object) -> ServiceResult:
    return _run(
        "update_user",
        lambda: {"user": facade.update_user(user_id, data).model_dump()},
        ignored_fields(data),
    )


def delete_user(facade: UserFacade, user_id: str) -> ServiceResult:
    def call() -> dict[str, Any]:
        facade.delete_user(user_id)
        return {"id": user_id}

    return _run("delete_user", call)


def user_exists(facade: UserFacade, user_id: str) -> ServiceResult:
    return _run("user_exists", lambda: {"id": user_id, "exists": facade.user_exists(user_id)})


def seed_users(facade: UserFacade, names: Iterable[str] = DEFAULT_SEED_NAMES) -> ServiceResult:
    """Create one user per name through the facade, stopping at the first failure.

    On failure the users created so far are reported in ``data``;
    ``meta["requested"]`` is the number of names asked for.
    """
    op = "seed_users"
    names = list(names)
    meta = {"requested": len(names)}
    created: list[dict[str, Any]] = []
    for name in names:
        try:
            user = facade.create_user({"name": name})
        except ShowcaseError as exc:
            return failure(op, exc, meta=meta, count=len(created), items=created)
        created.append(user.model_dump())
        log.info("seed.created", user_id=user.id, name=user.name)
    return ServiceResult(ok=True, op=op, data={"count": len(created), "items": created}, meta=meta)
