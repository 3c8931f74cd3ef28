"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from layers_showcase.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from layers_showcase.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: ids only where there are any."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items)
    user = result.data.get("user")
    if isinstance(user, dict):
        return str(user["id"])
    if "exists" in result.data:
        return "true" if result.data["exists"] else "false"
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="layers.ok"), Text(f"  {result.op}", style="layers.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}:", style="layers.key")
    if key == "id":
        v = Text(str(value), style="layers.id")
    elif key == "name":
        v = Text(str(value), style="layers.name")
    else:
        v = Text(str(value))
    console.print(k, v)


def _user_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="layers.id", no_wrap=True)
    table.add_column("Name", style="layers.name")
    for item in items:
        table.add_row(str(item.get("id", "")), str(item.get("name", "")))
    return table


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="layers.error"),
        Text(f"  {result.op}{code}", style="layers.op"),
        Text("-"),
        msg,
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_user(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    user = result.data.get("user")
    if user is None:
        console.print(Text("  no such user", style="dim"))
        return
    _field(console, "id", user["id"])
    _field(console, "name", user["name"])


def _render_meta(result: ServiceResult, console: Console) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _render_user_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if items:
        console.print(_user_table(items))
    console.print(f"\n{result.data.get('count', len(items))} users")
    if verbose:
        _render_meta(result, console)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(result, console)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_users": _render_user_list,
    "seed_users": _render_user_list,
    "get_user": _render_user,
    "create_user": _render_user,
    "update_user": _render_user,
}
