"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from objfacade.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from objfacade.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


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
    """Minimal output for ``--quiet``: the value for reads, a status otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "get":
        return str(result.data.get("value"))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ofc.ok"), Text(f"  {result.op}", style="ofc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="ofc.key")
    v = Text(str(value), style="ofc.name" if key == "name" else "")
    console.print(k, v, sep="")


def _flag(value: bool) -> Text:
    return Text("yes", style="ofc.flag.on") if value else Text("no", style="ofc.flag.off")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="ofc.warning"), Text(warning), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "target", data.get("target", ""))
    _field(console, "type", data.get("type", ""))

    fields = Table(title="Fields", title_justify="left", show_lines=False)
    for column in ("name", "type", "public", "static", "nullable", "readonly"):
        fields.add_column(column)
    for row in data.get("fields", []):
        fields.add_row(
            Text(row["name"], style="ofc.name"),
            Text(row["type"], style="ofc.type"),
            _flag(row["public"]),
            _flag(row["static"]),
            _flag(row["nullable"]),
            _flag(row["readonly"]),
        )

    methods = Table(title="Methods", title_justify="left", show_lines=False)
    for column in ("name", "parameters", "returns", "required", "public", "static"):
        methods.add_column(column)
    for row in data.get("methods", []):
        methods.add_row(
            Text(row["name"], style="ofc.name"),
            row["parameters"],
            Text(row["returns"], style="ofc.type"),
            str(row["required"]),
            _flag(row["public"]),
            _flag(row["static"]),
        )

    console.print(fields)
    console.print(methods)


def _render_access(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("name", "via", "value"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    message = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="ofc.error"),
        Text(f"  {result.op}", style="ofc.op"),
        Text(f" — {message}"),
        sep="",
    )
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)
    _render_warnings(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "describe": _render_describe,
    "get": _render_access,
    "set": _render_access,
}
