"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from itemctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from itemctl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render bare values for ``--quiet`` mode, suitable for shell pipes.

    Items print one identity per line; scalar outputs print on their own.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "items" in data:
        return "\n".join(str(item.get("identity", "")) for item in data["items"])
    for key in ("count", "out_string", "current_directory"):
        if key in data:
            return str(data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="item.ok"), Text(f"  {result.op}", style="item.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="item.key"), Text(str(value)), sep="")


def _format_metadata(metadata: dict[str, str]) -> str:
    return ", ".join(f"{k}={v}" for k, v in sorted(metadata.items()))


def _item_table(items: list[dict[str, Any]]) -> Table:
    """Build a table of items; the metadata column appears only when used."""
    with_metadata = any(item.get("metadata") for item in items)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Identity", style="item.identity")
    if with_metadata:
        table.add_column("Metadata", style="item.metadata")

    for position, item in enumerate(items):
        row = [Text(str(position)), Text(str(item.get("identity", "")))]
        if with_metadata:
            row.append(Text(_format_metadata(item.get("metadata") or {})))
        table.add_row(*row)
    return table


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_telemetry_tree(console, value)
        else:
            console.print(f"    {key}: {value}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="item.error"),
        Text(f"  {result.op}", style="item.op"),
        Text(" — "),
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_items(result: ServiceResult, console: Console) -> None:
    """Status line, item table, then the count."""
    _status_line(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_item_table(items))
    count = result.data.get("count", len(items))
    noun = "item" if count == 1 else "items"
    console.print(Text(f"{count} {noun}", style="item.count"))


def _render_count(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "count", result.data.get("count", 0))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "sort": _render_items,
    "get_item": _render_items,
    "get_last_item": _render_items,
    "get_common_items": _render_items,
    "get_distinct_items": _render_items,
    "remove_duplicate_files": _render_items,
    "string_to_item_collection": _render_items,
    "get_item_count": _render_count,
    "escape": _render_generic,
    "get_current_directory": _render_generic,
}
