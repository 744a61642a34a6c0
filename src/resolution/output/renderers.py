"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes plain lines to a Rich Console backed by StringIO.
Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

User text is always wrapped in :class:`rich.text.Text` so that brackets in
a resolution are never read as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from resolution.domain.entry import DEADLINE_PLACEHOLDER
from resolution.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from resolution.services.result import ServiceResult

EMPTY_LIST_MESSAGE = (
    "No New Year's resolutions have been added yet. "
    "Use command `resolution create` to add a new one."
)


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to human-readable text."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        return result.error.message if result.error else "Unknown error"
    if result.op == "list":
        return "\n".join(str(item["text"]) for item in result.data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, *parts: str | Text) -> None:
    """Print one unwrapped line built from plain strings and styled Text."""
    console.print(Text.assemble(*parts), soft_wrap=True)


def _show(value: Any) -> str:
    return DEADLINE_PLACEHOLDER if value is None else str(value)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    telemetry = result.meta.get("telemetry")
    if telemetry:
        _render_span(console, telemetry, indent=2)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    _line(console, Text(f"{prefix}{span['duration_ms']:>8.2f}ms  {span['name']}", style="res.meta"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    _line(console, Text(err.message if err else "Unknown error", style="res.error"))
    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _line(console, Text(f"  {key}: {value}", style="res.meta"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_create(result: ServiceResult, console: Console) -> None:
    entry = result.data["entry"]
    header = Text("The following New Year's resolution has been created:", style="res.header")
    _line(console, header)
    _line(console, " - ", Text("Text: ", style="res.label"), entry["text"])
    _line(console, " - ", Text("Priority: ", style="res.label"), str(entry["priority"]))
    if entry.get("deadline") is not None:
        _line(console, " - ", Text("Deadline: ", style="res.label"), entry["deadline"])


def _render_edit(result: ServiceResult, console: Console) -> None:
    before = result.data["before"]
    after = result.data["after"]
    header = "The year's resolution has been updated with following properties:"
    _line(console, Text(header, style="res.header"))
    for key in ("text", "priority", "deadline"):
        label = key.capitalize()
        old, new = _show(before.get(key)), _show(after.get(key))
        if key in result.data.get("fields_changed", []):
            _line(
                console,
                f" - Old {label}: ",
                Text(old, style="res.old"),
                f" -> New {label}: ",
                Text(new, style="res.new"),
            )
        else:
            _line(console, f" - Unchanged {label}: ", old)


def _render_remove(result: ServiceResult, console: Console) -> None:
    removed = result.data.get("removed", [])
    if not removed:
        _line(console, "No properties have been removed from the New Year's resolution.")
        return
    _line(
        console,
        Text(
            "The following properties have been removed from the New Year's resolution:",
            style="res.header",
        ),
    )
    if "priority" in removed:
        _line(console, " - Set priority to default value (1)")
    if "deadline" in removed:
        _line(console, " - Removed deadline")


def _render_delete(result: ServiceResult, console: Console) -> None:
    position = result.data["position"]
    _line(console, f"The New Year's resolution on position '{position}' has been deleted.")


def _render_list(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    if not items:
        _line(console, EMPTY_LIST_MESSAGE)
        return

    numbered = result.data.get("numbered", False)
    _line(console, Text("New Year's resolutions:", style="res.header"))
    for item in items:
        marker = Text(f" [{item['position']}]", style="res.position") if numbered else " -"
        parts: list[str | Text] = [marker, " Text: ", item["text"]]
        parts.append(f", Priority {item['priority']}")
        if item.get("deadline") is not None:
            parts.append(f", Deadline: {item['deadline']}")
        _line(console, *parts)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _line(console, f"OK: {result.op}")
    for key, value in result.data.items():
        _line(console, Text(f"  {key}: ", style="res.label"), str(value))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "create": _render_create,
    "edit": _render_edit,
    "remove": _render_remove,
    "delete": _render_delete,
    "list": _render_list,
}
