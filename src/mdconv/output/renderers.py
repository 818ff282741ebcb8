"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO, so the
formatter layer still gets a plain ``str`` back.  Rich only adds colour
codes when it detects a terminal.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from mdconv.services.result import ServiceResult

THEME = Theme(
    {
        "mdconv.ok": "bold green",
        "mdconv.error": "bold red",
        "mdconv.op": "bold cyan",
        "mdconv.key": "dim",
        "mdconv.path": "dim",
        "mdconv.title": "bold",
        "mdconv.tag": "magenta",
    }
)


def _new_console(buffer: StringIO) -> Console:
    # Fixed width keeps paths in result lines from wrapping.
    return Console(file=buffer, theme=THEME, highlight=False, width=120)


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    buffer = StringIO()
    console = _new_console(buffer)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)

    return buffer.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    line = Text.assemble(("OK", "mdconv.ok"), (f"  {result.op}", "mdconv.op"))
    console.print(line)


def _field(console: Console, key: str, value: Any, *, indent: int = 2) -> None:
    """Print a single indented key-value field."""
    k = (f"{' ' * indent}{key}: ", "mdconv.key")
    if key in ("input", "output") or key.endswith("_output"):
        v = (str(value), "mdconv.path")
    elif key == "title":
        v = (str(value), "mdconv.title")
    elif isinstance(value, list):
        v = (", ".join(str(item) for item in value), "mdconv.tag")
    else:
        v = (str(value), "")
    console.print(Text.assemble(k, v), soft_wrap=True)


def _render_front_matter(console: Console, front_matter: dict[str, Any]) -> None:
    console.print(Text("  front_matter:", style="mdconv.key"))
    for key, value in front_matter.items():
        _field(console, key, value, indent=4)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"), soft_wrap=True)


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {name}")

    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line.append(f"  ({extras})")

    console.print(line, soft_wrap=True)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text.assemble(("ERROR", "mdconv.error"), (f"  {result.op}", "mdconv.op"), ": ", msg)
    console.print(line, soft_wrap=True)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"), soft_wrap=True)


# ── Operation renderers ───────────────────────────────────────────────


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("input", "output", "front_matter_output"):
        if key in result.data:
            _field(console, key, result.data[key])
    _render_front_matter(console, result.data.get("front_matter", {}))


def _render_extract(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "input", result.data.get("input", ""))
    if not result.data.get("has_front_matter"):
        console.print(Text("  (no front matter block; defaults used)", style="dim"))
    _render_front_matter(console, result.data.get("front_matter", {}))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "convert": _render_convert,
    "extract_front_matter": _render_extract,
}
