"""Human-readable rendering of a ServiceResult.

Rich draws into an in-memory console; when no terminal is attached (pipes,
CliRunner) the text comes back without ANSI codes.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from socialgraph.services.result import ServiceResult

THEME = Theme(
    {
        "ok": "bold green",
        "err": "bold red",
        "op": "bold cyan",
        "label": "dim",
        "member": "bold blue",
        "hops": "magenta",
    }
)

_MEMBER_KEYS = frozenset({"source", "target", "member"})


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    out = Console(file=StringIO(), theme=THEME, highlight=False, width=120)
    if not result.ok:
        _error(out, result, verbose)
    else:
        _RENDERERS.get(result.op, _pairs)(out, result)
        if verbose and result.meta:
            out.print("  [label]meta:[/]")
            for key, value in result.meta.items():
                out.print(f"    {key}: {value}", markup=False)
    assert isinstance(out.file, StringIO)
    return out.file.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Just the answer: the hop count, one member per line, or the error."""
    if not result.ok:
        message = result.error.message if result.error else "unknown error"
        return f"ERROR: {result.op}: {message}"
    if result.op == "distance":
        return str(result.data["length"])
    if "items" in result.data:
        return "\n".join(str(m) for m in result.data["items"])
    return " ".join(f"{k}={v}" for k, v in result.data.items())


def _headline(out: Console, result: ServiceResult) -> None:
    out.print(f"[ok]OK[/] [op]{result.op}[/]")


def _value(out: Console, key: str, value: Any) -> None:
    style = "member" if key in _MEMBER_KEYS else "hops" if key == "length" else ""
    out.print(Text.assemble((f"  {key}: ", "label"), (str(value), style)))


def _error(out: Console, result: ServiceResult, verbose: bool) -> None:
    err = result.error
    message = err.message if err else "unknown error"
    out.print(Text.assemble(("ERROR", "err"), " ", (result.op, "op"), f": {message}"))
    if verbose and err is not None:
        for key, value in err.detail.items():
            out.print(f"  {key}: {value}", markup=False)


def _distance(out: Console, result: ServiceResult) -> None:
    _headline(out, result)
    for key in ("source", "target", "length"):
        _value(out, key, result.data[key])
    if not result.data["reachable"]:
        out.print("  [label]not connected by any chain of friendships[/]")


def _listing(out: Console, result: ServiceResult) -> None:
    _headline(out, result)
    if "member" in result.data:
        _value(out, "member", result.data["member"])
    table = Table("Member", pad_edge=False)
    for item in result.data["items"]:
        table.add_row(Text(str(item)), style="member")
    out.print(table)
    count = result.data["count"]
    out.print(f"{count} member" if count == 1 else f"{count} members")


def _pairs(out: Console, result: ServiceResult) -> None:
    _headline(out, result)
    for key, value in result.data.items():
        _value(out, key, value)


_RENDERERS: dict[str, Callable[[Console, ServiceResult], None]] = {
    "distance": _distance,
    "members": _listing,
    "friends": _listing,
}
