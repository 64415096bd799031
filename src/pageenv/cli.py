"""Typer-based CLI for pageenv."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.json import JSON
from rich.table import Table

from .classification import OPERATING_SYSTEMS
from .environment import Breakpoint, EnvironmentSession
from .host import StaticHost
from .state import build_state
from .utils import to_json

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def classify(
    user_agent: str = typer.Argument(..., help="User-agent string to classify"),
    width: int = typer.Option(1024, "--width", min=1, help="Viewport width in CSS pixels"),
    height: int = typer.Option(768, "--height", min=1, help="Viewport height in CSS pixels"),
    dpr: float = typer.Option(1.0, "--dpr", help="Device pixel ratio"),
    touch_points: int = typer.Option(0, "--touch-points", min=0, help="Reported maximum touch points"),
    href: str = typer.Option("", "--href", help="Page URL"),
    hostname: str = typer.Option("", "--hostname", help="Page host name"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config TOML"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of tables"),
) -> None:
    """Classify a user agent against a simulated viewport."""

    if dpr <= 0:
        raise typer.BadParameter(f"Device pixel ratio must be positive: {dpr}")
    if config_path is not None and not config_path.exists():
        raise typer.BadParameter(f"Config path does not exist: {config_path}")

    host = StaticHost(
        user_agent=user_agent,
        device_pixel_ratio=dpr,
        max_touch_points=touch_points,
        href=href,
        search=href.partition("?")[2],
        hostname=hostname,
    )
    host.resize(width, height)
    state = build_state(host, config_path)
    session = state.session

    if json_output:
        payload = {
            "os": session.identify_os(),
            "environment": session.environment_name(),
            "viewport": session.get_viewport(),
            "state": session.get_state().as_mapping(),
            "breakpoints": session.get_breakpoints(),
        }
        console.print(JSON.from_data(json.loads(to_json(payload))))
        return

    _render_session(session)


@app.command()
def breakpoints(
    width: int = typer.Option(..., "--width", min=1, help="Viewport width in CSS pixels"),
    height: int = typer.Option(768, "--height", min=1, help="Viewport height in CSS pixels"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config TOML"),
) -> None:
    """Show which breakpoints are active at a viewport width."""

    host = StaticHost()
    host.resize(width, height)
    state = build_state(host, config_path)
    _render_breakpoints(state.session.get_breakpoints())


@app.command()
def rules(
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """List the operating-system rules in evaluation order."""

    if json_output:
        console.print(JSON.from_data(json.loads(to_json(list(OPERATING_SYSTEMS)))))
        return

    table = Table(title="Operating system rules")
    table.add_column("#", justify="right")
    table.add_column("Label")
    table.add_column("Pattern")
    for index, rule in enumerate(OPERATING_SYSTEMS, start=1):
        table.add_row(str(index), rule.label, rule.pattern.pattern)
    console.print(table)


def _flag(value: bool) -> str:
    return "[green]yes" if value else "[dim]no"


def _render_session(session: EnvironmentSession) -> None:
    identity = session.identify_os()
    viewport = session.get_viewport()
    console.rule(f"Environment: {session.environment_name()}")

    summary = Table(show_header=False)
    summary.add_row("User agent", session.user_agent or "-")
    summary.add_row("OS", identity.name)
    summary.add_row("Version", identity.version or "-")
    summary.add_row("Viewport", f"{viewport.width}x{viewport.height} ({viewport.aspect_ratio:.2f})")
    summary.add_row("Pixel ratio", f"{session.pixel_ratio():g}")
    console.print(summary)

    state_table = Table(title="State")
    state_table.add_column("Predicate")
    state_table.add_column("Value")
    for name, value in session.get_state().as_mapping().items():
        state_table.add_row(name, _flag(value))
    console.print(state_table)

    _render_breakpoints(session.get_breakpoints())


def _render_breakpoints(entries: list[Breakpoint]) -> None:
    table = Table(title="Breakpoints")
    table.add_column("Name")
    table.add_column("Width", justify="right")
    table.add_column("Active")
    for entry in entries:
        table.add_row(entry.name, str(entry.width), _flag(entry.active))
    console.print(table)


def run() -> None:
    app()
