"""Typer CLI for mouse_mover."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .adapters import PyAutoGuiCursor
from .artifacts import LDJSONLogger, summary_payload, write_summary
from .config import apply_overrides, load_settings
from .exceptions import CursorControlError, MouseMoverError
from .paths import config_file
from .reporting import ConsoleReporter
from .runner import CycleDriver
from .utils import ensure_seed

app = typer.Typer(help="Move the mouse cursor along random patterns until stopped.")

console = Console()


def build_cursor() -> PyAutoGuiCursor:
    return PyAutoGuiCursor()


@app.command()
def run(
    cycles: Optional[int] = typer.Option(
        None, "--cycles", min=1, help="Number of pattern cycles before exiting"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", min=0.01, help="Seconds between cycles"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for pattern and speed choices"),
    config: Optional[Path] = typer.Option(
        None, "--config", exists=True, dir_okay=False, resolve_path=True, help="Settings YAML file"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Append one JSON line per cycle to this file"
    ),
    summary_json: Optional[Path] = typer.Option(
        None, "--summary-json", dir_okay=False, help="Write the final summary as JSON"
    ),
) -> None:
    """Start moving the cursor immediately; stop with CTRL + C."""
    try:
        settings = load_settings(config or config_file())
        settings = apply_overrides(
            settings, {"total_cycles": cycles, "interval_s": interval, "seed": seed}
        )
        settings.seed = ensure_seed(settings.seed)
        cursor = build_cursor()
        driver = CycleDriver(
            cursor,
            cursor.screen_size(),
            settings=settings,
            reporter=ConsoleReporter(console),
            event_log=LDJSONLogger(log_file) if log_file else None,
        )
    except MouseMoverError as exc:
        raise typer.Exit(f"error: {exc}") from exc

    try:
        summary = driver.run()
    except CursorControlError as exc:
        console.print(f"[red]error: {exc}[/red]")
        if summary_json and driver.summary is not None:
            write_summary(summary_json, summary_payload(driver.summary))
        raise typer.Exit(code=1) from exc

    if summary_json:
        write_summary(summary_json, summary_payload(summary))


if __name__ == "__main__":
    app()
