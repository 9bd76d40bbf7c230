"""Console rendering of live status and the final summary."""

from __future__ import annotations

from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, TemplateNotFound
from rich.console import Console
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from .models import ResourceSnapshot, RunState, RunSummary
from .paths import templates_dir
from .timefmt import format_12_hour, format_elapsed

BANNER = "Mouse Mover is running. Press CTRL + C to exit."


def _jinja_environment() -> Environment:
    template_path = templates_dir()
    loader = FileSystemLoader(str(template_path)) if template_path.exists() else None
    return Environment(
        loader=loader,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _render_template(env: Environment, template_name: str, fallback: str, context: Dict[str, Any]) -> str:
    if env.loader is not None:
        try:
            return env.get_template(template_name).render(**context)
        except TemplateNotFound:
            pass
    return env.from_string(fallback).render(**context)


def status_context(state: RunState, elapsed_ms: float, resources: ResourceSnapshot) -> Dict[str, Any]:
    return {
        "banner": BANNER,
        "start_time": format_12_hour(state.start_time),
        "elapsed": format_elapsed(elapsed_ms),
        "cycles": state.cycle_count,
        "total_cycles": state.total_cycles,
        "memory_mb": f"{resources.memory_mb:.2f}",
        "cpu_load": f"{resources.cpu_load:.2f}",
    }


def summary_context(summary: RunSummary) -> Dict[str, Any]:
    return {
        "start_time": format_12_hour(summary.start_time),
        "end_time": format_12_hour(summary.end_time),
        "elapsed": format_elapsed(summary.elapsed_ms),
        "cycles": summary.cycle_count,
        "memory_mb": f"{summary.resources.memory_mb:.2f}",
        "cpu_load": f"{summary.resources.cpu_load:.2f}",
        "reason": summary.reason,
    }


def render_status(context: Dict[str, Any], env: Environment | None = None) -> str:
    return _render_template(
        env or _jinja_environment(), "status.txt.j2", _DEFAULT_STATUS_TEMPLATE, context
    )


def render_summary(context: Dict[str, Any], env: Environment | None = None) -> str:
    return _render_template(
        env or _jinja_environment(), "summary.txt.j2", _DEFAULT_SUMMARY_TEMPLATE, context
    )


def progress_row(completed: int, total: int) -> Table:
    percentage = int(completed * 100 / total) if total else 100
    grid = Table.grid(padding=(0, 1))
    grid.add_column()
    grid.add_column(width=42)
    grid.add_column()
    grid.add_row(
        Text("Mouse Movement Progress |"),
        ProgressBar(total=total, completed=completed, width=40, complete_style="cyan"),
        Text(f"| {percentage}% | {completed}/{total} Cycles"),
    )
    return grid


class ConsoleReporter:
    """Writes the status block and summary to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._env = _jinja_environment()

    def start(self, state: RunState) -> None:
        self.console.clear()
        self.console.print(BANNER, markup=False, highlight=False)
        self.console.print(
            f"Program started at: {format_12_hour(state.start_time)}", markup=False, highlight=False
        )
        self.console.print(progress_row(state.cycle_count, state.total_cycles))

    def status(self, state: RunState, elapsed_ms: float, resources: ResourceSnapshot) -> None:
        text = render_status(status_context(state, elapsed_ms, resources), self._env)
        self.console.clear()
        self.console.print(text, markup=False, highlight=False)
        self.console.print(progress_row(state.cycle_count, state.total_cycles))

    def summary(self, summary: RunSummary) -> None:
        text = render_summary(summary_context(summary), self._env)
        self.console.print()
        self.console.print(text, markup=False, highlight=False)


_DEFAULT_STATUS_TEMPLATE = """{{ banner }}
Program started at: {{ start_time }}
Elapsed Time: {{ elapsed }}
Mouse Cycles: {{ cycles }}
Memory Usage: {{ memory_mb }} MB
CPU Usage: {{ cpu_load }}%"""

_DEFAULT_SUMMARY_TEMPLATE = """Summary:
Start Time: {{ start_time }}
End Time: {{ end_time }}
Elapsed Time: {{ elapsed }}
Mouse Cycles: {{ cycles }}
Memory Usage: {{ memory_mb }} MB
CPU Usage: {{ cpu_load }}%"""
