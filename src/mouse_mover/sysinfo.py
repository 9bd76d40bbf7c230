"""Resource sampling and environment information."""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict

import psutil

from .models import ResourceSnapshot

_BYTES_PER_MB = 1024 * 1024


def collect_snapshot(process: psutil.Process | None = None) -> ResourceSnapshot:
    """Sample resident memory of this process and the 1-minute load average."""
    proc = process or psutil.Process()
    memory_mb = proc.memory_info().rss / _BYTES_PER_MB
    cpu_load = psutil.getloadavg()[0]
    return ResourceSnapshot(memory_mb=memory_mb, cpu_load=cpu_load)


def environment_block() -> Dict[str, Any]:
    versions: Dict[str, Any] = {
        "python": sys.version,
        "platform": platform.platform(),
    }
    for distribution in ("typer", "rich", "Jinja2", "PyYAML", "psutil", "PyAutoGUI"):
        try:
            versions[distribution] = version(distribution)
        except PackageNotFoundError:
            continue
    from . import __version__

    versions["mouse_mover"] = __version__
    return versions
