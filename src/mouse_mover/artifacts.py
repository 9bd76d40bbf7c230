"""Event log and summary artifacts."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from .models import CycleRecord, RunSummary
from .sysinfo import environment_block
from .utils import dump_json


def timestamp_now() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


class LDJSONLogger:
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: Dict[str, Any]) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record))
            handle.write("\n")


def cycle_event(record: CycleRecord) -> Dict[str, Any]:
    return {
        "event": "cycle",
        "timestamp": timestamp_now(),
        "cycle": record.cycle,
        "pattern": record.pattern,
        "delay_ms": record.delay_ms,
        "points": record.points,
        "elapsed_s": round(record.elapsed_s, 3),
        "memory_mb": round(record.resources.memory_mb, 2),
        "cpu_load": round(record.resources.cpu_load, 2),
    }


def summary_payload(summary: RunSummary) -> Dict[str, Any]:
    return {
        "start_time": summary.start_time.isoformat(),
        "end_time": summary.end_time.isoformat(),
        "elapsed_s": round(summary.elapsed_ms / 1000.0, 3),
        "cycle_count": summary.cycle_count,
        "total_cycles": summary.total_cycles,
        "reason": summary.reason,
        "resources": asdict(summary.resources),
        "seed": summary.seed,
        "environment": environment_block(),
    }


def write_summary(path: Path, payload: Dict[str, Any]) -> None:
    dump_json(payload, path)
