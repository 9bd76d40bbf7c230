"""Data models for mouse_mover."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple

Point = Tuple[int, int]

DEFAULT_PATTERNS: Tuple[str, ...] = ("sine_wave", "zigzag", "circle")


@dataclass(slots=True)
class MoverSettings:
    interval_s: float = 1.0
    total_cycles: int = 100
    min_delay_ms: int = 1
    max_delay_ms: int = 5
    margin_px: int = 10
    patterns: List[str] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    seed: int | None = None


@dataclass(slots=True)
class ResourceSnapshot:
    memory_mb: float
    cpu_load: float


@dataclass(slots=True)
class RunState:
    """Counters for one run, owned by the cycle driver."""

    start_time: datetime
    start_clock: float
    total_cycles: int
    screen_width: int
    screen_height: int
    margin_px: int = 10
    cycle_count: int = 0

    @property
    def width(self) -> int:
        return self.screen_width

    @property
    def height(self) -> float:
        # Not clamped: very small screens give a non-positive height.
        return self.screen_height / 2 - self.margin_px

    @property
    def finished(self) -> bool:
        return self.cycle_count >= self.total_cycles


@dataclass(slots=True)
class CycleRecord:
    cycle: int
    pattern: str
    delay_ms: int
    points: int
    elapsed_s: float
    resources: ResourceSnapshot


@dataclass(slots=True)
class RunSummary:
    start_time: datetime
    end_time: datetime
    elapsed_ms: float
    cycle_count: int
    total_cycles: int
    reason: str
    resources: ResourceSnapshot
    seed: int | None = None
