"""Cycle driver: the periodic tick handler and its scheduling loop."""

from __future__ import annotations

import random
import time
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from .adapters import CursorController
from .artifacts import LDJSONLogger, cycle_event, summary_payload
from .exceptions import CursorControlError
from .models import CycleRecord, MoverSettings, ResourceSnapshot, RunState, RunSummary
from .patterns import get_pattern
from .reporting import ConsoleReporter
from .sysinfo import collect_snapshot

REASON_COMPLETED = "completed"
REASON_INTERRUPTED = "interrupted"
REASON_FAILED = "failed"


class CycleDriver:
    """Runs one randomly chosen pattern per tick until the cycle budget is spent.

    Everything that touches the host (cursor, clocks, sleeping, resource
    sampling, console) is injected, so the driver runs unchanged under test.
    """

    def __init__(
        self,
        cursor: CursorController,
        screen_size: Tuple[int, int],
        settings: MoverSettings | None = None,
        rng: random.Random | None = None,
        reporter: ConsoleReporter | None = None,
        sampler: Callable[[], ResourceSnapshot] = collect_snapshot,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        now: Callable[[], datetime] = datetime.now,
        event_log: LDJSONLogger | None = None,
    ) -> None:
        self._cursor = cursor
        self._settings = settings or MoverSettings()
        self._rng = rng or random.Random(self._settings.seed)
        self._reporter = reporter or ConsoleReporter()
        self._sampler = sampler
        self._clock = clock
        self._sleep = sleep
        self._now = now
        self._event_log = event_log
        self._patterns = [(name, get_pattern(name)) for name in self._settings.patterns]
        self._summary: RunSummary | None = None
        width, height = screen_size
        self.state = RunState(
            start_time=now(),
            start_clock=clock(),
            total_cycles=self._settings.total_cycles,
            screen_width=width,
            screen_height=height,
            margin_px=self._settings.margin_px,
        )
        self.records: List[CycleRecord] = []

    @property
    def summary(self) -> Optional[RunSummary]:
        return self._summary

    def elapsed_ms(self) -> float:
        return (self._clock() - self.state.start_clock) * 1000.0

    def tick(self) -> CycleRecord:
        """Run a single cycle: choose, move, count, report."""
        if self.state.finished:
            raise RuntimeError("cycle budget already exhausted")
        name, pattern = self._rng.choice(self._patterns)
        delay_ms = self._rng.randint(self._settings.min_delay_ms, self._settings.max_delay_ms)
        self._cursor.set_inter_move_delay(delay_ms)
        points = 0
        for x, y in pattern(self.state.width, self.state.height):
            self._cursor.move_to(x, y)
            points += 1

        self.state.cycle_count += 1
        elapsed_ms = self.elapsed_ms()
        resources = self._sampler()
        record = CycleRecord(
            cycle=self.state.cycle_count,
            pattern=name,
            delay_ms=delay_ms,
            points=points,
            elapsed_s=elapsed_ms / 1000.0,
            resources=resources,
        )
        self.records.append(record)
        if self._event_log is not None:
            self._event_log.append(cycle_event(record))
        self._reporter.status(self.state, elapsed_ms, resources)
        return record

    def run(self) -> RunSummary:
        """Tick on a fixed grid until done or interrupted, then summarize once."""
        interval = self._settings.interval_s
        deadline = self.state.start_clock + interval
        try:
            self._reporter.start(self.state)
            while not self.state.finished:
                remaining = deadline - self._clock()
                if remaining > 0:
                    self._sleep(remaining)
                self.tick()
                deadline = max(deadline + interval, self._clock())
        except KeyboardInterrupt:
            return self.finish(REASON_INTERRUPTED)
        except CursorControlError:
            self.finish(REASON_FAILED)
            raise
        return self.finish(REASON_COMPLETED)

    def finish(self, reason: str) -> RunSummary:
        if self._summary is not None:
            return self._summary
        summary = RunSummary(
            start_time=self.state.start_time,
            end_time=self._now(),
            elapsed_ms=self.elapsed_ms(),
            cycle_count=self.state.cycle_count,
            total_cycles=self.state.total_cycles,
            reason=reason,
            resources=self._sampler(),
            seed=self._settings.seed,
        )
        self._summary = summary
        if self._event_log is not None:
            self._event_log.append({"event": "summary", **summary_payload(summary)})
        self._reporter.summary(summary)
        return summary
