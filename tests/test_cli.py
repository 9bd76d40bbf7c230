import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from mouse_mover import cli
from mouse_mover.exceptions import CursorControlError
from mouse_mover.reporting import ConsoleReporter

runner = CliRunner()


class FakeScreenCursor:
    def __init__(self) -> None:
        self.moves = 0

    def screen_size(self) -> tuple[int, int]:
        return 800, 600

    def set_inter_move_delay(self, milliseconds: int) -> None:
        pass

    def move_to(self, x: int, y: int) -> None:
        self.moves += 1


@pytest.fixture()
def fake_cursor(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeScreenCursor:
    cursor = FakeScreenCursor()
    monkeypatch.setattr(cli, "build_cursor", lambda: cursor)
    monkeypatch.setattr(cli, "config_file", lambda: tmp_path / "mouse_mover.yaml")
    return cursor


def test_run_completes_and_writes_summary(tmp_path: Path, fake_cursor: FakeScreenCursor) -> None:
    summary_path = tmp_path / "out" / "summary.json"
    log_path = tmp_path / "out" / "cycles.ldjson"
    result = runner.invoke(
        cli.app,
        [
            "--cycles",
            "2",
            "--interval",
            "0.01",
            "--seed",
            "5",
            "--summary-json",
            str(summary_path),
            "--log-file",
            str(log_path),
        ],
    )
    assert result.exit_code == 0, result.output
    assert result.output.count("Summary:") == 1
    assert "Mouse Cycles: 2" in result.output
    assert fake_cursor.moves > 0
    summary = json.loads(summary_path.read_text(encoding="utf-8"))
    assert summary["cycle_count"] == 2
    assert summary["reason"] == "completed"
    assert summary["seed"] == 5
    assert "mouse_mover" in summary["environment"]
    assert len(log_path.read_text(encoding="utf-8").splitlines()) == 3


def test_config_file_values_are_used(tmp_path: Path, fake_cursor: FakeScreenCursor) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("total_cycles: 1\ninterval_s: 0.01\npatterns: [zigzag]\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["--config", str(config_path)])
    assert result.exit_code == 0, result.output
    assert "Mouse Cycles: 1" in result.output
    assert fake_cursor.moves == 40


def test_invalid_config_exits_before_moving(tmp_path: Path, fake_cursor: FakeScreenCursor) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("delay_ms: {min: 9, max: 2}\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["--config", str(config_path)])
    assert result.exit_code != 0
    assert fake_cursor.moves == 0


class InterruptingCursor(FakeScreenCursor):
    """Behaves like CTRL + C arriving partway through the second cycle."""

    def move_to(self, x: int, y: int) -> None:
        if self.moves == 50:
            raise KeyboardInterrupt
        super().move_to(x, y)


class FailSafeCursor(FakeScreenCursor):
    def move_to(self, x: int, y: int) -> None:
        if self.moves == 5:
            raise CursorControlError("fail-safe triggered moving cursor to (0, 0)")
        super().move_to(x, y)


def _invoke_with(cursor: FakeScreenCursor, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, *args: str):
    monkeypatch.setattr(cli, "build_cursor", lambda: cursor)
    monkeypatch.setattr(cli, "config_file", lambda: tmp_path / "mouse_mover.yaml")
    summary_path = tmp_path / "summary.json"
    result = runner.invoke(
        cli.app,
        ["--interval", "0.01", "--seed", "3", "--summary-json", str(summary_path), *args],
    )
    summary = (
        json.loads(summary_path.read_text(encoding="utf-8")) if summary_path.exists() else None
    )
    return result, summary


def test_interrupt_exits_zero_with_one_summary(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # zigzag only: 40 points per cycle on an 800 px wide screen
    config_path = tmp_path / "zigzag.yaml"
    config_path.write_text("patterns: [zigzag]\n", encoding="utf-8")
    result, summary = _invoke_with(
        InterruptingCursor(), tmp_path, monkeypatch, "--config", str(config_path)
    )
    assert result.exit_code == 0, result.output
    assert result.output.count("Summary:") == 1
    assert "Mouse Cycles: 1" in result.output
    assert summary is not None
    assert summary["reason"] == "interrupted"
    assert summary["cycle_count"] == 1


def test_interrupt_during_banner_exits_zero(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted_start(self, state) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(ConsoleReporter, "start", interrupted_start)
    cursor = FakeScreenCursor()
    result, summary = _invoke_with(cursor, tmp_path, monkeypatch)
    assert result.exit_code == 0, result.output
    assert result.output.count("Summary:") == 1
    assert cursor.moves == 0
    assert summary is not None
    assert summary["cycle_count"] == 0


def test_failsafe_exits_one_and_records_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    result, summary = _invoke_with(FailSafeCursor(), tmp_path, monkeypatch, "--cycles", "3")
    assert result.exit_code == 1
    assert result.output.count("Summary:") == 1
    assert "error: fail-safe triggered" in result.output
    assert summary is not None
    assert summary["reason"] == "failed"
    assert summary["cycle_count"] == 0
