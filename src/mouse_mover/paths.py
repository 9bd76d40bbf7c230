"""Shared project path helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

PROJECT_ROOT: Final[Path] = (
    Path(os.environ["MOUSE_MOVER_HOME"]).expanduser().resolve()
    if "MOUSE_MOVER_HOME" in os.environ
    else Path.cwd()
)


def config_file() -> Path:
    return PROJECT_ROOT / "mouse_mover.yaml"


def templates_dir() -> Path:
    return PROJECT_ROOT / "templates"
