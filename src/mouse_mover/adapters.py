"""Cursor-control and display adapters."""

from __future__ import annotations

from typing import Any, Protocol, Tuple

from .exceptions import CursorControlError


class CursorController(Protocol):
    def set_inter_move_delay(self, milliseconds: int) -> None:
        ...

    def move_to(self, x: int, y: int) -> None:
        ...


class PyAutoGuiCursor:
    """Cursor and display backed by pyautogui.

    pyautogui sleeps for ``pyautogui.PAUSE`` seconds after every call, which
    is what the inter-move delay controls. The fail-safe (cursor pushed into a
    screen corner) is kept enabled and surfaces as ``CursorControlError``.
    """

    def __init__(self, failsafe: bool = True, gui: Any = None) -> None:
        if gui is None:
            # Importing pyautogui needs a reachable display.
            import pyautogui as gui

        self._gui = gui
        self._gui.FAILSAFE = failsafe

    def screen_size(self) -> Tuple[int, int]:
        size = self._gui.size()
        return int(size.width), int(size.height)

    def set_inter_move_delay(self, milliseconds: int) -> None:
        self._gui.PAUSE = milliseconds / 1000.0

    def move_to(self, x: int, y: int) -> None:
        try:
            self._gui.moveTo(x, y)
        except self._gui.FailSafeException as exc:
            raise CursorControlError(f"fail-safe triggered moving cursor to ({x}, {y})") from exc
