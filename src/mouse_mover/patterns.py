"""Cursor movement patterns.

Every pattern is a pure function of the drawing area ``(width, height)`` that
yields integer cursor coordinates. ``height`` is the vertical midline of the
movement band, so most patterns oscillate around it. Calling a pattern again
restarts it from the first point.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Iterator

from .exceptions import ValidationError
from .models import Point

Pattern = Callable[[int, float], Iterator[Point]]

ZIGZAG_STEP = 20
ZIGZAG_AMPLITUDE = 20


def _point(x: float, y: float) -> Point:
    return round(x), round(y)


def sine_wave(width: int, height: float) -> Iterator[Point]:
    """One full sine period across the screen, centred on ``height``."""
    two_pi = math.pi * 2.0
    for x in range(width):
        y = height * math.sin(two_pi * x / width) + height
        yield _point(x, y)


def zigzag(width: int, height: float) -> Iterator[Point]:
    for x in range(0, width, ZIGZAG_STEP):
        if (x // ZIGZAG_STEP) % 2 == 0:
            y = height - ZIGZAG_AMPLITUDE
        else:
            y = height + ZIGZAG_AMPLITUDE
        yield _point(x, y)


def circle(width: int, height: float) -> Iterator[Point]:
    """A full turn in one-degree steps around the centre of the band."""
    radius = height / 2
    center_x = width / 2
    center_y = height
    for angle in range(360):
        radian = math.radians(angle)
        yield _point(center_x + radius * math.cos(radian), center_y + radius * math.sin(radian))


PATTERNS: Dict[str, Pattern] = {
    "sine_wave": sine_wave,
    "zigzag": zigzag,
    "circle": circle,
}


def get_pattern(name: str) -> Pattern:
    try:
        return PATTERNS[name]
    except KeyError:
        raise ValidationError(f"unknown pattern '{name}'") from None
