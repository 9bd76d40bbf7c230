"""Custom exception hierarchy."""

from __future__ import annotations


class MouseMoverError(Exception):
    """Base exception for the mouse_mover package."""


class ValidationError(MouseMoverError):
    """Raised when configuration validation fails."""


class CursorControlError(MouseMoverError):
    """Raised when the cursor backend refuses a movement command."""
