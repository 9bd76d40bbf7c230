"""Move the mouse cursor along randomized geometric patterns."""

__version__ = "0.1.0"
