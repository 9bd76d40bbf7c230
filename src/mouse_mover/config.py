"""Configuration loader for mover settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

from .exceptions import ValidationError
from .models import MoverSettings
from .patterns import PATTERNS
from .utils import load_yaml

_KNOWN_KEYS = frozenset({"interval_s", "total_cycles", "delay_ms", "margin_px", "patterns", "seed"})


def _as_int(value: Any, name: str, context: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{context}: '{name}' must be an integer, got {value!r}")
    return value


def _as_positive_float(value: Any, name: str, context: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{context}: '{name}' expects numeric value")
    try:
        numeric = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{context}: '{name}' expects numeric value") from exc
    if numeric <= 0:
        raise ValidationError(f"{context}: '{name}' must be greater than zero")
    return numeric


def _parse_patterns(value: Any, context: str) -> List[str]:
    if not isinstance(value, list) or not value:
        raise ValidationError(f"{context}: 'patterns' must be a non-empty list")
    names: List[str] = []
    for entry in value:
        name = str(entry)
        if name not in PATTERNS:
            known = ", ".join(PATTERNS)
            raise ValidationError(f"{context}: unknown pattern '{name}' (known: {known})")
        if name in names:
            raise ValidationError(f"{context}: pattern '{name}' listed more than once")
        names.append(name)
    return names


def parse_settings(payload: Mapping[str, Any], context: str) -> MoverSettings:
    unknown = sorted(set(payload) - _KNOWN_KEYS)
    if unknown:
        raise ValidationError(f"{context}: unknown key(s) {', '.join(unknown)}")

    settings = MoverSettings()
    if "interval_s" in payload:
        settings.interval_s = _as_positive_float(payload["interval_s"], "interval_s", context)
    if "total_cycles" in payload:
        settings.total_cycles = _as_int(payload["total_cycles"], "total_cycles", context)
    if "margin_px" in payload:
        settings.margin_px = _as_int(payload["margin_px"], "margin_px", context)
    if "patterns" in payload:
        settings.patterns = _parse_patterns(payload["patterns"], context)
    if payload.get("seed") is not None:
        settings.seed = _as_int(payload["seed"], "seed", context)

    delay = payload.get("delay_ms")
    if delay is not None:
        if not isinstance(delay, dict):
            raise ValidationError(f"{context}: 'delay_ms' must be a mapping with min/max")
        if "min" in delay:
            settings.min_delay_ms = _as_int(delay["min"], "delay_ms.min", context)
        if "max" in delay:
            settings.max_delay_ms = _as_int(delay["max"], "delay_ms.max", context)

    validate_settings(settings, context)
    return settings


def validate_settings(settings: MoverSettings, context: str = "settings") -> None:
    if settings.interval_s <= 0:
        raise ValidationError(f"{context}: 'interval_s' must be greater than zero")
    if settings.total_cycles < 1:
        raise ValidationError(f"{context}: 'total_cycles' must be at least 1")
    if settings.min_delay_ms < 1:
        raise ValidationError(f"{context}: 'delay_ms.min' must be at least 1")
    if settings.min_delay_ms > settings.max_delay_ms:
        raise ValidationError(
            f"{context}: 'delay_ms.min' {settings.min_delay_ms} above 'delay_ms.max' "
            f"{settings.max_delay_ms}"
        )
    if settings.margin_px < 0:
        raise ValidationError(f"{context}: 'margin_px' must not be negative")
    if not settings.patterns:
        raise ValidationError(f"{context}: at least one pattern must be enabled")
    if len(set(settings.patterns)) != len(settings.patterns):
        raise ValidationError(f"{context}: patterns must not repeat")


def load_settings(path: Path | None) -> MoverSettings:
    """Load settings from ``path``; a missing or empty file yields the defaults."""
    if path is None or not path.exists():
        return MoverSettings()
    payload = load_yaml(path)
    if payload is None:
        return MoverSettings()
    if not isinstance(payload, dict):
        raise ValidationError(f"{path}: expected mapping at root")
    return parse_settings(payload, f"{path}")


def apply_overrides(settings: MoverSettings, overrides: Dict[str, Any]) -> MoverSettings:
    for key, value in overrides.items():
        if value is not None:
            setattr(settings, key, value)
    validate_settings(settings, "command line")
    return settings
