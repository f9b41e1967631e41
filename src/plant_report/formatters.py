"""Locale formatting helpers (Indonesian number style) used by the renderers."""

from __future__ import annotations

import math
from datetime import date, datetime

PLACEHOLDER = "-"

# (first hour, last hour, label); hours are 1-based, 24 is the last hour of the day
_SHIFTS = (
    (1, 7, "S3C"),
    (8, 15, "S1"),
    (16, 22, "S2"),
    (23, 24, "S3"),
)


def shift_for_hour(hour: int) -> str:
    """Return the shift label for a 1-based report hour."""
    for first, last, label in _SHIFTS:
        if first <= hour <= last:
            return label
    return "S3"


def shift_hours() -> dict[str, tuple[int, ...]]:
    """Map each shift label to the hours it covers, in report order."""
    return {label: tuple(range(first, last + 1)) for first, last, label in _SHIFTS}


def is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def format_number(value: object, decimals: int = 2) -> str:
    """Format *value* with '.' thousands and ',' decimal separators.

    ``1234.5`` becomes ``"1.234,50"``.  Returns ``""`` for anything that is
    not a finite number so callers can fall back to a placeholder.
    """
    if not is_number(value):
        return ""
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")


def format_date(value: date | datetime | str) -> str:
    """Format a date as ``DD/MM/YYYY``.  Strings must be ISO dates."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return value.strftime("%d/%m/%Y")


def _parse_time(text: str) -> int:
    """Minutes since midnight for ``HH:MM`` or ``HH:MM:SS``."""
    parts = text.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time of day: {text!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid time of day: {text!r}")
    return hours * 60 + minutes


def calculate_duration(start_time: str, end_time: str) -> tuple[int, int]:
    """Return ``(hours, minutes)`` between two times of day.

    An end time earlier than the start time is treated as the next day
    (23:30 -> 00:15 is 45 minutes).  Missing input yields ``(0, 0)``;
    malformed input raises ``ValueError``.
    """
    if not start_time or not end_time:
        return (0, 0)
    start = _parse_time(start_time)
    end = _parse_time(end_time)
    if end < start:
        end += 24 * 60
    total = end - start
    return divmod(total, 60)


def format_duration(hours: int, minutes: int) -> str:
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def fill_percentage(content: object, capacity: object) -> float | None:
    """``content / capacity * 100``, or None when it cannot be computed.

    The result is not clamped; overfull silos report more than 100.
    """
    if not is_number(content) or not is_number(capacity) or capacity <= 0:
        return None
    return content / capacity * 100


def format_percentage(pct: float | None) -> str:
    """One decimal place with a trailing '%'; placeholder unless positive."""
    if pct is None or pct <= 0:
        return PLACEHOLDER
    return f"{pct:.1f}%"
