"""
Unit formatting per discipline.

Presentation only: formatting never feeds back into stored percentages
or computed absolute values.

- Swim / Run: seconds rendered as ``m:ss`` (``105`` -> ``'1:45'``)
- Bike: ``'{value}W'``
- Heart rate: ``'{value}bpm'``
"""

from trizones.schemas.discipline import Discipline


def format_pace(total_seconds: int) -> str:
    """Convert seconds -> ``'M:SS'``.

    Example: ``105`` -> ``'1:45'``, ``255`` -> ``'4:15'``.
    """
    if total_seconds < 0:
        raise ValueError(f"Pace cannot be negative, got {total_seconds}")
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    return f"{minutes}:{seconds:02d}"


def parse_pace(text: str) -> int:
    """Convert ``'M:SS'`` -> total seconds.  Inverse of :func:`format_pace`.

    Example: ``'1:45'`` -> ``105``.
    """
    parts = text.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Pace must be in M:SS format, got {text!r}")

    minutes, seconds = parts
    if not minutes.isdigit() or not seconds.isdigit() or len(seconds) != 2:
        raise ValueError(f"Pace must be in M:SS format, got {text!r}")
    if int(seconds) >= 60:
        raise ValueError(f"Seconds must be below 60, got {text!r}")

    return int(minutes) * 60 + int(seconds)


def unit_suffix(discipline: Discipline) -> str:
    """Short unit tag attached to computed zones."""
    if discipline.is_pace:
        return "s"
    if discipline is Discipline.BIKE:
        return "W"
    if discipline is Discipline.HEART_RATE:
        return "bpm"
    raise ValueError(f"Unhandled discipline: {discipline!r}")


def format_value(value: int, discipline: Discipline) -> str:
    """Render an absolute zone bound for *discipline*."""
    if discipline.is_pace:
        return format_pace(value)
    if discipline is Discipline.BIKE:
        return f"{value}W"
    if discipline is Discipline.HEART_RATE:
        return f"{value}bpm"
    raise ValueError(f"Unhandled discipline: {discipline!r}")


def format_threshold(value: float, discipline: Discipline) -> str:
    """Render a threshold value with its unit tag, e.g. ``'285W'`` or ``'75s'``."""
    rounded = int(value) if float(value).is_integer() else value
    return f"{rounded}{unit_suffix(discipline)}"
