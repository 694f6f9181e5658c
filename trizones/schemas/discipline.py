"""
Closed enumerations shared by the engine, the discipline catalogue and
the session service.

Every place that depends on the discipline (units, cadence, formatting)
branches on :class:`Discipline` and fails loudly on an unhandled member
rather than looking values up in free-form string maps.
"""

from __future__ import annotations

import enum
from typing import Optional


class Discipline(str, enum.Enum):
    """Training discipline that owns a threshold and a zone table."""

    SWIM = "swim"
    BIKE = "bike"
    RUN = "run"
    HEART_RATE = "hr"

    @property
    def is_pace(self) -> bool:
        """Pace-like disciplines measure seconds per fixed distance."""
        return self in (Discipline.SWIM, Discipline.RUN)


class FreshnessStatus(str, enum.Enum):
    """How recent the last threshold test is relative to the retest cadence."""

    CURRENT = "current"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"


class TrendDirection(str, enum.Enum):
    """Direction of a threshold trend series."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


_TIMEFRAME_DAYS: dict[str, Optional[int]] = {
    "1M": 30,
    "3M": 90,
    "6M": 182,
    "1Y": 365,
    "MAX": None,
}


class Timeframe(str, enum.Enum):
    """Window selectable for the threshold progression chart."""

    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    MAX = "MAX"

    @property
    def days(self) -> Optional[int]:
        """Window length in days, ``None`` for the full history."""
        return _TIMEFRAME_DAYS[self.value]
