"""
Threshold freshness: is the current threshold old enough to re-test?

Policy
------
``days_since = floor((now - last_tested_at) / 1 day)``.  Each discipline
has a recommended retest range; the cadence ``C`` is its midpoint:

    Swim / Bike / Run:  6-8 weeks  -> C = 49 days
    Heart rate:         8-12 weeks -> C = 70 days

    days_since >= C        -> overdue
    days_since >  2C / 3   -> due_soon
    otherwise              -> current

The ``uniform`` method reproduces the fixed 30/60-day boundaries
(``> 60`` overdue, ``> 30`` due soon) applied to every discipline, for
deployments that want the discipline-blind behaviour.

Status is a direct function of elapsed time: no hysteresis, no state.
"""

from __future__ import annotations

import datetime
import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from trizones.schemas.discipline import Discipline, FreshnessStatus
from trizones.schemas.threshold import FreshnessReport

# ======================================================================
# Configuration
# ======================================================================

# Recommended retest range per discipline, in weeks.
_DEFAULT_CADENCE_WEEKS: dict[Discipline, tuple[int, int]] = {
    Discipline.SWIM: (6, 8),
    Discipline.BIKE: (6, 8),
    Discipline.RUN: (6, 8),
    Discipline.HEART_RATE: (8, 12),
}

# Discipline-blind boundaries (days) used by the ``uniform`` method.
_UNIFORM_DUE_SOON_DAYS = 30
_UNIFORM_OVERDUE_DAYS = 60

_ONE_DAY = datetime.timedelta(days=1)


class FreshnessConfig(BaseModel):
    """Configuration for threshold freshness classification."""

    method: str = Field("discipline", pattern="^(discipline|uniform)$",
                        description="'discipline' (cadence midpoint) or 'uniform' (30/60 days)", )
    cadence_weeks: dict[Discipline, tuple[int, int]] = Field(
        default_factory=lambda: dict(_DEFAULT_CADENCE_WEEKS))
    uniform_due_soon_days: int = Field(_UNIFORM_DUE_SOON_DAYS, ge=1)
    uniform_overdue_days: int = Field(_UNIFORM_OVERDUE_DAYS, ge=1)

    @field_validator("cadence_weeks")
    @classmethod
    def merge_cadence_defaults(cls, value: dict[Discipline, tuple[int, int]]) -> dict[Discipline, tuple[int, int]]:
        """Reject empty or inverted ranges; fill omitted disciplines with defaults."""
        for discipline, (low, high) in value.items():
            if not 0 < low <= high:
                raise ValueError(f"Invalid cadence for '{discipline.value}': expected 0 < low <= high, "
                                 f"got ({low}, {high})")
        return {**_DEFAULT_CADENCE_WEEKS, **value}

    def cadence_days(self, discipline: Discipline) -> float:
        """Midpoint of the recommended retest range, in days."""
        low, high = self.cadence_weeks[discipline]
        return (low + high) * 7 / 2.0


DEFAULT_FRESHNESS_CONFIG = FreshnessConfig()


# ======================================================================
# Classification
# ======================================================================


def days_since(last_tested_at: datetime.datetime, now: datetime.datetime) -> int:
    """Whole days elapsed, floored (negative if the test is in the future)."""
    return math.floor((now - last_tested_at) / _ONE_DAY)


def _classify_days(elapsed: int, discipline: Discipline, cfg: FreshnessConfig) -> FreshnessStatus:
    if cfg.method == "uniform":
        if elapsed > cfg.uniform_overdue_days:
            return FreshnessStatus.OVERDUE
        if elapsed > cfg.uniform_due_soon_days:
            return FreshnessStatus.DUE_SOON
        return FreshnessStatus.CURRENT

    cadence = cfg.cadence_days(discipline)
    if elapsed >= cadence:
        return FreshnessStatus.OVERDUE
    if elapsed > 2 * cadence / 3:
        return FreshnessStatus.DUE_SOON
    return FreshnessStatus.CURRENT


def classify_freshness(last_tested_at: datetime.datetime, now: datetime.datetime, discipline: Discipline,
                       config: Optional[FreshnessConfig] = None, ) -> FreshnessStatus:
    """Classify how fresh a threshold is.

    Args:
        last_tested_at: When the threshold was last tested.
        now: Reference time (typically the current time).
        discipline: Discipline of the threshold.
        config: Optional :class:`FreshnessConfig` override (uses
            ``DEFAULT_FRESHNESS_CONFIG`` if ``None``).
    """
    cfg = config or DEFAULT_FRESHNESS_CONFIG
    return _classify_days(days_since(last_tested_at, now), discipline, cfg)


# ======================================================================
# Report
# ======================================================================


def _recommendation(status: FreshnessStatus, days_until_due: int) -> str:
    if status is FreshnessStatus.OVERDUE:
        return "Threshold test overdue: schedule a test to refresh your zones."
    if status is FreshnessStatus.DUE_SOON:
        return f"Next test recommended in {days_until_due} days."
    return f"Threshold is current. Next test recommended in {days_until_due} days."


def assess_freshness(last_tested_at: datetime.datetime, now: datetime.datetime, discipline: Discipline,
                     config: Optional[FreshnessConfig] = None, ) -> FreshnessReport:
    """Build a :class:`FreshnessReport` (status, elapsed days, days to next test)."""
    cfg = config or DEFAULT_FRESHNESS_CONFIG
    elapsed = days_since(last_tested_at, now)
    status = _classify_days(elapsed, discipline, cfg)

    if cfg.method == "uniform":
        # first overdue day under the strict "> overdue_days" rule
        cadence = float(cfg.uniform_overdue_days + 1)
    else:
        cadence = cfg.cadence_days(discipline)
    days_until_due = max(0, math.ceil(cadence - elapsed))

    return FreshnessReport(discipline=discipline, status=status, days_since_test=elapsed, cadence_days=cadence,
                           days_until_due=days_until_due, recommendation=_recommendation(status, days_until_due), )
