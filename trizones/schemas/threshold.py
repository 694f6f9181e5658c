"""
Threshold profile and test log schemas.

A :class:`ThresholdProfile` is created with an estimated value at
onboarding and is only ever superseded by a completed threshold test.
The history of tests lives in an append-only :class:`TestLog`, from which
every trend series is derived.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field

from trizones.core.exceptions import DisciplineMismatchError
from trizones.schemas.discipline import Discipline, FreshnessStatus


class ThresholdProfile(BaseModel):
    """Current threshold for one discipline of one athlete.

    ``value > 0`` is enforced by the engine (``InvalidThresholdError``),
    not by field validation, so that callers can distinguish it from
    malformed payloads.
    """

    model_config = ConfigDict(frozen=True)

    discipline: Discipline
    value: float = Field(..., description="CSS / FTP / threshold pace / LTHR")
    unit: str = Field(..., description="e.g. 's/100m', 'W', 's/km', 'bpm'")
    last_tested_at: datetime.datetime


class TestLogEntry(BaseModel):
    """Immutable record of a completed threshold test."""

    __test__ = False  # not a pytest test class

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    time: datetime.time = datetime.time(0, 0)
    discipline: Discipline
    test_type: str = Field(..., min_length=1, max_length=100, description="e.g. '20min FTP Test'")
    threshold_value: float
    unit: str
    notes: str = Field("", max_length=1000)

    @property
    def tested_at(self) -> datetime.datetime:
        return datetime.datetime.combine(self.date, self.time)


class TestLog(BaseModel):
    """Append-only, per-discipline history of threshold tests."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    discipline: Discipline
    entries: tuple[TestLogEntry, ...] = ()

    def append(self, entry: TestLogEntry) -> TestLog:
        """Return a new log with *entry* appended.

        Raises :class:`DisciplineMismatchError` if *entry* belongs to
        another discipline.
        """
        if entry.discipline != self.discipline:
            raise DisciplineMismatchError(self.discipline.value, entry.discipline.value)
        return TestLog(discipline=self.discipline, entries=self.entries + (entry,))

    def latest(self) -> TestLogEntry | None:
        """Most recent entry by test date/time, ``None`` if empty."""
        if not self.entries:
            return None
        return max(self.entries, key=lambda e: e.tested_at)


class ThresholdTrendPoint(BaseModel):
    """One point of a threshold progression chart."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    value: float


class FreshnessReport(BaseModel):
    """Freshness status plus the numbers a badge or hint needs."""

    discipline: Discipline
    status: FreshnessStatus
    days_since_test: int
    cadence_days: float = Field(..., description="Recommended retest interval")
    days_until_due: int = Field(..., ge=0, description="0 once the test is due")
    recommendation: str
