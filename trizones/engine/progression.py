"""
Threshold progression: recording tests and deriving trend series.

The test log is the single source of truth for history.  Trend points are
always projected from it, never maintained as a separate table, so the
chart and the log cannot drift apart.
"""

from __future__ import annotations

import datetime

from trizones.core.exceptions import DisciplineMismatchError
from trizones.engine.zones import validate_threshold
from trizones.schemas.discipline import Discipline, Timeframe, TrendDirection
from trizones.schemas.threshold import TestLog, TestLogEntry, ThresholdProfile, ThresholdTrendPoint


def record_test(entry: TestLogEntry, profile: ThresholdProfile) -> ThresholdProfile:
    """Return *profile* superseded by the result in *entry*.

    Only ``value`` and ``last_tested_at`` change.  Log entries carry a
    wall-clock date and time; when *profile* holds an aware timestamp the
    test time is read in the same timezone.  The entry itself is appended
    to the discipline's log with :meth:`TestLog.append`.

    Raises:
        DisciplineMismatchError: entry and profile disciplines differ.
        InvalidThresholdError: ``entry.threshold_value <= 0``.
    """
    if entry.discipline != profile.discipline:
        raise DisciplineMismatchError(profile.discipline.value, entry.discipline.value)
    validate_threshold(entry.threshold_value)

    tested_at = entry.tested_at
    if tested_at.tzinfo is None and profile.last_tested_at.tzinfo is not None:
        tested_at = tested_at.replace(tzinfo=profile.last_tested_at.tzinfo)

    return profile.model_copy(update={"value": entry.threshold_value, "last_tested_at": tested_at})


def trend_series(log: TestLog, timeframe: Timeframe, now: datetime.datetime) -> list[ThresholdTrendPoint]:
    """Project *log* onto a chronological series for *timeframe*.

    The window is ``[now.date() - timeframe.days, now.date()]`` inclusive;
    ``Timeframe.MAX`` keeps every entry up to ``now``.
    """
    today = now.date()
    window = timeframe.days
    start = today - datetime.timedelta(days=window) if window is not None else None

    entries = sorted(log.entries, key=lambda e: e.tested_at)
    return [ThresholdTrendPoint(date=e.date, value=e.threshold_value) for e in entries
            if e.date <= today and (start is None or e.date >= start)]


def trend_direction(points: list[ThresholdTrendPoint], discipline: Discipline) -> TrendDirection:
    """Compare the first and last point of a series.

    Pace-like disciplines (swim, run) improve when the value goes down;
    power and heart rate improve when it goes up.
    """
    if len(points) < 2:
        return TrendDirection.INSUFFICIENT_DATA

    delta = points[-1].value - points[0].value
    if delta == 0:
        return TrendDirection.STABLE
    if discipline.is_pace:
        delta = -delta
    return TrendDirection.IMPROVING if delta > 0 else TrendDirection.DECLINING
