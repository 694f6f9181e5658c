"""Tests for threshold test recording, the test log and trend series."""

import datetime

import pytest

from trizones.core.exceptions import DisciplineMismatchError, InvalidThresholdError
from trizones.engine.progression import record_test, trend_direction, trend_series
from trizones.schemas.discipline import Discipline, Timeframe, TrendDirection
from trizones.schemas.threshold import TestLog, TestLogEntry, ThresholdProfile, ThresholdTrendPoint

NOW = datetime.datetime(2024, 1, 29, 12, 0)


# ======================================================================
# Helpers
# ======================================================================


def _entry(day: str, value: float, discipline: Discipline = Discipline.BIKE, time: str = "09:30",
           test_type: str = "20min FTP Test") -> TestLogEntry:
    return TestLogEntry(date=datetime.date.fromisoformat(day), time=datetime.time.fromisoformat(time),
                        discipline=discipline, test_type=test_type, threshold_value=value, unit="W", )


def _bike_profile(value: float = 278.0) -> ThresholdProfile:
    return ThresholdProfile(discipline=Discipline.BIKE, value=value, unit="W",
                            last_tested_at=datetime.datetime(2023, 9, 15, 8, 20))


# ======================================================================
# record_test
# ======================================================================


class TestRecordTest:
    def test_replaces_value_and_date(self):
        profile = _bike_profile()
        updated = record_test(_entry("2024-01-15", 285), profile)
        assert updated.value == 285
        assert updated.last_tested_at == datetime.datetime(2024, 1, 15, 9, 30)
        assert updated.discipline == Discipline.BIKE
        assert updated.unit == "W"

    def test_original_profile_untouched(self):
        profile = _bike_profile()
        record_test(_entry("2024-01-15", 285), profile)
        assert profile.value == 278.0

    def test_naive_profile_stays_naive(self):
        updated = record_test(_entry("2024-01-15", 285), _bike_profile())
        assert updated.last_tested_at.tzinfo is None

    def test_aware_profile_keeps_timezone(self):
        cet = datetime.timezone(datetime.timedelta(hours=1))
        profile = _bike_profile().model_copy(
            update={"last_tested_at": datetime.datetime(2023, 9, 15, 8, 20, tzinfo=cet)})
        updated = record_test(_entry("2024-01-15", 285), profile)
        assert updated.last_tested_at == datetime.datetime(2024, 1, 15, 9, 30, tzinfo=cet)

    def test_discipline_mismatch(self):
        with pytest.raises(DisciplineMismatchError) as exc_info:
            record_test(_entry("2024-01-15", 255, discipline=Discipline.RUN), _bike_profile())
        assert exc_info.value.expected == "bike"
        assert exc_info.value.got == "run"

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_result(self, value):
        with pytest.raises(InvalidThresholdError):
            record_test(_entry("2024-01-15", value), _bike_profile())


# ======================================================================
# TestLog
# ======================================================================


class TestTestLog:
    def test_append_returns_new_log(self):
        log = TestLog(discipline=Discipline.BIKE)
        appended = log.append(_entry("2024-01-15", 285))
        assert len(log.entries) == 0
        assert len(appended.entries) == 1

    def test_append_wrong_discipline(self):
        log = TestLog(discipline=Discipline.BIKE)
        with pytest.raises(DisciplineMismatchError):
            log.append(_entry("2024-01-15", 75, discipline=Discipline.SWIM))

    def test_latest_by_test_time(self):
        log = TestLog(discipline=Discipline.BIKE)
        log = log.append(_entry("2024-01-15", 285)).append(_entry("2023-09-15", 278))
        assert log.latest().threshold_value == 285

    def test_latest_empty(self):
        assert TestLog(discipline=Discipline.RUN).latest() is None


# ======================================================================
# trend_series
# ======================================================================


def _bike_log() -> TestLog:
    log = TestLog(discipline=Discipline.BIKE)
    for day, value in [
        ("2024-01-15", 285),
        ("2022-11-01", 255),
        ("2023-09-15", 278),
        ("2023-12-20", 282),
        ("2024-02-10", 290),  # after NOW
    ]:
        log = log.append(_entry(day, value))
    return log


class TestTrendSeries:
    def test_chronological_order(self):
        points = trend_series(_bike_log(), Timeframe.MAX, NOW)
        assert [p.date for p in points] == sorted(p.date for p in points)

    @pytest.mark.parametrize(
        "timeframe, expected",
        [
            (Timeframe.ONE_MONTH, [285]),
            (Timeframe.THREE_MONTHS, [282, 285]),
            (Timeframe.SIX_MONTHS, [278, 282, 285]),
            (Timeframe.ONE_YEAR, [278, 282, 285]),
            (Timeframe.MAX, [255, 278, 282, 285]),
        ],
    )
    def test_windows(self, timeframe, expected):
        points = trend_series(_bike_log(), timeframe, NOW)
        assert [p.value for p in points] == expected

    def test_future_entries_excluded(self):
        points = trend_series(_bike_log(), Timeframe.MAX, NOW)
        assert all(p.date <= NOW.date() for p in points)

    def test_window_start_inclusive(self):
        log = TestLog(discipline=Discipline.BIKE).append(_entry("2023-12-30", 280))
        assert len(trend_series(log, Timeframe.ONE_MONTH, NOW)) == 1

    def test_empty_log(self):
        assert trend_series(TestLog(discipline=Discipline.BIKE), Timeframe.MAX, NOW) == []

    def test_same_day_tests_ordered_by_time(self):
        log = TestLog(discipline=Discipline.BIKE)
        log = log.append(_entry("2024-01-20", 290, time="18:00")).append(_entry("2024-01-20", 280, time="07:00"))
        assert [p.value for p in trend_series(log, Timeframe.ONE_MONTH, NOW)] == [280, 290]


# ======================================================================
# trend_direction
# ======================================================================


def _points(*values: float) -> list[ThresholdTrendPoint]:
    start = datetime.date(2024, 1, 1)
    return [ThresholdTrendPoint(date=start + datetime.timedelta(days=7 * i), value=v) for i, v in enumerate(values)]


class TestTrendDirection:
    @pytest.mark.parametrize(
        "discipline, values, expected",
        [
            (Discipline.BIKE, (278, 285), TrendDirection.IMPROVING),
            (Discipline.BIKE, (285, 278), TrendDirection.DECLINING),
            (Discipline.HEART_RATE, (172, 175), TrendDirection.IMPROVING),
            (Discipline.SWIM, (83, 75), TrendDirection.IMPROVING),
            (Discipline.RUN, (255, 260), TrendDirection.DECLINING),
            (Discipline.SWIM, (75, 75), TrendDirection.STABLE),
        ],
    )
    def test_direction(self, discipline, values, expected):
        assert trend_direction(_points(*values), discipline) == expected

    def test_first_and_last_only(self):
        assert trend_direction(_points(280, 300, 290), Discipline.BIKE) == TrendDirection.IMPROVING

    @pytest.mark.parametrize("values", [(), (285,)])
    def test_insufficient(self, values):
        assert trend_direction(_points(*values), Discipline.BIKE) == TrendDirection.INSUFFICIENT_DATA
