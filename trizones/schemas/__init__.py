"""Pydantic schemas for zone tables, thresholds and test history."""

from trizones.schemas.discipline import Discipline, FreshnessStatus, Timeframe, TrendDirection
from trizones.schemas.threshold import (
    FreshnessReport,
    TestLog,
    TestLogEntry,
    ThresholdProfile,
    ThresholdTrendPoint,
)
from trizones.schemas.zone import ComputedZone, ZoneDefinition, ZonePatch

__all__ = [
    "Discipline",
    "FreshnessStatus",
    "Timeframe",
    "TrendDirection",
    "FreshnessReport",
    "TestLog",
    "TestLogEntry",
    "ThresholdProfile",
    "ThresholdTrendPoint",
    "ComputedZone",
    "ZoneDefinition",
    "ZonePatch",
]
