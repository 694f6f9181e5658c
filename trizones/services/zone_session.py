"""
Athlete zone session.

Caller-owned mutable context holding, per discipline, the current
threshold profile, the zone table and the append-only test log.  Every
computation is delegated to the pure :mod:`trizones.engine` functions;
the session only stores their results.

A rejected edit (any :class:`ZoneEngineError`) leaves the stored table
untouched and is re-raised so that the caller can show an error state.
"""

from __future__ import annotations

import datetime
from typing import Optional

from trizones.core.config import settings
from trizones.core.exceptions import DisciplineMismatchError, ZoneEngineError
from trizones.core.logging import get_logger
from trizones.disciplines import DisciplineRegistry
from trizones.engine import editing, progression
from trizones.engine.freshness import FreshnessConfig, assess_freshness, classify_freshness
from trizones.engine.zones import compute_zones, validate_threshold, validate_zone_table
from trizones.schemas.discipline import Discipline, FreshnessStatus, Timeframe, TrendDirection
from trizones.schemas.threshold import FreshnessReport, TestLog, TestLogEntry, ThresholdProfile, ThresholdTrendPoint
from trizones.schemas.zone import ComputedZone, ZoneDefinition, ZonePatch

logger = get_logger(__name__)


class AthleteZoneSession:
    """Per-athlete zone state for all disciplines."""

    def __init__(self, profiles: dict[Discipline, ThresholdProfile], zone_tables: dict[Discipline, list[ZoneDefinition]],
                 test_logs: Optional[dict[Discipline, TestLog]] = None,
                 freshness_config: Optional[FreshnessConfig] = None,
                 zone_width_pct: Optional[float] = None, ):
        for discipline, profile in profiles.items():
            if profile.discipline != discipline:
                raise DisciplineMismatchError(discipline.value, profile.discipline.value)
            validate_threshold(profile.value)
        for table in zone_tables.values():
            validate_zone_table(table)

        self._profiles = dict(profiles)
        self._zone_tables = {d: list(t) for d, t in zone_tables.items()}
        self._test_logs = dict(test_logs or {})
        for discipline, log in self._test_logs.items():
            if log.discipline != discipline:
                raise DisciplineMismatchError(discipline.value, log.discipline.value)

        self.freshness_config = freshness_config or FreshnessConfig(method=settings.FRESHNESS_METHOD)
        self.zone_width_pct = zone_width_pct if zone_width_pct is not None else settings.DEFAULT_ZONE_WIDTH_PCT

    @classmethod
    def from_defaults(cls, tested_at: datetime.datetime, **kwargs) -> AthleteZoneSession:
        """Onboarding session: estimated thresholds and default zone tables."""
        plugins = DisciplineRegistry.all()
        return cls(profiles={d: p.default_profile(tested_at) for d, p in plugins.items()},
                   zone_tables={d: p.default_zones for d, p in plugins.items()},
                   test_logs={d: p.empty_log() for d, p in plugins.items()}, **kwargs, )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def disciplines(self) -> list[Discipline]:
        return [d for d in Discipline if d in self._profiles]

    def profile(self, discipline: Discipline) -> ThresholdProfile:
        try:
            return self._profiles[discipline]
        except KeyError:
            raise KeyError(f"No threshold profile for '{discipline.value}'") from None

    def zones_for(self, discipline: Discipline) -> list[ZoneDefinition]:
        try:
            return list(self._zone_tables[discipline])
        except KeyError:
            raise KeyError(f"No zone table for '{discipline.value}'") from None

    def test_log(self, discipline: Discipline) -> TestLog:
        return self._test_logs.get(discipline, TestLog(discipline=discipline))

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def computed_zones(self, discipline: Discipline) -> list[ComputedZone]:
        """Zones of *discipline* resolved against its own threshold."""
        return compute_zones(self.profile(discipline), self.zones_for(discipline))

    def freshness(self, discipline: Discipline, now: datetime.datetime) -> FreshnessStatus:
        return classify_freshness(self.profile(discipline).last_tested_at, now, discipline, self.freshness_config)

    def freshness_report(self, discipline: Discipline, now: datetime.datetime) -> FreshnessReport:
        return assess_freshness(self.profile(discipline).last_tested_at, now, discipline, self.freshness_config)

    def trend(self, discipline: Discipline, timeframe: Timeframe, now: datetime.datetime) -> list[ThresholdTrendPoint]:
        return progression.trend_series(self.test_log(discipline), timeframe, now)

    def trend_direction(self, discipline: Discipline, timeframe: Timeframe,
                        now: datetime.datetime) -> TrendDirection:
        return progression.trend_direction(self.trend(discipline, timeframe, now), discipline)

    # ------------------------------------------------------------------
    # Zone table editing
    # ------------------------------------------------------------------

    def _apply_edit(self, discipline: Discipline, operation: str, edit, **details) -> list[ZoneDefinition]:
        current = self.zones_for(discipline)
        try:
            updated = edit(current)
        except ZoneEngineError as e:
            logger.warning("zone_edit_rejected", discipline=discipline.value, operation=operation,
                           error=type(e).__name__, detail=str(e), **details)
            raise

        self._zone_tables[discipline] = updated
        logger.info("zone_table_updated", discipline=discipline.value, operation=operation, zones=len(updated),
                    **details)
        return list(updated)

    def add_zone(self, discipline: Discipline, after_index: Optional[int] = None,
                 width_pct: Optional[float] = None) -> list[ZoneDefinition]:
        width = width_pct if width_pct is not None else self.zone_width_pct
        return self._apply_edit(discipline, "add", lambda z: editing.add_zone(z, after_index, width),
                                after_index=after_index, width_pct=width)

    def remove_zone(self, discipline: Discipline, index: int) -> list[ZoneDefinition]:
        return self._apply_edit(discipline, "remove", lambda z: editing.remove_zone(z, index), index=index)

    def edit_zone(self, discipline: Discipline, index: int, patch: ZonePatch) -> list[ZoneDefinition]:
        return self._apply_edit(discipline, "edit", lambda z: editing.edit_zone(z, index, patch), index=index)

    # ------------------------------------------------------------------
    # Threshold tests
    # ------------------------------------------------------------------

    def record_test(self, entry: TestLogEntry) -> ThresholdProfile:
        """Log *entry* and supersede the discipline's threshold with it."""
        discipline = entry.discipline
        profile = progression.record_test(entry, self.profile(discipline))
        log = self.test_log(discipline).append(entry)

        self._profiles[discipline] = profile
        self._test_logs[discipline] = log
        logger.info("threshold_recorded", discipline=discipline.value, test_type=entry.test_type,
                    value=entry.threshold_value, tests=len(log.entries))
        return profile
