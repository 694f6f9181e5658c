"""
Abstract base class for discipline plugins.

Every discipline in TriZones must implement this interface.  The plugin
defines:

- The :class:`Discipline` it covers
- A display name and the label of its threshold metric
- The threshold unit
- A default (onboarding) threshold estimate
- A default 5-zone percentage table
- Testing guidance shown next to the zone table
"""

import datetime
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from trizones.engine.freshness import DEFAULT_FRESHNESS_CONFIG, FreshnessConfig
from trizones.schemas.discipline import Discipline
from trizones.schemas.threshold import TestLog, ThresholdProfile
from trizones.schemas.zone import ZoneDefinition

# Default zone colours, Z1..Z5.
ZONE_COLORS = ["#22D3EE", "#3B82F6", "#8B5CF6", "#EC4899", "#EF4444"]


def build_zone_table(rows: Sequence[tuple[str, float, float, str]]) -> list[ZoneDefinition]:
    """Build a zone table from ``(name, min_pct, max_pct, description)`` rows."""
    return [ZoneDefinition(index=i, name=name, min_pct=low, max_pct=high,
                           color=ZONE_COLORS[i - 1] if i <= len(ZONE_COLORS) else ZONE_COLORS[-1],
                           description=description, )
            for i, (name, low, high, description) in enumerate(rows, start=1)]


class DisciplinePlugin(ABC):
    """Abstract base class that every discipline plugin must implement."""

    @property
    @abstractmethod
    def discipline(self) -> Discipline:
        """The discipline this plugin covers."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name, e.g. ``'Bike'``."""
        ...

    @property
    @abstractmethod
    def threshold_label(self) -> str:
        """Name of the threshold metric, e.g. ``'FTP'``."""
        ...

    @property
    @abstractmethod
    def unit(self) -> str:
        """Threshold unit, e.g. ``'W'`` or ``'s/100m'``."""
        ...

    @property
    @abstractmethod
    def default_threshold(self) -> float:
        """Estimated threshold used at onboarding, before any test."""
        ...

    @property
    @abstractmethod
    def default_zones(self) -> list[ZoneDefinition]:
        """Default percentage-of-threshold zone table."""
        ...

    @property
    @abstractmethod
    def test_protocol(self) -> str:
        """Recommended threshold test, e.g. ``'20min or ramp test'``."""
        ...

    # ------------------------------------------------------------------
    # Optional overrides with sensible defaults
    # ------------------------------------------------------------------

    @property
    def best_conditions(self) -> str:
        """Conditions under which the test should be performed."""
        return "Rested, consistent effort"

    @property
    def lower_is_better(self) -> bool:
        """``True`` for pace-like thresholds (seconds per distance)."""
        return self.discipline.is_pace

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    def default_profile(self, tested_at: datetime.datetime) -> ThresholdProfile:
        """Onboarding profile carrying :attr:`default_threshold`."""
        return ThresholdProfile(discipline=self.discipline, value=self.default_threshold, unit=self.unit,
                                last_tested_at=tested_at, )

    def empty_log(self) -> TestLog:
        return TestLog(discipline=self.discipline)

    def testing_recommendations(self, config: Optional[FreshnessConfig] = None) -> list[str]:
        """Guidance lines: test protocol, frequency, best conditions."""
        cfg = config or DEFAULT_FRESHNESS_CONFIG
        low, high = cfg.cadence_weeks[self.discipline]
        return [
            f"{self.threshold_label} Test: {self.test_protocol}",
            f"Frequency: Every {low}-{high} weeks",
            f"Best conditions: {self.best_conditions}",
        ]
