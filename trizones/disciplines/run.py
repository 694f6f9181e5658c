"""
Run discipline plugin.

Threshold: lactate threshold pace, in seconds per km.  Pace-like, zone
bounds render as ``m:ss``.
"""

from trizones.disciplines.base import DisciplinePlugin, build_zone_table
from trizones.schemas.discipline import Discipline
from trizones.schemas.zone import ZoneDefinition

_DEFAULT_ZONES = [
    ("Z1 Recovery", 0, 85, "Easy recovery runs"),
    ("Z2 Aerobic", 85, 95, "Aerobic base pace"),
    ("Z3 Tempo", 95, 100, "Tempo run pace"),
    ("Z4 Threshold", 100, 110, "Lactate threshold"),
    ("Z5 VO2Max", 110, 125, "VO2 max intervals"),
]


class RunPlugin(DisciplinePlugin):
    """Run discipline plugin implementation."""

    @property
    def discipline(self) -> Discipline:
        return Discipline.RUN

    @property
    def display_name(self) -> str:
        return "Run"

    @property
    def threshold_label(self) -> str:
        return "Threshold"

    @property
    def unit(self) -> str:
        return "s/km"

    @property
    def default_threshold(self) -> float:
        return 255.0

    @property
    def default_zones(self) -> list[ZoneDefinition]:
        return build_zone_table(_DEFAULT_ZONES)

    @property
    def test_protocol(self) -> str:
        return "30min time trial"

    @property
    def best_conditions(self) -> str:
        return "Flat course, good weather"
