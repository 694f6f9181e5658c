"""
Swim discipline plugin.

Threshold: Critical Swim Speed (CSS), in seconds per 100 m.  Pace-like:
a lower value is a faster swimmer, and zone bounds render as ``m:ss``.
"""

from trizones.disciplines.base import DisciplinePlugin, build_zone_table
from trizones.schemas.discipline import Discipline
from trizones.schemas.zone import ZoneDefinition

_DEFAULT_ZONES = [
    ("Z1 Recovery", 0, 65, "Active recovery pace"),
    ("Z2 Aerobic", 65, 75, "Aerobic base building"),
    ("Z3 Tempo", 75, 85, "Tempo/threshold pace"),
    ("Z4 Threshold", 85, 95, "Lactate threshold"),
    ("Z5 VO2Max", 95, 110, "VO2 max intervals"),
]


class SwimPlugin(DisciplinePlugin):
    """Swim discipline plugin implementation."""

    @property
    def discipline(self) -> Discipline:
        return Discipline.SWIM

    @property
    def display_name(self) -> str:
        return "Swim"

    @property
    def threshold_label(self) -> str:
        return "CSS"

    @property
    def unit(self) -> str:
        return "s/100m"

    @property
    def default_threshold(self) -> float:
        return 75.0

    @property
    def default_zones(self) -> list[ZoneDefinition]:
        return build_zone_table(_DEFAULT_ZONES)

    @property
    def test_protocol(self) -> str:
        return "400m time trial or T30 test"

    @property
    def best_conditions(self) -> str:
        return "Rested, pool conditions"
