"""
Heart-rate discipline plugin.

Threshold: Lactate Threshold Heart Rate (LTHR), in bpm.  Not inverted:
zone bounds are raw integers rendered as ``{value}bpm``.  Retested less
often than the sport thresholds (8-12 weeks).
"""

from trizones.disciplines.base import DisciplinePlugin, build_zone_table
from trizones.schemas.discipline import Discipline
from trizones.schemas.zone import ZoneDefinition

_DEFAULT_ZONES = [
    ("Z1 Recovery", 0, 68, "Active recovery HR"),
    ("Z2 Aerobic", 68, 83, "Aerobic base HR"),
    ("Z3 Tempo", 83, 94, "Tempo HR range"),
    ("Z4 Threshold", 94, 105, "Lactate threshold HR"),
    ("Z5 VO2Max", 105, 120, "VO2 max HR"),
]


class HeartRatePlugin(DisciplinePlugin):
    """Heart-rate discipline plugin implementation."""

    @property
    def discipline(self) -> Discipline:
        return Discipline.HEART_RATE

    @property
    def display_name(self) -> str:
        return "Heart Rate"

    @property
    def threshold_label(self) -> str:
        return "LTHR"

    @property
    def unit(self) -> str:
        return "bpm"

    @property
    def default_threshold(self) -> float:
        return 175.0

    @property
    def default_zones(self) -> list[ZoneDefinition]:
        return build_zone_table(_DEFAULT_ZONES)

    @property
    def test_protocol(self) -> str:
        return "30min time trial average HR"
