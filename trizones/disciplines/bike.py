"""
Bike discipline plugin.

Threshold: Functional Threshold Power (FTP), in watts.  Higher is
better; zone bounds render as ``{value}W``.
"""

from trizones.disciplines.base import DisciplinePlugin, build_zone_table
from trizones.schemas.discipline import Discipline
from trizones.schemas.zone import ZoneDefinition

_DEFAULT_ZONES = [
    ("Z1 Recovery", 0, 55, "Active recovery"),
    ("Z2 Endurance", 55, 75, "Aerobic base"),
    ("Z3 Tempo", 75, 90, "Tempo efforts"),
    ("Z4 Threshold", 90, 105, "Lactate threshold"),
    ("Z5 VO2Max", 105, 120, "VO2 max power"),
]


class BikePlugin(DisciplinePlugin):
    """Bike discipline plugin implementation."""

    @property
    def discipline(self) -> Discipline:
        return Discipline.BIKE

    @property
    def display_name(self) -> str:
        return "Bike"

    @property
    def threshold_label(self) -> str:
        return "FTP"

    @property
    def unit(self) -> str:
        return "W"

    @property
    def default_threshold(self) -> float:
        return 285.0

    @property
    def default_zones(self) -> list[ZoneDefinition]:
        return build_zone_table(_DEFAULT_ZONES)

    @property
    def test_protocol(self) -> str:
        return "20min or ramp test"

    @property
    def best_conditions(self) -> str:
        return "Rested, controlled environment"
