"""
Discipline plugin system.

Import this module to register all built-in discipline plugins.  Every
member of :class:`~trizones.schemas.discipline.Discipline` must have a
plugin registered below.
"""

from trizones.disciplines.bike import BikePlugin
from trizones.disciplines.heart_rate import HeartRatePlugin
from trizones.disciplines.registry import DisciplineRegistry
from trizones.disciplines.run import RunPlugin
from trizones.disciplines.swim import SwimPlugin

# Register all built-in plugins
DisciplineRegistry.register(SwimPlugin())
DisciplineRegistry.register(BikePlugin())
DisciplineRegistry.register(RunPlugin())
DisciplineRegistry.register(HeartRatePlugin())
DisciplineRegistry.ensure_complete()

__all__ = ["DisciplineRegistry"]
