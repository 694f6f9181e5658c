"""
Discipline plugin registry.

The set of disciplines is closed (:class:`Discipline`), so the registry is
expected to be *complete*: every member has exactly one plugin.
``trizones.disciplines`` registers the built-in plugins at import time and
then calls :meth:`DisciplineRegistry.ensure_complete`, so a discipline
added to the enum without a plugin fails on import instead of on first
lookup.
"""

from __future__ import annotations

from typing import Optional, Union

from trizones.disciplines.base import DisciplinePlugin
from trizones.schemas.discipline import Discipline


def _coerce(discipline: Union[Discipline, str]) -> Optional[Discipline]:
    """Accept enum members or their wire values (``"bike"``, ``"hr"``)."""
    try:
        return Discipline(discipline)
    except ValueError:
        return None


class DisciplineRegistry:
    """Class-level mapping ``Discipline -> DisciplinePlugin``."""

    _plugins: dict[Discipline, DisciplinePlugin] = {}

    @classmethod
    def register(cls, plugin: DisciplinePlugin) -> None:
        """Register *plugin* under its discipline.

        Raises :class:`ValueError` if the discipline already has a plugin.
        """
        discipline = Discipline(plugin.discipline)
        if discipline in cls._plugins:
            raise ValueError(f"Discipline '{discipline.value}' already registered "
                             f"by {type(cls._plugins[discipline]).__name__}")
        cls._plugins[discipline] = plugin

    @classmethod
    def get(cls, discipline: Union[Discipline, str]) -> Optional[DisciplinePlugin]:
        key = _coerce(discipline)
        return cls._plugins.get(key) if key is not None else None

    @classmethod
    def get_or_raise(cls, discipline: Union[Discipline, str]) -> DisciplinePlugin:
        """Like :meth:`get`, but raises :class:`KeyError` for unknown or unregistered disciplines."""
        plugin = cls.get(discipline)
        if plugin is None:
            raise KeyError(f"Discipline '{getattr(discipline, 'value', discipline)}' not registered. "
                           f"Available: {[d.value for d in cls._plugins]}")
        return plugin

    @classmethod
    def all(cls) -> dict[Discipline, DisciplinePlugin]:
        """Registered plugins in enum declaration order."""
        return {d: cls._plugins[d] for d in Discipline if d in cls._plugins}

    @classmethod
    def missing(cls) -> list[Discipline]:
        return [d for d in Discipline if d not in cls._plugins]

    @classmethod
    def ensure_complete(cls) -> None:
        """Raise :class:`RuntimeError` unless every discipline has a plugin."""
        missing = cls.missing()
        if missing:
            raise RuntimeError(f"No plugin registered for: {[d.value for d in missing]}")

    @classmethod
    def clear(cls) -> None:
        """Remove all plugins.  Useful for testing."""
        cls._plugins.clear()
