"""
Zone table editing: add, remove and edit zones.

All three operations are pure: the input table is never modified and a
new list is returned.  Each either returns a table that satisfies the
contiguity invariant (see :func:`~trizones.engine.zones.validate_zone_table`)
or raises a named :class:`~trizones.core.exceptions.ZoneEngineError`.
Indices are renumbered ``1..n`` after every structural change.
"""

from __future__ import annotations

from typing import Optional, Sequence

from trizones.core.config import settings
from trizones.core.exceptions import InvalidZoneTableError, LastZoneError, ZoneNotFoundError
from trizones.engine.zones import validate_zone_table
from trizones.schemas.zone import NEUTRAL_ZONE_COLOR, ZoneDefinition, ZonePatch

# ======================================================================
# Helpers
# ======================================================================


def _renumber(zones: Sequence[ZoneDefinition]) -> list[ZoneDefinition]:
    return [z if z.index == i else z.model_copy(update={"index": i}) for i, z in enumerate(zones, start=1)]


def _position_of(zones: Sequence[ZoneDefinition], index: int) -> int:
    for position, zone in enumerate(zones):
        if zone.index == index:
            return position
    raise ZoneNotFoundError(index, [z.index for z in zones])


# ======================================================================
# Operations
# ======================================================================


def add_zone(zones: Sequence[ZoneDefinition], after_index: Optional[int] = None,
             width_pct: Optional[float] = None, ) -> list[ZoneDefinition]:
    """Insert a new zone of *width_pct* percentage points.

    With ``after_index=None`` (or the last index) the zone is appended:
    ``min_pct`` = last zone's ``max_pct``, ``max_pct`` = ``min_pct +
    width_pct``.  When *after_index* names an inner zone, the new zone
    goes right after it and every later zone is shifted up by
    *width_pct* so the table stays contiguous.

    *width_pct* defaults to ``settings.DEFAULT_ZONE_WIDTH_PCT``.
    """
    validate_zone_table(zones)
    if width_pct is None:
        width_pct = settings.DEFAULT_ZONE_WIDTH_PCT
    if width_pct <= 0:
        raise InvalidZoneTableError(f"New zone width must be positive, got {width_pct}")

    position = len(zones) - 1 if after_index is None else _position_of(zones, after_index)
    anchor = zones[position]

    new_zone = ZoneDefinition(index=position + 2, name=f"Z{position + 2} New Zone", min_pct=anchor.max_pct,
                              max_pct=anchor.max_pct + width_pct, color=NEUTRAL_ZONE_COLOR,
                              description="New zone description", )

    shifted = [z.model_copy(update={"min_pct": z.min_pct + width_pct, "max_pct": z.max_pct + width_pct})
               for z in zones[position + 1:]]

    result = _renumber([*zones[:position + 1], new_zone, *shifted])
    validate_zone_table(result)
    return result


def remove_zone(zones: Sequence[ZoneDefinition], index: int) -> list[ZoneDefinition]:
    """Remove zone *index* and close the gap it leaves.

    - inner zone: the lower neighbour's ``max_pct`` extends to the removed
      zone's ``max_pct``,
    - first zone: the next zone's ``min_pct`` drops to the removed zone's
      ``min_pct``,
    - last zone: simply dropped.

    Raises :class:`LastZoneError` if the table has a single zone.
    """
    validate_zone_table(zones)
    if len(zones) == 1:
        raise LastZoneError()

    position = _position_of(zones, index)
    removed = zones[position]
    remaining = [z for i, z in enumerate(zones) if i != position]

    if position == 0:
        remaining[0] = remaining[0].model_copy(update={"min_pct": removed.min_pct})
    elif position < len(zones) - 1:
        remaining[position - 1] = remaining[position - 1].model_copy(update={"max_pct": removed.max_pct})

    result = _renumber(remaining)
    validate_zone_table(result)
    return result


def edit_zone(zones: Sequence[ZoneDefinition], index: int, patch: ZonePatch) -> list[ZoneDefinition]:
    """Apply *patch* to zone *index*.

    Moving a bound drags the adjacent zone with it: a new ``min_pct``
    becomes the previous zone's ``max_pct`` and a new ``max_pct`` becomes
    the next zone's ``min_pct``.  If that still leaves an inverted or
    empty zone, :class:`InvalidZoneTableError` is raised.
    """
    validate_zone_table(zones)
    position = _position_of(zones, index)

    updates = patch.model_dump(exclude_none=True)
    result = list(zones)
    result[position] = zones[position].model_copy(update=updates)

    if "min_pct" in updates and position > 0:
        result[position - 1] = result[position - 1].model_copy(update={"max_pct": updates["min_pct"]})
    if "max_pct" in updates and position < len(zones) - 1:
        result[position + 1] = result[position + 1].model_copy(update={"min_pct": updates["max_pct"]})

    validate_zone_table(result)
    return result
