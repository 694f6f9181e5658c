"""
Zone computation: percentage table + threshold -> absolute ranges.

Each zone is a band expressed as a percentage of the discipline's
threshold (FTP, CSS, threshold pace, LTHR).  Absolute bounds are::

    absolute = round_half_away_from_zero(pct / 100 * threshold)

Design choices
--------------
1. **Decimal arithmetic**: ``0.94 * 175`` is ``164.49999...`` in binary
   floating point; computing in :class:`~decimal.Decimal` makes exact
   halves round up deterministically.
2. **No clamping**: bounds are never re-ordered or nudged after
   rounding.  A zero-width zone is a valid (if unusual) user
   configuration and is surfaced as-is.
3. **Validate first**: an invalid threshold or zone table raises before
   anything is computed; the caller shows an error state instead.
4. **Pure**: identical inputs always produce identical outputs.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from trizones.core.exceptions import InvalidThresholdError, InvalidZoneTableError
from trizones.engine.units import format_value, unit_suffix
from trizones.schemas.threshold import ThresholdProfile
from trizones.schemas.zone import ComputedZone, ZoneDefinition

_HUNDRED = Decimal(100)


# ======================================================================
# Validation
# ======================================================================


def validate_threshold(value: float) -> None:
    """Raise :class:`InvalidThresholdError` unless *value* is positive."""
    if not value > 0:
        raise InvalidThresholdError(value)


def validate_zone_table(zones: Sequence[ZoneDefinition]) -> None:
    """Check the zone-table invariants.

    - at least one zone,
    - indices run ``1..n`` in order,
    - ``min_pct < max_pct`` for every zone,
    - ``zones[i].max_pct == zones[i + 1].min_pct`` (contiguous, ascending).

    Raises :class:`InvalidZoneTableError` on the first violation.
    """
    if not zones:
        raise InvalidZoneTableError("Zone table is empty")

    for position, zone in enumerate(zones, start=1):
        if zone.index != position:
            raise InvalidZoneTableError(f"Zone at position {position} has index {zone.index}")
        if zone.min_pct >= zone.max_pct:
            raise InvalidZoneTableError(
                f"Zone {zone.index} has min_pct {zone.min_pct} >= max_pct {zone.max_pct}"
            )

    for lower, upper in zip(zones, zones[1:]):
        if lower.max_pct != upper.min_pct:
            raise InvalidZoneTableError(
                f"Zones {lower.index} and {upper.index} are not contiguous "
                f"({lower.max_pct} != {upper.min_pct})"
            )


def is_valid_zone_table(zones: Sequence[ZoneDefinition]) -> bool:
    try:
        validate_zone_table(zones)
    except InvalidZoneTableError:
        return False
    return True


# ======================================================================
# Computation
# ======================================================================


def round_half_away(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def absolute_bound(pct: float, threshold: float) -> int:
    """``round(pct / 100 * threshold)`` with half-away-from-zero rounding."""
    return round_half_away(Decimal(str(pct)) / _HUNDRED * Decimal(str(threshold)))


def compute_zones(threshold: ThresholdProfile, zones: Sequence[ZoneDefinition]) -> list[ComputedZone]:
    """Resolve a zone table against the current threshold.

    Args:
        threshold: Current :class:`ThresholdProfile` for the discipline.
        zones: Percentage table for the **same** discipline.

    Returns:
        One :class:`ComputedZone` per input zone, in table order.

    Raises:
        InvalidThresholdError: ``threshold.value <= 0``.
        InvalidZoneTableError: empty or non-contiguous table.
    """
    validate_threshold(threshold.value)
    validate_zone_table(zones)

    discipline = threshold.discipline
    unit = unit_suffix(discipline)

    computed: list[ComputedZone] = []
    for zone in zones:
        absolute_min = absolute_bound(zone.min_pct, threshold.value)
        absolute_max = absolute_bound(zone.max_pct, threshold.value)
        computed.append(ComputedZone(index=zone.index, name=zone.name, color=zone.color,
                                     absolute_min=absolute_min, absolute_max=absolute_max,
                                     display_min=format_value(absolute_min, discipline),
                                     display_max=format_value(absolute_max, discipline), unit=unit, ))
    return computed
