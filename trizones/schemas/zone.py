"""
Zone schemas.

A zone table is a percentage-of-threshold configuration, independent of
the athlete's current threshold value.  Table-level invariants
(contiguity, ordering, non-empty) are checked by
:func:`trizones.engine.zones.validate_zone_table`; the models below only
validate individual fields.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

NEUTRAL_ZONE_COLOR = "#6b7280"


class ZoneDefinition(BaseModel):
    """One intensity band expressed as a percentage range of threshold."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=1, description="1-based position in the table")
    name: str = Field(..., min_length=1, max_length=60)
    min_pct: float = Field(..., ge=0.0, description="Lower bound, % of threshold")
    max_pct: float = Field(..., ge=0.0, description="Upper bound, % of threshold")
    color: str = Field(NEUTRAL_ZONE_COLOR, description="Display colour token")
    description: str = Field("", max_length=500)


class ZonePatch(BaseModel):
    """Partial update applied by :func:`trizones.engine.editing.edit_zone`."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, min_length=1, max_length=60)
    min_pct: Optional[float] = Field(None, ge=0.0)
    max_pct: Optional[float] = Field(None, ge=0.0)
    color: Optional[str] = None
    description: Optional[str] = Field(None, max_length=500)


class ComputedZone(BaseModel):
    """A zone resolved against a threshold value, ready for display.

    Derived on every call, never stored.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    name: str
    color: str
    absolute_min: int
    absolute_max: int
    display_min: str
    display_max: str
    unit: str = Field(..., description="Unit suffix: 's', 'W' or 'bpm'")

    @property
    def is_degenerate(self) -> bool:
        """Zero-width zone after rounding (accepted, surfaced as-is)."""
        return self.absolute_min == self.absolute_max

    @property
    def display_range(self) -> str:
        """Range as shown in a zone table, e.g. ``'157 - 214W'``."""
        if self.unit == "s":
            return f"{self.display_min} - {self.display_max}"
        return f"{self.absolute_min} - {self.display_max}"
