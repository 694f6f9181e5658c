"""Zone engine: pure zone computation, editing, freshness and progression."""

from trizones.engine.editing import add_zone, edit_zone, remove_zone
from trizones.engine.freshness import FreshnessConfig, assess_freshness, classify_freshness
from trizones.engine.progression import record_test, trend_direction, trend_series
from trizones.engine.zones import compute_zones, validate_zone_table

__all__ = [
    "add_zone",
    "edit_zone",
    "remove_zone",
    "FreshnessConfig",
    "assess_freshness",
    "classify_freshness",
    "record_test",
    "trend_direction",
    "trend_series",
    "compute_zones",
    "validate_zone_table",
]
