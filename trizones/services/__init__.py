"""Service layer: caller-owned state around the pure zone engine."""

from trizones.services.zone_session import AthleteZoneSession

__all__ = ["AthleteZoneSession"]
