"""TriZones: threshold-based training zone engine."""

__version__ = "0.1.0"
