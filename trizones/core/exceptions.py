"""
Zone engine error taxonomy.

All errors are local validation failures detected before any output is
produced.  None of them is transient: the caller must fix the input
(e.g. discard a malformed zone-table edit and keep the previous table)
instead of retrying.
"""


class ZoneEngineError(ValueError):
    """Base class for every zone engine validation failure."""


class InvalidThresholdError(ZoneEngineError):
    """Threshold value is zero or negative."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Threshold value must be positive, got {value}")


class InvalidZoneTableError(ZoneEngineError):
    """Zone table is empty, unordered or not contiguous."""


class LastZoneError(ZoneEngineError):
    """Attempt to remove the only remaining zone."""

    def __init__(self):
        super().__init__("Cannot remove the last remaining zone")


class ZoneNotFoundError(ZoneEngineError):
    """No zone with the requested index exists in the table."""

    def __init__(self, index: int, available: list[int]):
        self.index = index
        super().__init__(f"Zone {index} not found. Available: {available}")


class DisciplineMismatchError(ZoneEngineError):
    """A test entry targets a different discipline than the profile/log."""

    def __init__(self, expected: str, got: str):
        self.expected = expected
        self.got = got
        super().__init__(f"Discipline mismatch: expected '{expected}', got '{got}'")
