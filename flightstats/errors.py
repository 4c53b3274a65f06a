class FlightStatsError(Exception):
    """Base class for errors raised by flightstats."""


class LoadError(FlightStatsError):
    """The input could not be turned into a list of flight records."""


class MissingFieldError(FlightStatsError, AttributeError):
    """A record lacks a field that a strict conversion requires."""

    def __init__(self, field: str):
        super().__init__(f"Flight record has no '{field}'")
        self.field = field


class InvalidArgument(FlightStatsError, ValueError):
    """A caller supplied argument is missing, empty or of the wrong type."""
