import math
from datetime import datetime, time, timedelta

from ..errors import InvalidArgument
from ..models import RawFlight

_SECOND = timedelta(seconds=1)


# ---------------- argument checks -----------------
def require_name(value: str | None, argument: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgument(f"'{argument}' must be a non-empty string, got {value!r}")
    return value


def require_time(value: time | None, argument: str) -> time:
    if not isinstance(value, time):
        raise InvalidArgument(f"'{argument}' must be a datetime.time, got {value!r}")
    return value


# ---------------- comparison / duration helpers -----------------
def same_name(expected: str, actual: str | None) -> bool:
    """Case-insensitive equality; a missing value never matches."""
    return actual is not None and expected.casefold() == actual.casefold()


def whole_minutes(duration: timedelta) -> int:
    """Minutes truncated toward zero, counted from the duration floored to whole seconds."""
    seconds = duration // _SECOND
    return -(-seconds // 60) if seconds < 0 else seconds // 60


def fractional_hours(duration: timedelta) -> float:
    return whole_minutes(duration) / 60.0


def truncated_hours(duration: timedelta) -> int:
    return math.trunc(whole_minutes(duration) / 60)


def average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


# ---------------- field guards -----------------
def scheduled_times(flight: RawFlight) -> tuple[datetime, datetime] | None:
    """(departure, arrival) scheduled times, or None when either one is missing."""
    if flight.departure is None or flight.arrival is None:
        return None
    if flight.departure.scheduled is None or flight.arrival.scheduled is None:
        return None
    return flight.departure.scheduled, flight.arrival.scheduled


def flight_duration(flight: RawFlight) -> timedelta | None:
    if (times := scheduled_times(flight)) is None:
        return None
    departure, arrival = times
    return arrival - departure


def flight_number(flight: RawFlight) -> str | None:
    return flight.flight.number if flight.flight else None


def flight_iata(flight: RawFlight) -> str | None:
    return flight.flight.iata if flight.flight else None


def airline_name(flight: RawFlight) -> str | None:
    return flight.airline.name if flight.airline else None
