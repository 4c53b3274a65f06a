from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class FlightCode:
    number: str | None = None
    iata: str | None = None


@dataclass(frozen=True, slots=True)
class Airline:
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Endpoint:
    """One side of a flight: the airport and its scheduled wall-clock time."""
    airport: str | None = None
    scheduled: datetime | None = None


@dataclass(frozen=True, slots=True)
class RawFlight:
    """Flight record as it comes out of the JSON feed.

    Every nested group may be missing; a missing group means all of its leaves are missing too.
    """
    flight: FlightCode | None = None
    airline: Airline | None = None
    departure: Endpoint | None = None
    arrival: Endpoint | None = None


@dataclass(frozen=True, slots=True)
class FlightSummary:
    """Flattened view of a flight with the derived duration.

    Queries that only project a subset of the fields leave the rest as None.
    duration is arrival - departure as-is, so it is negative when the feed has arrival before departure.
    """
    name: str | None = None
    iata: str | None = None
    airline: str | None = None
    origin: str | None = None
    destination: str | None = None
    departure: datetime | None = None
    arrival: datetime | None = None
    duration: timedelta | None = None
