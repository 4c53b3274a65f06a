import logging
from collections.abc import Iterable
from datetime import time

from ..models import FlightSummary, RawFlight
from .base import (airline_name, flight_duration, flight_iata, flight_number, require_name, require_time,
                   same_name)


def _on_route(flight: RawFlight, airport_a: str, airport_b: str) -> bool:
    origin = flight.departure.airport
    destination = flight.arrival.airport
    return ((same_name(airport_a, origin) and same_name(airport_b, destination))
            or (same_name(airport_b, origin) and same_name(airport_a, destination)))


def flights_between_airports(flights: Iterable[RawFlight], airport_a: str, airport_b: str) -> list[FlightSummary]:
    """Flights flying between the two airports in either direction, in input order.

    Only name, iata, airline, origin and destination are filled in on the returned summaries.
    """
    airport_a = require_name(airport_a, 'airport_a')
    airport_b = require_name(airport_b, 'airport_b')
    result = [
        FlightSummary(
            name=flight_number(f),
            iata=flight_iata(f),
            airline=airline_name(f),
            origin=f.departure.airport,
            destination=f.arrival.airport,
        )
        for f in flights
        if f.departure is not None and f.arrival is not None and _on_route(f, airport_a, airport_b)
    ]
    logging.debug("%d flight(s) between '%s' and '%s'", len(result), airport_a, airport_b)
    return result


def flights_departing_before(flights: Iterable[RawFlight], cutoff: time) -> list[FlightSummary]:
    """Flights whose scheduled departure wall-clock time is strictly before cutoff; the date is ignored.

    Only name, iata, airline, origin and departure are filled in on the returned summaries.
    """
    cutoff = require_time(cutoff, 'cutoff')
    result = [
        FlightSummary(
            name=flight_number(f),
            iata=flight_iata(f),
            airline=airline_name(f),
            origin=f.departure.airport,
            departure=f.departure.scheduled,
        )
        for f in flights
        if f.departure is not None and f.departure.scheduled is not None
        and f.departure.scheduled.time() < cutoff
    ]
    logging.debug("%d flight(s) departing before %s", len(result), cutoff.strftime('%H:%M'))
    return result


def sorted_by_arrival(flights: Iterable[RawFlight]) -> list[FlightSummary]:
    """Flights with a scheduled arrival, ascending by it; ties keep their input order."""
    with_arrival = [f for f in flights if f.arrival is not None and f.arrival.scheduled is not None]
    with_arrival.sort(key=lambda f: f.arrival.scheduled)
    return [
        FlightSummary(
            name=flight_number(f),
            iata=flight_iata(f),
            airline=airline_name(f),
            origin=f.departure.airport if f.departure else None,
            destination=f.arrival.airport,
            departure=f.departure.scheduled if f.departure else None,
            arrival=f.arrival.scheduled,
            duration=flight_duration(f),
        )
        for f in with_arrival
    ]
