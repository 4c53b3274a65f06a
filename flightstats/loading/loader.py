"""Loading of the flight feed and strict / lenient conversion to summaries."""
import json
import logging
import os
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, TypeAlias

import dacite

from ..errors import LoadError, MissingFieldError
from ..models import FlightSummary, RawFlight

Source: TypeAlias = str | bytes | os.PathLike | list[Mapping[str, Any]]


def _parse_timestamp(value: Any) -> Any:
    # Offsets are dropped: only the wall-clock value is kept.
    if isinstance(value, str):
        return datetime.fromisoformat(value).replace(tzinfo=None)
    return value


_DACITE_CONFIG = dacite.Config(type_hooks={datetime: _parse_timestamp})


def _read_json(source: Source) -> Any:
    if isinstance(source, os.PathLike):
        with open(source, 'rt', encoding='utf-8') as f:
            return json.load(f)
    if isinstance(source, (str, bytes)):
        return json.loads(source)
    return source


def load_raw_flights(source: Source) -> list[RawFlight]:
    """Build RawFlight records, in file order, from a JSON array of flight objects.

    source is a path to a JSON file, a JSON document as str/bytes or an already parsed list.
    Nothing is filtered here: absent groups are kept as None.
    """
    try:
        data = _read_json(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LoadError(f"Flights source is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise LoadError(f"Expected a JSON array of flights, got {type(data).__name__}")

    flights = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise LoadError(f"Flight #{index} is not an object: {item!r}")
        try:
            flights.append(dacite.from_dict(data_class=RawFlight, data=item, config=_DACITE_CONFIG))
        except (dacite.DaciteError, ValueError, TypeError) as exc:
            raise LoadError(f"Flight #{index} does not match the flight record shape: {exc}") from exc

    logging.info("Loaded %d raw flights", len(flights))
    return flights


def to_summary(flight: RawFlight) -> FlightSummary:
    """Project a complete RawFlight into a FlightSummary; raises MissingFieldError on partial records."""
    if flight.flight is None:
        raise MissingFieldError('flight')
    if flight.airline is None:
        raise MissingFieldError('airline')
    if flight.departure is None or flight.departure.scheduled is None:
        raise MissingFieldError('departure.scheduled')
    if flight.arrival is None or flight.arrival.scheduled is None:
        raise MissingFieldError('arrival.scheduled')

    departure = flight.departure.scheduled
    arrival = flight.arrival.scheduled
    return FlightSummary(
        name=flight.flight.number,
        iata=flight.flight.iata,
        airline=flight.airline.name,
        origin=flight.departure.airport,
        destination=flight.arrival.airport,
        departure=departure,
        arrival=arrival,
        duration=arrival - departure,
    )


def to_summaries(flights: Iterable[RawFlight]) -> list[FlightSummary]:
    """Strict conversion: every flight must be complete, the first partial one aborts with MissingFieldError."""
    return [to_summary(flight) for flight in flights]


def to_summaries_lenient(flights: Iterable[RawFlight]) -> tuple[list[FlightSummary], int]:
    """Convert what can be converted; returns the summaries in input order and the number of skipped records."""
    summaries = []
    skipped = 0
    for flight in flights:
        try:
            summaries.append(to_summary(flight))
        except MissingFieldError as exc:
            logging.debug('Skipping flight %s: %s', flight, exc)
            skipped += 1
    if skipped:
        logging.warning('Skipped %d incomplete flight(s) while building summaries', skipped)
    return summaries, skipped
