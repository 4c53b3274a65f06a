"""Duration aggregates over flight collections.

Per-airline totals use truncated hours (each flight's whole minutes integer-divided by 60)
while averages and the per-airline rollup use fractional hours (whole minutes / 60.0).
The two are intentionally kept apart: totals and averages of the same airline do not agree
for flights that are not a whole number of hours long.
"""
import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import timedelta

from ..models import FlightSummary, RawFlight
from .base import (airline_name, average, flight_duration, fractional_hours, require_name, same_name,
                   truncated_hours)


def _airline_durations(flights: Iterable[RawFlight], airline: str) -> list[timedelta]:
    durations = []
    for flight in flights:
        if not same_name(airline, airline_name(flight)):
            continue
        if (duration := flight_duration(flight)) is None:
            continue
        durations.append(duration)
    logging.debug("%d flight(s) with schedule found for airline '%s'", len(durations), airline)
    return durations


def total_duration_for_airline(flights: Iterable[RawFlight], airline: str) -> float:
    """Sum of truncated flight hours for one airline (case-insensitive), 0.0 when nothing matches."""
    airline = require_name(airline, 'airline')
    return float(sum(truncated_hours(d) for d in _airline_durations(flights, airline)))


def average_duration_for_airline(flights: Iterable[RawFlight], airline: str) -> float:
    """Mean flight time in fractional hours for one airline (case-insensitive), 0.0 when nothing matches."""
    airline = require_name(airline, 'airline')
    return average([fractional_hours(d) for d in _airline_durations(flights, airline)])


def average_duration(flights: Iterable[RawFlight]) -> float:
    """Mean flight time in fractional hours over every flight with both scheduled times."""
    hours = [fractional_hours(d) for f in flights if (d := flight_duration(f)) is not None]
    return average(hours)


def total_duration_by_airline(summaries: Iterable[FlightSummary]) -> dict[str, float]:
    """Fractional hours per airline, grouped by the airline value exactly as it appears on the summary."""
    totals: dict[str, float] = defaultdict(float)
    for summary in summaries:
        if summary.duration is None or summary.airline is None:
            continue
        totals[summary.airline] += fractional_hours(summary.duration)
    return dict(totals)
