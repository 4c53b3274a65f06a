from datetime import datetime, time, timedelta

import pytest

from flightstats.errors import InvalidArgument
from flightstats.models import FlightSummary
from flightstats.processing.filters import flights_between_airports, flights_departing_before, sorted_by_arrival


def test_between_airports_matches_both_directions(mixed_flights):
    result = flights_between_airports(mixed_flights, 'fukuoka', 'HANEDA AIRPORT')

    assert result == [
        FlightSummary(name='300', iata='JL300', airline=None, origin='Fukuoka', destination='Haneda Airport'),
        FlightSummary(name='400', iata='NH400', airline='ANA', origin='Haneda Airport', destination='Fukuoka'),
    ]


def test_between_airports_is_symmetric(mixed_flights):
    assert flights_between_airports(mixed_flights, 'CPH', 'FRA') == flights_between_airports(mixed_flights, 'FRA', 'CPH')
    assert [f.iata for f in flights_between_airports(mixed_flights, 'CPH', 'FRA')] == ['LH100', 'LH101']


def test_between_airports_needs_both_endpoints(mixed_flights):
    # XX500 arrives at FRA but has no departure group
    assert flights_between_airports(mixed_flights, 'FRA', 'OSL') == []


def test_between_airports_same_airport_twice(flight_factory):
    loop = flight_factory('7', 'AA7', 'Acme', 'CPH', '2024-01-01T10:00', 'CPH', '2024-01-01T11:00')

    assert len(flights_between_airports([loop], 'cph', 'CPH')) == 1


@pytest.mark.parametrize('a, b', [('', 'FRA'), ('CPH', ''), (None, 'FRA'), ('CPH', None)])
def test_between_airports_invalid_arguments(example_flights, a, b):
    with pytest.raises(InvalidArgument):
        flights_between_airports(example_flights, a, b)


def test_departing_before_example(example_flights):
    assert flights_departing_before(example_flights, time(0, 15)) == []


def test_departing_before_compares_time_of_day_only(mixed_flights):
    result = flights_departing_before(mixed_flights, time(1, 0))

    assert result == [
        FlightSummary(name='300', iata='JL300', origin='Fukuoka', departure=datetime(2024, 1, 1, 0, 20)),
        FlightSummary(airline='SAS', origin='OSL', departure=datetime(2024, 1, 1, 0, 45)),
    ]


def test_departing_before_is_strict(lh100):
    assert flights_departing_before([lh100], time(10, 0)) == []
    assert len(flights_departing_before([lh100], time(10, 1))) == 1


@pytest.mark.parametrize('cutoff', [None, '01:00', datetime(2024, 1, 1, 1, 0).date()])
def test_departing_before_invalid_cutoff(example_flights, cutoff):
    with pytest.raises(InvalidArgument):
        flights_departing_before(example_flights, cutoff)


def test_sorted_by_arrival_orders_and_drops_missing(mixed_flights):
    result = sorted_by_arrival(mixed_flights)

    assert [f.iata for f in result] == ['JL300', 'XX500', 'LH100', 'LH101', 'SK200']
    assert all(a.arrival <= b.arrival for a, b in zip(result, result[1:]))


def test_sorted_by_arrival_fills_available_fields(mixed_flights):
    by_iata = {f.iata: f for f in sorted_by_arrival(mixed_flights)}

    assert by_iata['SK200'] == FlightSummary(
        name='200', iata='SK200', airline='SAS', origin='CPH', destination='OSL',
        departure=datetime(2024, 1, 1, 23, 30), arrival=datetime(2024, 1, 2, 1, 0), duration=timedelta(minutes=90),
    )
    assert by_iata['XX500'].origin is None
    assert by_iata['XX500'].departure is None
    assert by_iata['XX500'].duration is None


def test_sorted_by_arrival_is_stable(flight_factory):
    flights = [
        flight_factory('1', 'AA1', 'Acme', 'A', '2024-01-01T08:00', 'B', '2024-01-01T12:00'),
        flight_factory('2', 'AA2', 'Acme', 'C', '2024-01-01T09:00', 'B', '2024-01-01T10:00'),
        flight_factory('3', 'AA3', 'Acme', 'D', '2024-01-01T10:00', 'B', '2024-01-01T12:00'),
    ]

    assert [f.name for f in sorted_by_arrival(flights)] == ['2', '1', '3']


def test_filters_on_empty_input():
    assert flights_between_airports([], 'CPH', 'FRA') == []
    assert flights_departing_before([], time(1, 0)) == []
    assert sorted_by_arrival([]) == []


def test_filters_do_not_mutate_input(mixed_flights):
    snapshot = list(mixed_flights)
    sorted_by_arrival(mixed_flights)

    assert mixed_flights == snapshot
