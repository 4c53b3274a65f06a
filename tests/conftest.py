from datetime import datetime

import pytest

from flightstats.models import Airline, Endpoint, FlightCode, RawFlight


def make_flight(number=None, iata=None, airline=None, origin=None, departure=None, destination=None, arrival=None,
                with_departure=True, with_arrival=True) -> RawFlight:
    """RawFlight factory; timestamps may be given as ISO strings."""
    if isinstance(departure, str):
        departure = datetime.fromisoformat(departure)
    if isinstance(arrival, str):
        arrival = datetime.fromisoformat(arrival)
    return RawFlight(
        flight=FlightCode(number=number, iata=iata) if number or iata else None,
        airline=Airline(name=airline) if airline else None,
        departure=Endpoint(airport=origin, scheduled=departure) if with_departure else None,
        arrival=Endpoint(airport=destination, scheduled=arrival) if with_arrival else None,
    )


@pytest.fixture
def lh100() -> RawFlight:
    return make_flight('100', 'LH100', 'Lufthansa', 'CPH', '2024-01-01T10:00', 'FRA', '2024-01-01T12:00')


@pytest.fixture
def sk200() -> RawFlight:
    return make_flight('200', 'SK200', 'SAS', 'CPH', '2024-01-01T23:30', 'OSL', '2024-01-02T01:00')


@pytest.fixture
def example_flights(lh100, sk200) -> list[RawFlight]:
    return [lh100, sk200]


@pytest.fixture
def mixed_flights(lh100, sk200) -> list[RawFlight]:
    """Complete flights mixed with records missing different groups."""
    return [
        lh100,
        make_flight('101', 'LH101', 'LUFTHANSA', 'FRA', '2024-01-01T13:10', 'CPH', '2024-01-01T14:55'),
        make_flight('300', 'JL300', None, 'Fukuoka', '2024-01-01T00:20', 'Haneda Airport', '2024-01-01T02:05'),
        sk200,
        make_flight('400', 'NH400', 'ANA', 'Haneda Airport', '2024-01-01T06:00', 'Fukuoka', None),
        make_flight('500', 'XX500', 'Lufthansa', with_departure=False, destination='FRA',
                    arrival='2024-01-01T09:00'),
        make_flight(airline='SAS', origin='OSL', departure='2024-01-01T00:45', with_arrival=False),
    ]


@pytest.fixture
def flight_factory():
    return make_flight
