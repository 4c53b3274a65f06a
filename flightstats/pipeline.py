"""Command line report over a flights JSON file.

Usage:

   flightstats --file flights.json --airline Lufthansa --airports Fukuoka "Haneda Airport" --before 01:00

Every option falls back to the environment driven settings (see flightstats.config).
"""
import argparse
import logging
from datetime import datetime, time
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from flightstats.config import settings
from flightstats.loading.loader import load_raw_flights, to_summaries_lenient
from flightstats.logging_config import LOG_LEVELS, setup_logging
from flightstats.processing.durations import (average_duration, average_duration_for_airline,
                                              total_duration_by_airline, total_duration_for_airline)
from flightstats.processing.filters import flights_between_airports, flights_departing_before, sorted_by_arrival

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


def _parse_cutoff(value: str) -> time:
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a HH:MM time") from exc


def render_report(**context) -> str:
    env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), trim_blocks=True, lstrip_blocks=True,
                      keep_trailing_newline=True)
    return env.get_template('report.txt.j2').render(**context)


def run_report(flights_file: Path, airline: str, airport_a: str, airport_b: str, cutoff: time) -> str:
    flights = load_raw_flights(flights_file)
    summaries, skipped = to_summaries_lenient(flights)

    logging.info(f"Running queries over {len(flights)} flights from {flights_file}")
    return render_report(
        loaded=len(flights),
        skipped=skipped,
        airline=airline,
        airline_total=total_duration_for_airline(flights, airline),
        airline_average=average_duration_for_airline(flights, airline),
        airport_a=airport_a,
        airport_b=airport_b,
        route=flights_between_airports(flights, airport_a, airport_b),
        cutoff=cutoff,
        early=flights_departing_before(flights, cutoff),
        overall_average=average_duration(flights),
        by_arrival=sorted_by_arrival(flights),
        per_airline=sorted(total_duration_by_airline(summaries).items()),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Flight schedule statistics report")
    p.add_argument("--file", type=Path, default=settings.flights_file, help="Flights JSON file")
    p.add_argument("--airline", default=settings.report_airline, help="Airline for the per-airline totals")
    p.add_argument("--airports", nargs=2, metavar=("A", "B"),
                   default=[settings.report_airport_a, settings.report_airport_b],
                   help="Airports of the route to list flights for (either direction)")
    p.add_argument("--before", metavar="HH:MM", type=_parse_cutoff, default=settings.report_cutoff,
                   help="List flights departing before this time of day")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level)
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"argument --log-level: invalid choice: '{args.log_level}' (choose from {', '.join(LOG_LEVELS)})")

    setup_logging(args.log_level)

    try:
        report = run_report(args.file, args.airline, args.airports[0], args.airports[1], args.before)
    except Exception:  # noqa: BLE001
        logging.exception("Report failed")
        return 1
    print(report, end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
