"""Configuration utilities.

Central place to load environment driven settings (input file, report defaults, log level).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()


@dataclass(slots=True)
class Settings:
    flights_file: Path = Path(os.getenv("FLIGHTS_FILE", "flights.json"))
    report_airline: str = os.getenv("REPORT_AIRLINE", "Lufthansa")
    report_airport_a: str = os.getenv("REPORT_AIRPORT_A", "Fukuoka")
    report_airport_b: str = os.getenv("REPORT_AIRPORT_B", "Haneda Airport")
    report_cutoff: str = os.getenv("REPORT_CUTOFF", "01:00")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
