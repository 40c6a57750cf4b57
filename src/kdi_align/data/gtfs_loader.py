"""GTFS feed loader: reads the tables of a GTFS directory or ZIP into memory."""

import logging
import zipfile
from pathlib import Path
from typing import IO

from pydantic import BaseModel

from kdi_align.data.csv_tables import open_text, read_rows
from kdi_align.models.gtfs import (
    Agency,
    Calendar,
    CalendarDate,
    GTFSFeed,
    Route,
    Stop,
    StopTime,
    Trip,
)

logger = logging.getLogger(__name__)

# Table definitions: feed attribute -> (csv_filename, model, columns)
TABLE_DEFINITIONS: dict[str, tuple[str, type[BaseModel], list[str]]] = {
    "agencies": (
        "agency.txt",
        Agency,
        ["agency_id", "agency_name", "agency_url", "agency_timezone", "agency_phone"],
    ),
    "routes": (
        "routes.txt",
        Route,
        ["route_id", "agency_id", "route_short_name", "route_long_name", "route_type"],
    ),
    "stops": (
        "stops.txt",
        Stop,
        ["stop_id", "stop_name", "stop_lat", "stop_lon", "zone_id", "wheelchair_boarding"],
    ),
    "calendars": (
        "calendar.txt",
        Calendar,
        [
            "service_id",
            "monday",
            "tuesday",
            "wednesday",
            "thursday",
            "friday",
            "saturday",
            "sunday",
            "start_date",
            "end_date",
        ],
    ),
    "calendar_dates": (
        "calendar_dates.txt",
        CalendarDate,
        ["service_id", "date", "exception_type"],
    ),
    "trips": (
        "trips.txt",
        Trip,
        [
            "trip_id",
            "route_id",
            "service_id",
            "trip_headsign",
            "direction_id",
            "wheelchair_accessible",
            "bikes_allowed",
        ],
    ),
    "stop_times": (
        "stop_times.txt",
        StopTime,
        ["trip_id", "arrival_time", "departure_time", "stop_id", "stop_sequence"],
    ),
}

# Columns that must be present in the header of each table.
REQUIRED_COLUMNS: dict[str, list[str]] = {
    "agencies": ["agency_name", "agency_url"],
    "routes": ["route_id", "route_type"],
    "stops": ["stop_id", "stop_name"],
    "calendars": [
        "service_id",
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
        "start_date",
        "end_date",
    ],
    "calendar_dates": ["service_id", "date", "exception_type"],
    "trips": ["trip_id", "route_id", "service_id"],
    "stop_times": ["trip_id", "stop_id", "stop_sequence"],
}

# Files a feed may omit.
OPTIONAL_FILES = frozenset({"calendar_dates.txt"})


class GTFSLoader:
    """Loader for reading a GTFS feed into a GTFSFeed."""

    def load(self, gtfs_path: Path) -> GTFSFeed:
        """Load GTFS data from a directory or ZIP file.

        Args:
            gtfs_path: Path to GTFS directory or ZIP file.

        Returns:
            GTFSFeed with one record per row of each table.

        Raises:
            FileNotFoundError: If the path or a mandatory file doesn't exist.
            ValueError: If a mandatory column is missing.
            pydantic.ValidationError: If a row cannot be decoded.
        """
        gtfs_path = Path(gtfs_path)
        if not gtfs_path.exists():
            raise FileNotFoundError(f"GTFS path not found: {gtfs_path}")

        tables: dict[str, list[BaseModel]] = {}
        if gtfs_path.is_file() and gtfs_path.suffix == ".zip":
            with zipfile.ZipFile(gtfs_path, "r") as zf:
                names = set(zf.namelist())
                for attribute, (csv_filename, model, columns) in TABLE_DEFINITIONS.items():
                    if csv_filename not in names:
                        tables[attribute] = self._missing(csv_filename, gtfs_path)
                        continue
                    with zf.open(csv_filename) as f:
                        tables[attribute] = self._load_table(
                            attribute, model, columns, open_text(f), csv_filename
                        )
        else:
            for attribute, (csv_filename, model, columns) in TABLE_DEFINITIONS.items():
                csv_path = gtfs_path / csv_filename
                if not csv_path.exists():
                    tables[attribute] = self._missing(csv_filename, gtfs_path)
                    continue
                with open(csv_path, encoding="utf-8-sig", newline="") as f:
                    tables[attribute] = self._load_table(
                        attribute, model, columns, f, csv_filename
                    )

        return GTFSFeed.model_validate(tables)

    def _missing(self, csv_filename: str, gtfs_path: Path) -> list[BaseModel]:
        if csv_filename not in OPTIONAL_FILES:
            raise FileNotFoundError(f"{csv_filename} not found in {gtfs_path}")
        logger.warning(f"Optional file {csv_filename} not found in {gtfs_path}")
        return []

    def _load_table(
        self,
        attribute: str,
        model: type[BaseModel],
        columns: list[str],
        text_file: IO[str],
        csv_filename: str,
    ) -> list[BaseModel]:
        """Read a single CSV table into model instances."""
        logger.debug(f"Loading {attribute} from {csv_filename}...")
        required = REQUIRED_COLUMNS.get(attribute, [])
        records = [
            model.model_validate(row)
            for row in read_rows(text_file, csv_filename, columns, required)
        ]
        logger.debug(f"  Loaded {len(records):,} {attribute}")
        return records


def load_feed(gtfs_path: Path) -> GTFSFeed:
    """Load a GTFS feed from a directory or ZIP file."""
    return GTFSLoader().load(gtfs_path)
