"""Loader for the bike-sharing stations JSON feed."""

import logging
from pathlib import Path

from pydantic import TypeAdapter

from kdi_align.models.sources import BikeSharingStation

logger = logging.getLogger(__name__)

_STATIONS = TypeAdapter(list[BikeSharingStation])


def load_bike_sharing(json_path: Path) -> list[BikeSharingStation]:
    """Load the stations of a bike-sharing feed.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If the document is not a list of stations.
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"Bike sharing feed not found: {json_path}")
    stations = _STATIONS.validate_json(json_path.read_bytes())
    logger.debug(f"Loaded {len(stations):,} bike sharing stations from {json_path.name}")
    return stations
