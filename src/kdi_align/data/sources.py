"""Reads every input of a run into an AlignmentSources bundle."""

import logging

from kdi_align.alignment.assembler import AlignmentSources
from kdi_align.alignment.namespacing import Tier
from kdi_align.data.bike_sharing_loader import load_bike_sharing
from kdi_align.data.config import AlignConfig
from kdi_align.data.fare_loader import load_fare_tables
from kdi_align.data.gtfs_loader import load_feed
from kdi_align.data.kml_loader import load_placemarks

logger = logging.getLogger(__name__)


def load_sources(config: AlignConfig) -> AlignmentSources:
    """Load the GTFS feeds, fare archives, KML layers and bike-sharing feed."""
    gtfs_paths = {Tier.EXTRA_URBAN: config.extraurban_gtfs, Tier.URBAN: config.urban_gtfs}
    fare_paths = {Tier.EXTRA_URBAN: config.extraurban_fare, Tier.URBAN: config.urban_fare}

    feeds = {}
    for tier, path in gtfs_paths.items():
        logger.info(f"Reading {path}")
        feeds[tier] = load_feed(path)

    fares = {}
    for tier, path in fare_paths.items():
        logger.info(f"Reading {path}")
        fares[tier] = load_fare_tables(path, tier)

    placemarks = {}
    for key, path in config.kml_paths().items():
        logger.info(f"Reading {path}")
        placemarks[key] = load_placemarks(path)

    bike_sharing = []
    if config.bike_sharing_json is not None:
        logger.info(f"Reading {config.bike_sharing_json}")
        bike_sharing = load_bike_sharing(config.bike_sharing_json)

    return AlignmentSources(
        feeds=feeds, fares=fares, placemarks=placemarks, bike_sharing=bike_sharing
    )
