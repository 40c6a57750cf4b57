"""Builders for the Location collection."""

from kdi_align.alignment.errors import MalformedField, MissingField
from kdi_align.alignment.namespacing import Tier, namespace, poi_id, zone_id
from kdi_align.alignment.poi import BIKE_SHARING_PREFIX, PoiFamily
from kdi_align.models.domain import Location
from kdi_align.models.gtfs import GTFSFeed
from kdi_align.models.sources import BikeSharingStation, Placemark, Zone


def build_zone_locations(zones: list[Zone], tier: Tier) -> list[Location]:
    """Build one Location per fare zone, id "ZONE_<tier>_<zone_id>"."""
    return [
        Location(
            id=zone_id(tier, zone.zone_id),
            name=zone.zone_name,
            latitude=zone.zone_lat,
            longitude=zone.zone_lon,
        )
        for zone in zones
    ]


def build_stop_locations(feed: GTFSFeed, tier: Tier) -> list[Location]:
    """Build one Location per GTFS stop.

    Raises:
        MissingField: If a stop has no coordinates.
    """
    locations: list[Location] = []
    for stop in feed.stops:
        if stop.stop_lat is None:
            raise MissingField("stop_lat", f"stop {stop.stop_id!r}")
        if stop.stop_lon is None:
            raise MissingField("stop_lon", f"stop {stop.stop_id!r}")
        locations.append(
            Location(
                id=namespace(tier, stop.stop_id),
                name=stop.stop_name,
                latitude=stop.stop_lat,
                longitude=stop.stop_lon,
            )
        )
    return locations


def build_poi_locations(placemarks: list[Placemark], family: PoiFamily) -> list[Location]:
    """Build one Location per placemark, id "<prefix>_<index>".

    Raises:
        MissingField: If a placemark lacks the family's name field.
        MalformedField: If coordinates are not a "lon,lat" pair.
    """
    locations: list[Location] = []
    for index, placemark in enumerate(placemarks):
        latitude, longitude = placemark.position()
        locations.append(
            Location(
                id=poi_id(family.prefix, index),
                name=placemark.required_field(family.name_field),
                latitude=latitude,
                longitude=longitude,
            )
        )
    return locations


def build_bike_sharing_locations(stations: list[BikeSharingStation]) -> list[Location]:
    """Build one Location per bike-sharing station, id "BS_<station id>"."""
    locations: list[Location] = []
    for station in stations:
        if len(station.position) != 2:
            raise MalformedField("position", station.position, f"station {station.id!r}")
        locations.append(
            Location(
                id=poi_id(BIKE_SHARING_PREFIX, station.id),
                name=station.name,
                latitude=station.position[0],
                longitude=station.position[1],
            )
        )
    return locations
