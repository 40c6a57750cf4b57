"""Builders for parking and bike-sharing stops."""

from kdi_align.alignment.errors import MalformedField
from kdi_align.alignment.namespacing import poi_id
from kdi_align.alignment.poi import BIKE_SHARING_PREFIX, PoiFamily
from kdi_align.models.domain import BikeSharingStop, ParkingStop, ParkingStopEnum
from kdi_align.models.sources import BikeSharingStation, Placemark


def _slots(placemark: Placemark, family: PoiFamily) -> int:
    if family.slots_field is None:
        return 1
    value = placemark.required_field(family.slots_field)
    try:
        return int(value.strip())
    except ValueError as e:
        raise MalformedField(family.slots_field, value, f"{family.key} placemark") from e


def build_parking_stops(placemarks: list[Placemark], family: PoiFamily) -> list[ParkingStop]:
    """Build one ParkingStop per placemark, pointing at the "<prefix>_<index>" Location."""
    return [
        ParkingStop(
            location=poi_id(family.prefix, index),
            type=family.parking_type,
            address=placemark.required_field(family.address_field),
            total_slots=_slots(placemark, family),
        )
        for index, placemark in enumerate(placemarks)
    ]


def build_bike_sharing_stops(stations: list[BikeSharingStation]) -> list[BikeSharingStop]:
    return [
        BikeSharingStop(
            location=poi_id(BIKE_SHARING_PREFIX, station.id),
            type=ParkingStopEnum.BIKE_SHARING,
            address=station.address,
            total_slots=station.total_slots,
            free_slots=station.slots,
            bikes=station.bikes,
        )
        for station in stations
    ]
