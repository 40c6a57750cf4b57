"""Tests for parking and bike-sharing stop builders."""

import pytest

from kdi_align.alignment.errors import MalformedField, MissingField
from kdi_align.alignment.parking import build_bike_sharing_stops, build_parking_stops
from kdi_align.alignment.poi import (
    CAR_SHARING,
    CENTRO_IN_BICI,
    PARCHEGGIO_PROTETTO_BICICLETTE,
    TAXI,
)
from kdi_align.models.domain import ParkingStopEnum
from kdi_align.models.sources import BikeSharingStation, Placemark


class TestParkingStops:
    """Tests for KML-derived parking stops."""

    def test_car_sharing(self, placemarks: dict[str, list[Placemark]]) -> None:
        stops = build_parking_stops(placemarks["car_sharing"], CAR_SHARING)
        assert [stop.location for stop in stops] == ["CS_0", "CS_1"]
        assert stops[0].type == ParkingStopEnum.CAR_SHARING
        assert stops[0].address == "Piazza Dante 1"
        assert stops[0].total_slots == 3

    def test_centro_in_bici(self, placemarks: dict[str, list[Placemark]]) -> None:
        stop = build_parking_stops(placemarks["centro_in_bici"], CENTRO_IN_BICI)[0]
        assert stop.location == "CIB_0"
        assert stop.type == ParkingStopEnum.BIKE_SHARING
        assert stop.address == "Stazione"
        assert stop.total_slots == 20

    def test_protected_bike_parking(self, placemarks: dict[str, list[Placemark]]) -> None:
        stop = build_parking_stops(
            placemarks["parcheggio_protetto_biciclette"], PARCHEGGIO_PROTETTO_BICICLETTE
        )[0]
        assert stop.location == "PPB_0"
        assert stop.type == ParkingStopEnum.BIKE_PARKING
        assert stop.total_slots == 40

    def test_taxi_has_one_slot(self, placemarks: dict[str, list[Placemark]]) -> None:
        stop = build_parking_stops(placemarks["taxi"], TAXI)[0]
        assert stop.location == "TX_0"
        assert stop.type == ParkingStopEnum.TAXI
        assert stop.address == "Piazza Dante"
        assert stop.total_slots == 1

    def test_missing_slots_field_raises(self) -> None:
        placemark = Placemark(coordinates="11.1,46.0", data={"via": "Via Roma"})
        with pytest.raises(MissingField) as exc_info:
            build_parking_stops([placemark], CAR_SHARING)
        assert exc_info.value.field == "auto"

    def test_non_numeric_slots_raise(self) -> None:
        placemark = Placemark(coordinates="11.1,46.0", data={"via": "Via Roma", "auto": "tre"})
        with pytest.raises(MalformedField):
            build_parking_stops([placemark], CAR_SHARING)


class TestBikeSharingStops:
    """Tests for bike-sharing stops."""

    def test_counts(self, bike_sharing: list[BikeSharingStation]) -> None:
        stop = build_bike_sharing_stops(bike_sharing)[0]
        assert stop.location == "BS_7"
        assert stop.type == ParkingStopEnum.BIKE_SHARING
        assert stop.total_slots == 12
        assert stop.free_slots == 8
        assert stop.bikes == 4

    def test_serialized_names(self, bike_sharing: list[BikeSharingStation]) -> None:
        stop = build_bike_sharing_stops(bike_sharing)[0]
        dumped = stop.model_dump(mode="json", by_alias=True)
        assert dumped == {
            "location": "BS_7",
            "type": "BikeSharing",
            "address": "Piazza Venezia",
            "totalSlots": 12,
            "freeSlots": 8,
            "bikes": 4,
        }
