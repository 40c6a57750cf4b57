"""Shared in-memory sources for alignment tests."""

import pytest

from kdi_align.alignment.assembler import AlignmentSources
from kdi_align.alignment.namespacing import Tier
from kdi_align.models.domain import FareEnum
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
from kdi_align.models.sources import (
    BikeSharingStation,
    FareAttribute,
    FareRuleRow,
    FareTables,
    Placemark,
    Zone,
)


def make_agency() -> Agency:
    return Agency(
        agency_id="12",
        agency_name="Trentino Trasporti",
        agency_url="https://www.trentinotrasporti.it",
        agency_timezone="Europe/Rome",
        agency_phone="0461 821000",
    )


def make_calendar(service_id: str) -> Calendar:
    return Calendar(
        service_id=service_id,
        monday=True,
        tuesday=True,
        wednesday=True,
        thursday=True,
        friday=True,
        saturday=False,
        sunday=False,
        start_date="20240101",
        end_date="20241231",
    )


def make_fare(fare_id: str, price: float) -> FareAttribute:
    return FareAttribute.model_validate(
        {
            "FARE_ID": fare_id,
            "PRICE": price,
            "CURRENCY_TYPE": "EUR",
            "PAYMENT_METHOD": 1,
            "TRANSFER_DURATION": 4200,
        }
    )


def make_rule(fare_id: str, origin: str | None, destination: str | None) -> FareRuleRow:
    return FareRuleRow.model_validate(
        {"FARE_ID": fare_id, "ORIGIN_ID": origin, "DESTINATION_ID": destination}
    )


@pytest.fixture
def urban_feed() -> GTFSFeed:
    """Urban network: a bus line and the cable car, sharing stop 13."""
    return GTFSFeed(
        agencies=[make_agency()],
        routes=[
            Route(
                route_id="5",
                agency_id="12",
                route_short_name="5",
                route_long_name="Piazza Dante - Povo",
                route_type=3,
            ),
            Route(
                route_id="FUN",
                agency_id="12",
                route_short_name="Funivia",
                route_long_name="Trento - Sardagna",
                route_type=5,
            ),
        ],
        stops=[
            Stop(
                stop_id="12",
                stop_name="Piazza Dante",
                stop_lat=46.07,
                stop_lon=11.12,
                zone_id="0001",
                wheelchair_boarding=1,
            ),
            Stop(stop_id="13", stop_name="Funivia", stop_lat=46.071, stop_lon=11.115),
        ],
        calendars=[make_calendar("WD")],
        calendar_dates=[CalendarDate(service_id="WD", date="20240501", exception_type=2)],
        trips=[
            Trip(
                trip_id="T1",
                route_id="5",
                service_id="WD",
                trip_headsign="Povo",
                direction_id=0,
                wheelchair_accessible=1,
                bikes_allowed=2,
            ),
            Trip(
                trip_id="T2",
                route_id="FUN",
                service_id="WD",
                trip_headsign="Sardagna",
                direction_id=1,
            ),
        ],
        stop_times=[
            StopTime(
                trip_id="T1",
                arrival_time="08:00:00",
                departure_time="08:00:30",
                stop_id="12",
                stop_sequence=1,
            ),
            StopTime(
                trip_id="T1",
                arrival_time="25:00:00",
                departure_time="25:00:00",
                stop_id="13",
                stop_sequence=2,
            ),
            StopTime(
                trip_id="T2",
                arrival_time="09:00:00",
                departure_time="09:00:00",
                stop_id="13",
                stop_sequence=1,
            ),
        ],
    )


@pytest.fixture
def extraurban_feed() -> GTFSFeed:
    """Extra-urban network reusing raw ids of the urban one."""
    return GTFSFeed(
        agencies=[make_agency()],
        routes=[
            Route(
                route_id="5",
                agency_id="12",
                route_short_name="FTV",
                route_long_name="Trento - Bassano",
                route_type=2,
            ),
        ],
        stops=[
            Stop(
                stop_id="12",
                stop_name="Trento FS",
                stop_lat=46.072,
                stop_lon=11.119,
                zone_id="0002",
                wheelchair_boarding=2,
            ),
        ],
        calendars=[make_calendar("WD")],
        calendar_dates=[],
        trips=[
            Trip(
                trip_id="T1",
                route_id="5",
                service_id="WD",
                trip_headsign="Bassano",
                direction_id=1,
                bikes_allowed=1,
            ),
        ],
        stop_times=[
            StopTime(
                trip_id="T1",
                arrival_time="07:00:00",
                departure_time="07:00:00",
                stop_id="12",
                stop_sequence=1,
            ),
        ],
    )


def make_zone(zone_id: str, name: str, lat: float, lon: float) -> Zone:
    return Zone.model_validate(
        {"ZONE_ID": zone_id, "ZONE_NAME": name, "ZONE_LAT": lat, "ZONE_LON": lon}
    )


@pytest.fixture
def urban_fares() -> FareTables:
    return FareTables(
        zones=[make_zone("0001", "Trento", 46.07, 11.12)],
        fares={
            FareEnum.CASH: [make_fare("U1", 1.2)],
            FareEnum.CARTASCALARE: [make_fare("U1", 1.1)],
            FareEnum.MOBILE: [make_fare("U1", 1.0)],
        },
        rules={
            FareEnum.CASH: [make_rule("U1", None, None)],
            FareEnum.CARTASCALARE: [make_rule("U1", "0001", "0001")],
            FareEnum.MOBILE: [make_rule("U1", "0001", None)],
        },
    )


@pytest.fixture
def extraurban_fares() -> FareTables:
    return FareTables(
        zones=[
            make_zone("0001", "Trento", 46.07, 11.12),
            make_zone("0002", "Rovereto", 45.89, 11.04),
        ],
        fares={
            FareEnum.CASH: [make_fare("E1", 2.5), make_fare("E2", 3.5)],
            FareEnum.CARTASCALARE: [make_fare("E1", 2.2)],
            FareEnum.MOBILE: [make_fare("E1", 2.0)],
        },
        rules={
            FareEnum.CASH: [make_rule("E2", "0001", "0002"), make_rule("E1", "0001", "0001")],
            FareEnum.CARTASCALARE: [make_rule("E1", "0001", "0001")],
            FareEnum.MOBILE: [make_rule("E1", "0002", "0002")],
        },
    )


@pytest.fixture
def placemarks() -> dict[str, list[Placemark]]:
    return {
        "car_sharing": [
            Placemark(
                coordinates="11.12,46.07",
                data={"nomepos": "Piazza Dante", "via": "Piazza Dante 1", "auto": "3"},
            ),
            Placemark(
                coordinates="11.13,46.06",
                data={"nomepos": "Muse", "via": "Corso del Lavoro 3", "auto": "2"},
            ),
        ],
        "centro_in_bici": [
            Placemark(
                coordinates="11.119,46.072",
                data={"desc": "Stazione", "cicloposteggi": "20"},
            ),
        ],
        "parcheggio_protetto_biciclette": [
            Placemark(
                coordinates="11.118,46.071",
                data={"park": "Bicipark", "via": "Via Dogana", "posti": "40"},
            ),
        ],
        "taxi": [
            Placemark(
                coordinates="11.12,46.072",
                data={"nome": "Taxi Stazione", "indirizzo": "Piazza Dante"},
            ),
        ],
    }


@pytest.fixture
def bike_sharing() -> list[BikeSharingStation]:
    return [
        BikeSharingStation(
            id="7",
            name="Piazza Venezia",
            address="Piazza Venezia",
            bikes=4,
            slots=8,
            total_slots=12,
            position=[46.068, 11.127],
        ),
    ]


@pytest.fixture
def sources(
    urban_feed: GTFSFeed,
    extraurban_feed: GTFSFeed,
    urban_fares: FareTables,
    extraurban_fares: FareTables,
    placemarks: dict[str, list[Placemark]],
    bike_sharing: list[BikeSharingStation],
) -> AlignmentSources:
    return AlignmentSources(
        feeds={Tier.URBAN: urban_feed, Tier.EXTRA_URBAN: extraurban_feed},
        fares={Tier.URBAN: urban_fares, Tier.EXTRA_URBAN: extraurban_fares},
        placemarks=placemarks,
        bike_sharing=bike_sharing,
    )
