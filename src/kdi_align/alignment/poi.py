"""Points-of-interest families published as KML layers."""

from dataclasses import dataclass

from kdi_align.models.domain import ParkingStopEnum


@dataclass(frozen=True)
class PoiFamily:
    """How one KML layer maps onto Location and ParkingStop entities.

    Placemarks carry no stable key, so ids are the layer prefix plus the
    placemark's position in the file.
    """

    key: str
    prefix: str
    parking_type: ParkingStopEnum
    name_field: str
    address_field: str
    slots_field: str | None  # None: one slot per placemark


CAR_SHARING = PoiFamily(
    key="car_sharing",
    prefix="CS",
    parking_type=ParkingStopEnum.CAR_SHARING,
    name_field="nomepos",
    address_field="via",
    slots_field="auto",
)

CENTRO_IN_BICI = PoiFamily(
    key="centro_in_bici",
    prefix="CIB",
    parking_type=ParkingStopEnum.BIKE_SHARING,
    name_field="desc",
    address_field="desc",
    slots_field="cicloposteggi",
)

PARCHEGGIO_PROTETTO_BICICLETTE = PoiFamily(
    key="parcheggio_protetto_biciclette",
    prefix="PPB",
    parking_type=ParkingStopEnum.BIKE_PARKING,
    name_field="park",
    address_field="via",
    slots_field="posti",
)

TAXI = PoiFamily(
    key="taxi",
    prefix="TX",
    parking_type=ParkingStopEnum.TAXI,
    name_field="nome",
    address_field="indirizzo",
    slots_field=None,
)

POI_FAMILIES: tuple[PoiFamily, ...] = (
    CAR_SHARING,
    CENTRO_IN_BICI,
    PARCHEGGIO_PROTETTO_BICICLETTE,
    TAXI,
)

BIKE_SHARING_PREFIX = "BS"
