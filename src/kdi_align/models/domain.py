"""Pydantic models for the aligned open-data entities."""

from enum import Enum

from pydantic import BaseModel, Field


class ParkingStopEnum(str, Enum):
    """Family of a points-of-interest stop."""

    BIKE_SHARING = "BikeSharing"
    BIKE_PARKING = "BikeParking"
    CAR_SHARING = "CarSharing"
    TAXI = "Taxi"


class PaymentEnum(str, Enum):
    """When a fare is paid."""

    ON_BOARD = "OnBoard"
    BEFORE_BOARDING = "BeforeBoarding"


class CurrencyEnum(str, Enum):
    EUR = "EUR"


class FareEnum(str, Enum):
    """Payment channel a fare table was published for."""

    CASH = "Cash"
    CARTASCALARE = "Cartascalare"
    MOBILE = "Mobile"


class SupportedEnum(str, Enum):
    UNKNOWN = "Unknown"
    SUPPORTED = "Supported"
    NOT_SUPPORTED = "NotSupported"


class DirectionEnum(str, Enum):
    OUTBOUND = "Outbound"
    INBOUND = "Inbound"


class ExceptionEnum(str, Enum):
    ADDED = "Added"
    REMOVED = "Removed"


class TransportEnum(str, Enum):
    """Transport mode of a route."""

    TRAIN = "Train"
    BUS = "Bus"
    CABLE_CAR = "CableCar"


# Enumerations published as standalone documents: file stem -> enum
ENUM_DOCUMENTS: dict[str, type[Enum]] = {
    "payment_enum": PaymentEnum,
    "parking_stop_enum": ParkingStopEnum,
    "currency_enum": CurrencyEnum,
    "fare_enum": FareEnum,
    "supported_enum": SupportedEnum,
    "direction_enum": DirectionEnum,
    "exception_enum": ExceptionEnum,
    "transport_enum": TransportEnum,
}


# Common


class Location(BaseModel):
    """A geo-referenced place: fare zone, transit stop or point of interest."""

    id: str
    name: str
    latitude: float
    longitude: float


class CalendarException(BaseModel):
    calendar: str
    date: str = Field(description="Service date as YYYY-MM-DDT00:00:00")
    exception: ExceptionEnum


class Calendar(BaseModel):
    """Weekly service pattern."""

    id: str
    start_date: str = Field(serialization_alias="startDate")
    end_date: str = Field(serialization_alias="endDate")
    monday: bool
    tuesday: bool
    wednesday: bool
    thursday: bool
    friday: bool
    saturday: bool
    sunday: bool


class Agency(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    url: str


# Core


class FareRule(BaseModel):
    """Fare applicable between two fare zones."""

    fare: str
    type: FareEnum = Field(description="Channel of the referenced fare")
    origin: str
    destination: str


class Fare(BaseModel):
    id: str
    price: float
    currency: CurrencyEnum
    type: FareEnum
    payment: PaymentEnum
    duration: int = Field(description="Transfer duration in seconds")


class ParkingStop(BaseModel):
    location: str
    type: ParkingStopEnum
    address: str
    total_slots: int = Field(serialization_alias="totalSlots")


class BikeSharingStop(BaseModel):
    location: str
    type: ParkingStopEnum = ParkingStopEnum.BIKE_SHARING
    address: str
    total_slots: int = Field(serialization_alias="totalSlots")
    free_slots: int = Field(serialization_alias="freeSlots")
    bikes: int


class PublicTransportStop(BaseModel):
    location: str
    zone: str | None = None
    ptype: list[TransportEnum] = Field(
        default_factory=list, description="Transport modes serving the stop"
    )
    wheelchair: SupportedEnum


class StopTime(BaseModel):
    trip: str
    stop: str
    arrival: str | None = Field(default=None, description="Service-day timestamp")
    departure: str | None = Field(default=None, description="Service-day timestamp")
    sequence: int


class Trip(BaseModel):
    id: str
    route: str
    calendar: str
    name: str
    direction: DirectionEnum
    wheelchair: SupportedEnum
    bike: SupportedEnum


class Route(BaseModel):
    id: str
    agency: str
    short_name: str = Field(serialization_alias="shortName")
    long_name: str = Field(serialization_alias="longName")
    transport: TransportEnum
