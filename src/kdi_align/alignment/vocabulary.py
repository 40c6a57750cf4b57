"""Mapping of source enumerated codes onto the closed domain enumerations."""

from kdi_align.alignment.errors import UnsupportedCode
from kdi_align.models.domain import (
    CurrencyEnum,
    DirectionEnum,
    ExceptionEnum,
    PaymentEnum,
    SupportedEnum,
    TransportEnum,
)

# GTFS basic route types
ROUTE_TYPES: dict[int, TransportEnum] = {
    2: TransportEnum.TRAIN,
    3: TransportEnum.BUS,
    5: TransportEnum.CABLE_CAR,
}

# Extended route type ranges (Google "Hierarchical Vehicle Type")
EXTENDED_ROUTE_TYPES: list[tuple[range, TransportEnum]] = [
    (range(100, 200), TransportEnum.TRAIN),
    (range(700, 800), TransportEnum.BUS),
]

# wheelchair_boarding / wheelchair_accessible
AVAILABILITY: dict[int, SupportedEnum] = {
    1: SupportedEnum.SUPPORTED,
    2: SupportedEnum.NOT_SUPPORTED,
}

# bikes_allowed
BIKES_ALLOWED: dict[int, SupportedEnum] = {
    1: SupportedEnum.SUPPORTED,
    2: SupportedEnum.NOT_SUPPORTED,
}

DIRECTIONS: dict[int, DirectionEnum] = {
    0: DirectionEnum.OUTBOUND,
    1: DirectionEnum.INBOUND,
}

EXCEPTION_TYPES: dict[int, ExceptionEnum] = {
    1: ExceptionEnum.ADDED,
    2: ExceptionEnum.REMOVED,
}

PAYMENT_METHODS: dict[int, PaymentEnum] = {
    0: PaymentEnum.ON_BOARD,
    1: PaymentEnum.BEFORE_BOARDING,
}


def map_route_type(route_type: int) -> TransportEnum:
    """Map a GTFS route_type onto a transport mode.

    Raises:
        UnsupportedCode: If the network is not expected to run that mode.
    """
    if route_type in ROUTE_TYPES:
        return ROUTE_TYPES[route_type]
    for codes, transport in EXTENDED_ROUTE_TYPES:
        if route_type in codes:
            return transport
    raise UnsupportedCode("route_type", route_type)


def map_availability(value: int | None) -> SupportedEnum:
    """Map wheelchair_boarding/wheelchair_accessible. Never fails."""
    if value is None:
        return SupportedEnum.UNKNOWN
    return AVAILABILITY.get(value, SupportedEnum.UNKNOWN)


def map_bikes_allowed(value: int | None) -> SupportedEnum:
    """Map bikes_allowed. Never fails."""
    if value is None:
        return SupportedEnum.UNKNOWN
    return BIKES_ALLOWED.get(value, SupportedEnum.UNKNOWN)


def map_direction(direction_id: int | None) -> DirectionEnum:
    try:
        return DIRECTIONS[direction_id]  # type: ignore[index]
    except KeyError:
        raise UnsupportedCode("direction_id", direction_id) from None


def map_exception_type(exception_type: int) -> ExceptionEnum:
    try:
        return EXCEPTION_TYPES[exception_type]
    except KeyError:
        raise UnsupportedCode("exception_type", exception_type) from None


def map_payment_method(payment_method: int) -> PaymentEnum:
    try:
        return PAYMENT_METHODS[payment_method]
    except KeyError:
        raise UnsupportedCode("payment_method", payment_method) from None


def map_currency(currency_type: str) -> CurrencyEnum:
    try:
        return CurrencyEnum(currency_type.strip().upper())
    except ValueError:
        raise UnsupportedCode("currency_type", currency_type) from None
