"""Total orders for every entity kind.

Sources are iterated in whatever order their containers yield, so every
merged collection is sorted on a key that identifies its entities before it
is written. Published snapshots are then byte-stable from run to run.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from kdi_align.models.domain import (
    Agency,
    BikeSharingStop,
    Calendar,
    CalendarException,
    Fare,
    FareEnum,
    FareRule,
    Location,
    ParkingStop,
    PublicTransportStop,
    Route,
    StopTime,
    Trip,
)

T = TypeVar("T")

_CHANNEL_RANK = {channel: rank for rank, channel in enumerate(FareEnum)}

SORT_KEYS: dict[type, Callable[[Any], Any]] = {
    Location: lambda location: location.id,
    Agency: lambda agency: agency.id,
    Calendar: lambda calendar: calendar.id,
    CalendarException: lambda exception: (exception.calendar, exception.date),
    Route: lambda route: route.id,
    Trip: lambda trip: trip.id,
    StopTime: lambda stop_time: (stop_time.trip, stop_time.sequence),
    Fare: lambda fare: (fare.id, _CHANNEL_RANK[fare.type]),
    FareRule: lambda rule: (rule.fare, _CHANNEL_RANK[rule.type], rule.origin, rule.destination),
    ParkingStop: lambda stop: stop.location,
    BikeSharingStop: lambda stop: stop.location,
    PublicTransportStop: lambda stop: stop.location,
}


def sort_key(kind: type) -> Callable[[Any], Any]:
    """Return the sort key of an entity kind.

    Raises:
        KeyError: If the kind has no registered order.
    """
    return SORT_KEYS[kind]


def ordered(entities: Iterable[T], kind: type[T]) -> list[T]:
    """Return entities sorted by the order of their kind."""
    return sorted(entities, key=sort_key(kind))
