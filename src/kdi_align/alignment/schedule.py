"""Builders for the GTFS-derived entities: calendars, agency, routes, trips and stops."""

from datetime import date, datetime, time, timedelta

from kdi_align.alignment.errors import AlignmentError, MalformedField, MissingField
from kdi_align.alignment.namespacing import Tier, namespace, zone_id
from kdi_align.alignment.vocabulary import (
    map_availability,
    map_bikes_allowed,
    map_direction,
    map_exception_type,
    map_route_type,
)
from kdi_align.models.domain import (
    Agency,
    Calendar,
    CalendarException,
    PublicTransportStop,
    Route,
    StopTime,
    Trip,
)
from kdi_align.models.gtfs import GTFSFeed

SECONDS_PER_DAY = 86_400
DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Service-day timestamps are anchored on 0000-01-01. Year 0 is a leap year in
# the proleptic Gregorian calendar, so month/day arithmetic is done on 2000.
SERVICE_DAY_EPOCH_YEAR = "0000"
SERVICE_DAY_CALENDAR = date(2000, 1, 1)
# Day offsets past the epoch year would wrap back to 0000-01-01
MAX_SERVICE_DAYS = 366


def format_gtfs_date(value: str, context: str = "") -> str:
    """Format a GTFS YYYYMMDD date as a midnight timestamp.

    Example: "20240101" -> "2024-01-01T00:00:00"
    """
    try:
        parsed = datetime.strptime(value.strip(), "%Y%m%d")
    except ValueError as e:
        raise MalformedField("date", value, context) from e
    return parsed.strftime(DATE_TIME_FORMAT)


def gtfs_time_to_seconds(time_str: str) -> int:
    """Convert a GTFS time string to seconds since midnight.

    GTFS times can exceed 24:00:00 for trips that extend past midnight.

    Raises:
        MalformedField: If the string is not H:MM:SS.
    """
    parts = time_str.strip().split(":")
    if len(parts) != 3:
        raise MalformedField("time", time_str, "stop_times")
    try:
        hours, minutes, seconds = (int(part) for part in parts)
    except ValueError as e:
        raise MalformedField("time", time_str, "stop_times") from e
    return hours * 3600 + minutes * 60 + seconds


def decode_service_time(seconds: int) -> tuple[int, time]:
    """Split seconds since midnight into (day offset, time of day).

    Example: 90000 -> (1, 01:00:00)
    """
    day_offset, time_of_day = divmod(seconds, SECONDS_PER_DAY)
    hours, remainder = divmod(time_of_day, 3600)
    minutes, secs = divmod(remainder, 60)
    return day_offset, time(hours, minutes, secs)


def format_service_time(seconds: int) -> str:
    """Format seconds since midnight as a timestamp relative to 0000-01-01.

    Example: 90000 -> "0000-01-02T01:00:00"

    Raises:
        MalformedField: If the time falls past the end of the epoch year.
    """
    day_offset, time_of_day = decode_service_time(seconds)
    if day_offset >= MAX_SERVICE_DAYS:
        raise MalformedField("time", seconds, "stop_times")
    day = SERVICE_DAY_CALENDAR + timedelta(days=day_offset)
    return f"{SERVICE_DAY_EPOCH_YEAR}-{day:%m-%d}T{time_of_day:%H:%M:%S}"


def _service_time(value: str | None) -> str | None:
    if value is None:
        return None
    return format_service_time(gtfs_time_to_seconds(value))


def build_calendars(feed: GTFSFeed, tier: Tier) -> list[Calendar]:
    calendars: list[Calendar] = []
    for calendar in feed.calendars:
        context = f"calendar {calendar.service_id!r}"
        calendars.append(
            Calendar(
                id=namespace(tier, calendar.service_id),
                start_date=format_gtfs_date(calendar.start_date, context),
                end_date=format_gtfs_date(calendar.end_date, context),
                monday=calendar.monday,
                tuesday=calendar.tuesday,
                wednesday=calendar.wednesday,
                thursday=calendar.thursday,
                friday=calendar.friday,
                saturday=calendar.saturday,
                sunday=calendar.sunday,
            )
        )
    return calendars


def build_calendar_exceptions(feed: GTFSFeed, tier: Tier) -> list[CalendarException]:
    return [
        CalendarException(
            calendar=namespace(tier, calendar_date.service_id),
            date=format_gtfs_date(calendar_date.date, f"service {calendar_date.service_id!r}"),
            exception=map_exception_type(calendar_date.exception_type),
        )
        for calendar_date in feed.calendar_dates
    ]


def build_agency(urban: GTFSFeed, extra_urban: GTFSFeed, email: str) -> Agency:
    """Build the single published agency from the urban feed.

    Both networks are run by the same operator, so each feed must declare
    exactly one agency; only the urban record is published.

    Raises:
        AlignmentError: If a feed does not have exactly one agency.
        MissingField: If the urban agency has no id or phone.
    """
    for label, feed in (("urban", urban), ("extra-urban", extra_urban)):
        if len(feed.agencies) != 1:
            raise AlignmentError(
                f"Expected exactly one agency in the {label} feed, found {len(feed.agencies)}"
            )

    agency = urban.agencies[0]
    if not agency.agency_id:
        raise MissingField("agency_id", f"agency {agency.agency_name!r}")
    if not agency.agency_phone:
        raise MissingField("agency_phone", f"agency {agency.agency_name!r}")

    return Agency(
        id=agency.agency_id,
        name=agency.agency_name,
        email=email,
        phone=agency.agency_phone,
        url=agency.agency_url,
    )


def build_routes(feed: GTFSFeed, tier: Tier) -> list[Route]:
    """Build routes. The agency reference stays raw: there is one agency overall.

    Raises:
        MissingField: If a route has no agency_id.
        UnsupportedCode: If a route_type has no transport mode.
    """
    routes: list[Route] = []
    for route in feed.routes:
        if not route.agency_id:
            raise MissingField("agency_id", f"route {route.route_id!r}")
        routes.append(
            Route(
                id=namespace(tier, route.route_id),
                agency=route.agency_id,
                short_name=route.route_short_name or "",
                long_name=route.route_long_name or "",
                transport=map_route_type(route.route_type),
            )
        )
    return routes


def build_trips(feed: GTFSFeed, tier: Tier) -> list[Trip]:
    trips: list[Trip] = []
    for trip in feed.trips:
        if trip.trip_headsign is None:
            raise MissingField("trip_headsign", f"trip {trip.trip_id!r}")
        trips.append(
            Trip(
                id=namespace(tier, trip.trip_id),
                route=namespace(tier, trip.route_id),
                calendar=namespace(tier, trip.service_id),
                name=trip.trip_headsign,
                direction=map_direction(trip.direction_id),
                wheelchair=map_availability(trip.wheelchair_accessible),
                bike=map_bikes_allowed(trip.bikes_allowed),
            )
        )
    return trips


def build_stop_times(feed: GTFSFeed, tier: Tier) -> list[StopTime]:
    return [
        StopTime(
            trip=namespace(tier, stop_time.trip_id),
            stop=namespace(tier, stop_time.stop_id),
            arrival=_service_time(stop_time.arrival_time),
            departure=_service_time(stop_time.departure_time),
            sequence=stop_time.stop_sequence,
        )
        for stop_time in feed.stop_times
    ]


def build_public_transport_stops(feed: GTFSFeed, tier: Tier) -> list[PublicTransportStop]:
    """Build one stop per GTFS stop; transport modes are resolved after the merge."""
    return [
        PublicTransportStop(
            location=namespace(tier, stop.stop_id),
            zone=zone_id(tier, stop.zone_id) if stop.zone_id else None,
            wheelchair=map_availability(stop.wheelchair_boarding),
        )
        for stop in feed.stops
    ]
