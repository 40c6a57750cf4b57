"""Assembly of the merged model from both networks and the points-of-interest layers."""

import logging
from collections import Counter
from dataclasses import dataclass, field

from pydantic import BaseModel

from kdi_align.alignment.errors import DanglingReference, DuplicateId
from kdi_align.alignment.fares import build_fare_rules, build_fares
from kdi_align.alignment.locations import (
    build_bike_sharing_locations,
    build_poi_locations,
    build_stop_locations,
    build_zone_locations,
)
from kdi_align.alignment.namespacing import Tier
from kdi_align.alignment.ordering import ordered
from kdi_align.alignment.parking import build_bike_sharing_stops, build_parking_stops
from kdi_align.alignment.poi import POI_FAMILIES
from kdi_align.alignment.schedule import (
    build_agency,
    build_calendar_exceptions,
    build_calendars,
    build_public_transport_stops,
    build_routes,
    build_stop_times,
    build_trips,
)
from kdi_align.models.domain import (
    Agency,
    BikeSharingStop,
    Calendar,
    CalendarException,
    Fare,
    FareRule,
    Location,
    ParkingStop,
    PublicTransportStop,
    Route,
    StopTime,
    TransportEnum,
    Trip,
)
from kdi_align.models.gtfs import GTFSFeed
from kdi_align.models.sources import BikeSharingStation, FareTables, Placemark

logger = logging.getLogger(__name__)

# Order in which the networks are aligned. Output does not depend on it.
TIERS: tuple[Tier, ...] = (Tier.EXTRA_URBAN, Tier.URBAN)

_TIER_LABELS = {Tier.URBAN: "urban", Tier.EXTRA_URBAN: "extraurban"}


@dataclass
class AlignmentSources:
    """Parsed inputs of one run."""

    feeds: dict[Tier, GTFSFeed]
    fares: dict[Tier, FareTables]
    placemarks: dict[str, list[Placemark]]  # PoiFamily.key -> placemarks
    bike_sharing: list[BikeSharingStation] = field(default_factory=list)


@dataclass
class AlignedModel:
    """Merged, sorted entity collections."""

    locations: list[Location] = field(default_factory=list)
    calendar_exceptions: list[CalendarException] = field(default_factory=list)
    calendars: list[Calendar] = field(default_factory=list)
    agencies: list[Agency] = field(default_factory=list)
    fare_rules: list[FareRule] = field(default_factory=list)
    parking_stops: list[ParkingStop] = field(default_factory=list)
    fares: list[Fare] = field(default_factory=list)
    bike_sharing_stops: list[BikeSharingStop] = field(default_factory=list)
    public_transport_stops: list[PublicTransportStop] = field(default_factory=list)
    stop_times: list[StopTime] = field(default_factory=list)
    trips: list[Trip] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)

    def collections(self) -> dict[str, list[BaseModel]]:
        """Return every collection keyed by its output file stem."""
        return {
            "locations": self.locations,
            "calendar_exceptions": self.calendar_exceptions,
            "calendars": self.calendars,
            "agencies": self.agencies,
            "fare_rules": self.fare_rules,
            "parking_stops": self.parking_stops,
            "fares": self.fares,
            "bike_sharing_stops": self.bike_sharing_stops,
            "public_transport_stops": self.public_transport_stops,
            "stop_times": self.stop_times,
            "trips": self.trips,
            "routes": self.routes,
        }

    def counts(self) -> dict[str, int]:
        return {name: len(entities) for name, entities in self.collections().items()}


def assemble(
    sources: AlignmentSources,
    agency_email: str,
    strict: bool = False,
    verify_references: bool = True,
) -> AlignedModel:
    """Build every collection for both networks and merge them.

    Args:
        sources: Parsed feeds, fare tables and points-of-interest layers.
        agency_email: Contact address of the agency (not part of GTFS).
        strict: Raise instead of warning when foreign keys do not resolve.
        verify_references: Check foreign keys. Callers that report them
            themselves pass False.

    Returns:
        The merged model with every collection sorted.

    Raises:
        DuplicateId: If a primary key occurs more than once.
        AlignmentError: On any other structural problem in the sources.
    """
    model = AlignedModel()

    # --- Common
    logger.info("Aligning locations")
    locations: list[Location] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} zone locations")
        locations.extend(build_zone_locations(sources.fares[tier].zones, tier))
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} stop locations")
        locations.extend(build_stop_locations(sources.feeds[tier], tier))
    for family in POI_FAMILIES:
        logger.debug(f"Aligning {family.key} locations")
        locations.extend(build_poi_locations(sources.placemarks.get(family.key, []), family))
    if sources.bike_sharing:
        logger.debug("Aligning bike_sharing locations")
        locations.extend(build_bike_sharing_locations(sources.bike_sharing))
    model.locations = ordered(locations, Location)

    logger.info("Aligning calendar exceptions")
    calendar_exceptions: list[CalendarException] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} calendar exceptions")
        calendar_exceptions.extend(build_calendar_exceptions(sources.feeds[tier], tier))
    model.calendar_exceptions = ordered(calendar_exceptions, CalendarException)

    logger.info("Aligning calendars")
    calendars: list[Calendar] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} calendars")
        calendars.extend(build_calendars(sources.feeds[tier], tier))
    model.calendars = ordered(calendars, Calendar)

    logger.info("Aligning agency")
    model.agencies = [
        build_agency(sources.feeds[Tier.URBAN], sources.feeds[Tier.EXTRA_URBAN], agency_email)
    ]

    # --- Core
    logger.info("Aligning fare rules")
    fare_rules: list[FareRule] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} fare rules")
        fare_rules.extend(build_fare_rules(sources.fares[tier], tier))
    model.fare_rules = ordered(fare_rules, FareRule)

    logger.info("Aligning parking stops")
    parking_stops: list[ParkingStop] = []
    for family in POI_FAMILIES:
        logger.debug(f"Aligning {family.key} parking stops")
        parking_stops.extend(build_parking_stops(sources.placemarks.get(family.key, []), family))
    model.parking_stops = ordered(parking_stops, ParkingStop)

    logger.info("Aligning fares")
    fares: list[Fare] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} fares")
        fares.extend(build_fares(sources.fares[tier], tier))
    model.fares = ordered(fares, Fare)

    logger.info("Aligning bike sharing stops")
    model.bike_sharing_stops = ordered(
        build_bike_sharing_stops(sources.bike_sharing), BikeSharingStop
    )

    logger.info("Aligning public transport stops")
    public_transport_stops: list[PublicTransportStop] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} public transport stops")
        public_transport_stops.extend(build_public_transport_stops(sources.feeds[tier], tier))

    logger.info("Aligning stop times")
    stop_times: list[StopTime] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} stop times")
        stop_times.extend(build_stop_times(sources.feeds[tier], tier))
    model.stop_times = ordered(stop_times, StopTime)

    logger.info("Aligning trips")
    trips: list[Trip] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} trips")
        trips.extend(build_trips(sources.feeds[tier], tier))
    model.trips = ordered(trips, Trip)

    logger.info("Aligning routes")
    routes: list[Route] = []
    for tier in TIERS:
        logger.debug(f"Aligning {_TIER_LABELS[tier]} routes")
        routes.extend(build_routes(sources.feeds[tier], tier))
    model.routes = ordered(routes, Route)

    logger.info("Resolving transport modes of public transport stops")
    model.public_transport_stops = ordered(
        resolve_stop_transports(public_transport_stops, model), PublicTransportStop
    )

    duplicates = check_unique_ids(model)
    if duplicates:
        raise DuplicateId(duplicates)

    if not verify_references:
        return model

    problems = check_references(model)
    if problems:
        if strict:
            raise DanglingReference(problems)
        for problem in problems:
            logger.warning(f"Dangling reference: {problem}")

    return model


def resolve_stop_transports(
    stops: list[PublicTransportStop], model: AlignedModel
) -> list[PublicTransportStop]:
    """Fill each stop's ptype with the transport modes of the routes serving it.

    Joins stop -> stop times -> trips -> routes. Modes are listed in
    TransportEnum declaration order; stops no trip calls at get an empty list.
    """
    route_transport = {route.id: route.transport for route in model.routes}
    trip_transport = {
        trip.id: route_transport[trip.route]
        for trip in model.trips
        if trip.route in route_transport
    }

    served: dict[str, set[TransportEnum]] = {}
    for stop_time in model.stop_times:
        transport = trip_transport.get(stop_time.trip)
        if transport is not None:
            served.setdefault(stop_time.stop, set()).add(transport)

    return [
        stop.model_copy(
            update={
                "ptype": [mode for mode in TransportEnum if mode in served.get(stop.location, ())]
            }
        )
        for stop in stops
    ]


def check_references(model: AlignedModel) -> list[str]:
    """Return a description of every foreign key that does not resolve."""
    location_ids = {location.id for location in model.locations}
    calendar_ids = {calendar.id for calendar in model.calendars}
    route_ids = {route.id for route in model.routes}
    trip_ids = {trip.id for trip in model.trips}
    fare_keys = {(fare.id, fare.type) for fare in model.fares}

    problems: list[str] = []
    for trip in model.trips:
        if trip.route not in route_ids:
            problems.append(f"trip {trip.id} -> route {trip.route}")
        if trip.calendar not in calendar_ids:
            problems.append(f"trip {trip.id} -> calendar {trip.calendar}")
    for stop_time in model.stop_times:
        if stop_time.trip not in trip_ids:
            problems.append(f"stop time {stop_time.trip}#{stop_time.sequence} -> trip")
        if stop_time.stop not in location_ids:
            problems.append(
                f"stop time {stop_time.trip}#{stop_time.sequence} -> stop {stop_time.stop}"
            )
    for exception in model.calendar_exceptions:
        if exception.calendar not in calendar_ids:
            problems.append(f"calendar exception {exception.date} -> calendar {exception.calendar}")
    for rule in model.fare_rules:
        if (rule.fare, rule.type) not in fare_keys:
            problems.append(f"fare rule -> fare {rule.fare} ({rule.type.value})")
        for zone in (rule.origin, rule.destination):
            if zone not in location_ids:
                problems.append(f"fare rule {rule.fare} -> zone {zone}")
    for stop in model.public_transport_stops:
        if stop.location not in location_ids:
            problems.append(f"public transport stop -> location {stop.location}")
        if stop.zone is not None and stop.zone not in location_ids:
            problems.append(f"public transport stop {stop.location} -> zone {stop.zone}")
    for parking in [*model.parking_stops, *model.bike_sharing_stops]:
        if parking.location not in location_ids:
            problems.append(f"{parking.type.value} stop -> location {parking.location}")
    return problems


def check_unique_ids(model: AlignedModel) -> list[str]:
    """Return a description of every primary key that occurs more than once."""
    keyed: list[tuple[str, list[str]]] = [
        ("location", [location.id for location in model.locations]),
        ("calendar", [calendar.id for calendar in model.calendars]),
        ("route", [route.id for route in model.routes]),
        ("trip", [trip.id for trip in model.trips]),
        ("fare", [f"{fare.id} ({fare.type.value})" for fare in model.fares]),
        ("stop time", [f"{st.trip}#{st.sequence}" for st in model.stop_times]),
    ]

    duplicates: list[str] = []
    for kind, keys in keyed:
        for key, count in sorted(Counter(keys).items()):
            if count > 1:
                duplicates.append(f"{kind} {key} x{count}")
    return duplicates
