"""Pydantic models for GTFS entities."""

from pydantic import BaseModel, Field


class Agency(BaseModel):
    """GTFS agency entity."""

    agency_id: str | None = None
    agency_name: str
    agency_url: str
    agency_timezone: str | None = None
    agency_phone: str | None = None


class Route(BaseModel):
    """GTFS route entity."""

    route_id: str
    agency_id: str | None = None
    route_short_name: str | None = None
    route_long_name: str | None = None
    route_type: int  # 2=rail, 3=bus, 5=cable car


class Stop(BaseModel):
    """GTFS stop entity."""

    stop_id: str
    stop_name: str
    stop_lat: float | None = None
    stop_lon: float | None = None
    zone_id: str | None = None
    wheelchair_boarding: int | None = None  # 0=no info, 1=accessible, 2=not accessible


class Calendar(BaseModel):
    """GTFS calendar entity for service patterns."""

    service_id: str
    monday: bool
    tuesday: bool
    wednesday: bool
    thursday: bool
    friday: bool
    saturday: bool
    sunday: bool
    start_date: str  # YYYYMMDD
    end_date: str  # YYYYMMDD


class CalendarDate(BaseModel):
    """GTFS calendar_dates entity for service exceptions."""

    service_id: str
    date: str  # YYYYMMDD
    exception_type: int  # 1=added, 2=removed


class Trip(BaseModel):
    """GTFS trip entity."""

    trip_id: str
    route_id: str
    service_id: str
    trip_headsign: str | None = None
    direction_id: int | None = None
    wheelchair_accessible: int | None = None
    bikes_allowed: int | None = None


class StopTime(BaseModel):
    """GTFS stop_times entity."""

    trip_id: str
    arrival_time: str | None = None  # HH:MM:SS (can exceed 24:00:00)
    departure_time: str | None = None
    stop_id: str
    stop_sequence: int


class GTFSFeed(BaseModel):
    """All the GTFS tables of one network."""

    agencies: list[Agency] = Field(default_factory=list)
    routes: list[Route] = Field(default_factory=list)
    stops: list[Stop] = Field(default_factory=list)
    calendars: list[Calendar] = Field(default_factory=list)
    calendar_dates: list[CalendarDate] = Field(default_factory=list)
    trips: list[Trip] = Field(default_factory=list)
    stop_times: list[StopTime] = Field(default_factory=list)
