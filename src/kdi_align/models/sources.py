"""Pydantic models for the non-GTFS sources: fare tables, KML and bike sharing."""

from pydantic import BaseModel, ConfigDict, Field

from kdi_align.alignment.errors import MalformedField, MissingField
from kdi_align.models.domain import FareEnum


class Zone(BaseModel):
    """Row of a zones table."""

    zone_id: str = Field(alias="ZONE_ID")
    zone_name: str = Field(alias="ZONE_NAME")
    zone_lat: float = Field(alias="ZONE_LAT")
    zone_lon: float = Field(alias="ZONE_LON")


class FareAttribute(BaseModel):
    """Row of a fare_attributes table."""

    fare_id: str = Field(alias="FARE_ID")
    price: float = Field(alias="PRICE")
    currency_type: str = Field(alias="CURRENCY_TYPE")
    payment_method: int = Field(alias="PAYMENT_METHOD")
    transfer_duration: int = Field(alias="TRANSFER_DURATION")


class FareRuleRow(BaseModel):
    """Row of a fare_rules table. Zones may be left blank."""

    fare_id: str = Field(alias="FARE_ID")
    origin_id: str | None = Field(default=None, alias="ORIGIN_ID")
    destination_id: str | None = Field(default=None, alias="DESTINATION_ID")


class FareTables(BaseModel):
    """Fare zones plus the per-channel fare and fare-rule tables of one network."""

    zones: list[Zone] = Field(default_factory=list)
    fares: dict[FareEnum, list[FareAttribute]] = Field(default_factory=dict)
    rules: dict[FareEnum, list[FareRuleRow]] = Field(default_factory=dict)


class Placemark(BaseModel):
    """A KML placemark: a point plus its SimpleData name/value pairs."""

    coordinates: str
    data: dict[str, str] = Field(default_factory=dict)

    def required_field(self, name: str) -> str:
        """Return the value of a named field.

        Raises:
            MissingField: If the placemark has no field with that name.
        """
        try:
            return self.data[name]
        except KeyError:
            raise MissingField(name, f"placemark at {self.coordinates!r}") from None

    def position(self) -> tuple[float, float]:
        """Return (latitude, longitude) from the "lon,lat" coordinates.

        Raises:
            MalformedField: If there are not exactly two numeric components.
        """
        parts = self.coordinates.strip().split(",")
        if len(parts) != 2:
            raise MalformedField("coordinates", self.coordinates, "placemark")
        try:
            longitude, latitude = (float(part) for part in parts)
        except ValueError as e:
            raise MalformedField("coordinates", self.coordinates, "placemark") from e
        return latitude, longitude


class BikeSharingStation(BaseModel):
    """Station of the bike-sharing feed."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    name: str
    address: str
    bikes: int
    slots: int = Field(description="Free slots")
    total_slots: int = Field(alias="totalSlots")
    position: list[float] = Field(description="[latitude, longitude]")
