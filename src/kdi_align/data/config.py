from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlignConfig(BaseSettings):
    """Input and output locations of an alignment run.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # GTFS feeds
    urban_gtfs: Path = Field(default=Path("data/urban.zip"), alias="KDI_URBAN_GTFS")
    extraurban_gtfs: Path = Field(
        default=Path("data/extraurban.zip"), alias="KDI_EXTRAURBAN_GTFS"
    )

    # Fare archives
    urban_fare: Path = Field(default=Path("data/urban_fare.zip"), alias="KDI_URBAN_FARE")
    extraurban_fare: Path = Field(
        default=Path("data/extraurban_fare.zip"), alias="KDI_EXTRAURBAN_FARE"
    )

    # Points-of-interest layers
    car_sharing_kml: Path = Field(default=Path("data/car_sharing.kml"), alias="KDI_CAR_SHARING")
    centro_in_bici_kml: Path = Field(
        default=Path("data/centro_in_bici.kml"), alias="KDI_CENTRO_IN_BICI"
    )
    parcheggio_protetto_biciclette_kml: Path = Field(
        default=Path("data/parcheggio_protetto_biciclette.kml"),
        alias="KDI_PARCHEGGIO_PROTETTO_BICICLETTE",
    )
    taxi_kml: Path = Field(default=Path("data/taxi.kml"), alias="KDI_TAXI")
    bike_sharing_json: Path | None = Field(default=None, alias="KDI_BIKE_SHARING")

    output_dir: Path = Field(default=Path("alignment"), alias="KDI_OUTPUT_DIR")

    # Not part of GTFS
    agency_email: str = Field(default="info@trentinotrasporti.it", alias="KDI_AGENCY_EMAIL")

    # Raise on dangling foreign keys instead of logging them
    strict_references: bool = Field(default=False, alias="KDI_STRICT_REFERENCES")

    def kml_paths(self) -> dict[str, Path]:
        """KML layer paths keyed by points-of-interest family."""
        return {
            "car_sharing": self.car_sharing_kml,
            "centro_in_bici": self.centro_in_bici_kml,
            "parcheggio_protetto_biciclette": self.parcheggio_protetto_biciclette_kml,
            "taxi": self.taxi_kml,
        }


@lru_cache
def get_align_config() -> AlignConfig:
    """Get alignment configuration (cached singleton).

    Returns:
        AlignConfig with values from .env file or environment variables.
    """
    return AlignConfig()
