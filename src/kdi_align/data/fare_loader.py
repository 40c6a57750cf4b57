"""Loader for the per-network fare archives.

Each archive holds one folder, ``tariffegtfs<suffix>``, with the zones table
and three variants of the fare_attributes and fare_rules tables:

    tariffegtfsurbano/zones_urbano.txt
    tariffegtfsurbano/fare_attributes_urbano.txt
    tariffegtfsurbano/fare_attributes_urbano_cartascalare.txt
    tariffegtfsurbano/fare_attributes_urbano_mobile.txt
    tariffegtfsurbano/fare_rules_urbano{,_cartascalare,_mobile}.txt
"""

import logging
import zipfile
from pathlib import Path

from pydantic import BaseModel

from kdi_align.alignment.namespacing import Tier
from kdi_align.data.csv_tables import open_text, read_rows
from kdi_align.models.domain import FareEnum
from kdi_align.models.sources import FareAttribute, FareRuleRow, FareTables, Zone

logger = logging.getLogger(__name__)

TIER_SUFFIXES: dict[Tier, str] = {
    Tier.URBAN: "urbano",
    Tier.EXTRA_URBAN: "extraurbano",
}

CHANNEL_SUFFIXES: dict[FareEnum, str] = {
    FareEnum.CASH: "",
    FareEnum.CARTASCALARE: "_cartascalare",
    FareEnum.MOBILE: "_mobile",
}

ZONE_COLUMNS = ["ZONE_ID", "ZONE_NAME", "ZONE_LAT", "ZONE_LON"]
FARE_ATTRIBUTE_COLUMNS = [
    "FARE_ID",
    "PRICE",
    "CURRENCY_TYPE",
    "PAYMENT_METHOD",
    "TRANSFER_DURATION",
]
FARE_RULE_COLUMNS = ["FARE_ID", "ORIGIN_ID", "DESTINATION_ID"]


def entry_name(tier: Tier, table: str, channel: FareEnum | None = None) -> str:
    """Return the archive path of a fare table.

    Example: entry_name(Tier.URBAN, "fare_rules", FareEnum.MOBILE)
        -> "tariffegtfsurbano/fare_rules_urbano_mobile.txt"
    """
    suffix = TIER_SUFFIXES[tier]
    channel_suffix = CHANNEL_SUFFIXES[channel] if channel is not None else ""
    return f"tariffegtfs{suffix}/{table}_{suffix}{channel_suffix}.txt"


def _read_table(
    zf: zipfile.ZipFile,
    name: str,
    model: type[BaseModel],
    columns: list[str],
    required: list[str],
) -> list:
    logger.debug(f"Loading {name}...")
    # ZipFile.open raises KeyError for a missing entry
    with zf.open(name) as f:
        rows = read_rows(open_text(f), name, columns, required)
        return [model.model_validate(row) for row in rows]


def load_fare_tables(archive_path: Path, tier: Tier) -> FareTables:
    """Load zones, fares and fare rules of one network.

    Raises:
        FileNotFoundError: If the archive doesn't exist.
        KeyError: If a table is missing from the archive.
        ValueError: If a mandatory column is missing.
    """
    archive_path = Path(archive_path)
    if not archive_path.exists():
        raise FileNotFoundError(f"Fare archive not found: {archive_path}")

    with zipfile.ZipFile(archive_path, "r") as zf:
        zones = _read_table(zf, entry_name(tier, "zones"), Zone, ZONE_COLUMNS, ZONE_COLUMNS)
        fares = {
            channel: _read_table(
                zf,
                entry_name(tier, "fare_attributes", channel),
                FareAttribute,
                FARE_ATTRIBUTE_COLUMNS,
                FARE_ATTRIBUTE_COLUMNS,
            )
            for channel in FareEnum
        }
        rules = {
            channel: _read_table(
                zf,
                entry_name(tier, "fare_rules", channel),
                FareRuleRow,
                FARE_RULE_COLUMNS,
                ["FARE_ID"],
            )
            for channel in FareEnum
        }

    return FareTables(zones=zones, fares=fares, rules=rules)
