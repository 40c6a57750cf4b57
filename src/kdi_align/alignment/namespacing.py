"""Canonical identifiers for the merged model.

Both networks number their stops, routes, trips and services independently,
so the same raw id can denote unrelated entities in each feed. Every raw id
is prefixed with the short code of the tier it came from, which keeps the
merged identifier space collision-free.
"""

from enum import Enum

SEPARATOR = "_"
ZONE_PREFIX = "ZONE"


class Tier(str, Enum):
    """Source network, valued by its short code."""

    URBAN = "U"
    EXTRA_URBAN = "EU"

    @property
    def code(self) -> str:
        return self.value


def namespace(tier: Tier, raw_id: str) -> str:
    """Return the canonical id of a raw source id.

    Example: namespace(Tier.URBAN, "12") -> "U_12"
    """
    return f"{tier.code}{SEPARATOR}{raw_id}"


def zone_id(tier: Tier, raw_zone_id: str) -> str:
    """Return the Location id of a fare zone.

    Example: zone_id(Tier.URBAN, "0001") -> "ZONE_U_0001"
    """
    return f"{ZONE_PREFIX}{SEPARATOR}{namespace(tier, raw_zone_id)}"


def poi_id(prefix: str, key: int | str) -> str:
    """Return the Location id of a point of interest."""
    return f"{prefix}{SEPARATOR}{key}"
