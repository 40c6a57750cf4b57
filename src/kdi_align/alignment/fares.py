"""Builders for fares and fare rules.

Each network publishes the same fare tables three times, once per payment
channel (cash, "carta scalare" stored-value card, mobile). The channel is
not a column: it is the table a row was read from.
"""

from kdi_align.alignment.namespacing import Tier, namespace, zone_id
from kdi_align.alignment.vocabulary import map_currency, map_payment_method
from kdi_align.models.domain import Fare, FareEnum, FareRule
from kdi_align.models.sources import FareTables

# Zone assumed by fare rules that leave origin or destination blank
DEFAULT_ZONE_ID = "0001"


def build_fares(tables: FareTables, tier: Tier) -> list[Fare]:
    fares: list[Fare] = []
    for channel in FareEnum:
        for attribute in tables.fares.get(channel, []):
            fares.append(
                Fare(
                    id=namespace(tier, attribute.fare_id),
                    price=attribute.price,
                    currency=map_currency(attribute.currency_type),
                    type=channel,
                    payment=map_payment_method(attribute.payment_method),
                    duration=attribute.transfer_duration,
                )
            )
    return fares


def build_fare_rules(tables: FareTables, tier: Tier) -> list[FareRule]:
    """Build fare rules, defaulting blank zones to DEFAULT_ZONE_ID before namespacing."""
    rules: list[FareRule] = []
    for channel in FareEnum:
        for row in tables.rules.get(channel, []):
            rules.append(
                FareRule(
                    fare=namespace(tier, row.fare_id),
                    type=channel,
                    origin=zone_id(tier, row.origin_id or DEFAULT_ZONE_ID),
                    destination=zone_id(tier, row.destination_id or DEFAULT_ZONE_ID),
                )
            )
    return rules
