"""Tests for fare and fare-rule builders."""

import pytest

from kdi_align.alignment.errors import UnsupportedCode
from kdi_align.alignment.fares import build_fare_rules, build_fares
from kdi_align.alignment.namespacing import Tier
from kdi_align.models.domain import CurrencyEnum, FareEnum, PaymentEnum
from kdi_align.models.sources import FareAttribute, FareRuleRow, FareTables


class TestFares:
    """Tests for fares."""

    def test_one_fare_per_channel(self, urban_fares: FareTables) -> None:
        """Test that each channel table yields its own fare with the same id."""
        fares = build_fares(urban_fares, Tier.URBAN)
        assert [(fare.id, fare.type) for fare in fares] == [
            ("U_U1", FareEnum.CASH),
            ("U_U1", FareEnum.CARTASCALARE),
            ("U_U1", FareEnum.MOBILE),
        ]
        assert [fare.price for fare in fares] == [1.2, 1.1, 1.0]

    def test_decoded_fields(self, urban_fares: FareTables) -> None:
        fare = build_fares(urban_fares, Tier.URBAN)[0]
        assert fare.currency == CurrencyEnum.EUR
        assert fare.payment == PaymentEnum.BEFORE_BOARDING
        assert fare.duration == 4200

    def test_unknown_currency_raises(self) -> None:
        attribute = FareAttribute.model_validate(
            {
                "FARE_ID": "1",
                "PRICE": "1.0",
                "CURRENCY_TYPE": "CHF",
                "PAYMENT_METHOD": "0",
                "TRANSFER_DURATION": "0",
            }
        )
        tables = FareTables(fares={FareEnum.CASH: [attribute]})
        with pytest.raises(UnsupportedCode):
            build_fares(tables, Tier.URBAN)


class TestFareRules:
    """Tests for fare rules."""

    def test_missing_zones_default_before_namespacing(self, urban_fares: FareTables) -> None:
        """Test that a blank ORIGIN_ID becomes ZONE_U_0001."""
        rules = build_fare_rules(urban_fares, Tier.URBAN)
        cash = next(rule for rule in rules if rule.type == FareEnum.CASH)
        assert cash.fare == "U_U1"
        assert cash.origin == "ZONE_U_0001"
        assert cash.destination == "ZONE_U_0001"

    def test_default_zone_is_tier_specific(self) -> None:
        """Test that the default zone is namespaced with the rule's tier."""
        row = FareRuleRow.model_validate({"FARE_ID": "E9", "DESTINATION_ID": "0002"})
        tables = FareTables(rules={FareEnum.MOBILE: [row]})
        rule = build_fare_rules(tables, Tier.EXTRA_URBAN)[0]
        assert rule.origin == "ZONE_EU_0001"
        assert rule.destination == "ZONE_EU_0002"
        assert rule.type == FareEnum.MOBILE

    def test_explicit_zones(self, extraurban_fares: FareTables) -> None:
        rules = build_fare_rules(extraurban_fares, Tier.EXTRA_URBAN)
        assert rules[0].fare == "EU_E2"
        assert rules[0].origin == "ZONE_EU_0001"
        assert rules[0].destination == "ZONE_EU_0002"
        assert {rule.type for rule in rules} == set(FareEnum)
