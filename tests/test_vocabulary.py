"""Tests for source vocabulary mapping."""

import pytest

from kdi_align.alignment.errors import UnsupportedCode
from kdi_align.alignment.vocabulary import (
    map_availability,
    map_bikes_allowed,
    map_currency,
    map_direction,
    map_exception_type,
    map_payment_method,
    map_route_type,
)
from kdi_align.models.domain import (
    CurrencyEnum,
    DirectionEnum,
    ExceptionEnum,
    PaymentEnum,
    SupportedEnum,
    TransportEnum,
)


class TestRouteType:
    """Tests for route_type mapping."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (2, TransportEnum.TRAIN),
            (3, TransportEnum.BUS),
            (5, TransportEnum.CABLE_CAR),
            (100, TransportEnum.TRAIN),
            (109, TransportEnum.TRAIN),
            (700, TransportEnum.BUS),
            (715, TransportEnum.BUS),
        ],
    )
    def test_supported_codes(self, code: int, expected: TransportEnum) -> None:
        """Test that in-domain codes always map."""
        assert map_route_type(code) == expected

    @pytest.mark.parametrize("code", [0, 1, 4, 6, 7, 11, 12, 200, 1000])
    def test_unsupported_code_raises(self, code: int) -> None:
        """Test that out-of-domain codes are rejected, not defaulted."""
        with pytest.raises(UnsupportedCode) as exc_info:
            map_route_type(code)
        assert exc_info.value.vocabulary == "route_type"
        assert exc_info.value.code == code


class TestSupported:
    """Tests for wheelchair and bikes availability mapping."""

    def test_availability(self) -> None:
        assert map_availability(1) == SupportedEnum.SUPPORTED
        assert map_availability(2) == SupportedEnum.NOT_SUPPORTED
        assert map_availability(0) == SupportedEnum.UNKNOWN

    def test_availability_tolerates_unknown_values(self) -> None:
        """Test that missing or unexpected values fall into Unknown."""
        assert map_availability(None) == SupportedEnum.UNKNOWN
        assert map_availability(9) == SupportedEnum.UNKNOWN

    def test_bikes_allowed(self) -> None:
        assert map_bikes_allowed(1) == SupportedEnum.SUPPORTED
        assert map_bikes_allowed(2) == SupportedEnum.NOT_SUPPORTED
        assert map_bikes_allowed(0) == SupportedEnum.UNKNOWN
        assert map_bikes_allowed(None) == SupportedEnum.UNKNOWN


class TestDirection:
    """Tests for direction_id mapping."""

    def test_gtfs_values(self) -> None:
        assert map_direction(0) == DirectionEnum.OUTBOUND
        assert map_direction(1) == DirectionEnum.INBOUND

    def test_missing_direction_raises(self) -> None:
        with pytest.raises(UnsupportedCode):
            map_direction(None)


class TestExceptionType:
    """Tests for calendar_dates exception_type mapping."""

    def test_gtfs_values(self) -> None:
        assert map_exception_type(1) == ExceptionEnum.ADDED
        assert map_exception_type(2) == ExceptionEnum.REMOVED

    def test_other_value_raises(self) -> None:
        with pytest.raises(UnsupportedCode):
            map_exception_type(3)


class TestFareVocabulary:
    """Tests for payment method and currency mapping."""

    def test_payment_method(self) -> None:
        assert map_payment_method(0) == PaymentEnum.ON_BOARD
        assert map_payment_method(1) == PaymentEnum.BEFORE_BOARDING
        with pytest.raises(UnsupportedCode):
            map_payment_method(2)

    def test_currency(self) -> None:
        assert map_currency("EUR") == CurrencyEnum.EUR
        assert map_currency(" eur ") == CurrencyEnum.EUR
        with pytest.raises(UnsupportedCode):
            map_currency("USD")
