"""
Unit tests for aggregate value conversion in the service layer.
"""
import pytest
from decimal import Decimal, InvalidOperation
from unittest.mock import AsyncMock

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.common.exceptions import DataAccessError
from backoffice.common.services import AppService, to_decimal


class TestToDecimal:

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, Decimal("0")),
            (Decimal("12.34"), Decimal("12.34")),
            (5, Decimal("5")),
            (0.1, Decimal("0.1")),
            ("99.99", Decimal("99.99")),
        ],
    )
    @pytest.mark.unit
    def test_numeric_values(self, value, expected):
        assert to_decimal(value) == expected

    @pytest.mark.unit
    def test_float_keeps_driver_digits(self):
        # Decimal(0.1) would be 0.1000000000000000055511151231257827...
        assert str(to_decimal(0.1)) == "0.1"

    @pytest.mark.parametrize("value", [True, object(), [1]])
    @pytest.mark.unit
    def test_non_numeric_type(self, value):
        with pytest.raises(TypeError):
            to_decimal(value)

    @pytest.mark.unit
    def test_non_numeric_string(self):
        with pytest.raises(InvalidOperation):
            to_decimal("abc")


class TestAppServiceConversion:

    @pytest.fixture
    def service(self) -> AppService:
        return AppService(AsyncMock(spec=AsyncSession))

    @pytest.mark.unit
    def test_malformed_decimal_becomes_data_access_error(self, service: AppService):
        with pytest.raises(DataAccessError) as exc_info:
            service._decimal("n/a", "Failed to fetch sales stats")
        assert exc_info.value.message == "Failed to fetch sales stats"
        assert isinstance(exc_info.value.cause, InvalidOperation)

    @pytest.mark.unit
    def test_malformed_int_becomes_data_access_error(self, service: AppService):
        with pytest.raises(DataAccessError):
            service._int("seven", "Failed to fetch product stats")

    @pytest.mark.unit
    def test_missing_int_is_zero(self, service: AppService):
        assert service._int(None, "Failed to fetch product stats") == 0
