import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy import Executable, Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.common.exceptions import DataAccessError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """
    Convert an aggregate value returned by the store to Decimal.

    A missing aggregate (``SUM`` over no rows) is zero. Floats are converted
    through ``str`` so the value keeps the digits the driver produced.

    Raises:
        TypeError: If the value is not numeric
        InvalidOperation: If the value is a string that is not a number
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Unexpected aggregate value {value!r}")
    return Decimal(str(value))


class AppService:
    """
    Base service class for read-only aggregations.

    Holds the request session and funnels every statement and every
    aggregate conversion through helpers that turn store failures into
    DataAccessError. ``failure`` is the client-facing message of the
    operation being served (e.g. "Failed to fetch sales stats").
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _execute(self, stmt: Executable, failure: str) -> Result:
        try:
            return await self.session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"{failure}: {e}", exc_info=True)
            raise DataAccessError(failure, e) from e

    def _decimal(self, value: Any, failure: str) -> Decimal:
        try:
            return to_decimal(value)
        except (TypeError, InvalidOperation) as e:
            logger.error(f"{failure}: malformed aggregate {value!r}")
            raise DataAccessError(failure, e) from e

    def _int(self, value: Any, failure: str) -> int:
        if value is None:
            return 0
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            logger.error(f"{failure}: malformed aggregate {value!r}")
            raise DataAccessError(failure, e) from e
