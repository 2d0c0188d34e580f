"""Input checks shared by the loyalty services. All raise InvalidInputError."""

from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from .exceptions import InvalidInputError

# Largest single request accepted at the counter
MAX_QUANTITY = 1000
MAX_POINTS_PER_REDEMPTION = 1_000_000
MAX_AMOUNT = Decimal("99999999.99")


def coerce_uuid(value, field: str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise InvalidInputError(f"{field} must be a valid UUID")


def positive_int(value, field: str, max_value: Optional[int] = None) -> int:
    # bool is an int subclass; True is not a quantity
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInputError(f"{field} must be a positive integer")
    if max_value is not None and value > max_value:
        raise InvalidInputError(f"{field} must be at most {max_value}")
    return value


def positive_amount(value, field: str, max_value: Optional[Decimal] = None) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(f"{field} must be a positive amount")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidInputError(f"{field} must be a positive amount")
    if not amount.is_finite() or amount <= 0:
        raise InvalidInputError(f"{field} must be a positive amount")
    if max_value is not None and amount > max_value:
        raise InvalidInputError(f"{field} must be at most {max_value}")
    return amount
