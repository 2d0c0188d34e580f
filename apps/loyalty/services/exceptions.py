"""
Domain exceptions for the loyalty app.

Exception Hierarchy:
    LoyaltyServiceError (base)
    ├── InvalidInputError
    ├── NotFoundError
    │   ├── MemberNotFoundError
    │   └── ProductNotFoundError
    ├── InsufficientBalanceError
    └── StorageFailureError

Every exception is raised before any state change becomes visible; a
failed operation leaves balances and the ledger exactly as they were.
"""


class LoyaltyServiceError(Exception):
    """Base exception for all loyalty service errors."""
    pass


class InvalidInputError(LoyaltyServiceError):
    """Malformed or out-of-range request field."""
    pass


class NotFoundError(LoyaltyServiceError):
    """Referenced record does not exist."""
    pass


class MemberNotFoundError(NotFoundError):
    """Member does not exist."""
    pass


class ProductNotFoundError(NotFoundError):
    """Product does not exist."""
    pass


class InsufficientBalanceError(LoyaltyServiceError):
    """Redemption exceeds the member's current points balance."""

    def __init__(self, message, *, balance=None, requested=None):
        super().__init__(message)
        self.balance = balance
        self.requested = requested


class StorageFailureError(LoyaltyServiceError):
    """Store unreachable or the atomic unit could not commit."""
    pass
