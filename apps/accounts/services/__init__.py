"""Services for staff accounts."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
    NotStaffError,
)
from .staff_authentication import authenticate_staff

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'NotStaffError',
    # Services
    'authenticate_staff',
]
