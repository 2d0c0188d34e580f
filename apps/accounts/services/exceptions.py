"""
Domain exceptions for staff accounts.

Exception Hierarchy:
    AccountsServiceError (base)
    ├── InvalidCredentialsError
    ├── InactiveAccountError
    └── NotStaffError
"""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Unknown email or wrong password."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Staff account has been deactivated."""
    pass


class NotStaffError(AccountsServiceError):
    """Account exists but is not allowed to operate the counter."""
    pass
