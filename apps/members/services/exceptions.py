"""Domain exceptions for members app."""


class MembersServiceError(Exception):
    """Base exception for all members service errors."""
    pass


class MemberNotFoundError(MembersServiceError):
    """Member does not exist."""
    pass


class DuplicateEmailError(MembersServiceError):
    """Another member already uses this email address."""
    pass
