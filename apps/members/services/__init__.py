"""
Members services - Business logic layer.

Administrative operations for loyalty members. Points balances are
never touched here; see apps.loyalty.services.
"""

from .member_management import (
    create_member,
    get_member_by_id,
    update_member,
    list_members,
)

from .exceptions import (
    MembersServiceError,
    MemberNotFoundError,
    DuplicateEmailError,
)

__all__ = [
    # Member Management Services
    'create_member',
    'get_member_by_id',
    'update_member',
    'list_members',
    # Exceptions
    'MembersServiceError',
    'MemberNotFoundError',
    'DuplicateEmailError',
]
