"""Member management service - administrative operations on members."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Q, QuerySet

from apps.members.models import Member
from .exceptions import MemberNotFoundError, DuplicateEmailError

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


@transaction.atomic
def create_member(*, name: str, email: str, phone: str = '') -> Member:
    """
    Enrol a new loyalty member with a zero points balance.

    Args:
        name: Member's full name
        email: Contact email, unique across members
        phone: Optional phone number

    Returns:
        Created Member instance

    Raises:
        DuplicateEmailError: If the email is already registered
    """
    email = _normalize_email(email)

    if Member.objects.filter(email=email).exists():
        raise DuplicateEmailError(f"A member with email {email} already exists")

    try:
        member = Member.objects.create(name=name.strip(), email=email, phone=phone.strip())
    except IntegrityError:
        raise DuplicateEmailError(f"A member with email {email} already exists")

    logger.info("Enrolled member %s (%s)", member.id, member.email)
    return member


def get_member_by_id(*, member_id: UUID) -> Member:
    """
    Retrieve a member by ID.

    Raises:
        MemberNotFoundError: If member doesn't exist
    """
    try:
        return Member.objects.get(id=member_id)
    except Member.DoesNotExist:
        raise MemberNotFoundError("Member not found")


@transaction.atomic
def update_member(
    *,
    member_id: UUID,
    name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
) -> Member:
    """
    Update a member's contact details.

    The points balance is not editable here; it only changes through
    loyalty earn/redeem operations.

    Raises:
        MemberNotFoundError: If member doesn't exist
        DuplicateEmailError: If the new email belongs to another member
    """
    try:
        member = Member.objects.select_for_update().get(id=member_id)
    except Member.DoesNotExist:
        raise MemberNotFoundError("Member not found")

    update_fields = ['updated_at']

    if name is not None:
        member.name = name.strip()
        update_fields.append('name')

    if email is not None:
        email = _normalize_email(email)
        if Member.objects.filter(email=email).exclude(id=member.id).exists():
            raise DuplicateEmailError(f"A member with email {email} already exists")
        member.email = email
        update_fields.append('email')

    if phone is not None:
        member.phone = phone.strip()
        update_fields.append('phone')

    member.save(update_fields=update_fields)
    return member


def list_members(*, search: str = '') -> QuerySet[Member]:
    """List members, optionally filtered by name, email or phone."""
    queryset = Member.objects.all()

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(email__icontains=search) |
            Q(phone__icontains=search)
        )

    return queryset
