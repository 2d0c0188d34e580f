"""Relational loyalty store backed by the Django ORM."""

import logging
from typing import Callable, Optional, TypeVar
from uuid import UUID

from django.db import transaction, DatabaseError
from django.db.models import Count, Max, Sum
from django.utils import timezone

from apps.members.models import Member
from apps.products.models import Product
from apps.loyalty.models import LedgerEntry
from .exceptions import StorageFailureError
from .store import LoyaltyStore, MemberRecord, ProductRecord, LedgerRecord

T = TypeVar('T')
logger = logging.getLogger(__name__)


def _member_record(member: Member) -> MemberRecord:
    return MemberRecord(
        id=member.id,
        name=member.name,
        email=member.email,
        phone=member.phone,
        points_balance=member.points_balance,
        created_at=member.created_at,
    )


def _ledger_record(entry: LedgerEntry) -> LedgerRecord:
    product = entry.product
    return LedgerRecord(
        id=entry.id,
        member_id=entry.member_id,
        product_id=entry.product_id,
        points_delta=entry.points_delta,
        kind=entry.kind,
        description=entry.description,
        created_at=entry.created_at,
        sequence=entry.sequence,
        product_name=product.name if product else None,
        product_price=product.price if product else None,
    )


class DjangoLoyaltyStore(LoyaltyStore):
    """
    Loyalty store on the default database.

    The unit of work is ``transaction.atomic``; nested units become
    savepoints. Reading a member ``for_update`` issues
    ``SELECT ... FOR UPDATE`` so that concurrent earn/redeem calls on the
    same member serialize on the row lock.
    """

    def __init__(self, using: Optional[str] = None):
        self.using = using

    def get_member(self, member_id: UUID, *, for_update: bool = False) -> Optional[MemberRecord]:
        queryset = Member.objects.using(self.using)
        if for_update:
            queryset = queryset.select_for_update()
        member = queryset.filter(id=member_id).first()
        return _member_record(member) if member else None

    def get_product(self, product_id: UUID) -> Optional[ProductRecord]:
        product = Product.objects.using(self.using).filter(id=product_id).first()
        if product is None:
            return None
        return ProductRecord(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            category=product.category,
        )

    def save_member_balance(self, member_id: UUID, points_balance: int) -> None:
        updated = Member.objects.using(self.using).filter(id=member_id).update(
            points_balance=points_balance,
            updated_at=timezone.now(),
        )
        if updated != 1:
            raise StorageFailureError(f"Balance update for member {member_id} touched {updated} rows")

    def append_ledger_entry(self, *, member_id, product_id, points_delta, kind, description) -> LedgerRecord:
        # Caller holds the member row lock, so the next number cannot be taken twice
        last = LedgerEntry.objects.using(self.using).filter(member_id=member_id).aggregate(
            last=Max('sequence'),
        )['last']
        entry = LedgerEntry(
            sequence=(last or 0) + 1,
            member_id=member_id,
            product_id=product_id,
            points_delta=points_delta,
            kind=kind,
            description=description,
        )
        entry.save(using=self.using)
        if product_id is not None:
            entry = LedgerEntry.objects.using(self.using).select_related('product').get(id=entry.id)
        return _ledger_record(entry)

    def list_ledger_entries(self, member_id: UUID) -> list[LedgerRecord]:
        entries = (
            LedgerEntry.objects.using(self.using)
            .filter(member_id=member_id)
            .select_related('product')
            .order_by('-sequence')
        )
        return [_ledger_record(entry) for entry in entries]

    def ledger_totals(self, member_id: UUID) -> tuple[int, int]:
        totals = LedgerEntry.objects.using(self.using).filter(member_id=member_id).aggregate(
            total=Sum('points_delta'),
            count=Count('id'),
        )
        return totals['total'] or 0, totals['count']

    def run_atomic(self, unit: Callable[[], T]) -> T:
        try:
            with transaction.atomic(using=self.using):
                return unit()
        except DatabaseError as exc:
            logger.exception("Loyalty unit of work rolled back by the database")
            raise StorageFailureError(f"Storage failure: {exc}") from exc
