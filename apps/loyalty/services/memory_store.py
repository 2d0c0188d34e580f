"""Process-local loyalty store."""

import threading
import uuid
from decimal import Decimal
from typing import Callable, Optional, TypeVar
from uuid import UUID

from django.utils import timezone

from .store import LoyaltyStore, MemberRecord, ProductRecord, LedgerRecord

T = TypeVar('T')


class InMemoryLoyaltyStore(LoyaltyStore):
    """
    Loyalty store kept in dictionaries.

    A single re-entrant lock is held for the whole unit of work, so units
    are serialized store-wide. On any exception the members and ledger are
    restored from the snapshot taken when the outermost unit started.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._members: dict[UUID, MemberRecord] = {}
        self._products: dict[UUID, ProductRecord] = {}
        self._ledger: list[LedgerRecord] = []

    # -----------------------------
    # Seeding (administrative)
    # -----------------------------
    def add_member(self, *, name: str, email: str, phone: str = '') -> MemberRecord:
        with self._lock:
            if any(m.email == email for m in self._members.values()):
                raise ValueError(f"A member with email {email} already exists")
            member = MemberRecord(
                id=uuid.uuid4(),
                name=name,
                email=email,
                phone=phone,
                points_balance=0,
                created_at=timezone.now(),
            )
            self._members[member.id] = member
            return member

    def add_product(self, *, name: str, price, description: str = '', category: str = '') -> ProductRecord:
        with self._lock:
            product = ProductRecord(
                id=uuid.uuid4(),
                name=name,
                price=Decimal(str(price)),
                description=description,
                category=category,
            )
            self._products[product.id] = product
            return product

    # -----------------------------
    # LoyaltyStore
    # -----------------------------
    def get_member(self, member_id: UUID, *, for_update: bool = False) -> Optional[MemberRecord]:
        # The store lock already serializes units; for_update needs no extra work
        with self._lock:
            return self._members.get(member_id)

    def get_product(self, product_id: UUID) -> Optional[ProductRecord]:
        with self._lock:
            return self._products.get(product_id)

    def save_member_balance(self, member_id: UUID, points_balance: int) -> None:
        with self._lock:
            member = self._members[member_id]
            self._members[member_id] = MemberRecord(
                id=member.id,
                name=member.name,
                email=member.email,
                phone=member.phone,
                points_balance=points_balance,
                created_at=member.created_at,
            )

    def append_ledger_entry(self, *, member_id, product_id, points_delta, kind, description) -> LedgerRecord:
        with self._lock:
            product = self._products.get(product_id) if product_id is not None else None
            sequence = 1 + sum(1 for e in self._ledger if e.member_id == member_id)
            entry = LedgerRecord(
                id=uuid.uuid4(),
                member_id=member_id,
                product_id=product_id,
                points_delta=points_delta,
                kind=kind,
                description=description,
                created_at=timezone.now(),
                sequence=sequence,
                product_name=product.name if product else None,
                product_price=product.price if product else None,
            )
            self._ledger.append(entry)
            return entry

    def list_ledger_entries(self, member_id: UUID) -> list[LedgerRecord]:
        with self._lock:
            entries = [e for e in self._ledger if e.member_id == member_id]
        return sorted(entries, key=lambda e: e.sequence, reverse=True)

    def ledger_totals(self, member_id: UUID) -> tuple[int, int]:
        with self._lock:
            deltas = [e.points_delta for e in self._ledger if e.member_id == member_id]
        return sum(deltas), len(deltas)

    def run_atomic(self, unit: Callable[[], T]) -> T:
        with self._lock:
            members_snapshot = dict(self._members)
            ledger_length = len(self._ledger)
            try:
                return unit()
            except BaseException:
                self._members = members_snapshot
                del self._ledger[ledger_length:]
                raise
