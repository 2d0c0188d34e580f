"""
Loyalty store interface.

The points engine never talks to the ORM directly; it goes through a
``LoyaltyStore``. Two implementations exist:

- ``DjangoLoyaltyStore`` (``django_store``): relational store, the unit of
  work is ``transaction.atomic`` and member rows are locked with
  ``select_for_update``.
- ``InMemoryLoyaltyStore`` (``memory_store``): process-local dictionaries
  guarded by a lock, rolled back from a snapshot on failure.

Records crossing the interface are frozen dataclasses so that both stores
hand out the same shapes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, TypeVar
from uuid import UUID

T = TypeVar('T')


@dataclass(frozen=True)
class MemberRecord:
    id: UUID
    name: str
    email: str
    phone: str
    points_balance: int
    created_at: datetime


@dataclass(frozen=True)
class ProductRecord:
    id: UUID
    name: str
    price: Decimal
    description: str = ''
    category: str = ''


@dataclass(frozen=True)
class LedgerRecord:
    id: UUID
    member_id: UUID
    product_id: Optional[UUID]
    points_delta: int
    kind: str
    description: str
    created_at: datetime
    # Per-member position, 1 for the first entry
    sequence: int
    # Joined from the product when product_id is set
    product_name: Optional[str] = None
    product_price: Optional[Decimal] = None


class LoyaltyStore(ABC):
    """Storage capability used by the points engine and coordinator."""

    @abstractmethod
    def get_member(self, member_id: UUID, *, for_update: bool = False) -> Optional[MemberRecord]:
        """Return the member or None. ``for_update`` locks it until the unit ends."""

    @abstractmethod
    def get_product(self, product_id: UUID) -> Optional[ProductRecord]:
        """Return the product or None."""

    @abstractmethod
    def save_member_balance(self, member_id: UUID, points_balance: int) -> None:
        """Persist a new balance. Only the transaction coordinator calls this."""

    @abstractmethod
    def append_ledger_entry(
        self,
        *,
        member_id: UUID,
        product_id: Optional[UUID],
        points_delta: int,
        kind: str,
        description: str,
    ) -> LedgerRecord:
        """Append one immutable ledger entry. Only the coordinator calls this."""

    @abstractmethod
    def list_ledger_entries(self, member_id: UUID) -> list[LedgerRecord]:
        """All entries of a member, highest sequence first, with product fields joined."""

    @abstractmethod
    def ledger_totals(self, member_id: UUID) -> tuple[int, int]:
        """(sum of points deltas, number of entries) for a member."""

    @abstractmethod
    def run_atomic(self, unit: Callable[[], T]) -> T:
        """
        Run ``unit`` as one atomic unit of work and return its result.

        Either every write made inside ``unit`` becomes visible or none
        does. Exceptions raised by ``unit`` propagate unchanged after the
        rollback; failures of the store itself surface as
        ``StorageFailureError``. Units may nest.
        """
