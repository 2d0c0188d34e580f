"""Balance vs. ledger reconciliation."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .exceptions import MemberNotFoundError
from .points_engine import get_default_store
from .store import LoyaltyStore
from .validation import coerce_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceSummary:
    member_id: UUID
    points_balance: int
    ledger_total: int
    entry_count: int

    @property
    def is_consistent(self) -> bool:
        return self.points_balance == self.ledger_total

    @property
    def discrepancy(self) -> int:
        return self.points_balance - self.ledger_total


def reconcile_member(*, member_id, store: Optional[LoyaltyStore] = None) -> BalanceSummary:
    """
    Compare a member's stored balance with the sum of their ledger deltas.

    The read runs inside one atomic unit so the balance and the ledger are
    observed at the same point in time.

    Raises:
        MemberNotFoundError: If the member does not exist
    """
    member_id = coerce_uuid(member_id, 'member_id')
    store = store or get_default_store()

    def unit() -> BalanceSummary:
        member = store.get_member(member_id)
        if member is None:
            raise MemberNotFoundError(f"Member {member_id} not found")
        total, count = store.ledger_totals(member_id)
        return BalanceSummary(
            member_id=member_id,
            points_balance=member.points_balance,
            ledger_total=total,
            entry_count=count,
        )

    summary = store.run_atomic(unit)
    if not summary.is_consistent:
        logger.error(
            "Member %s balance %d does not match ledger total %d",
            member_id, summary.points_balance, summary.ledger_total,
        )
    return summary
