"""Transaction coordinator: the only writer of balances and ledger entries."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .exceptions import MemberNotFoundError, InsufficientBalanceError
from .store import LoyaltyStore, MemberRecord, LedgerRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointsChange:
    member: MemberRecord
    prior_balance: int
    new_balance: int
    entry: LedgerRecord


def apply_points_change(
    store: LoyaltyStore,
    *,
    member_id: UUID,
    points_delta: int,
    kind: str,
    description: str,
    product_id: Optional[UUID] = None,
) -> PointsChange:
    """
    Apply a balance delta and append its ledger entry as one atomic unit.

    The member row is read with ``for_update`` so the read-compute-write
    sequence is serialized per member. A delta that would leave the balance
    negative is rejected before anything is written.

    Args:
        store: Loyalty store to write to
        member_id: Member whose balance changes
        points_delta: Signed change (positive earned, negative spent)
        kind: Ledger entry kind
        description: Human-readable ledger description
        product_id: Product the entry refers to, if any

    Returns:
        PointsChange with the balances before and after and the new entry

    Raises:
        MemberNotFoundError: If the member does not exist
        InsufficientBalanceError: If the balance would go negative
        StorageFailureError: If the store cannot commit the unit
    """

    def unit() -> PointsChange:
        member = store.get_member(member_id, for_update=True)
        if member is None:
            raise MemberNotFoundError(f"Member {member_id} not found")

        prior_balance = member.points_balance
        new_balance = prior_balance + points_delta
        if new_balance < 0:
            raise InsufficientBalanceError(
                f"Insufficient points: balance is {prior_balance}, requested {-points_delta}",
                balance=prior_balance,
                requested=-points_delta,
            )

        store.save_member_balance(member_id, new_balance)
        entry = store.append_ledger_entry(
            member_id=member_id,
            product_id=product_id,
            points_delta=points_delta,
            kind=kind,
            description=description,
        )
        logger.debug(
            "Member %s balance %d -> %d (entry %s)",
            member_id, prior_balance, new_balance, entry.id,
        )
        return PointsChange(
            member=member,
            prior_balance=prior_balance,
            new_balance=new_balance,
            entry=entry,
        )

    return store.run_atomic(unit)
