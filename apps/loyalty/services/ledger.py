"""Ledger queries."""

from typing import Optional

from .exceptions import MemberNotFoundError
from .points_engine import get_default_store
from .store import LoyaltyStore, LedgerRecord
from .validation import coerce_uuid


def list_transactions(*, member_id, store: Optional[LoyaltyStore] = None) -> list[LedgerRecord]:
    """
    All ledger entries of a member, newest first.

    Entries referencing a product carry its name and price; entries without
    a product are included with those fields set to None.

    Raises:
        InvalidInputError: If member_id is malformed
        MemberNotFoundError: If the member does not exist
    """
    member_id = coerce_uuid(member_id, 'member_id')
    store = store or get_default_store()
    if store.get_member(member_id) is None:
        raise MemberNotFoundError(f"Member {member_id} not found")
    return store.list_ledger_entries(member_id)
