"""
Points engine: earning points on purchases and redeeming them for discounts.

Both operations validate their inputs before touching the store, then hand
the computed delta to the transaction coordinator, which applies the
balance update and the ledger append as one atomic unit.

Conversion rules (settings, with defaults):
    LOYALTY_POINTS_EARN_DIVISOR = 50   one point per 50 currency units spent
    LOYALTY_POINT_VALUE = 1            one currency unit of discount per point
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.conf import settings

from apps.loyalty.models import EntryKind
from .coordinator import apply_points_change
from .django_store import DjangoLoyaltyStore
from .exceptions import (
    MemberNotFoundError,
    ProductNotFoundError,
    NotFoundError,
    InsufficientBalanceError,
)
from .store import LoyaltyStore, LedgerRecord
from .validation import (
    coerce_uuid,
    positive_int,
    positive_amount,
    MAX_QUANTITY,
    MAX_POINTS_PER_REDEMPTION,
    MAX_AMOUNT,
)

logger = logging.getLogger(__name__)

DEFAULT_EARN_DIVISOR = 50
DEFAULT_POINT_VALUE = 1
DESCRIPTION_MAX_LENGTH = 255


@dataclass(frozen=True)
class PurchaseSummary:
    product_id: UUID
    product_name: str
    unit_price: Decimal
    quantity: int
    total_amount: Decimal


@dataclass(frozen=True)
class EarnResult:
    member_id: UUID
    prior_balance: int
    new_balance: int
    points_earned: int
    ledger_entry: LedgerRecord
    purchase: PurchaseSummary


@dataclass(frozen=True)
class RedeemResult:
    member_id: UUID
    points_redeemed: int
    discount_amount: Decimal
    original_amount: Decimal
    final_amount: Decimal
    # Discount that exceeded the purchase amount and was not applied
    unused_discount: Decimal
    prior_balance: int
    new_balance: int
    ledger_entry: LedgerRecord


def get_default_store() -> LoyaltyStore:
    return DjangoLoyaltyStore()


def get_earn_divisor() -> int:
    return getattr(settings, 'LOYALTY_POINTS_EARN_DIVISOR', DEFAULT_EARN_DIVISOR)


def get_point_value() -> int:
    return getattr(settings, 'LOYALTY_POINT_VALUE', DEFAULT_POINT_VALUE)


def calculate_points_earned(total_amount: Decimal) -> int:
    """Points for a purchase total, truncated (49 -> 0, 50 -> 1, 99 -> 1)."""
    return int(Decimal(total_amount) // get_earn_divisor())


def _truncate(description: str) -> str:
    return description[:DESCRIPTION_MAX_LENGTH]


def earn_points(
    *,
    member_id,
    product_id,
    quantity: int,
    store: Optional[LoyaltyStore] = None,
) -> EarnResult:
    """
    Record a purchase and credit the member with the points it earns.

    A ledger entry is recorded even when the purchase earns zero points.

    Args:
        member_id: Purchasing member
        product_id: Purchased product
        quantity: Number of units, positive integer
        store: Loyalty store; defaults to the relational store

    Returns:
        EarnResult with balances, points earned, ledger entry and summary

    Raises:
        InvalidInputError: If quantity is not in 1..MAX_QUANTITY or an ID is malformed
        MemberNotFoundError: If the member does not exist
        ProductNotFoundError: If the product does not exist
        StorageFailureError: If the store cannot commit
    """
    quantity = positive_int(quantity, 'quantity', MAX_QUANTITY)
    member_id = coerce_uuid(member_id, 'member_id')
    product_id = coerce_uuid(product_id, 'product_id')
    store = store or get_default_store()

    def unit() -> EarnResult:
        if store.get_member(member_id, for_update=True) is None:
            raise MemberNotFoundError(f"Member {member_id} not found")
        product = store.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found")

        total_amount = product.price * quantity
        points_earned = calculate_points_earned(total_amount)
        change = apply_points_change(
            store,
            member_id=member_id,
            points_delta=points_earned,
            kind=EntryKind.EARNED.value,
            description=_truncate(
                f"Purchased {quantity} x {product.name} (total {total_amount})"
            ),
            product_id=product.id,
        )
        return EarnResult(
            member_id=member_id,
            prior_balance=change.prior_balance,
            new_balance=change.new_balance,
            points_earned=points_earned,
            ledger_entry=change.entry,
            purchase=PurchaseSummary(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=quantity,
                total_amount=total_amount,
            ),
        )

    try:
        result = store.run_atomic(unit)
    except NotFoundError as e:
        logger.warning("Earn rejected: %s", e)
        raise

    logger.info(
        "Member %s earned %d points (%d -> %d) for %s x %d",
        member_id, result.points_earned, result.prior_balance,
        result.new_balance, result.purchase.product_name, quantity,
    )
    return result


def redeem_points(
    *,
    member_id,
    points_to_redeem: int,
    purchase_amount,
    store: Optional[LoyaltyStore] = None,
) -> RedeemResult:
    """
    Spend points as a discount on a purchase.

    The discount is ``points_to_redeem * LOYALTY_POINT_VALUE`` and the final
    amount never goes below zero. The points are debited in full even when
    the discount exceeds the purchase; the excess is reported as
    ``unused_discount``.

    Raises:
        InvalidInputError: If points or amount are not positive or over their limit
        MemberNotFoundError: If the member does not exist
        InsufficientBalanceError: If the balance is lower than the points
        StorageFailureError: If the store cannot commit
    """
    points_to_redeem = positive_int(points_to_redeem, 'points_to_redeem', MAX_POINTS_PER_REDEMPTION)
    purchase_amount = positive_amount(purchase_amount, 'purchase_amount', MAX_AMOUNT)
    member_id = coerce_uuid(member_id, 'member_id')
    store = store or get_default_store()

    discount_amount = Decimal(points_to_redeem * get_point_value())
    final_amount = max(Decimal('0'), purchase_amount - discount_amount)
    unused_discount = max(Decimal('0'), discount_amount - purchase_amount)

    try:
        change = apply_points_change(
            store,
            member_id=member_id,
            points_delta=-points_to_redeem,
            kind=EntryKind.SPENT.value,
            description=_truncate(
                f"Redeemed {points_to_redeem} points for {discount_amount} off "
                f"a purchase of {purchase_amount}"
            ),
        )
    except (NotFoundError, InsufficientBalanceError) as e:
        logger.warning("Redeem rejected: %s", e)
        raise

    if unused_discount:
        logger.warning(
            "Member %s redeemed %d points worth %s on a purchase of %s; %s of discount unused",
            member_id, points_to_redeem, discount_amount, purchase_amount, unused_discount,
        )
    logger.info(
        "Member %s redeemed %d points (%d -> %d)",
        member_id, points_to_redeem, change.prior_balance, change.new_balance,
    )
    return RedeemResult(
        member_id=member_id,
        points_redeemed=points_to_redeem,
        discount_amount=discount_amount,
        original_amount=purchase_amount,
        final_amount=final_amount,
        unused_discount=unused_discount,
        prior_balance=change.prior_balance,
        new_balance=change.new_balance,
        ledger_entry=change.entry,
    )
