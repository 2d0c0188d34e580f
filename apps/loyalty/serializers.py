from decimal import Decimal
from rest_framework import serializers
from .models import EntryKind
from .services.validation import MAX_QUANTITY, MAX_POINTS_PER_REDEMPTION, MAX_AMOUNT


# =============================================================================
# Input Serializers
# =============================================================================

class PurchaseInputSerializer(serializers.Serializer):
    """Validate input for recording a purchase that earns points."""

    member_id = serializers.UUIDField()
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)


class RedeemInputSerializer(serializers.Serializer):
    """Validate input for redeeming points against a purchase."""

    member_id = serializers.UUIDField()
    points_to_redeem = serializers.IntegerField(min_value=1, max_value=MAX_POINTS_PER_REDEMPTION)
    purchase_amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        max_value=MAX_AMOUNT,
    )


# =============================================================================
# Output Serializers
# =============================================================================

class LedgerEntrySerializer(serializers.Serializer):
    """Ledger entry with the referenced product's name and price, if any."""

    id = serializers.UUIDField()
    member_id = serializers.UUIDField()
    product_id = serializers.UUIDField(allow_null=True)
    product_name = serializers.CharField(allow_null=True)
    product_price = serializers.DecimalField(max_digits=None, decimal_places=2, allow_null=True)
    points_delta = serializers.IntegerField()
    kind = serializers.ChoiceField(choices=EntryKind.choices)
    description = serializers.CharField()
    sequence = serializers.IntegerField()
    created_at = serializers.DateTimeField()


class PurchaseSummarySerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    product_name = serializers.CharField()
    unit_price = serializers.DecimalField(max_digits=None, decimal_places=2)
    quantity = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=None, decimal_places=2)


class EarnResultSerializer(serializers.Serializer):
    member_id = serializers.UUIDField()
    prior_balance = serializers.IntegerField()
    new_balance = serializers.IntegerField()
    points_earned = serializers.IntegerField()
    ledger_entry = LedgerEntrySerializer()
    purchase = PurchaseSummarySerializer()


class RedeemResultSerializer(serializers.Serializer):
    member_id = serializers.UUIDField()
    points_redeemed = serializers.IntegerField()
    discount_amount = serializers.DecimalField(max_digits=None, decimal_places=2)
    original_amount = serializers.DecimalField(max_digits=None, decimal_places=2)
    final_amount = serializers.DecimalField(max_digits=None, decimal_places=2)
    unused_discount = serializers.DecimalField(max_digits=None, decimal_places=2)
    prior_balance = serializers.IntegerField()
    new_balance = serializers.IntegerField()
    ledger_entry = LedgerEntrySerializer()


class TransactionHistorySerializer(serializers.Serializer):
    """Member transactions, newest first."""

    member_id = serializers.UUIDField()
    count = serializers.IntegerField()
    transactions = LedgerEntrySerializer(many=True)


class BalanceSummarySerializer(serializers.Serializer):
    member_id = serializers.UUIDField()
    points_balance = serializers.IntegerField()
    ledger_total = serializers.IntegerField()
    entry_count = serializers.IntegerField()
    is_consistent = serializers.BooleanField()
