"""Services for loyalty points business logic."""

from .exceptions import (
    LoyaltyServiceError,
    InvalidInputError,
    NotFoundError,
    MemberNotFoundError,
    ProductNotFoundError,
    InsufficientBalanceError,
    StorageFailureError,
)
from .store import (
    LoyaltyStore,
    MemberRecord,
    ProductRecord,
    LedgerRecord,
)
from .django_store import DjangoLoyaltyStore
from .memory_store import InMemoryLoyaltyStore
from .coordinator import (
    PointsChange,
    apply_points_change,
)
from .points_engine import (
    PurchaseSummary,
    EarnResult,
    RedeemResult,
    calculate_points_earned,
    earn_points,
    redeem_points,
    get_default_store,
)
from .ledger import (
    list_transactions,
)
from .reconciliation import (
    BalanceSummary,
    reconcile_member,
)

__all__ = [
    # Exceptions
    'LoyaltyServiceError',
    'InvalidInputError',
    'NotFoundError',
    'MemberNotFoundError',
    'ProductNotFoundError',
    'InsufficientBalanceError',
    'StorageFailureError',
    # Stores
    'LoyaltyStore',
    'MemberRecord',
    'ProductRecord',
    'LedgerRecord',
    'DjangoLoyaltyStore',
    'InMemoryLoyaltyStore',
    # Coordinator
    'PointsChange',
    'apply_points_change',
    # Points engine
    'PurchaseSummary',
    'EarnResult',
    'RedeemResult',
    'calculate_points_earned',
    'earn_points',
    'redeem_points',
    'get_default_store',
    # Ledger
    'list_transactions',
    # Reconciliation
    'BalanceSummary',
    'reconcile_member',
]
