"""
Loyalty App - Coffee-shop points program

Members earn points on purchases and redeem them for discounts. Every
balance change is paired with an immutable ledger entry so that a member's
balance always equals the sum of their ledger deltas.

Architecture:
- Models: LedgerEntry (append-only)
- Services: points engine (earn/redeem), transaction coordinator,
  ledger history, reconciliation
- Stores: DjangoLoyaltyStore (relational, row locks) and
  InMemoryLoyaltyStore (process-local, used by tests and tooling)
- Views: purchase, redeem, history and balance endpoints
"""
