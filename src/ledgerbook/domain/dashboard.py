"""Dashboard aggregation across all ledgers."""

from decimal import Decimal
from typing import Iterable, Sequence

from ledgerbook.domain.balance import current_balance, sort_chronologically
from ledgerbook.domain.entities import (
    DashboardSummary,
    Ledger,
    Settings,
    Transaction,
    TransactionKind,
)
from ledgerbook.domain.outstanding import total_outstanding

RECENT_ACTIVITY_LIMIT = 5

# OWN_PURCHASE is tracked for the bank balance only and is not counted here.
PURCHASE_KINDS = frozenset(
    {TransactionKind.CUSTOMER_PURCHASE, TransactionKind.AACHI_MASALA_PURCHASE}
)


def total_purchases(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of customer purchases and Aachi Masala purchases."""
    return sum(
        (txn.amount for txn in transactions if txn.kind in PURCHASE_KINDS),
        Decimal("0"),
    )


def recent_activity(
    transactions: Iterable[Transaction], limit: int = RECENT_ACTIVITY_LIMIT
) -> list[Transaction]:
    """Newest ``limit`` transactions of any kind."""
    return sort_chronologically(transactions, newest_first=True)[:limit]


def build_dashboard(
    settings: Settings,
    transactions: Sequence[Transaction],
    customer_count: int,
    recent_limit: int = RECENT_ACTIVITY_LIMIT,
) -> DashboardSummary:
    """Compose the dashboard for one owner from already-scoped data."""
    return DashboardSummary(
        bank_balance=current_balance(
            settings.opening_bank_balance, transactions, Ledger.BANK
        ),
        total_outstanding=total_outstanding(transactions),
        total_purchases=total_purchases(transactions),
        customer_count=customer_count,
        aachi_masala_balance=current_balance(
            settings.opening_aachi_masala_balance, transactions, Ledger.AACHI_MASALA
        ),
        recent_transactions=tuple(recent_activity(transactions, recent_limit)),
    )
