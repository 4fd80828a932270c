"""Domain layer for ledgerbook application.

Only the pure ledger engine is re-exported here. Services live in their own
modules and depend on ``ledgerbook.database``.
"""

from ledgerbook.domain.classifier import classify, LedgerEffect
from ledgerbook.domain.balance import current_balance, running_balances, build_statement
from ledgerbook.domain.outstanding import customer_outstanding, total_outstanding
from ledgerbook.domain.dashboard import build_dashboard

__all__ = [
    "classify",
    "LedgerEffect",
    "current_balance",
    "running_balances",
    "build_statement",
    "customer_outstanding",
    "total_outstanding",
    "build_dashboard",
]
