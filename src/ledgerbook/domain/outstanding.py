"""Outstanding (customer credit) ledger.

Customers have no opening balance of their own, so every fold here starts
at zero.
"""

from decimal import Decimal
from typing import Iterable

from ledgerbook.domain.balance import current_balance, running_balances
from ledgerbook.domain.entities import (
    Customer,
    Ledger,
    RunningBalanceEntry,
    Transaction,
)

ZERO = Decimal("0")


def transactions_of(customer_id: int, transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return the transactions that reference ``customer_id``."""
    return [txn for txn in transactions if txn.customer_id == customer_id]


def customer_outstanding(customer_id: int, transactions: Iterable[Transaction]) -> Decimal:
    """Amount the customer still owes."""
    return current_balance(
        ZERO, transactions_of(customer_id, transactions), Ledger.OUTSTANDING
    )


def customer_running_balances(
    customer_id: int, transactions: Iterable[Transaction]
) -> list[RunningBalanceEntry]:
    """Oldest-first outstanding trajectory of one customer."""
    return running_balances(
        ZERO, transactions_of(customer_id, transactions), Ledger.OUTSTANDING
    )


def outstanding_by_customer(
    customers: Iterable[Customer], transactions: Iterable[Transaction]
) -> dict[int, Decimal]:
    """Map every customer ID to its outstanding amount (zero if idle)."""
    grouped: dict[int, list[Transaction]] = {customer.id: [] for customer in customers}
    for txn in transactions:
        if txn.customer_id in grouped:
            grouped[txn.customer_id].append(txn)
    return {
        customer_id: current_balance(ZERO, txns, Ledger.OUTSTANDING)
        for customer_id, txns in grouped.items()
    }


def total_outstanding(transactions: Iterable[Transaction]) -> Decimal:
    """Outstanding across all customers of one owner."""
    return current_balance(ZERO, transactions, Ledger.OUTSTANDING)


def can_delete_customer(customer_id: int, transactions: Iterable[Transaction]) -> bool:
    """A customer is deletable only when no transaction of any kind references it."""
    return not any(txn.customer_id == customer_id for txn in transactions)
