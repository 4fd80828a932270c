"""Balance derivation for a single ledger.

``current_balance`` answers "what is the balance now" and does not care about
order. ``running_balances`` reconstructs the trajectory, and therefore sorts
its input first so the answer never depends on how records were fetched.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Sequence

from ledgerbook.domain.classifier import signed_amount, transactions_affecting
from ledgerbook.domain.entities import (
    Ledger,
    LedgerStatement,
    RunningBalanceEntry,
    Transaction,
)
from ledgerbook.domain.errors import ValidationError

logger = logging.getLogger(__name__)

# Stored amounts are Numeric(12, 2): whole cents, ten integer digits.
CENT = Decimal("0.01")
AMOUNT_LIMIT = Decimal(10) ** 10


def to_decimal(value: Decimal | int) -> Decimal:
    """Coerce an opening balance to Decimal without going through float."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Balance must be Decimal or int, got {type(value).__name__}"
        )
    return Decimal(value)


def ensure_storable(amount: Decimal, label: str = "Amount") -> Decimal:
    """Reject amounts the ledger columns cannot hold exactly.

    Args:
        amount: Decimal amount
        label: Name of the value used in error messages

    Returns:
        The amount, unchanged

    Raises:
        ValidationError: If amount is not finite, has ten or more integer
            digits, or has more than two decimal places
    """
    if not amount.is_finite():
        raise ValidationError(f"{label} must be a finite number")
    if abs(amount) >= AMOUNT_LIMIT:
        raise ValidationError(f"{label} must be less than {AMOUNT_LIMIT:,}")
    if amount != amount.quantize(CENT):
        raise ValidationError(f"{label} cannot have more than two decimal places")
    return amount


def chronological_key(transaction: Transaction) -> tuple[date, datetime, int]:
    """Sort key: business date, then creation time, then ID."""
    return (transaction.date, transaction.created_at, transaction.id)


def sort_chronologically(
    transactions: Iterable[Transaction], newest_first: bool = False
) -> list[Transaction]:
    """Return transactions ordered by ``chronological_key``."""
    return sorted(transactions, key=chronological_key, reverse=newest_first)


def current_balance(
    opening_balance: Decimal | int,
    transactions: Iterable[Transaction],
    ledger: Ledger,
) -> Decimal:
    """Compute the current balance of a ledger.

    Args:
        opening_balance: Balance before any transaction
        transactions: Transactions in any order; ones not affecting the
            ledger are ignored
        ledger: Ledger to compute

    Returns:
        Opening balance plus the signed amounts of affecting transactions
    """
    balance = to_decimal(opening_balance)
    for txn in transactions_affecting(transactions, ledger):
        balance += signed_amount(txn, ledger)
    return balance


def running_balances(
    opening_balance: Decimal | int,
    transactions: Iterable[Transaction],
    ledger: Ledger,
) -> list[RunningBalanceEntry]:
    """Reconstruct the running balance of a ledger.

    Transactions are filtered to the ledger, sorted by date with creation
    time as tie-break, then folded from the opening balance.

    Args:
        opening_balance: Balance before the first transaction
        transactions: Transactions in any order
        ledger: Ledger to reconstruct

    Returns:
        Oldest-first list of entries, each carrying the balance after it
    """
    balance = to_decimal(opening_balance)
    entries = []
    for txn in sort_chronologically(transactions_affecting(transactions, ledger)):
        balance += signed_amount(txn, ledger)
        entries.append(RunningBalanceEntry(transaction=txn, balance_after=balance))
    logger.debug(
        "Reconstructed %d %s entries, final balance %s",
        len(entries),
        ledger.value,
        balance,
    )
    return entries


def final_balance(
    entries: Sequence[RunningBalanceEntry], opening_balance: Decimal | int
) -> Decimal:
    """Return the balance after the last entry, or the opening balance."""
    if not entries:
        return to_decimal(opening_balance)
    return entries[-1].balance_after


def build_statement(
    ledger: Ledger,
    opening_balance: Decimal | int,
    transactions: Iterable[Transaction],
) -> LedgerStatement:
    """Bundle running balances and the current balance of one ledger."""
    opening = to_decimal(opening_balance)
    entries = running_balances(opening, transactions, ledger)
    return LedgerStatement(
        ledger=ledger,
        opening_balance=opening,
        entries=tuple(entries),
        current_balance=final_balance(entries, opening),
    )
