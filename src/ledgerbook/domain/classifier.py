"""Transaction classification: which ledgers a kind affects, and how."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator

from ledgerbook.domain.entities import Ledger, Transaction, TransactionKind
from ledgerbook.domain.errors import (
    UnknownTransactionKindError,
    unknown_transaction_kind,
)


@dataclass(frozen=True)
class LedgerEffect:
    """Sign of a transaction kind on each ledger (0 = not affected)."""

    bank: int = 0
    outstanding: int = 0
    aachi_masala: int = 0

    @property
    def affects_bank(self) -> bool:
        return self.bank != 0

    @property
    def affects_outstanding(self) -> bool:
        return self.outstanding != 0

    @property
    def affects_aachi_masala(self) -> bool:
        return self.aachi_masala != 0

    def sign(self, ledger: Ledger) -> int:
        """Return +1, -1 or 0 for the given ledger."""
        if ledger == Ledger.BANK:
            return self.bank
        if ledger == Ledger.OUTSTANDING:
            return self.outstanding
        if ledger == Ledger.AACHI_MASALA:
            return self.aachi_masala
        raise ValueError(f"Unknown ledger '{ledger}'")

    def affects(self, ledger: Ledger) -> bool:
        return self.sign(ledger) != 0

    @property
    def ledgers(self) -> tuple[Ledger, ...]:
        return tuple(ledger for ledger in Ledger if self.affects(ledger))


CLASSIFICATION: dict[TransactionKind, LedgerEffect] = {
    TransactionKind.CUSTOMER_PURCHASE: LedgerEffect(outstanding=+1),
    TransactionKind.PAYMENT_RECEIVED: LedgerEffect(bank=+1, outstanding=-1),
    TransactionKind.OWN_PURCHASE: LedgerEffect(bank=-1),
    TransactionKind.BANK_CREDIT: LedgerEffect(bank=+1),
    TransactionKind.BANK_DEBIT: LedgerEffect(bank=-1),
    TransactionKind.AACHI_MASALA_CREDIT: LedgerEffect(aachi_masala=+1),
    TransactionKind.AACHI_MASALA_PURCHASE: LedgerEffect(aachi_masala=-1),
}

# Kinds that must reference a customer of the same owner.
CUSTOMER_KINDS = frozenset(
    {TransactionKind.CUSTOMER_PURCHASE, TransactionKind.PAYMENT_RECEIVED}
)


def parse_kind(kind: TransactionKind | str) -> TransactionKind:
    """Convert a kind or its string value to ``TransactionKind``.

    Raises:
        UnknownTransactionKindError: If the value is not a recognized kind
    """
    if isinstance(kind, TransactionKind):
        return kind
    try:
        return TransactionKind(kind)
    except ValueError:
        raise UnknownTransactionKindError(unknown_transaction_kind(kind)) from None


def classify(kind: TransactionKind | str) -> LedgerEffect:
    """Return the ledger effect for a transaction kind.

    Args:
        kind: TransactionKind member or its string value

    Returns:
        LedgerEffect describing affected ledgers and signs

    Raises:
        UnknownTransactionKindError: If the kind is not recognized
    """
    return CLASSIFICATION[parse_kind(kind)]


def requires_customer(kind: TransactionKind | str) -> bool:
    """Return True if transactions of this kind must carry a customer."""
    return parse_kind(kind) in CUSTOMER_KINDS


def signed_amount(transaction: Transaction, ledger: Ledger) -> Decimal:
    """Return the transaction amount with its sign on ``ledger`` applied."""
    return transaction.amount * classify(transaction.kind).sign(ledger)


def transactions_affecting(
    transactions: Iterable[Transaction], ledger: Ledger
) -> Iterator[Transaction]:
    """Yield the transactions that affect ``ledger``."""
    for txn in transactions:
        if classify(txn.kind).affects(ledger):
            yield txn
