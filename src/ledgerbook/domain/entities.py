"""Domain model entities for ledgerbook.

These are pure data classes representing business concepts, independent of
database schema. Ledger membership is deliberately absent from
``Transaction``: it is derived from ``kind`` by the classifier every time it
is needed.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionKind(str, Enum):
    """Closed set of monetary events the business records."""

    CUSTOMER_PURCHASE = "CUSTOMER_PURCHASE"
    PAYMENT_RECEIVED = "PAYMENT_RECEIVED"
    OWN_PURCHASE = "OWN_PURCHASE"
    BANK_CREDIT = "BANK_CREDIT"
    BANK_DEBIT = "BANK_DEBIT"
    AACHI_MASALA_CREDIT = "AACHI_MASALA_CREDIT"
    AACHI_MASALA_PURCHASE = "AACHI_MASALA_PURCHASE"

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Customer Purchase'."""
        return self.value.replace("_", " ").title()


class Ledger(str, Enum):
    """The independent ledgers a transaction can affect."""

    BANK = "bank"
    OUTSTANDING = "outstanding"
    AACHI_MASALA = "aachi_masala"


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    id: int
    owner_id: str
    name: str
    phone: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    owner_id: str
    kind: TransactionKind
    amount: Decimal
    date: date
    created_at: datetime
    description: str = ""
    customer_id: Optional[int] = None


@dataclass(frozen=True)
class Settings:
    """Per-owner opening balances and display settings."""

    owner_id: str
    opening_bank_balance: Decimal
    opening_bank_balance_date: date
    opening_aachi_masala_balance: Decimal
    opening_aachi_masala_balance_date: date
    business_name: str
    updated_at: datetime


@dataclass(frozen=True)
class RunningBalanceEntry:
    """A transaction paired with the ledger balance right after it."""

    transaction: Transaction
    balance_after: Decimal


@dataclass(frozen=True)
class LedgerStatement:
    """Chronological running-balance view of one ledger."""

    ledger: Ledger
    opening_balance: Decimal
    entries: tuple[RunningBalanceEntry, ...]
    current_balance: Decimal

    def newest_first(self) -> tuple[RunningBalanceEntry, ...]:
        """Entries in presentation order; balances are not recomputed."""
        return tuple(reversed(self.entries))


@dataclass(frozen=True)
class CustomerBalance:
    """Customer together with its outstanding amount."""

    customer: Customer
    outstanding: Decimal


@dataclass(frozen=True)
class CustomerStatement:
    """Outstanding ledger of a single customer."""

    customer: Customer
    entries: tuple[RunningBalanceEntry, ...]
    outstanding: Decimal
    transactions: tuple[Transaction, ...]


@dataclass(frozen=True)
class OutstandingReportRow:
    """One customer line of the outstanding report."""

    customer: Customer
    outstanding: Decimal
    bill_date: date
    days_outstanding: int


@dataclass(frozen=True)
class OutstandingReport:
    """Customers that still owe money, largest balance first."""

    business_name: str
    as_of: date
    rows: tuple[OutstandingReportRow, ...]
    total_outstanding: Decimal


@dataclass(frozen=True)
class PurchaseReport:
    """Customer and Aachi Masala purchases over an optional date range."""

    start_date: Optional[date]
    end_date: Optional[date]
    customer_purchases: tuple[Transaction, ...]
    aachi_masala_purchases: tuple[Transaction, ...]
    customer_total: Decimal
    aachi_masala_total: Decimal

    @property
    def grand_total(self) -> Decimal:
        return self.customer_total + self.aachi_masala_total


@dataclass(frozen=True)
class DashboardSummary:
    """Read-only composition of every ledger for one owner."""

    bank_balance: Decimal
    total_outstanding: Decimal
    total_purchases: Decimal
    customer_count: int
    aachi_masala_balance: Decimal
    recent_transactions: tuple[Transaction, ...]
