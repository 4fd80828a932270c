"""Abstract database interface.

Every operation takes the ``owner_id`` it is scoped to; implementations
must never return or touch another owner's rows.
"""

from abc import ABC, abstractmethod
from typing import Optional, Iterable
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerbook.domain.entities import (
    Customer,
    Settings,
    Transaction,
    TransactionKind,
)


class Database(ABC):
    """Abstract database interface for ledgerbook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Customer operations
    @abstractmethod
    def create_customer(self, owner_id: str, name: str, phone: str = "") -> int:
        """Create a new customer. Returns customer ID."""
        pass

    @abstractmethod
    def get_customer(self, owner_id: str, customer_id: int) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    def get_customer_by_name(self, owner_id: str, name: str) -> Optional[Customer]:
        """Get customer by exact name."""
        pass

    @abstractmethod
    def list_customers(self, owner_id: str) -> list[Customer]:
        """List customers ordered by name."""
        pass

    @abstractmethod
    def count_customers(self, owner_id: str) -> int:
        """Count customers."""
        pass

    @abstractmethod
    def update_customer(
        self, owner_id: str, customer_id: int, name: str, phone: Optional[str] = None
    ) -> None:
        """Update customer name and optionally phone."""
        pass

    @abstractmethod
    def delete_customer(self, owner_id: str, customer_id: int) -> None:
        """Delete a customer."""
        pass

    @abstractmethod
    def get_customer_transaction_count(self, owner_id: str, customer_id: int) -> int:
        """Count transactions of any kind referencing a customer."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        owner_id: str,
        kind: TransactionKind,
        amount: Decimal,
        date: date,
        description: str = "",
        customer_id: Optional[int] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, owner_id: str, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        owner_id: str,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update the amendable fields of a transaction."""
        pass

    @abstractmethod
    def delete_transaction(self, owner_id: str, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        owner_id: str,
        kinds: Optional[Iterable[TransactionKind]] = None,
        customer_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List transactions, newest first, with optional filters.

        Args:
            owner_id: Owner the transactions belong to
            kinds: Optional set of kinds to include
            customer_id: Optional customer filter
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date
        """
        pass

    # Settings operations
    @abstractmethod
    def get_settings(self, owner_id: str) -> Optional[Settings]:
        """Get settings, or None if the owner has none yet."""
        pass

    @abstractmethod
    def save_settings(
        self,
        owner_id: str,
        opening_bank_balance: Decimal,
        opening_bank_balance_date: date,
        opening_aachi_masala_balance: Decimal,
        opening_aachi_masala_balance_date: date,
        business_name: str,
    ) -> None:
        """Create or replace the owner's settings record."""
        pass
