"""Customer domain service."""

import logging
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Customer as CustomerEntity, CustomerBalance
from ledgerbook.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    customer_delete_blocked,
    customer_not_found,
    duplicate_customer_name,
)
from ledgerbook.domain.outstanding import outstanding_by_customer

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for managing one owner's customers."""

    def __init__(self, db: Database, owner_id: str):
        """Initialize customer service.

        Args:
            db: Database instance
            owner_id: Owner the customers belong to
        """
        self.db = db
        self.owner_id = owner_id

    def _clean_name(self, name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Customer name is required")
        return cleaned

    def create_customer(self, name: str, phone: Optional[str] = None) -> int:
        """Create a new customer.

        Names are trimmed and compared case-sensitively, the same rule the
        database unique constraint enforces.

        Args:
            name: Customer name
            phone: Optional phone number

        Returns:
            Customer ID

        Raises:
            ValidationError: If name is empty
            ConflictError: If a customer with that name already exists
        """
        name = self._clean_name(name)
        if self.db.get_customer_by_name(self.owner_id, name) is not None:
            raise ConflictError(duplicate_customer_name(name))

        customer_id = self.db.create_customer(
            owner_id=self.owner_id, name=name, phone=(phone or "").strip()
        )
        logger.info("Created customer %s '%s' for owner %s", customer_id, name, self.owner_id)
        return customer_id

    def get_customer(self, customer_id: int) -> Optional[CustomerEntity]:
        """Get customer by ID, or None if not found."""
        return self.db.get_customer(self.owner_id, customer_id)

    def require_customer(self, customer_id: int) -> CustomerEntity:
        """Get customer by ID.

        Raises:
            NotFoundError: If the owner has no such customer
        """
        customer = self.db.get_customer(self.owner_id, customer_id)
        if customer is None:
            raise NotFoundError(customer_not_found(customer_id))
        return customer

    def get_customer_by_name(self, name: str) -> Optional[CustomerEntity]:
        """Get customer by exact name."""
        return self.db.get_customer_by_name(self.owner_id, name.strip())

    def list_customers(self) -> list[CustomerEntity]:
        """List customers ordered by name."""
        return self.db.list_customers(self.owner_id)

    def list_customers_with_outstanding(self) -> list[CustomerBalance]:
        """List customers with the amount each one still owes."""
        customers = self.db.list_customers(self.owner_id)
        transactions = self.db.list_transactions(owner_id=self.owner_id)
        balances = outstanding_by_customer(customers, transactions)
        return [
            CustomerBalance(customer=customer, outstanding=balances[customer.id])
            for customer in customers
        ]

    def update_customer(
        self, customer_id: int, name: str, phone: Optional[str] = None
    ) -> None:
        """Rename a customer and optionally change the phone number.

        Raises:
            NotFoundError: If customer not found
            ConflictError: If another customer already has the name
        """
        self.require_customer(customer_id)
        name = self._clean_name(name)

        existing = self.db.get_customer_by_name(self.owner_id, name)
        if existing is not None and existing.id != customer_id:
            raise ConflictError(duplicate_customer_name(name))

        self.db.update_customer(
            owner_id=self.owner_id,
            customer_id=customer_id,
            name=name,
            phone=phone.strip() if phone is not None else None,
        )
        logger.info("Updated customer %s for owner %s", customer_id, self.owner_id)

    def delete_customer(self, customer_id: int) -> None:
        """Delete a customer that has no transactions.

        Raises:
            NotFoundError: If customer not found
            DependencyError: If any transaction references the customer
        """
        self.require_customer(customer_id)

        transaction_count = self.db.get_customer_transaction_count(self.owner_id, customer_id)
        if transaction_count > 0:
            raise DependencyError(customer_delete_blocked(customer_id, transaction_count))

        self.db.delete_customer(self.owner_id, customer_id)
        logger.info("Deleted customer %s for owner %s", customer_id, self.owner_id)
