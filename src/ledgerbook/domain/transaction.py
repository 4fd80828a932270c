"""Transaction domain service."""

import logging
from typing import Optional
from datetime import date as date_type
from decimal import Decimal

from ledgerbook.database.base import Database
from ledgerbook.domain.balance import ensure_storable
from ledgerbook.domain.classifier import classify, parse_kind, requires_customer
from ledgerbook.domain.entities import (
    Ledger,
    Transaction as TransactionEntity,
    TransactionKind,
)
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    customer_not_found,
    transaction_not_found,
)

logger = logging.getLogger(__name__)


def kinds_affecting(ledger: Ledger) -> list[TransactionKind]:
    """Return every transaction kind that moves ``ledger``."""
    return [kind for kind in TransactionKind if classify(kind).affects(ledger)]


def validate_amount(amount: Decimal) -> Decimal:
    """Ensure a transaction amount is a strictly positive Decimal.

    The amount must also fit the stored precision of whole cents, so a
    value like 0.004 is rejected instead of being saved as zero.

    Raises:
        ValidationError: If amount is not a Decimal/int, not positive, or
            not storable exactly
    """
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
        raise ValidationError(f"Amount must be a decimal number, got {amount!r}")
    amount = Decimal(amount)
    if not amount.is_finite() or amount <= 0:
        raise ValidationError("Amount must be positive")
    return ensure_storable(amount)


class TransactionService:
    """Service for recording one owner's transactions."""

    def __init__(self, db: Database, owner_id: str):
        """Initialize transaction service.

        Args:
            db: Database instance
            owner_id: Owner the transactions belong to
        """
        self.db = db
        self.owner_id = owner_id

    def create_transaction(
        self,
        kind: TransactionKind | str,
        amount: Decimal,
        date: Optional[date_type] = None,
        description: Optional[str] = None,
        customer_id: Optional[int] = None,
    ) -> int:
        """Create a transaction.

        Args:
            kind: Transaction kind
            amount: Positive amount
            date: Business date (defaults to today)
            description: Optional description
            customer_id: Customer ID, required for customer purchases and
                payments and rejected for every other kind

        Returns:
            Transaction ID

        Raises:
            ValidationError: If kind, amount or customer reference is invalid
            NotFoundError: If the customer does not belong to this owner
        """
        kind = parse_kind(kind)
        amount = validate_amount(amount)

        if requires_customer(kind):
            if customer_id is None:
                raise ValidationError(f"Customer is required for {kind.label} transactions")
            if self.db.get_customer(self.owner_id, customer_id) is None:
                raise NotFoundError(customer_not_found(customer_id))
        elif customer_id is not None:
            raise ValidationError(f"{kind.label} transactions cannot reference a customer")

        transaction_id = self.db.create_transaction(
            owner_id=self.owner_id,
            kind=kind,
            amount=amount,
            date=date or date_type.today(),
            description=(description or "").strip(),
            customer_id=customer_id,
        )
        logger.info(
            "Created %s transaction %s (%s) for owner %s",
            kind.value,
            transaction_id,
            amount,
            self.owner_id,
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID, or None if not found."""
        return self.db.get_transaction(self.owner_id, transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID.

        Raises:
            NotFoundError: If the owner has no such transaction
        """
        txn = self.db.get_transaction(self.owner_id, transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        date: Optional[date_type] = None,
        description: Optional[str] = None,
    ) -> None:
        """Amend a transaction.

        Only amount, date and description can change; kind and customer are
        fixed at creation.

        Raises:
            NotFoundError: If transaction doesn't exist
            ValidationError: If the new amount is not positive
        """
        self.require_transaction(transaction_id)
        if amount is not None:
            amount = validate_amount(amount)

        self.db.update_transaction(
            owner_id=self.owner_id,
            transaction_id=transaction_id,
            amount=amount,
            date=date,
            description=description.strip() if description is not None else None,
        )
        logger.info("Updated transaction %s for owner %s", transaction_id, self.owner_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(self.owner_id, transaction_id)
        logger.info("Deleted transaction %s for owner %s", transaction_id, self.owner_id)

    def list_transactions(
        self,
        kind: Optional[TransactionKind | str] = None,
        ledger: Optional[Ledger] = None,
        customer_id: Optional[int] = None,
        start_date: Optional[date_type] = None,
        end_date: Optional[date_type] = None,
    ) -> list[TransactionEntity]:
        """List transactions, newest first, with filters.

        Args:
            kind: Optional kind filter
            ledger: Optional ledger filter; resolved through the classifier
            customer_id: Optional customer filter
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date

        Returns:
            List of transaction entities
        """
        kinds: Optional[set[TransactionKind]] = None
        if kind is not None:
            kinds = {parse_kind(kind)}
        if ledger is not None:
            ledger_kinds = set(kinds_affecting(ledger))
            kinds = ledger_kinds if kinds is None else kinds & ledger_kinds
            if not kinds:
                return []

        return self.db.list_transactions(
            owner_id=self.owner_id,
            kinds=kinds,
            customer_id=customer_id,
            start_date=start_date,
            end_date=end_date,
        )
