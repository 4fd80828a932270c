"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain never sees ORM
objects and the ORM never sees ledger classification.
"""

from decimal import Decimal

from ledgerbook.domain import entities as domain
from ledgerbook.database.models import (
    Customer as ORMCustomer,
    Settings as ORMSettings,
    Transaction as ORMTransaction,
)


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        id=orm_customer.id,
        owner_id=orm_customer.owner_id,
        name=orm_customer.name,
        phone=orm_customer.phone or "",
        created_at=orm_customer.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        owner_id=orm_transaction.owner_id,
        kind=domain.TransactionKind(orm_transaction.kind),
        amount=Decimal(orm_transaction.amount),
        date=orm_transaction.date,
        created_at=orm_transaction.created_at,
        description=orm_transaction.description or "",
        customer_id=orm_transaction.customer_id,
    )


def settings_to_domain(orm_settings: ORMSettings) -> domain.Settings:
    """Convert SQLAlchemy Settings model to domain Settings entity."""
    return domain.Settings(
        owner_id=orm_settings.owner_id,
        opening_bank_balance=Decimal(orm_settings.opening_bank_balance),
        opening_bank_balance_date=orm_settings.opening_bank_balance_date,
        opening_aachi_masala_balance=Decimal(orm_settings.opening_aachi_masala_balance),
        opening_aachi_masala_balance_date=orm_settings.opening_aachi_masala_balance_date,
        business_name=orm_settings.business_name or "",
        updated_at=orm_settings.updated_at,
    )
