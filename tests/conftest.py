"""Shared pytest fixtures for ledgerbook tests."""

import tempfile
import os
from datetime import date, datetime, timedelta
from decimal import Decimal
import pytest

from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.entities import Transaction, TransactionKind
from ledgerbook.domain.report import ReportService
from ledgerbook.domain.settings import SettingsService
from ledgerbook.domain.statement import StatementService
from ledgerbook.domain.transaction import TransactionService

OWNER = "shop-a"
OTHER_OWNER = "shop-b"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def owner():
    """Owner the service fixtures are bound to."""
    return OWNER


@pytest.fixture
def other_owner():
    """A second owner whose data must never leak into the first."""
    return OTHER_OWNER


@pytest.fixture
def customer_service(temp_db):
    """Create a CustomerService for the primary owner."""
    return CustomerService(temp_db, OWNER)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService for the primary owner."""
    return TransactionService(temp_db, OWNER)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService for the primary owner."""
    return SettingsService(temp_db, OWNER)


@pytest.fixture
def statement_service(temp_db):
    """Create a StatementService for the primary owner."""
    return StatementService(temp_db, OWNER)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService for the primary owner."""
    return ReportService(temp_db, OWNER)


@pytest.fixture
def sample_customer(customer_service):
    """Create a sample customer for testing."""
    customer_id = customer_service.create_customer(name="Ravi Stores", phone="9876543210")
    return customer_service.get_customer(customer_id)


@pytest.fixture
def make_transaction():
    """Factory for in-memory Transaction entities.

    IDs and creation timestamps increase with every call, so creation order
    is the call order unless ``created_at`` is given explicitly.
    """
    counter = {"next": 1}
    base_time = datetime(2024, 1, 1, 9, 0, 0)

    def _make(
        kind: TransactionKind,
        amount,
        day: int = 1,
        customer_id=None,
        created_at=None,
        owner_id: str = OWNER,
        description: str = "",
    ) -> Transaction:
        txn_id = counter["next"]
        counter["next"] += 1
        return Transaction(
            id=txn_id,
            owner_id=owner_id,
            kind=kind,
            amount=Decimal(str(amount)),
            date=date(2024, 1, day),
            created_at=created_at or base_time + timedelta(minutes=txn_id),
            description=description,
            customer_id=customer_id,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
