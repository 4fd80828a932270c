"""SQLAlchemy models for ledgerbook database."""

from datetime import datetime, date, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    UniqueConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    phone = Column(String, default="", nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Customer names are unique per owner
    __table_args__ = (UniqueConstraint("owner_id", "name", name="uq_owner_customer_name"),)

    # Relationships
    transactions = relationship("Transaction", back_populates="customer")


class Transaction(Base):
    """Transaction model.

    Ledger membership is not stored; it is derived from ``kind``.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False)
    kind = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, default="", nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_transactions_owner_date", "owner_id", "date"),
        Index("ix_transactions_owner_kind", "owner_id", "kind"),
        Index("ix_transactions_owner_customer", "owner_id", "customer_id"),
    )

    # Relationships
    customer = relationship("Customer", back_populates="transactions")


class Settings(Base):
    """Per-owner settings model."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, unique=True, nullable=False)
    opening_bank_balance = Column(Numeric(12, 2), default=0, nullable=False)
    opening_bank_balance_date = Column(Date, default=date.today, nullable=False)
    opening_aachi_masala_balance = Column(Numeric(12, 2), default=0, nullable=False)
    opening_aachi_masala_balance_date = Column(Date, default=date.today, nullable=False)
    business_name = Column(String, default="", nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
