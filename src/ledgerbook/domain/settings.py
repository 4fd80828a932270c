"""Settings domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.balance import ensure_storable, to_decimal
from ledgerbook.domain.entities import Settings as SettingsEntity

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for reading and saving an owner's settings."""

    def __init__(self, db: Database, owner_id: str):
        """Initialize settings service.

        Args:
            db: Database instance
            owner_id: Owner the settings belong to
        """
        self.db = db
        self.owner_id = owner_id

    def get_settings(self) -> SettingsEntity:
        """Get settings, creating the zero-balance defaults on first access.

        Returns:
            Settings entity
        """
        settings = self.db.get_settings(self.owner_id)
        if settings is None:
            today = date.today()
            self.db.save_settings(
                owner_id=self.owner_id,
                opening_bank_balance=Decimal("0"),
                opening_bank_balance_date=today,
                opening_aachi_masala_balance=Decimal("0"),
                opening_aachi_masala_balance_date=today,
                business_name="",
            )
            logger.info("Created default settings for owner %s", self.owner_id)
            settings = self.db.get_settings(self.owner_id)
        return settings

    def update_settings(
        self,
        opening_bank_balance: Optional[Decimal] = None,
        opening_bank_balance_date: Optional[date] = None,
        opening_aachi_masala_balance: Optional[Decimal] = None,
        opening_aachi_masala_balance_date: Optional[date] = None,
        business_name: Optional[str] = None,
    ) -> SettingsEntity:
        """Update settings. Fields left as None keep their current value.

        Opening balances may be negative but must fit whole cents.

        Returns:
            Updated settings entity

        Raises:
            TypeError: If an opening balance is a float
            ValidationError: If an opening balance cannot be stored exactly
        """
        current = self.get_settings()
        self.db.save_settings(
            owner_id=self.owner_id,
            opening_bank_balance=(
                ensure_storable(to_decimal(opening_bank_balance), "Opening bank balance")
                if opening_bank_balance is not None
                else current.opening_bank_balance
            ),
            opening_bank_balance_date=opening_bank_balance_date or current.opening_bank_balance_date,
            opening_aachi_masala_balance=(
                ensure_storable(
                    to_decimal(opening_aachi_masala_balance), "Opening Aachi Masala balance"
                )
                if opening_aachi_masala_balance is not None
                else current.opening_aachi_masala_balance
            ),
            opening_aachi_masala_balance_date=(
                opening_aachi_masala_balance_date or current.opening_aachi_masala_balance_date
            ),
            business_name=(
                business_name.strip() if business_name is not None else current.business_name
            ),
        )
        logger.info("Updated settings for owner %s", self.owner_id)
        return self.db.get_settings(self.owner_id)
