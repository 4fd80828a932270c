"""Report domain service: dashboard, purchases and outstanding reports."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.balance import sort_chronologically
from ledgerbook.domain.dashboard import build_dashboard, total_purchases
from ledgerbook.domain.entities import (
    DashboardSummary,
    OutstandingReport,
    OutstandingReportRow,
    PurchaseReport,
    TransactionKind,
)
from ledgerbook.domain.outstanding import outstanding_by_customer
from ledgerbook.domain.settings import SettingsService

logger = logging.getLogger(__name__)


class ReportService:
    """Read-only reports composed from the ledger engine."""

    def __init__(self, db: Database, owner_id: str):
        """Initialize report service.

        Args:
            db: Database instance
            owner_id: Owner whose books are reported
        """
        self.db = db
        self.owner_id = owner_id

    def get_dashboard(self) -> DashboardSummary:
        """Build the dashboard summary for the owner."""
        settings = SettingsService(self.db, self.owner_id).get_settings()
        transactions = self.db.list_transactions(owner_id=self.owner_id)
        customer_count = self.db.count_customers(self.owner_id)
        logger.debug(
            "Building dashboard for owner %s from %d transactions",
            self.owner_id,
            len(transactions),
        )
        return build_dashboard(settings, transactions, customer_count)

    def purchase_report(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> PurchaseReport:
        """Customer and Aachi Masala purchases within an inclusive date range.

        Args:
            start_date: Optional start date
            end_date: Optional end date

        Returns:
            PurchaseReport with newest-first transactions and totals
        """
        customer_purchases = self.db.list_transactions(
            owner_id=self.owner_id,
            kinds=[TransactionKind.CUSTOMER_PURCHASE],
            start_date=start_date,
            end_date=end_date,
        )
        aachi_masala_purchases = self.db.list_transactions(
            owner_id=self.owner_id,
            kinds=[TransactionKind.AACHI_MASALA_PURCHASE],
            start_date=start_date,
            end_date=end_date,
        )
        return PurchaseReport(
            start_date=start_date,
            end_date=end_date,
            customer_purchases=tuple(
                sort_chronologically(customer_purchases, newest_first=True)
            ),
            aachi_masala_purchases=tuple(
                sort_chronologically(aachi_masala_purchases, newest_first=True)
            ),
            customer_total=total_purchases(customer_purchases),
            aachi_masala_total=total_purchases(aachi_masala_purchases),
        )

    def outstanding_report(self, as_of: Optional[date] = None) -> OutstandingReport:
        """Customers that still owe money, largest outstanding first.

        The bill date of a customer is the date of its latest customer
        purchase, or the date the customer was created if it has none.

        Args:
            as_of: Date the days outstanding are counted to (defaults to today)

        Returns:
            OutstandingReport
        """
        as_of = as_of or date.today()
        settings = SettingsService(self.db, self.owner_id).get_settings()
        customers = self.db.list_customers(self.owner_id)
        transactions = self.db.list_transactions(owner_id=self.owner_id)
        balances = outstanding_by_customer(customers, transactions)

        last_bill: dict[int, date] = {}
        for txn in transactions:
            if txn.kind is TransactionKind.CUSTOMER_PURCHASE and txn.customer_id is not None:
                if txn.customer_id not in last_bill or txn.date > last_bill[txn.customer_id]:
                    last_bill[txn.customer_id] = txn.date

        rows = []
        for customer in customers:
            outstanding = balances[customer.id]
            if outstanding <= 0:
                continue
            bill_date = last_bill.get(customer.id, customer.created_at.date())
            rows.append(
                OutstandingReportRow(
                    customer=customer,
                    outstanding=outstanding,
                    bill_date=bill_date,
                    days_outstanding=max((as_of - bill_date).days, 0),
                )
            )
        rows.sort(key=lambda row: (-row.outstanding, row.customer.name))

        return OutstandingReport(
            business_name=settings.business_name,
            as_of=as_of,
            rows=tuple(rows),
            total_outstanding=sum((row.outstanding for row in rows), Decimal("0")),
        )
