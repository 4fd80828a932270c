"""Tests for dashboard, purchase and outstanding reports."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.domain.entities import TransactionKind
from ledgerbook.domain.report import ReportService


@pytest.fixture
def two_customers(customer_service, transaction_service, settings_service):
    """Customer A owes 400, customer B owes 150, customer C is settled."""
    settings_service.update_settings(
        opening_bank_balance=Decimal("1000"),
        opening_aachi_masala_balance=Decimal("50"),
        business_name="Sri Murugan Agencies",
    )
    a = customer_service.create_customer(name="A Stores")
    b = customer_service.create_customer(name="B Mart")
    c = customer_service.create_customer(name="C Traders")

    transaction_service.create_transaction(
        TransactionKind.CUSTOMER_PURCHASE, Decimal("700"), date=date(2024, 1, 1), customer_id=a
    )
    transaction_service.create_transaction(
        TransactionKind.CUSTOMER_PURCHASE, Decimal("200"), date=date(2024, 1, 3), customer_id=a
    )
    transaction_service.create_transaction(
        TransactionKind.PAYMENT_RECEIVED, Decimal("500"), date=date(2024, 1, 5), customer_id=a
    )
    transaction_service.create_transaction(
        TransactionKind.CUSTOMER_PURCHASE, Decimal("150"), date=date(2024, 1, 8), customer_id=b
    )
    transaction_service.create_transaction(
        TransactionKind.CUSTOMER_PURCHASE, Decimal("90"), date=date(2024, 1, 2), customer_id=c
    )
    transaction_service.create_transaction(
        TransactionKind.PAYMENT_RECEIVED, Decimal("90"), date=date(2024, 1, 4), customer_id=c
    )
    transaction_service.create_transaction(
        TransactionKind.AACHI_MASALA_PURCHASE, Decimal("40"), date=date(2024, 1, 6)
    )
    transaction_service.create_transaction(
        TransactionKind.OWN_PURCHASE, Decimal("60"), date=date(2024, 2, 1)
    )
    return a, b, c


def test_dashboard(report_service, two_customers):
    summary = report_service.get_dashboard()

    # 1000 + 500 + 90 - 60
    assert summary.bank_balance == Decimal("1530")
    assert summary.total_outstanding == Decimal("550")
    assert summary.total_purchases == Decimal("1180")
    assert summary.customer_count == 3
    assert summary.aachi_masala_balance == Decimal("10")
    assert len(summary.recent_transactions) == 5
    assert summary.recent_transactions[0].kind is TransactionKind.OWN_PURCHASE


def test_dashboard_for_new_owner(report_service):
    summary = report_service.get_dashboard()
    assert summary.bank_balance == Decimal("0")
    assert summary.customer_count == 0
    assert summary.recent_transactions == ()


def test_dashboard_is_owner_scoped(temp_db, two_customers, other_owner):
    summary = ReportService(temp_db, other_owner).get_dashboard()
    assert summary.total_outstanding == Decimal("0")
    assert summary.total_purchases == Decimal("0")
    assert summary.customer_count == 0


def test_purchase_report(report_service, two_customers):
    report = report_service.purchase_report()

    assert [t.amount for t in report.customer_purchases] == [
        Decimal("150"),
        Decimal("200"),
        Decimal("90"),
        Decimal("700"),
    ]
    assert report.customer_total == Decimal("1140")
    assert report.aachi_masala_total == Decimal("40")
    assert report.grand_total == Decimal("1180")


def test_purchase_report_date_range(report_service, two_customers):
    report = report_service.purchase_report(
        start_date=date(2024, 1, 2), end_date=date(2024, 1, 6)
    )

    assert report.start_date == date(2024, 1, 2)
    assert report.customer_total == Decimal("290")
    assert report.aachi_masala_total == Decimal("40")
    assert report.grand_total == Decimal("330")


def test_outstanding_report(report_service, two_customers):
    a, b, _ = two_customers
    report = report_service.outstanding_report(as_of=date(2024, 1, 10))

    assert report.business_name == "Sri Murugan Agencies"
    assert report.as_of == date(2024, 1, 10)
    assert [row.customer.id for row in report.rows] == [a, b]
    assert [row.outstanding for row in report.rows] == [Decimal("400"), Decimal("150")]
    assert [row.bill_date for row in report.rows] == [date(2024, 1, 3), date(2024, 1, 8)]
    assert [row.days_outstanding for row in report.rows] == [7, 2]
    assert report.total_outstanding == Decimal("550")


def test_outstanding_report_clamps_future_bill_dates(report_service, two_customers):
    report = report_service.outstanding_report(as_of=date(2023, 12, 1))
    assert all(row.days_outstanding == 0 for row in report.rows)


def test_outstanding_report_empty(report_service):
    report = report_service.outstanding_report(as_of=date(2024, 1, 1))
    assert report.rows == ()
    assert report.total_outstanding == Decimal("0")
