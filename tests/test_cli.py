"""End-to-end tests for the command line interface."""

import click
import pytest
from datetime import date

from ledgerbook.cli.date_filters import resolve_cli_date_range
from ledgerbook.cli.formatting import format_money
from ledgerbook.cli.main import cli
from ledgerbook.utils.date_parser import get_date_range, parse_date


@pytest.fixture
def run(cli_runner, temp_db):
    """Invoke the CLI against the temporary database as owner shop-a."""

    def _run(*args, owner="shop-a", input=None):
        return cli_runner.invoke(
            cli,
            ["--db-path", temp_db.database_path, "--owner", owner, *args],
            input=input,
        )

    return _run


def test_help_does_not_need_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "customer" in result.output
    assert "dashboard" in result.output


def test_full_workflow(run):
    """Settings, customer, transactions, then every read command."""
    result = run("settings", "set", "--opening-bank-balance", "1,000", "--business-name", "Sri Agencies")
    assert result.exit_code == 0, result.output
    assert "Settings saved." in result.output

    result = run("customer", "create", "Ravi Stores", "--phone", "9876543210")
    assert result.exit_code == 0, result.output
    assert "Created customer 'Ravi Stores' (ID: 1)" in result.output

    steps = [
        ["add", "--type", "BANK_CREDIT", "--amount", "500", "--date", "2024-01-01"],
        ["add", "--type", "BANK_DEBIT", "--amount", "200", "--date", "2024-01-02", "--description", "Rent"],
        ["add", "--type", "CUSTOMER_PURCHASE", "--customer", "Ravi Stores", "--amount", "700", "--date", "2024-01-01"],
        ["add", "--type", "payment_received", "--customer", "1", "--amount", "Rs 300", "--date", "02-01-2024"],
    ]
    for args in steps:
        result = run(*args)
        assert result.exit_code == 0, result.output
        assert "Created transaction" in result.output

    result = run("statement", "bank")
    assert result.exit_code == 0, result.output
    assert "Opening balance: Rs 1,000.00" in result.output
    assert "Current balance: Rs 1,600.00" in result.output
    assert "Rs 1,300.00" in result.output

    result = run("customer", "list")
    assert result.exit_code == 0, result.output
    assert "Total outstanding: Rs 400.00" in result.output

    result = run("customer", "show", "Ravi Stores")
    assert result.exit_code == 0, result.output
    assert "Outstanding: Rs 400.00" in result.output

    result = run("dashboard")
    assert result.exit_code == 0, result.output
    assert "Rs 1,600.00" in result.output
    assert "Recent activity:" in result.output

    result = run("purchases")
    assert result.exit_code == 0, result.output
    assert "Grand total: Rs 700.00" in result.output

    result = run("outstanding", "--as-of", "2024-01-11")
    assert result.exit_code == 0, result.output
    assert "SRI AGENCIES" in result.output
    assert "Outstanding details as of 11-01-2024" in result.output
    assert "RAVI STORES" in result.output


def test_add_shows_affected_ledgers(run):
    run("customer", "create", "Ravi Stores")
    result = run("add", "--type", "PAYMENT_RECEIVED", "--customer", "Ravi Stores", "--amount", "50")
    assert result.exit_code == 0, result.output
    assert "Affects: bank, outstanding" in result.output


def test_add_rejects_invalid_input(run):
    result = run("add", "--type", "BANK_CREDIT", "--amount", "abc")
    assert result.exit_code == 1
    assert "Invalid amount" in result.output

    result = run("add", "--type", "BANK_CREDIT", "--amount", "0")
    assert result.exit_code == 1
    assert "positive" in result.output

    result = run("add", "--type", "CUSTOMER_PURCHASE", "--amount", "10")
    assert result.exit_code == 1
    assert "Customer is required" in result.output

    result = run("add", "--type", "CUSTOMER_PURCHASE", "--customer", "Nobody", "--amount", "10")
    assert result.exit_code == 1
    assert "not found" in result.output


def test_customer_delete_blocked_then_allowed(run):
    run("customer", "create", "Ravi Stores")
    run("add", "--type", "CUSTOMER_PURCHASE", "--customer", "Ravi Stores", "--amount", "10")

    result = run("customer", "delete", "Ravi Stores", "--yes")
    assert result.exit_code == 1
    assert "Cannot delete customer" in result.output

    result = run("transaction", "delete", "1", "--yes")
    assert result.exit_code == 0, result.output
    assert "Deleted transaction 1" in result.output

    result = run("customer", "delete", "Ravi Stores", "--yes")
    assert result.exit_code == 0, result.output
    assert "Deleted customer 'Ravi Stores'" in result.output


def test_customer_delete_cancelled(run):
    run("customer", "create", "Ravi Stores")
    result = run("customer", "delete", "Ravi Stores", input="n\n")
    assert result.exit_code == 0
    assert "Deletion cancelled." in result.output


def test_customer_duplicate_and_rename(run):
    run("customer", "create", "Ravi Stores")
    result = run("customer", "create", "Ravi Stores")
    assert result.exit_code == 1
    assert "already exists" in result.output

    result = run("customer", "rename", "Ravi Stores", "Ravi Super Stores")
    assert result.exit_code == 0, result.output
    assert "Renamed customer to 'Ravi Super Stores'" in result.output


def test_transaction_list_and_update(run):
    run("add", "--type", "BANK_CREDIT", "--amount", "500", "--date", "2024-01-01")
    run("add", "--type", "AACHI_MASALA_CREDIT", "--amount", "90", "--date", "2024-01-02")

    result = run("transaction", "list", "--ledger", "bank")
    assert result.exit_code == 0, result.output
    assert "Found 1 transaction(s):" in result.output

    result = run("transaction", "list", "--start-date", "2025-01-01")
    assert result.exit_code == 0
    assert "No transactions found." in result.output

    result = run("transaction", "update", "1", "--amount", "650")
    assert result.exit_code == 0, result.output
    assert "Updated transaction 1" in result.output

    result = run("statement", "bank")
    assert "Current balance: Rs 650.00" in result.output

    result = run("transaction", "update", "1")
    assert result.exit_code == 1
    assert "Nothing to update" in result.output


def test_transaction_missing(run):
    result = run("transaction", "delete", "999", "--yes")
    assert result.exit_code == 1
    assert "Transaction 999 not found" in result.output


def test_owners_are_isolated(run):
    run("customer", "create", "Ravi Stores")
    run("add", "--type", "BANK_CREDIT", "--amount", "500")

    result = run("customer", "list", owner="shop-b")
    assert result.exit_code == 0
    assert "No customers found." in result.output

    result = run("statement", "bank", owner="shop-b")
    assert "Current balance: Rs 0.00" in result.output


def test_aachi_masala_statement(run):
    run("settings", "set", "--opening-aachi-balance", "100")
    run("add", "--type", "AACHI_MASALA_PURCHASE", "--amount", "40")

    result = run("statement", "aachi-masala")
    assert result.exit_code == 0, result.output
    assert "Aachi Masala Statement" in result.output
    assert "Current balance: Rs 60.00" in result.output


def test_outstanding_report_empty(run):
    result = run("outstanding")
    assert result.exit_code == 0
    assert "No outstanding balances." in result.output


def test_format_money():
    from decimal import Decimal

    assert format_money(Decimal("1234.5")) == "Rs 1,234.50"
    assert format_money(Decimal("-200")) == "-Rs 200.00"
    assert format_money(Decimal("0")) == "Rs 0.00"


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date=None,
            period_flags=period_flags,
        )

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-01-01",
            end_date=None,
            period_flags={"this-month": True},
        )
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date=None,
        end_date=None,
        period_flags={"this-month": True},
    )
    assert (start, end) == get_date_range("this-month")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2024-01-02",
        end_date="05-01-2024",
        period_flags={},
    )
    assert start == parse_date("2024-01-02")
    assert end == date(2024, 1, 5)


def test_add_rejects_sub_cent_amount(run):
    result = run("add", "--type", "BANK_CREDIT", "--amount", "0.004")
    assert result.exit_code == 1
    assert "Error: Amount cannot have more than two decimal places" in result.output

    result = run("transaction", "list")
    assert "No transactions found." in result.output


def test_settings_set_rejects_sub_cent_balance(run):
    result = run("settings", "set", "--opening-bank-balance", "10.005")
    assert result.exit_code == 1
    assert "Opening bank balance cannot have more than two decimal places" in result.output


def test_verbose_error_still_reports_message(run):
    result = run("-v", "transaction", "delete", "999", "--yes")
    assert result.exit_code == 1
    assert "Error: Transaction 999 not found" in result.output
