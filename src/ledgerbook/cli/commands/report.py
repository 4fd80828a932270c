"""Purchases and outstanding report commands."""

import click
from ledgerbook.cli.customer_resolution import customer_names
from ledgerbook.cli.date_filters import date_range_options, resolve_cli_date_range
from ledgerbook.cli.formatting import describe, format_money
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.report import ReportService
from ledgerbook.utils.date_parser import parse_date


@click.command("purchases")
@date_range_options
@click.pass_context
def show_purchases(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
):
    """Show customer purchases and Aachi Masala purchases.

    Own purchases are tracked on the bank ledger only and are not listed here.
    """
    db = ctx.obj["db"]
    owner = ctx.obj["owner"]
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month, "this-year": this_year},
    )
    report = ReportService(db, owner).purchase_report(start_date=start, end_date=end)
    names = customer_names(CustomerService(db, owner))

    sections = (
        ("Customer purchases", report.customer_purchases, report.customer_total),
        ("Aachi Masala purchases", report.aachi_masala_purchases, report.aachi_masala_total),
    )
    for title, transactions, total in sections:
        click.echo(f"\n{title} ({len(transactions)})")
        click.echo("-" * 70)
        for txn in transactions:
            click.echo(
                f"  {txn.id:<6} {str(txn.date):<12} {format_money(txn.amount):>14}  "
                f"{describe(txn, names)}"
            )
        click.echo(f"  {'Total':<19} {format_money(total):>14}")

    label = "Filtered grand total" if start or end else "Grand total"
    click.echo(f"\n{label}: {format_money(report.grand_total)}")


@click.command("outstanding")
@click.option("--as-of", help="Count days outstanding up to this date (defaults to today)")
@click.pass_context
def show_outstanding(ctx, as_of: str | None):
    """Show customers that still owe money, largest amount first."""
    as_of_date = None
    if as_of:
        try:
            as_of_date = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    report = ReportService(ctx.obj["db"], ctx.obj["owner"]).outstanding_report(as_of=as_of_date)

    if report.business_name:
        click.echo(f"\n{report.business_name.upper()}")
    click.echo(f"Outstanding details as of {report.as_of.strftime('%d-%m-%Y')}")

    if not report.rows:
        click.echo("\nNo outstanding balances.")
        return

    click.echo("-" * 70)
    click.echo(f"{'Bill date':<12} {'Customer':<28} {'Amount':>16} {'Days':>6}")
    click.echo("-" * 70)
    for row in report.rows:
        click.echo(
            f"{row.bill_date.strftime('%d-%m-%Y'):<12} {row.customer.name.upper():<28} "
            f"{format_money(row.outstanding):>16} {row.days_outstanding:>6}"
        )
    click.echo("-" * 70)
    click.echo(f"{'Total':<41} {format_money(report.total_outstanding):>16}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(show_purchases)
    cli.add_command(show_outstanding)
