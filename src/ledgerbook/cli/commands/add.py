"""Add transaction command."""

import click
from ledgerbook.cli.customer_resolution import resolve_customer_or_exit
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.formatting import format_money
from ledgerbook.domain.classifier import classify
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.entities import TransactionKind
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date

KIND_CHOICES = [kind.value for kind in TransactionKind]


@click.command("add")
@click.option(
    "--type",
    "kind",
    required=True,
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    help="Transaction type",
)
@click.option("--amount", required=True, help="Positive amount (e.g., 1500 or 1,500.50)")
@click.option("--date", help="Business date (YYYY-MM-DD, DD-MM-YYYY, 'today'); defaults to today")
@click.option("--description", help="Transaction description")
@click.option("--customer", help="Customer name or ID (customer purchases and payments)")
@click.pass_context
def add_transaction(
    ctx,
    kind: str,
    amount: str,
    date: str | None,
    description: str | None,
    customer: str | None,
):
    """Record a transaction.

    Examples:
        ledgerbook add --type CUSTOMER_PURCHASE --customer "Ravi Stores" --amount 700
        ledgerbook add --type PAYMENT_RECEIVED --customer 1 --amount 300 --date yesterday
        ledgerbook add --type BANK_DEBIT --amount 200 --description "Rent"
    """
    db = ctx.obj["db"]
    owner = ctx.obj["owner"]
    transaction_service = TransactionService(db, owner)
    kind = TransactionKind(kind.upper())

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    txn_date = None
    if date:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    customer_id = None
    if customer is not None:
        customer_id = resolve_customer_or_exit(ctx, CustomerService(db, owner), customer)

    try:
        transaction_id = transaction_service.create_transaction(
            kind=kind,
            amount=txn_amount,
            date=txn_date,
            description=description,
            customer_id=customer_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    txn = transaction_service.get_transaction(transaction_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Type: {txn.kind.label}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {format_money(txn.amount)}")
    if customer is not None:
        click.echo(f"  Customer: {customer}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")
    ledgers = ", ".join(ledger.value for ledger in classify(txn.kind).ledgers)
    click.echo(f"  Affects: {ledgers}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
