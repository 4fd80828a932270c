"""Transaction management commands."""

import click
from ledgerbook.cli.customer_resolution import customer_names, resolve_customer_or_exit
from ledgerbook.cli.date_filters import date_range_options, resolve_cli_date_range
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.formatting import describe, format_money
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.entities import Ledger, TransactionKind
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option(
    "--type",
    "kind",
    type=click.Choice([k.value for k in TransactionKind], case_sensitive=False),
    help="Only this transaction type",
)
@click.option(
    "--ledger",
    type=click.Choice([l.value for l in Ledger], case_sensitive=False),
    help="Only transactions affecting this ledger",
)
@click.option("--customer", help="Customer name or ID")
@date_range_options
@click.pass_context
def list_transactions(
    ctx,
    kind: str | None,
    ledger: str | None,
    customer: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    owner = ctx.obj["owner"]
    service = TransactionService(db, owner)
    customer_service = CustomerService(db, owner)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month, "this-year": this_year},
    )

    customer_id = None
    if customer is not None:
        customer_id = resolve_customer_or_exit(ctx, customer_service, customer)

    transactions = service.list_transactions(
        kind=TransactionKind(kind.upper()) if kind else None,
        ledger=Ledger(ledger.lower()) if ledger else None,
        customer_id=customer_id,
        start_date=start,
        end_date=end,
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    names = customer_names(customer_service)
    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<22} {'Amount':>16}  Description")
    click.echo("-" * 90)
    for txn in transactions:
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.kind.label:<22} "
            f"{format_money(txn.amount):>16}  {describe(txn, names)}"
        )


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--amount", help="New positive amount")
@click.option("--date", help="New business date")
@click.option("--description", help="New description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    amount: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Amend a transaction's amount, date or description.

    The type and customer of a transaction cannot be changed; delete it and
    record a new one instead.
    """
    if amount is None and date is None and description is None:
        click.echo("Error: Nothing to update. Use --amount, --date or --description.", err=True)
        ctx.exit(1)

    service = TransactionService(ctx.obj["db"], ctx.obj["owner"])

    new_amount = None
    if amount is not None:
        try:
            new_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    new_date = None
    if date is not None:
        try:
            new_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id, amount=new_amount, date=new_date, description=description
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction. Every balance reflects the deletion immediately."""
    service = TransactionService(ctx.obj["db"], ctx.obj["owner"])

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Delete {txn.kind.label} of {format_money(txn.amount)} on {txn.date}?"
    ):
        click.echo("Deletion cancelled.")
        return

    service.delete_transaction(transaction_id)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
