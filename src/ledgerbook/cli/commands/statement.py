"""Ledger statement commands."""

import click
from ledgerbook.cli.customer_resolution import customer_names
from ledgerbook.cli.formatting import describe, format_money
from ledgerbook.domain.classifier import classify
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.entities import LedgerStatement
from ledgerbook.domain.statement import StatementService

LEDGER_TITLES = {
    "bank": "Bank Statement",
    "aachi-masala": "Aachi Masala Statement",
}


def _echo_statement(
    title: str, statement: LedgerStatement, names: dict[int, str], oldest_first: bool
) -> None:
    click.echo(f"\n{title}")
    click.echo(f"Opening balance: {format_money(statement.opening_balance)}")
    click.echo(f"Current balance: {format_money(statement.current_balance)}")

    if not statement.entries:
        click.echo("\nNo transactions.")
        return

    entries = statement.entries if oldest_first else statement.newest_first()
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<22} {'Credit':>14} {'Debit':>14} {'Balance':>16}  Description"
    )
    click.echo("-" * 100)
    for entry in entries:
        txn = entry.transaction
        is_credit = classify(txn.kind).sign(statement.ledger) > 0
        credit = format_money(txn.amount) if is_credit else ""
        debit = "" if is_credit else format_money(txn.amount)
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.kind.label:<22} {credit:>14} {debit:>14} "
            f"{format_money(entry.balance_after):>16}  {describe(txn, names)}"
        )


@click.command("statement")
@click.argument("ledger", type=click.Choice(sorted(LEDGER_TITLES)))
@click.option("--oldest-first", is_flag=True, help="List oldest transactions first")
@click.pass_context
def show_statement(ctx, ledger: str, oldest_first: bool):
    """Show the running balance of the bank or Aachi Masala ledger.

    Examples:
        ledgerbook statement bank
        ledgerbook statement aachi-masala --oldest-first
    """
    db = ctx.obj["db"]
    owner = ctx.obj["owner"]
    service = StatementService(db, owner)

    if ledger == "bank":
        statement = service.bank_statement()
    else:
        statement = service.aachi_masala_statement()

    names = customer_names(CustomerService(db, owner))
    _echo_statement(LEDGER_TITLES[ledger], statement, names, oldest_first)


def register_commands(cli):
    """Register statement command with main CLI."""
    cli.add_command(show_statement)
