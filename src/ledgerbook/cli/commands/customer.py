"""Customer management commands."""

from decimal import Decimal

import click
from ledgerbook.cli.customer_resolution import resolve_customer_or_exit
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.formatting import format_money
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.statement import StatementService


@click.group()
def customer_group():
    """Manage customers."""
    pass


@customer_group.command("create")
@click.argument("name", metavar="CUSTOMER_NAME")
@click.option("--phone", help="Phone number")
@click.pass_context
def create_customer(ctx, name: str, phone: str | None):
    """Create a new customer.

    Examples:
        ledgerbook customer create "Ravi Stores"
        ledgerbook customer create "Ravi Stores" --phone 9876543210
    """
    service = CustomerService(ctx.obj["db"], ctx.obj["owner"])

    try:
        customer_id = service.create_customer(name=name, phone=phone)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created customer '{name.strip()}' (ID: {customer_id})")


@customer_group.command("list")
@click.pass_context
def list_customers(ctx):
    """List customers with their outstanding amounts."""
    service = CustomerService(ctx.obj["db"], ctx.obj["owner"])

    balances = service.list_customers_with_outstanding()
    if not balances:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 70)
    for entry in balances:
        c = entry.customer
        click.echo(
            f"ID: {c.id:3d} | {c.name:25s} | {c.phone or '-':12s} | "
            f"Outstanding: {format_money(entry.outstanding)}"
        )
    total = sum((entry.outstanding for entry in balances), Decimal("0"))
    click.echo("-" * 70)
    click.echo(f"Total outstanding: {format_money(total)}")


@customer_group.command("show")
@click.argument("customer", metavar="CUSTOMER")
@click.pass_context
def show_customer(ctx, customer: str):
    """Show a customer's statement with running outstanding balance.

    CUSTOMER can be a customer name or ID.
    """
    db = ctx.obj["db"]
    owner = ctx.obj["owner"]
    customer_id = resolve_customer_or_exit(ctx, CustomerService(db, owner), customer)
    statement = StatementService(db, owner).customer_statement(customer_id)

    c = statement.customer
    click.echo(f"\n{c.name} (ID: {c.id})")
    if c.phone:
        click.echo(f"Phone: {c.phone}")
    click.echo(f"Outstanding: {format_money(statement.outstanding)}")

    if not statement.entries:
        click.echo("\nNo transactions.")
        return

    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<20} {'Amount':>16} {'Balance':>16}  Description")
    click.echo("-" * 90)
    for entry in reversed(statement.entries):
        txn = entry.transaction
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.kind.label:<20} "
            f"{format_money(txn.amount):>16} {format_money(entry.balance_after):>16}  "
            f"{txn.description}"
        )


@customer_group.command("rename")
@click.argument("customer", metavar="CUSTOMER")
@click.argument("new_name", metavar="NEW_NAME")
@click.option("--phone", help="New phone number (optional)")
@click.pass_context
def rename_customer(ctx, customer: str, new_name: str, phone: str | None) -> None:
    """Rename a customer.

    CUSTOMER can be a customer name or ID.

    Examples:
        ledgerbook customer rename "Ravi" "Ravi Stores"
        ledgerbook customer rename 1 "Ravi Stores" --phone 9876543210
    """
    service = CustomerService(ctx.obj["db"], ctx.obj["owner"])
    customer_id = resolve_customer_or_exit(ctx, service, customer)

    try:
        service.update_customer(customer_id=customer_id, name=new_name, phone=phone)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed customer to '{new_name.strip()}'")
    if phone is not None:
        click.echo(f"Phone updated to '{phone}'")


@customer_group.command("delete")
@click.argument("customer", metavar="CUSTOMER")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_customer(ctx, customer: str, yes: bool) -> None:
    """Delete a customer.

    CUSTOMER can be a customer name or ID.

    A customer can only be deleted if no transaction references it.
    """
    service = CustomerService(ctx.obj["db"], ctx.obj["owner"])
    customer_id = resolve_customer_or_exit(ctx, service, customer)
    customer_obj = service.get_customer(customer_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete customer '{customer_obj.name}' (ID: {customer_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_customer(customer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted customer '{customer_obj.name}'")


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
