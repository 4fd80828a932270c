"""Dashboard command."""

import click
from ledgerbook.cli.customer_resolution import customer_names
from ledgerbook.cli.formatting import describe, format_money
from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.report import ReportService


@click.command("dashboard")
@click.pass_context
def show_dashboard(ctx):
    """Show balances of every ledger and recent activity."""
    db = ctx.obj["db"]
    owner = ctx.obj["owner"]
    summary = ReportService(db, owner).get_dashboard()

    click.echo("\nDashboard")
    click.echo("=" * 50)
    click.echo(f"{'Bank balance:':<25}{format_money(summary.bank_balance):>25}")
    click.echo(f"{'Total outstanding:':<25}{format_money(summary.total_outstanding):>25}")
    click.echo(f"{'Total purchases:':<25}{format_money(summary.total_purchases):>25}")
    click.echo(f"{'Aachi Masala balance:':<25}{format_money(summary.aachi_masala_balance):>25}")
    click.echo(f"{'Customers:':<25}{summary.customer_count:>25}")

    click.echo("\nRecent activity:")
    if not summary.recent_transactions:
        click.echo("  No transactions yet.")
        return

    names = customer_names(CustomerService(db, owner))
    for txn in summary.recent_transactions:
        click.echo(
            f"  {str(txn.date):<12} {txn.kind.label:<22} {format_money(txn.amount):>14}  "
            f"{describe(txn, names)}"
        )


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)
