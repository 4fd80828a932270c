"""Settings commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.formatting import format_money
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.settings import SettingsService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date


@click.group()
def settings_group():
    """View and change opening balances and business name."""
    pass


def _echo_settings(settings) -> None:
    click.echo(f"Business name:          {settings.business_name or '(not set)'}")
    click.echo(
        f"Opening bank balance:   {format_money(settings.opening_bank_balance)} "
        f"as of {settings.opening_bank_balance_date}"
    )
    click.echo(
        f"Opening Aachi Masala:   {format_money(settings.opening_aachi_masala_balance)} "
        f"as of {settings.opening_aachi_masala_balance_date}"
    )


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show current settings."""
    _echo_settings(SettingsService(ctx.obj["db"], ctx.obj["owner"]).get_settings())


@settings_group.command("set")
@click.option("--opening-bank-balance", help="Opening bank balance")
@click.option("--opening-bank-date", help="Date of the opening bank balance")
@click.option("--opening-aachi-balance", help="Opening Aachi Masala balance")
@click.option("--opening-aachi-date", help="Date of the opening Aachi Masala balance")
@click.option("--business-name", help="Business name shown on reports")
@click.pass_context
def set_settings(
    ctx,
    opening_bank_balance: str | None,
    opening_bank_date: str | None,
    opening_aachi_balance: str | None,
    opening_aachi_date: str | None,
    business_name: str | None,
):
    """Update settings. Options not given keep their current value.

    Examples:
        ledgerbook settings set --opening-bank-balance 1000 --opening-bank-date 2024-04-01
        ledgerbook settings set --business-name "Sri Lakshmi Agencies"
    """
    service = SettingsService(ctx.obj["db"], ctx.obj["owner"])

    try:
        updated = service.update_settings(
            opening_bank_balance=(
                parse_amount(opening_bank_balance) if opening_bank_balance is not None else None
            ),
            opening_bank_balance_date=(
                parse_date(opening_bank_date) if opening_bank_date is not None else None
            ),
            opening_aachi_masala_balance=(
                parse_amount(opening_aachi_balance) if opening_aachi_balance is not None else None
            ),
            opening_aachi_masala_balance_date=(
                parse_date(opening_aachi_date) if opening_aachi_date is not None else None
            ),
            business_name=business_name,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo("Settings saved.")
    _echo_settings(updated)


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
