"""CLI helpers for customer resolution and error handling."""

from __future__ import annotations

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.customer import CustomerService
from ledgerbook.utils.customer_resolver import resolve_customer


def resolve_customer_or_exit(
    ctx: click.Context, customer_service: CustomerService, customer: str | int
) -> int:
    """Resolve customer name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_customer(customer_service, customer)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def customer_names(customer_service: CustomerService) -> dict[int, str]:
    """Map customer IDs to names for display."""
    return {c.id: c.name for c in customer_service.list_customers()}
