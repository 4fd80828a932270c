"""Shared output formatting for CLI commands."""

from decimal import Decimal

from ledgerbook.domain.entities import Transaction


def format_money(amount: Decimal) -> str:
    """Format an amount as rupees, e.g. 'Rs 1,234.50' or '-Rs 200.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}Rs {abs(amount):,.2f}"


def describe(txn: Transaction, customer_names: dict[int, str]) -> str:
    """Short description: customer name and free text, when present."""
    parts = []
    if txn.customer_id is not None:
        parts.append(customer_names.get(txn.customer_id, f"#{txn.customer_id}"))
    if txn.description:
        parts.append(txn.description)
    return " - ".join(parts)
