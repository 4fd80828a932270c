"""Utility for resolving customer names to IDs."""

from ledgerbook.domain.customer import CustomerService
from ledgerbook.domain.errors import NotFoundError


def resolve_customer(customer_service: CustomerService, customer: str | int) -> int:
    """Resolve customer name or ID to customer ID.

    A value that parses as an integer is treated as an ID first; if no
    customer has that ID, it is looked up as a name, so a customer called
    "42" is still reachable.

    Args:
        customer_service: CustomerService bound to the current owner
        customer: Customer name (str) or ID (int or string representation of int)

    Returns:
        Customer ID

    Raises:
        NotFoundError: If customer is not found
    """
    if isinstance(customer, int):
        if customer_service.get_customer(customer) is None:
            raise NotFoundError(f"Customer ID {customer} not found")
        return customer

    try:
        customer_id = int(customer)
    except (ValueError, TypeError):
        customer_id = None

    if customer_id is not None and customer_service.get_customer(customer_id) is not None:
        return customer_id

    found = customer_service.get_customer_by_name(customer)
    if found is not None:
        return found.id

    raise NotFoundError(f"Customer '{customer}' not found")
