"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for the owner."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class UnknownTransactionKindError(ValidationError):
    """Transaction kind outside the recognized set reached the engine."""


def customer_not_found(customer_id: int) -> str:
    """Return message for missing customer."""
    return f"Customer {customer_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def duplicate_customer_name(name: str) -> str:
    """Return message for a customer name already in use."""
    return f"Customer with name '{name}' already exists"


def unknown_transaction_kind(kind: object) -> str:
    """Return message for an unrecognized transaction kind."""
    return f"Unknown transaction type '{kind}'"


def customer_delete_blocked(customer_id: int, transaction_count: int) -> str:
    """Return message when a customer still has transactions."""
    return (
        f"Cannot delete customer {customer_id}: it has {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}. "
        "Delete them first."
    )
