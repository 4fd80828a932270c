"""CLI error handling helpers."""

import logging

import click

from ledgerbook.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print ``Error: <message>`` to stderr and exit with status 1.

    The full traceback is only logged, at DEBUG, so it shows up with ``-v``.
    """
    logger.debug(
        "Command %s failed with %s", ctx.info_name, type(error).__name__, exc_info=error
    )
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
