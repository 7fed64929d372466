"""CLI error handling helpers."""

import click

from invoicekit.domain.errors import DomainError, ValidationError


def describe_error(error: DomainError | ValueError) -> str:
    """Return a one-line description, naming the wire field for validation errors."""
    if isinstance(error, ValidationError):
        return f"{error.field}: {error.reason.value}: {error.args[0]}"
    return str(error)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {describe_error(error)}", err=True)
    ctx.exit(1)
