"""List invoice statuses command."""

import click

from invoicekit.domain.invoice_status import InvoiceStatus


@click.command("statuses")
def list_statuses():
    """List the accepted invoice statuses."""
    for status in InvoiceStatus.values():
        click.echo(status)


def register_commands(cli):
    """Register statuses command with main CLI."""
    cli.add_command(list_statuses)
