"""Check invoice records command."""

import json
import logging
from collections.abc import Mapping

import click

from invoicekit.cli.error_handling import describe_error, handle_domain_error
from invoicekit.domain.errors import ValidationError
from invoicekit.domain.invoice import collect_validation_errors, construct, serialize

logger = logging.getLogger(__name__)


def load_records(path: str) -> list:
    """Load one raw invoice record or a list of them from a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        List of raw records (not yet validated)

    Raises:
        ValueError: If the file is not JSON or holds neither an object nor a list
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"'{path}' is not valid JSON: {e}") from e

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise ValueError(
        f"'{path}' must contain an invoice object or a list of them, "
        f"got {type(data).__name__}"
    )


@click.command("check")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--all-errors",
    is_flag=True,
    help="Report every invalid field instead of stopping at the first one",
)
@click.option(
    "--canonical",
    is_flag=True,
    help="Print the canonical serialized form of each valid record",
)
@click.pass_context
def check_invoices(ctx, file: str, all_errors: bool, canonical: bool):
    """Validate invoice records in a JSON file.

    FILE holds a single invoice object or a list of invoice objects with
    amount, description, status, cardLast4Digits and createdAt keys.
    Exits with status 1 if any record is invalid.

    Examples:
        invoicekit check invoices.json
        invoicekit check invoices.json --all-errors
        invoicekit check invoice.json --canonical
    """
    try:
        records = load_records(file)
    except ValueError as e:
        handle_domain_error(ctx, e)

    logger.info("Checking %d record(s) from %s", len(records), file)

    invalid_count = 0
    for index, raw in enumerate(records, start=1):
        if not isinstance(raw, Mapping):
            invalid_count += 1
            click.echo(f"Record {index}: not an object ({type(raw).__name__})")
            continue

        if all_errors:
            errors = collect_validation_errors(raw)
        else:
            try:
                invoice = construct(raw)
                errors = []
            except ValidationError as e:
                errors = [e]

        if errors:
            invalid_count += 1
            for error in errors:
                click.echo(f"Record {index}: {describe_error(error)}")
            continue

        if all_errors:
            invoice = construct(raw)
        click.echo(f"Record {index}: OK")
        if canonical:
            click.echo(json.dumps(serialize(invoice)))

    click.echo(
        f"\nChecked {len(records)} record(s): "
        f"{len(records) - invalid_count} valid, {invalid_count} invalid"
    )
    if invalid_count:
        ctx.exit(1)


def register_commands(cli):
    """Register check command with main CLI."""
    cli.add_command(check_invoices)
