"""Main CLI entry point."""

import logging

import click

# Import and register all commands at module level
from invoicekit.cli.commands import check, statuses

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (overrides INVOICEKIT_LOG_LEVEL environment variable)",
    envvar="INVOICEKIT_LOG_LEVEL",
)
def cli(log_level: str):
    """invoicekit - Invoice record checker.

    Validate invoice records produced by payment processors, storage layers
    or API responses before they enter a billing application.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register all commands
check.register_commands(cli)
statuses.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
