"""fieldguard CLI entry point."""

import logging

import click

from fieldguard.config import EngineConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: FIELDGUARD_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None):
    """fieldguard: per-field form validation CLI."""
    level = (log_level or EngineConfig.from_env().log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from fieldguard.cli.check_cmd import check  # noqa: E402
from fieldguard.cli.rules_cmd import rules  # noqa: E402

cli.add_command(rules)
cli.add_command(check)
