"""Date Window CLI.

This module provides a command-line interface for checking dates against
rolling month windows.
"""

import click

from src.cli.commands.check import check_date
from src.config.logging_config import LoggingConfig, configure_logging
from src.config.settings import get_config

__version__ = "1.0.0"


@click.group(help="Date Window CLI - Check dates against rolling month windows")
@click.version_option(version=__version__)
def cli():
    """Date Window CLI main entry point."""
    configure_logging(LoggingConfig.from_settings(get_config()))


# Register commands
cli.add_command(check_date)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
