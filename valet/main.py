"""Valet - Main entry point."""

import logging

from valet.interfaces.cli.commands import cli

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
