"""
Command Line Interface for fivem-utility.

Provides CLI commands to print and verify a server.cfg, compare its
resources with the resources directory and query the artifact server.
"""

import argparse
import sys
from typing import List, Optional

from ._version import __version__
from .cli_commands import COMMANDS
from .common.config import UtilitySettings
from .common.constants import ExitCodes
from .common.logging_config import configure_logging, get_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='fivem-utility',
        description='Provides various useful utilities for FiveM servers'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-c', '--config', default=None,
                        help="Set the main config file, often called `server.cfg' "
                             "(default: $FIVEM_CONFIG or server.cfg)")
    parser.add_argument('-r', '--resources-dir', dest='resources_dir', default=None,
                        help='Set the resources directory (default: $FIVEM_RESOURCES_DIR or resources)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    configure_logging()
    logger = get_logger(__name__)
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    parsed_args = parser.parse_args(args)
    parsed_args.settings = UtilitySettings()

    if not hasattr(parsed_args, 'func'):
        parser.print_help(sys.stderr)
        print("You must specify a subcommand. See --help for more information.", file=sys.stderr)
        sys.exit(ExitCodes.USAGE)

    logger.debug("Running command %s", parsed_args.command)
    parsed_args.func(parsed_args)


if __name__ == '__main__':
    main()
