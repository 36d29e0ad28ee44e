"""Config verification for the fivem-utility CLI."""

import sys

from fivem_util.cli_helpers import resolve_config_path
from fivem_util.common.constants import ExitCodes
from fivem_util.common.errors import ConfigParseError
from fivem_util.core.loader import read_config_file


class VerifyCommand:
    """Checks the integrity of the config file."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add verify command parser to subparsers."""
        parser = subparsers.add_parser('verify', help='Check the integrity of the config file')
        parser.set_defaults(func=VerifyCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Parse the config file and report whether it is valid."""
        try:
            read_config_file(resolve_config_path(args))
        except ConfigParseError as exc:
            print(f"The file was parsed and error(s) were found: {exc}", file=sys.stderr)
            sys.exit(ExitCodes.VERIFY_FAILED)

        print("The file was parsed and found no errors.", file=sys.stderr)
