"""Config printing for the fivem-utility CLI."""

import json

from fivem_util.cli_helpers import load_config_or_exit
from fivem_util.core.display import render_config


class PrintCommand:
    """Prints details about the config file."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add print command parser to subparsers."""
        parser = subparsers.add_parser('print', help='Print details about the config file')
        parser.add_argument('--json', action='store_true',
                            help='Print the parsed configuration as JSON')
        parser.set_defaults(func=PrintCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Parse the config file and print it."""
        config = load_config_or_exit(args)
        if args.json:
            print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
        else:
            render_config(config)
