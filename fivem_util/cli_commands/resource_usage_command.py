"""Resource usage report for the fivem-utility CLI."""

from fivem_util.cli_helpers import (
    exit_with_error,
    load_config_or_exit,
    map_exception_to_exit_code,
    resolve_resources_dir,
)
from fivem_util.common.constants import ExitCodes
from fivem_util.common.errors import ResourceDirectoryError
from fivem_util.core.display import render_resource_usage
from fivem_util.core.resources import detect_resources, diff_resources


class ResourceUsageCommand:
    """Compares resources started in server.cfg with the resources directory."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add resource-usage command parser to subparsers."""
        parser = subparsers.add_parser(
            'resource-usage',
            help='Find resources specified in server.cfg, and list resources that are never used',
        )
        parser.set_defaults(func=ResourceUsageCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Print found, missing and unused resources."""
        config = load_config_or_exit(args)
        try:
            available = detect_resources(resolve_resources_dir(args))
        except ResourceDirectoryError as exc:
            exit_code = map_exception_to_exit_code(exc)
            if exit_code is None:
                exit_code = ExitCodes.RESOURCES_DIR_INVALID
            exit_with_error(str(exc), exit_code)
            return

        render_resource_usage(diff_resources(config.resources, available))
