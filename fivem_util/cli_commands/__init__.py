"""Registry for CLI subcommands."""

from .print_command import PrintCommand
from .resource_usage_command import ResourceUsageCommand
from .verify_command import VerifyCommand
from .version_server_command import VersionServerCommand

COMMANDS = (
    PrintCommand,
    VerifyCommand,
    ResourceUsageCommand,
    VersionServerCommand,
)

__all__ = ["COMMANDS", "PrintCommand", "VerifyCommand", "ResourceUsageCommand", "VersionServerCommand"]
