"""Shared CLI helpers for fivem-utility commands."""

import sys
from typing import Optional

from fivem_util.common.config import UtilitySettings
from fivem_util.common.constants import ExitCodes
from fivem_util.common.errors import (
    ArtifactNotFoundError,
    ConfigParseError,
    ResourceDirectoryError,
)
from fivem_util.core.loader import read_config_file
from fivem_util.core.server_config import ServerConfig


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to fivem-utility exit codes."""
    if isinstance(exc, ConfigParseError):
        return ExitCodes.CONFIG_INVALID
    if isinstance(exc, ResourceDirectoryError):
        return ExitCodes.RESOURCES_DIR_INVALID
    if isinstance(exc, ArtifactNotFoundError):
        return ExitCodes.ARTIFACT_NOT_FOUND
    return None


def get_settings(args) -> UtilitySettings:
    settings = getattr(args, "settings", None)
    if not isinstance(settings, UtilitySettings):
        settings = UtilitySettings()
    return settings


def resolve_config_path(args) -> str:
    """The --config flag, falling back to FIVEM_CONFIG and then server.cfg."""
    return getattr(args, "config", None) or get_settings(args).config_path()


def resolve_resources_dir(args) -> str:
    """The --resources-dir flag, falling back to FIVEM_RESOURCES_DIR and then resources."""
    return getattr(args, "resources_dir", None) or get_settings(args).resources_dir()


def load_config_or_exit(args) -> ServerConfig:
    """Parse the configured server.cfg, exiting with a hint on failure."""
    try:
        return read_config_file(resolve_config_path(args))
    except ConfigParseError as exc:
        exit_with_error(
            f"Failed to parse config file: {exc}. Maybe run `verify` to check why?",
            ExitCodes.CONFIG_INVALID,
        )
