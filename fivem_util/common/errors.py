"""
Custom exception classes for fivem-utility.
"""

from typing import Optional


class FivemUtilError(Exception):
    """Base exception class for fivem-utility errors."""
    pass


class ConfigParseError(FivemUtilError):
    """Raised when a server configuration file cannot be parsed.

    ``path`` and ``line_number`` point at the innermost file and line where
    parsing stopped, when known.
    """

    def __init__(self, message: str, path: Optional[str] = None, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.line_number = line_number

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        if self.line_number is None:
            return f"{self.message} ({self.path})"
        return f"{self.message} ({self.path}:{self.line_number})"


class MalformedScalarError(ConfigParseError):
    """Raised when a typed directive (e.g. sv_maxclients) gets a bad value."""
    pass


class ConfigFileError(ConfigParseError):
    """Raised when a config file (root or included) cannot be opened or read."""
    pass


class UnterminatedQuoteError(ConfigParseError):
    """Raised for an unbalanced quote when quotes are parsed strictly."""
    pass


class UnknownDirectiveError(ConfigParseError):
    """Raised for an unrecognized directive when directives are parsed strictly."""
    pass


class IncludeCycleError(ConfigParseError):
    """Raised when an exec chain includes a file that is already being loaded."""
    pass


class IncludeDepthError(ConfigParseError):
    """Raised when exec nesting exceeds the configured limit."""
    pass


class ResourceDirectoryError(FivemUtilError):
    """Raised when the resources directory cannot be scanned."""
    pass


class ArtifactNotFoundError(FivemUtilError):
    """Raised when a requested artifact is not available on the artifact server."""
    pass
