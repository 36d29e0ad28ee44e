"""
Constants and exit codes for fivem-utility.
"""

DEFAULT_CONFIG_PATH = 'server.cfg'
DEFAULT_RESOURCES_DIR = 'resources'

LINUX_ARTIFACTS_URL = 'https://runtime.fivem.net/artifacts/fivem/build_proot_linux/master/'
WINDOWS_ARTIFACTS_URL = 'https://runtime.fivem.net/artifacts/fivem/build_server_windows/master/'

DEFAULT_HTTP_TIMEOUT = 10
DEFAULT_LOG_LEVEL = 'WARNING'

# Nesting limit for `exec` chains.
DEFAULT_MAX_INCLUDE_DEPTH = 64


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    VERIFY_FAILED = 1
    CONFIG_INVALID = 1
    RESOURCES_DIR_INVALID = 1
    ARTIFACT_NOT_FOUND = 1
    USAGE = 1
