"""Environment-backed settings for fivem-utility.

Every value can be overridden through a `FIVEM_*` environment variable;
command line flags take precedence over both.
"""

import os
import sys
from typing import Optional, Mapping

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_RESOURCES_DIR,
    LINUX_ARTIFACTS_URL,
    WINDOWS_ARTIFACTS_URL,
)


class UtilitySettings:
    """Resolve environment-backed configuration for fivem-utility."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._environ.get(key)
        if value is None or not value.strip():
            return default
        return value

    def config_path(self) -> str:
        return self.get("FIVEM_CONFIG", DEFAULT_CONFIG_PATH)  # type: ignore[return-value]

    def resources_dir(self) -> str:
        return self.get("FIVEM_RESOURCES_DIR", DEFAULT_RESOURCES_DIR)  # type: ignore[return-value]

    def linux_artifacts_url(self) -> str:
        return self.get("FIVEM_ARTIFACTS_LINUX_URL", LINUX_ARTIFACTS_URL)  # type: ignore[return-value]

    def windows_artifacts_url(self) -> str:
        return self.get("FIVEM_ARTIFACTS_WINDOWS_URL", WINDOWS_ARTIFACTS_URL)  # type: ignore[return-value]

    def http_timeout(self) -> float:
        value = self.get("FIVEM_HTTP_TIMEOUT")
        if not value:
            return float(DEFAULT_HTTP_TIMEOUT)
        try:
            timeout = float(value)
        except ValueError:
            return float(DEFAULT_HTTP_TIMEOUT)
        return timeout if timeout > 0 else float(DEFAULT_HTTP_TIMEOUT)

    def artifacts_url(self, use_windows_server: bool = False, platform: Optional[str] = None) -> str:
        """Pick the artifact server matching the host platform (or the Windows override)."""
        platform = platform or sys.platform
        if use_windows_server or platform.startswith("win"):
            return self.windows_artifacts_url()
        return self.linux_artifacts_url()
