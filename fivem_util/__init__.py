"""fivem-utility - inspection tools for FiveM server deployments.

Provides:
* A `server.cfg` parser with `exec` support (`read_config_file`)
* Resource directory scanning and declared-vs-present comparison
* An artifact server client listing available server builds
* Thin CLI wrapper (`fivem-utility`)

Public helpers exported here are considered part of the semi-stable API. The
CLI remains the primary user interface.
"""

from ._version import __version__
from .common.logging_config import configure_logging  # noqa: F401
from .core.artifacts import Artifact, ArtifactClient  # noqa: F401
from .core.loader import ConfigLoader, read_config_file  # noqa: F401
from .core.policy import LENIENT_POLICY, STRICT_POLICY, ParsePolicy  # noqa: F401
from .core.resources import detect_resources, diff_resources  # noqa: F401
from .core.server_config import ServerConfig  # noqa: F401
from .core.tokenizer import split_config_line  # noqa: F401

__all__ = [
	"__version__",
	"configure_logging",
	"Artifact",
	"ArtifactClient",
	"ConfigLoader",
	"read_config_file",
	"ParsePolicy",
	"LENIENT_POLICY",
	"STRICT_POLICY",
	"detect_resources",
	"diff_resources",
	"ServerConfig",
	"split_config_line",
]
