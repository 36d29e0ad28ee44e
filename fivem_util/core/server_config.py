"""
Parsed representation of a FiveM server configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

MAX_CLIENTS_LIMIT = 65535


@dataclass
class ServerConfig:
    """Most of the settings a ``server.cfg`` can declare.

    Directives that are not modelled here are skipped while parsing; they can
    still be read from the file manually. String fields default to ``""``,
    never ``None``.
    """

    hostname: str = ""
    resources: List[str] = field(default_factory=list)
    convars: Dict[str, str] = field(default_factory=dict)
    replicated_convars: Dict[str, str] = field(default_factory=dict)
    allow_scripthook: bool = True
    rcon_password: str = ""
    license_key: str = ""
    server_icon: str = ""
    max_clients: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a JSON-friendly dictionary."""
        return {
            'hostname': self.hostname,
            'resources': list(self.resources),
            'convars': dict(self.convars),
            'replicated_convars': dict(self.replicated_convars),
            'allow_scripthook': self.allow_scripthook,
            'rcon_password': self.rcon_password,
            'license_key': self.license_key,
            'server_icon': self.server_icon,
            'max_clients': self.max_clients,
        }
