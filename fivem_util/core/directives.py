"""Directive handlers applied to a :class:`ServerConfig` while parsing.

Every recognised directive maps to one handler. A handler receives the
directive's arguments (tokens after the keyword) and either mutates the
shared configuration or asks the loader to include another file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from fivem_util.common.errors import MalformedScalarError, UnknownDirectiveError

from .policy import LENIENT_POLICY, ParsePolicy
from .server_config import MAX_CLIENTS_LIMIT, ServerConfig

COMMENT_PREFIX = '#'

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class DirectiveContext:
    """Where the current line came from and how to include other files."""

    path: str
    include: Callable[[str], None]


Handler = Callable[[ServerConfig, Sequence[str], DirectiveContext], None]


def parse_max_clients(value: str) -> int:
    """Parse an unsigned 16-bit client count."""
    if not _UNSIGNED_PATTERN.fullmatch(value):
        raise MalformedScalarError("max clients is not a number")
    number = int(value)
    if number > MAX_CLIENTS_LIMIT:
        raise MalformedScalarError("max clients is not a number")
    return number


def _set_hostname(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.hostname = args[0]


def _add_resource(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.resources.append(args[0])


def _set_convar(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.convars[args[0]] = args[1] if len(args) > 1 else ""


def _set_replicated_convar(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.replicated_convars[args[0]] = args[1] if len(args) > 1 else ""


def _set_scripthook(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.allow_scripthook = args[0] == "1"


def _set_rcon_password(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.rcon_password = args[0]


def _set_license_key(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.license_key = args[0]


def _set_server_icon(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.server_icon = args[0]


def _set_max_clients(config: ServerConfig, args: Sequence[str], _context: DirectiveContext) -> None:
    config.max_clients = parse_max_clients(args[0])


def _exec_file(_config: ServerConfig, args: Sequence[str], context: DirectiveContext) -> None:
    context.include(args[0])


DIRECTIVES: Dict[str, Handler] = {
    'sv_hostname': _set_hostname,
    'start': _add_resource,
    'ensure': _add_resource,
    'set': _set_convar,
    'setr': _set_replicated_convar,
    'sv_scriptHookAllowed': _set_scripthook,
    'rcon_password': _set_rcon_password,
    'sv_licenseKey': _set_license_key,
    'load_server_icon': _set_server_icon,
    'sv_maxclients': _set_max_clients,
    'exec': _exec_file,
}


def dispatch(
    tokens: List[str],
    config: ServerConfig,
    context: DirectiveContext,
    policy: Optional[ParsePolicy] = None,
) -> bool:
    """Apply a tokenized line to ``config``.

    Returns ``True`` when a directive was applied. Empty lines, comments,
    directives without an argument and (under the lenient policy) unknown
    directives are skipped and return ``False``.
    """
    policy = policy or LENIENT_POLICY
    if not tokens or tokens[0].startswith(COMMENT_PREFIX):
        return False

    keyword, args = tokens[0], tokens[1:]
    handler = DIRECTIVES.get(keyword)
    if handler is None:
        if policy.strict_directives:
            raise UnknownDirectiveError(f"unknown directive '{keyword}'")
        return False

    if not args:
        return False

    handler(config, args, context)
    return True


__all__ = ["DIRECTIVES", "DirectiveContext", "dispatch", "parse_max_clients"]
