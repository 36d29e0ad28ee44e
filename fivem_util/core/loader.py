"""Recursive loader for FiveM server configuration files.

`read_config_file` is the public entry point. Files pulled in through
``exec`` are parsed depth-first into the same :class:`ServerConfig`, so a
later directive always overrides an earlier one regardless of which file it
came from. The first error stops the whole parse.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List, Optional, Union

from fivem_util.common.errors import (
    ConfigFileError,
    ConfigParseError,
    IncludeCycleError,
    IncludeDepthError,
)
from fivem_util.common.logging_config import get_logger

from .directives import COMMENT_PREFIX, DirectiveContext, dispatch
from .policy import LENIENT_POLICY, ParsePolicy
from .server_config import ServerConfig
from .tokenizer import split_config_line

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


# CRLF, CR and LF are all line breaks.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split file contents on any line ending."""
    return _LINE_BREAK.split(text)


class ConfigLoader:
    """Parses configuration files into a shared :class:`ServerConfig`."""

    def __init__(self, policy: Optional[ParsePolicy] = None):
        self.policy = policy or LENIENT_POLICY
        self._active: List[str] = []

    def load(self, config: ServerConfig, path: PathLike) -> ServerConfig:
        """Parse ``path`` into ``config`` and return it."""
        path = Path(path)
        identity = os.path.realpath(path)

        if identity in self._active:
            raise IncludeCycleError(f"exec cycle detected: '{path}' is already being loaded")
        if len(self._active) >= self.policy.max_include_depth:
            raise IncludeDepthError(
                f"exec nesting deeper than {self.policy.max_include_depth} files"
            )

        text = self._read(path)
        logger.debug("Parsing config file %s", path)

        self._active.append(identity)
        try:
            for line_number, line in enumerate(split_lines(text), start=1):
                try:
                    self._process_line(config, path, line)
                except ConfigParseError as exc:
                    if exc.path is None:
                        exc.path = str(path)
                        exc.line_number = line_number
                    raise
        finally:
            self._active.pop()
        return config

    def _process_line(self, config: ServerConfig, path: Path, line: str) -> None:
        if line.lstrip().startswith(COMMENT_PREFIX):
            return
        tokens = split_config_line(line, self.policy)
        context = DirectiveContext(
            path=str(path),
            include=lambda target: self._include(config, path, target),
        )
        dispatch(tokens, config, context, self.policy)

    def _include(self, config: ServerConfig, current: Path, target: str) -> None:
        logger.debug("exec %s (from %s)", target, current)
        self.load(config, resolve_include(current, target))

    @staticmethod
    def _read(path: Path) -> str:
        try:
            with open(path, 'r', encoding='utf-8-sig', newline='') as handle:
                return handle.read()
        except OSError as exc:
            raise ConfigFileError(f"failed to read config file: {exc.strerror or exc}", path=str(path)) from exc
        except UnicodeDecodeError as exc:
            raise ConfigFileError(f"config file is not valid UTF-8: {exc.reason}", path=str(path)) from exc


def resolve_include(current: Path, target: str) -> Path:
    """Resolve an ``exec`` target.

    The target is taken as given first (absolute, or relative to the working
    directory like the game server does). A relative target that does not
    exist there is looked up next to the including file instead.
    """
    candidate = Path(target)
    if candidate.is_absolute() or candidate.exists():
        return candidate
    sibling = current.parent / candidate
    if sibling.exists():
        return sibling
    return candidate


def read_config_file(path: PathLike, policy: Optional[ParsePolicy] = None) -> ServerConfig:
    """Read the config file at ``path`` and everything it ``exec``s.

    Raises a :class:`ConfigParseError` subclass on the first failure; no
    partially filled configuration is returned.
    """
    config = ServerConfig()
    ConfigLoader(policy).load(config, path)
    logger.info(
        "Parsed %s: %d resources, %d convars, %d replicated convars",
        path, len(config.resources), len(config.convars), len(config.replicated_convars),
    )
    return config


__all__ = ["ConfigLoader", "read_config_file", "resolve_include", "split_lines"]
