"""Parsing policies for server configuration files."""

from __future__ import annotations

from dataclasses import dataclass

from fivem_util.common.constants import DEFAULT_MAX_INCLUDE_DEPTH


@dataclass(frozen=True)
class ParsePolicy:
    """How tolerant the parser is of questionable input.

    The default policy mirrors the game server: unbalanced quotes run to the
    end of the line and unknown directives are skipped.
    """

    strict_quotes: bool = False
    strict_directives: bool = False
    max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH


LENIENT_POLICY = ParsePolicy()
STRICT_POLICY = ParsePolicy(strict_quotes=True, strict_directives=True)

__all__ = ["ParsePolicy", "LENIENT_POLICY", "STRICT_POLICY"]
