"""Quote-aware line splitting for server configuration files."""

from __future__ import annotations

from typing import List, Optional

from fivem_util.common.errors import UnterminatedQuoteError

from .policy import LENIENT_POLICY, ParsePolicy

QUOTE = '"'
SEPARATORS = frozenset(' \t')


def split_config_line(line: str, policy: Optional[ParsePolicy] = None) -> List[str]:
    """Split one configuration line into tokens.

    Tokens are separated by unquoted spaces or tabs. The game server itself
    splits on spaces only; here a tab-separated ``set<TAB>FOO<TAB>bar`` still
    sets ``FOO``. Double quotes group a span (including its whitespace) into
    the current token and are dropped from the output. Runs of separators never
    produce empty tokens.

    With ``policy.strict_quotes`` an unbalanced quote raises
    :class:`UnterminatedQuoteError`; otherwise the quoted span simply runs
    to the end of the line.
    """
    policy = policy or LENIENT_POLICY
    tokens: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char in SEPARATORS and not in_quotes:
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append(''.join(current))

    if in_quotes and policy.strict_quotes:
        raise UnterminatedQuoteError("unterminated quote")

    return tokens


__all__ = ["split_config_line"]
