from __future__ import annotations

import pytest

from fivem_util.common.errors import UnterminatedQuoteError
from fivem_util.core.policy import STRICT_POLICY, ParsePolicy
from fivem_util.core.tokenizer import split_config_line


def test_splits_on_spaces():
    assert split_config_line("start mapmanager") == ["start", "mapmanager"]


def test_quoted_span_keeps_internal_spaces():
    assert split_config_line('set NAME "hello world"') == ["set", "NAME", "hello world"]


def test_quotes_are_not_part_of_tokens():
    assert split_config_line('sv_hostname "My"Server') == ["sv_hostname", "MyServer"]


def test_consecutive_spaces_produce_no_empty_tokens():
    assert split_config_line("set   FOO    bar   ") == ["set", "FOO", "bar"]


def test_tabs_separate_tokens():
    assert split_config_line("set\tFOO\t\tbar") == ["set", "FOO", "bar"]


@pytest.mark.parametrize("line", ["", "   ", "\t \t"])
def test_blank_lines_yield_no_tokens(line):
    assert split_config_line(line) == []


def test_empty_quotes_yield_no_token():
    assert split_config_line('set FOO ""') == ["set", "FOO"]


def test_unterminated_quote_runs_to_end_of_line():
    assert split_config_line('sv_hostname "My Server  x') == ["sv_hostname", "My Server  x"]


def test_unterminated_quote_raises_with_strict_quotes():
    with pytest.raises(UnterminatedQuoteError):
        split_config_line('sv_hostname "My Server', STRICT_POLICY)

    # balanced lines are unaffected by the strict policy
    assert split_config_line('sv_hostname "My Server"', ParsePolicy(strict_quotes=True)) == [
        "sv_hostname",
        "My Server",
    ]


@pytest.mark.parametrize(
    "line",
    [
        "start mapmanager",
        'ensure "chat"',
        "set   sv_enforceGameBuild  2699",
        'setr "locale" "en-US"',
    ],
)
def test_tokenizing_joined_tokens_is_stable(line):
    tokens = split_config_line(line)
    assert split_config_line(" ".join(tokens)) == tokens
