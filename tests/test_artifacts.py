from __future__ import annotations

import http.client
import urllib.error
from unittest.mock import MagicMock

import pytest

from fivem_util.core import artifacts as artifacts_module
from fivem_util.core.artifacts import Artifact, ArtifactClient, parse_artifacts

BASE_URL = "https://runtime.example/artifacts/linux/master/"

LISTING = """
<html><body>
<a href="./7290-a654bcc2adfa27c4e020fc915a1a6343c3b4f921/server.7z">LATEST RECOMMENDED (7290)</a>
<a href="./7290-a654bcc2adfa27c4e020fc915a1a6343c3b4f921/fx.tar.xz">7290</a>
<a href="./6683-0b0b43df1e5a4c2a89f7ed5d9e1d07c8ccb5e7ec/fx.tar.xz">6683</a>
<a href="./7500-ffee00/fx.tar.xz">7500</a>
<a href="./99999-abcdef/fx.tar.xz">too big</a>
</body></html>
"""


def _response(body: str):
    response = MagicMock()
    response.read.return_value = body.encode("utf-8")
    response.__enter__.return_value = response
    return response


def test_parse_artifacts_deduplicates_and_keeps_order():
    artifacts = parse_artifacts(BASE_URL, LISTING)

    assert [a.number for a in artifacts] == [7290, 6683, 7500]
    assert artifacts[0] == Artifact(
        url=BASE_URL + "7290-a654bcc2adfa27c4e020fc915a1a6343c3b4f921/",
        number=7290,
        hash="a654bcc2adfa27c4e020fc915a1a6343c3b4f921",
    )


def test_parse_artifacts_empty_body():
    assert parse_artifacts(BASE_URL, "maintenance") == []


def test_client_fetches_once(monkeypatch):
    urlopen = MagicMock(return_value=_response(LISTING))
    monkeypatch.setattr(artifacts_module.urllib.request, "urlopen", urlopen)

    client = ArtifactClient(BASE_URL, timeout=3)
    assert len(client.list_artifacts()) == 3
    assert client.get_artifact(6683).hash.startswith("0b0b43df")
    assert client.get_artifact(1) is None
    assert client.latest_artifact().number == 7500

    urlopen.assert_called_once_with(BASE_URL, timeout=3)


def test_client_refresh_fetches_again(monkeypatch):
    urlopen = MagicMock(side_effect=[_response(LISTING), _response("")])
    monkeypatch.setattr(artifacts_module.urllib.request, "urlopen", urlopen)

    client = ArtifactClient(BASE_URL)
    assert len(client.list_artifacts()) == 3
    client.refresh()
    assert client.list_artifacts() == []
    assert urlopen.call_count == 2


def test_client_appends_trailing_slash():
    assert ArtifactClient("https://runtime.example/linux").base_url == "https://runtime.example/linux/"


@pytest.mark.parametrize(
    "error",
    [
        urllib.error.URLError("offline"),
        TimeoutError("slow"),
        ConnectionResetError("reset"),
        OSError("eio"),
        http.client.BadStatusLine("garbage"),
        http.client.IncompleteRead(b"x"),
    ],
)
def test_fetch_failure_degrades_to_empty(monkeypatch, error):
    urlopen = MagicMock(side_effect=error)
    monkeypatch.setattr(artifacts_module.urllib.request, "urlopen", urlopen)

    client = ArtifactClient(BASE_URL)
    assert client.list_artifacts() == []
    assert client.latest_artifact() is None
    assert client.get_artifact(7290) is None


def test_truncated_body_degrades_to_empty(monkeypatch):
    response = _response("")
    response.read.side_effect = http.client.IncompleteRead(b"7290-")
    monkeypatch.setattr(artifacts_module.urllib.request, "urlopen", MagicMock(return_value=response))

    assert ArtifactClient(BASE_URL).list_artifacts() == []


def test_failed_fetch_is_retried(monkeypatch):
    urlopen = MagicMock(side_effect=[urllib.error.URLError("offline"), _response(LISTING)])
    monkeypatch.setattr(artifacts_module.urllib.request, "urlopen", urlopen)

    client = ArtifactClient(BASE_URL)
    assert client.list_artifacts() == []
    assert len(client.list_artifacts()) == 3
