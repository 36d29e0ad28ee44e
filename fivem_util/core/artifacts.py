"""Artifact server client.

The artifact server publishes one folder per build, named
``<number>-<hash>``. The listing page is fetched once per client and the
builds are extracted from it with a regular expression. If the server is
unreachable (or its page format changes) the client reports no artifacts
instead of raising.
"""

from __future__ import annotations

import http.client
import re
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import List, Optional

from fivem_util.common.constants import DEFAULT_HTTP_TIMEOUT
from fivem_util.common.logging_config import get_logger

logger = get_logger(__name__)

_ARTIFACT_PATTERN = re.compile(r"(\d+)-([\da-f]+)")
_MAX_ARTIFACT_NUMBER = 65535


@dataclass(frozen=True)
class Artifact:
    """A server build available on the artifact server."""

    url: str
    number: int
    hash: str


def parse_artifacts(base_url: str, body: str) -> List[Artifact]:
    """Extract artifacts from an artifact server listing.

    The first occurrence of each build number wins; order of appearance is
    kept.
    """
    artifacts: List[Artifact] = []
    seen = set()
    for match in _ARTIFACT_PATTERN.finditer(body):
        number = int(match.group(1))
        if number > _MAX_ARTIFACT_NUMBER or number in seen:
            continue
        seen.add(number)
        artifacts.append(
            Artifact(
                url=f"{base_url}{match.group(1)}-{match.group(2)}/",
                number=number,
                hash=match.group(2),
            )
        )
    return artifacts


def _fetch_text(url: str, timeout: float) -> Optional[str]:
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:  # noqa: S310
            return response.read().decode("utf-8", errors="replace")
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
        logger.warning("Failed to fetch artifact listing from %s: %s", url, exc)
        return None


class ArtifactClient:
    """Lists artifacts from one artifact server, caching the listing."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_HTTP_TIMEOUT):
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.timeout = timeout
        self._artifacts: Optional[List[Artifact]] = None

    def list_artifacts(self) -> List[Artifact]:
        """Return all artifacts, fetching the listing on first use."""
        if self._artifacts is None:
            logger.info("Fetching artifact listing from %s", self.base_url)
            body = _fetch_text(self.base_url, self.timeout)
            if body is None:
                return []
            self._artifacts = parse_artifacts(self.base_url, body)
            logger.debug("Found %d artifacts", len(self._artifacts))
        return list(self._artifacts)

    def get_artifact(self, number: int) -> Optional[Artifact]:
        """Return the artifact with build ``number``, if published."""
        for artifact in self.list_artifacts():
            if artifact.number == number:
                return artifact
        return None

    def latest_artifact(self) -> Optional[Artifact]:
        """Return the artifact with the highest build number."""
        artifacts = self.list_artifacts()
        if not artifacts:
            return None
        return max(artifacts, key=lambda artifact: artifact.number)

    def refresh(self) -> None:
        """Drop the cached listing so the next query fetches again."""
        self._artifacts = None


__all__ = ["Artifact", "ArtifactClient", "parse_artifacts"]
