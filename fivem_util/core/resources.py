"""
Resource directory scanning for fivem-utility.

Finds resources on disk and compares them with the resources a server
configuration starts.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from fivem_util.common.errors import ResourceDirectoryError
from fivem_util.common.logging_config import get_logger

logger = get_logger(__name__)


def is_category(name: str) -> bool:
    """Return True for bracketed category folders like ``[maps]``."""
    return len(name) >= 2 and name.startswith('[') and name.endswith(']')


def detect_resources(resource_dir: Union[str, os.PathLike]) -> Dict[str, str]:
    """
    Map resource names to their paths below ``resource_dir``.

    Every directory is a resource, except bracketed categories, which are
    searched recursively instead. Directory symlinks are followed.

    Args:
        resource_dir: The server's resources directory

    Returns:
        Mapping of resource name to resource path

    Raises:
        ResourceDirectoryError: If the directory is missing or unreadable
    """
    root = Path(resource_dir)
    if not root.is_dir():
        raise ResourceDirectoryError(f"Resources directory not found: {root}")

    resources: Dict[str, str] = {}
    _scan(root, resources, set())
    logger.debug("Detected %d resources in %s", len(resources), root)
    return resources


def _scan(directory: Path, resources: Dict[str, str], visiting: Set[str]) -> None:
    identity = os.path.realpath(directory)
    if identity in visiting:
        logger.warning("Skipping %s: category symlink loop", directory)
        return
    visiting.add(identity)

    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as exc:
        raise ResourceDirectoryError(f"Cannot read resources directory {directory}: {exc}") from exc

    try:
        for entry in entries:
            if not entry.is_dir(follow_symlinks=True):
                continue
            if is_category(entry.name):
                _scan(Path(entry.path), resources, visiting)
            else:
                resources[entry.name] = entry.path
    finally:
        visiting.discard(identity)


@dataclass
class ResourceUsage:
    """Declared resources split by whether they exist on disk."""

    found: List[Tuple[str, str]] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    extra: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing


def diff_resources(declared: Iterable[str], available: Optional[Dict[str, str]]) -> ResourceUsage:
    """Compare declared resource names with the ones found on disk.

    Declared resources keep their order (duplicates are reported each time).
    Resources on disk that are never declared are reported as extra.
    """
    available = available or {}
    usage = ResourceUsage()
    used = set()

    for name in declared:
        path = available.get(name)
        if path is None:
            usage.missing.append(name)
        else:
            usage.found.append((name, path))
            used.add(name)

    usage.extra = [(name, available[name]) for name in sorted(available) if name not in used]
    return usage


__all__ = ["ResourceUsage", "detect_resources", "diff_resources", "is_category"]
