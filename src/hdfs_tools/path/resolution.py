"""Command-line path resolution.

Arguments may be plain HDFS paths or ``hdfs://namenode:port/path`` URLs.
URLs name the namenode to talk to; relative paths are taken relative to
the user's home directory.
"""

import posixpath
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from hdfs_tools.core import get_logger
from hdfs_tools.core.exceptions import ConfigurationError

logger = get_logger(__name__)


@dataclass(frozen=True)
class RemotePaths:
    """Paths from the command line, with the namenode they name (if any)."""

    namenode: Optional[str]
    paths: list[str]

    @property
    def addresses(self) -> Optional[list[str]]:
        return [self.namenode] if self.namenode else None


def split_remote_path(raw: str) -> tuple[Optional[str], str]:
    """Split an argument into (namenode, path).

    >>> split_remote_path("hdfs://nn1:9870/data")
    ('nn1:9870', '/data')
    >>> split_remote_path("logs/today")
    (None, 'logs/today')
    """
    if "://" not in raw:
        return None, raw

    parsed = urlparse(raw)
    if parsed.scheme not in ("hdfs", "webhdfs"):
        raise ConfigurationError(f"Unsupported URL scheme in {raw}")
    return parsed.netloc or None, parsed.path


def parse_remote_paths(raw_paths: list[str]) -> RemotePaths:
    """Extract the namenode and the bare paths from command-line arguments.

    Raises:
        ConfigurationError: If arguments name different namenodes
    """
    namenode = None
    paths = []
    for raw in raw_paths:
        host, path = split_remote_path(raw)
        if host:
            if namenode and namenode != host:
                raise ConfigurationError("Multiple namenode URLs specified")
            namenode = host
        paths.append(path)

    logger.debug("Paths parsed", namenode=namenode, path_count=len(paths))
    return RemotePaths(namenode=namenode, paths=paths)


def make_absolute(path: str, home: str) -> str:
    """Clean a path, anchoring relative ones at ``home``.

    >>> make_absolute("data/../logs", "/user/alice")
    '/user/alice/logs'
    >>> make_absolute("/tmp/", "/user/alice")
    '/tmp'
    """
    if not path.startswith("/"):
        path = posixpath.join(home, path)
    return posixpath.normpath(path)
