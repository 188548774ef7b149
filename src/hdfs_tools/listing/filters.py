"""Hidden-entry policy and the synthetic "." / ".." entries."""

import posixpath
from typing import Iterable

from hdfs_tools.remote import RemoteFileSystemClient
from hdfs_tools.schemas import EntryRecord


def should_show(entry: EntryRecord, show_all: bool) -> bool:
    """Return True unless the entry is hidden and hidden entries are off."""
    return show_all or not entry.name.startswith(".")


def filter_batch(batch: Iterable[EntryRecord], show_all: bool) -> list[EntryRecord]:
    return [entry for entry in batch if should_show(entry, show_all)]


def parent_directory(path: str) -> str:
    """Return the parent of a path; the root is its own parent."""
    return posixpath.normpath(posixpath.join(path, ".."))


def synthetic_entries(
    client: RemoteFileSystemClient, directory: str
) -> list[EntryRecord]:
    """Build the "." and ".." entries of a directory from remote metadata.

    Raises:
        PathError: If either directory can no longer be probed
    """
    own = client.stat(directory)
    parent = client.stat(parent_directory(directory))
    return [own.renamed("."), parent.renamed("..")]
