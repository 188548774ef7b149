"""Interfaces the listing engine expects from a remote filesystem client."""

from typing import Protocol

from hdfs_tools.schemas import EntryRecord


class DirectoryStream(Protocol):
    """Cursor over one remote directory."""

    def read_next(self, max_count: int) -> tuple[list[EntryRecord], bool]:
        """Return up to max_count entries and whether the stream is exhausted."""
        ...


class RemoteFileSystemClient(Protocol):
    """Protocol for clients that can probe paths and page directories."""

    def stat(self, path: str) -> EntryRecord:
        """Return metadata for a path, raising PathError if it is missing."""
        ...

    def open_directory(self, path: str) -> DirectoryStream:
        """Open a directory, raising PathError if it is not one."""
        ...

    def home_directory(self) -> str:
        """Return the home directory of the connected user."""
        ...
