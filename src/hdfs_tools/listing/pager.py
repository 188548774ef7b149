"""Paged reading of remote directories."""

from typing import Iterator

from hdfs_tools.core import get_logger
from hdfs_tools.remote import DirectoryStream, RemoteFileSystemClient
from hdfs_tools.schemas import EntryRecord

logger = get_logger(__name__)

DEFAULT_BATCH_SIZE = 100


class DirectoryPager:
    """Reads a remote directory in bounded batches until it is exhausted."""

    def __init__(
        self, client: RemoteFileSystemClient, batch_size: int = DEFAULT_BATCH_SIZE
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got: {batch_size}")
        self.client = client
        self.batch_size = batch_size

    def open(self, path: str) -> DirectoryStream:
        """Open a directory stream.

        Raises:
            PathError: If the path does not exist or is not a directory
        """
        return self.client.open_directory(path)

    def next_batch(self, stream: DirectoryStream) -> tuple[list[EntryRecord], bool]:
        """Read the next batch and whether the stream is done."""
        return stream.read_next(self.batch_size)

    def iter_batches(self, path: str) -> Iterator[list[EntryRecord]]:
        """Yield the non-empty batches of a directory in stream order.

        An empty directory yields nothing. Failures propagate as raised by
        the client; there is no retry.
        """
        stream = self.open(path)
        done = False
        batch_count = 0
        while not done:
            batch, done = self.next_batch(stream)
            if batch:
                batch_count += 1
                yield batch

        logger.debug("Directory exhausted", path=path, batch_count=batch_count)
