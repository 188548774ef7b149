"""Sequencing of one ``ls`` invocation.

Arguments are classified first, explicit files are rendered next in
argument order, then every directory is expanded in argument order. A
single directory argument with no explicit files is listed without a
header, as if its contents had been asked for directly.
"""

from datetime import datetime
from typing import Optional, TextIO

from hdfs_tools.core import get_logger, get_tracer
from hdfs_tools.core.exceptions import HdfsToolsError
from hdfs_tools.listing.arguments import classify_arguments
from hdfs_tools.listing.filters import filter_batch, parent_directory, synthetic_entries
from hdfs_tools.listing.formatter import OutputFormatter
from hdfs_tools.listing.pager import DirectoryPager
from hdfs_tools.path import make_absolute, parse_remote_paths
from hdfs_tools.remote import RemoteFileSystemClient
from hdfs_tools.schemas import EntryRecord, ListingOptions
from hdfs_tools.webhdfs.session import Session, get_session

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class ListingOrchestrator:
    """Drives classification, paging, filtering and rendering."""

    def __init__(
        self,
        client: RemoteFileSystemClient,
        formatter: OutputFormatter,
        pager: Optional[DirectoryPager] = None,
    ):
        self.client = client
        self.formatter = formatter
        self.options = formatter.options
        self.pager = pager or DirectoryPager(client)

    def run(self, paths: list[str], default_path: str) -> None:
        """List the given paths.

        Nothing is written until every argument has been probed. In JSON
        mode the array is closed even when a later directory fails, so
        the elements already written remain a valid document.

        Raises:
            HdfsToolsError: On the first failure; no partial recovery
        """
        classified = classify_arguments(self.client, paths, default_path)

        if self.options.json_output:
            self.formatter.open_array()

        try:
            if not classified.files and len(classified.dirs) == 1:
                self._render_directory(classified.dirs[0], with_header=False)
            else:
                self._render_files(classified.files)
                for directory in classified.dirs:
                    self._render_directory(directory, with_header=True)
        finally:
            if self.options.json_output:
                self.formatter.close_array()

    def _render_files(self, files: list[tuple[str, EntryRecord]]) -> None:
        with self.formatter.block():
            for path, entry in files:
                if self.options.long:
                    self.formatter.render_long(path, parent_directory(path), entry)
                else:
                    self.formatter.render_short(path)

    def _render_directory(self, directory: str, with_header: bool) -> None:
        logger.info("Listing directory", path=directory)

        if with_header:
            self.formatter.section_header(directory)

        with self.formatter.block():
            if self.options.show_all and not self.options.json_output:
                self._render_synthetic(directory)

            for batch in self.pager.iter_batches(directory):
                for entry in filter_batch(batch, self.options.show_all):
                    if self.options.long:
                        self.formatter.render_long(entry.name, directory, entry)
                    else:
                        self.formatter.render_short(entry.name, parent=directory)

    def _render_synthetic(self, directory: str) -> None:
        if self.options.long:
            for entry in synthetic_entries(self.client, directory):
                self.formatter.render_long(entry.name, directory, entry)
        else:
            self.formatter.render_short(".")
            self.formatter.render_short("..")


def list_paths(
    paths: list[str],
    options: ListingOptions,
    session: Optional[Session] = None,
    stream: Optional[TextIO] = None,
    now: Optional[datetime] = None,
) -> None:
    """List remote paths the way ``ls`` does.

    Args:
        paths: Paths or hdfs:// URLs as given on the command line
        options: Listing flags
        session: Session to use; the process-wide session by default
        stream: Output stream; stdout by default
        now: Reference time for the date column; the current time by default

    Raises:
        HdfsToolsError: If configuration, login or any remote call fails
    """
    with tracer.start_as_current_span("ls") as span:
        span.set_attribute("hdfs.path_count", len(paths))

        try:
            remote = parse_remote_paths(paths)
            session = session or get_session(remote.addresses)
            home = session.client.home_directory()
            absolute = [make_absolute(path, home) for path in remote.paths]

            formatter = OutputFormatter(options, stream=stream, now=now)
            ListingOrchestrator(session.client, formatter).run(absolute, home)
        except HdfsToolsError as e:
            logger.info("Listing failed", error=str(e))
            span.record_exception(e)
            raise
