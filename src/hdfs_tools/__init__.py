"""Command-line tools for the Hadoop Distributed File System.

This package lists HDFS entries over the namenode's WebHDFS endpoint and
renders them the way POSIX ``ls`` does, as plain names, aligned detail
rows, or JSON.

Key Features:
    - ``ls`` with ``-l``, ``-a``, ``-h`` and JSON output
    - Paged directory reads for arbitrarily large directories
    - Namenode HA failover across a comma-separated address list
    - Optional Kerberos (keytab) login

Recommended Usage:
    Use the CLI (``hdfs-tools ls -la /data``) or the listing function:

    >>> from hdfs_tools import ListingOptions, list_paths
    >>> list_paths(["/data"], ListingOptions(long=True))

Advanced Usage:
    Drive the engine with your own client:

    >>> from hdfs_tools.listing import ListingOrchestrator, OutputFormatter
"""

__version__ = "0.1.0"

from .listing import ListingOrchestrator, OutputFormatter, list_paths
from .schemas import EntryRecord, HdfsConnectionConfig, ListingOptions
from .webhdfs import Session, SessionProvider, WebHDFSClient, get_session

__all__ = [
    # Records and options
    "EntryRecord",
    "HdfsConnectionConfig",
    "ListingOptions",
    # Listing
    "ListingOrchestrator",
    "OutputFormatter",
    "list_paths",
    # Remote session
    "Session",
    "SessionProvider",
    "WebHDFSClient",
    "get_session",
]
