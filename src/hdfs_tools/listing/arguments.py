"""Classification of command-line paths into files and directories."""

from dataclasses import dataclass, field

from hdfs_tools.core import get_logger
from hdfs_tools.remote import RemoteFileSystemClient
from hdfs_tools.schemas import EntryRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClassifiedArguments:
    """Explicit files (with their metadata) and directories to expand.

    Attributes:
        files: (path, record) pairs in argument order
        dirs: Directory paths in argument order
    """

    files: list[tuple[str, EntryRecord]] = field(default_factory=list)
    dirs: list[str] = field(default_factory=list)


def classify_arguments(
    client: RemoteFileSystemClient, paths: list[str], default_path: str
) -> ClassifiedArguments:
    """Probe every path and split them into files and directories.

    Args:
        client: Remote filesystem client
        paths: Paths in command-line order
        default_path: Path listed when no paths are given

    Returns:
        ClassifiedArguments preserving order within each bucket

    Raises:
        PathError: On the first path that cannot be probed
    """
    if not paths:
        paths = [default_path]

    classified = ClassifiedArguments()
    for path in paths:
        entry = client.stat(path)
        if entry.is_directory:
            classified.dirs.append(path)
        else:
            classified.files.append((path, entry))

    logger.info(
        "Arguments classified",
        file_count=len(classified.files),
        dir_count=len(classified.dirs),
    )
    return classified
