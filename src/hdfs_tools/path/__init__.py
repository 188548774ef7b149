from .resolution import (
    RemotePaths,
    make_absolute,
    parse_remote_paths,
    split_remote_path,
)

__all__ = [
    "RemotePaths",
    "make_absolute",
    "parse_remote_paths",
    "split_remote_path",
]
