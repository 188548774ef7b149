"""Core utilities and shared components for hdfs-tools."""

from .config import settings
from .exceptions import HdfsToolsError, PathError
from .observability import get_logger, get_tracer

__all__ = ["settings", "HdfsToolsError", "PathError", "get_logger", "get_tracer"]
