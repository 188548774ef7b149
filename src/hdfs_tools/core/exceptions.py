"""Exception hierarchy for hdfs-tools."""


class HdfsToolsError(Exception):
    """Base exception for all hdfs-tools errors."""

    pass


class ConfigurationError(HdfsToolsError):
    """Raised when no namenode address can be resolved."""

    pass


class AuthenticationError(HdfsToolsError):
    """Raised when credential loading or login fails."""

    pass


class PathError(HdfsToolsError):
    """Raised when a path is missing, not a directory, or not accessible."""

    pass


class RemoteIOError(HdfsToolsError):
    """Raised when a transport-level failure interrupts a remote call."""

    pass
