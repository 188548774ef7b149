"""WebHDFS client, session management and Kerberos login."""

from .client import DirectoryStream, WebHDFSClient, permission_string
from .session import Session, SessionProvider, get_session

__all__ = [
    "DirectoryStream",
    "WebHDFSClient",
    "permission_string",
    "Session",
    "SessionProvider",
    "get_session",
]
