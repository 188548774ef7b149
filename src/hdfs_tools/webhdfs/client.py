"""WebHDFS client used by the listing engine.

This module talks to the namenode's WebHDFS REST endpoint
(``/webhdfs/v1``) and turns its JSON file statuses into ``EntryRecord``
objects, so every record carries the same metadata whether it came from
a status probe or from a directory page.

High Availability:
    Several namenode addresses may be configured. Requests go to the last
    address that answered; when it is unreachable or reports itself as
    standby, the next address is tried in order.

Authentication:
    Without Kerberos the ``user.name`` query parameter is sent (pseudo
    authentication). With Kerberos a SPNEGO ``requests`` auth handler is
    attached to the HTTP session instead.
"""

import posixpath
from typing import Any, Optional
from urllib.parse import quote

import requests

from hdfs_tools.core import get_logger
from hdfs_tools.core.exceptions import (
    AuthenticationError,
    PathError,
    RemoteIOError,
)
from hdfs_tools.schemas import EntryRecord, HdfsConnectionConfig, from_epoch_millis

logger = get_logger(__name__)

WEBHDFS_PREFIX = "/webhdfs/v1"

_PERMISSION_BITS = "rwxrwxrwx"


def permission_string(octal: str, is_directory: bool) -> str:
    """Build an ls-style mode string from a WebHDFS octal permission.

    Only the nine access bits are rendered; sticky and setuid bits are
    dropped.

    >>> permission_string("755", True)
    'drwxr-xr-x'
    >>> permission_string("1777", True)
    'drwxrwxrwx'
    """
    bits = int(octal, 8) & 0o777
    chars = [
        char if bits & (1 << (8 - index)) else "-"
        for index, char in enumerate(_PERMISSION_BITS)
    ]
    return ("d" if is_directory else "-") + "".join(chars)


def entry_from_status(status: dict[str, Any], name: str) -> EntryRecord:
    """Convert a WebHDFS FileStatus object into an EntryRecord."""
    is_directory = status.get("type") == "DIRECTORY"
    return EntryRecord(
        name=name,
        is_directory=is_directory,
        permission_mode=permission_string(status.get("permission", "0"), is_directory),
        owner=status.get("owner", ""),
        group=status.get("group", ""),
        size_bytes=int(status.get("length", 0)),
        modified_at=from_epoch_millis(int(status.get("modificationTime", 0))),
    )


class DirectoryStream:
    """Cursor over one remote directory.

    Pages are fetched with ``LISTSTATUS_BATCH`` and resumed from the last
    name seen. Entries the server returned beyond the requested count are
    held back for the next call, so each call hands out at most
    ``max_count`` entries. The stream cannot be restarted.
    """

    def __init__(self, client: "WebHDFSClient", path: str):
        self.client = client
        self.path = path
        self._pending: list[EntryRecord] = []
        self._start_after: Optional[str] = None
        self._server_has_more = True

    def read_next(self, max_count: int) -> tuple[list[EntryRecord], bool]:
        """Read up to ``max_count`` entries.

        Returns:
            Tuple of (entries, exhausted). An empty directory returns
            ``([], True)`` on the first call.

        Raises:
            PathError: If the directory vanished or became unreadable
            RemoteIOError: On transport failure
        """
        while len(self._pending) < max_count and self._server_has_more:
            self._fetch_page()

        batch = self._pending[:max_count]
        self._pending = self._pending[max_count:]
        exhausted = not self._pending and not self._server_has_more
        return batch, exhausted

    def _fetch_page(self) -> None:
        params = {}
        if self._start_after is not None:
            params["startAfter"] = self._start_after

        payload = self.client._request("LISTSTATUS_BATCH", self.path, **params)
        listing = payload.get("DirectoryListing", {})
        statuses = (
            listing.get("partialListing", {})
            .get("FileStatuses", {})
            .get("FileStatus", [])
        )

        for status in statuses:
            self._pending.append(entry_from_status(status, status["pathSuffix"]))

        if statuses:
            self._start_after = statuses[-1]["pathSuffix"]
        self._server_has_more = bool(statuses) and listing.get("remainingEntries", 0) > 0

        logger.debug(
            "Directory page fetched",
            path=self.path,
            entry_count=len(statuses),
            remaining=listing.get("remainingEntries", 0),
        )


class WebHDFSClient:
    """Minimal WebHDFS client exposing the calls the listing needs."""

    def __init__(
        self,
        config: HdfsConnectionConfig,
        auth: Optional[requests.auth.AuthBase] = None,
        http: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            config: Connection configuration
            auth: Optional requests auth handler (SPNEGO)
            http: Optional pre-built HTTP session
        """
        self.config = config
        self.auth = auth
        self._http = http or requests.Session()
        if auth is not None:
            self._http.auth = auth
        self._active = 0
        logger.info("WebHDFS client initialized", addresses=config.addresses)

    @property
    def user(self) -> Optional[str]:
        return self.config.user

    def home_directory(self) -> str:
        """Return the home directory of the configured user."""
        return f"/user/{self.user}"

    def stat(self, path: str) -> EntryRecord:
        """Fetch metadata for a single file or directory.

        Raises:
            PathError: If the path does not exist or access is denied
            RemoteIOError: On transport failure
        """
        payload = self._request("GETFILESTATUS", path)
        name = posixpath.basename(path.rstrip("/")) or "/"
        return entry_from_status(payload["FileStatus"], name)

    def open_directory(self, path: str) -> DirectoryStream:
        """Open a directory for paged reading.

        Raises:
            PathError: If the path does not exist or is not a directory
        """
        entry = self.stat(path)
        if not entry.is_directory:
            raise PathError(f"open {path}: not a directory")
        return DirectoryStream(self, path)

    def _url(self, address: str, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"http://{address}{WEBHDFS_PREFIX}{quote(path)}"

    def _request(self, op: str, path: str, **params: Any) -> dict[str, Any]:
        """Issue one GET operation, failing over across namenodes.

        Raises:
            PathError: For missing paths and permission failures
            AuthenticationError: When the namenode rejects credentials
            RemoteIOError: When no namenode can serve the request
        """
        query = {"op": op, **params}
        if self.auth is None and self.user:
            query["user.name"] = self.user

        addresses = self.config.addresses
        last_error: Optional[str] = None

        for offset in range(len(addresses)):
            index = (self._active + offset) % len(addresses)
            address = addresses[index]
            try:
                response = self._http.get(
                    self._url(address, path),
                    params=query,
                    timeout=self.config.timeout,
                )
            except (requests.ConnectionError, requests.Timeout) as e:
                logger.warning("Namenode unreachable", address=address, error=str(e))
                last_error = str(e)
                continue
            except requests.RequestException as e:
                raise RemoteIOError(f"{op.lower()} {path}: {e}")

            if response.ok:
                self._active = index
                try:
                    return response.json()
                except ValueError as e:
                    raise RemoteIOError(f"{op.lower()} {path}: invalid response: {e}")

            exception, message = _remote_exception(response)
            if exception == "StandbyException":
                logger.info("Namenode is in standby", address=address)
                last_error = f"{address} is in standby"
                continue

            raise _map_error(op, path, response.status_code, exception, message)

        error_msg = (
            f"{op.lower()} {path}: no namenode available "
            f"({','.join(addresses)}): {last_error}"
        )
        logger.warning(error_msg)
        raise RemoteIOError(error_msg)


def _remote_exception(response: requests.Response) -> tuple[str, str]:
    """Extract the Java exception name and message from an error body."""
    try:
        remote = response.json().get("RemoteException", {})
    except ValueError:
        return "", response.text.strip()
    return remote.get("exception", ""), remote.get("message", "")


def _map_error(op: str, path: str, status: int, exception: str, message: str):
    verb = "stat" if op == "GETFILESTATUS" else "readdir"
    if status == 404 or exception == "FileNotFoundException":
        return PathError(f"{verb} {path}: no such file or directory")
    if exception == "AccessControlException" or status == 403:
        return PathError(f"{verb} {path}: permission denied")
    if status == 401:
        return AuthenticationError(f"{verb} {path}: authentication required")
    detail = message or exception or f"HTTP {status}"
    return RemoteIOError(f"{verb} {path}: {detail}")
