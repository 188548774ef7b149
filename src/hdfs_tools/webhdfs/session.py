"""Process-wide WebHDFS session management.

The session is built at most once: the first command that needs the
remote client resolves the namenode addresses, performs the optional
Kerberos login and caches the resulting client. Later calls reuse it.
"""

import getpass
import os
import threading
import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlparse

from hdfs_tools.core import get_logger
from hdfs_tools.core.config import Settings, settings
from hdfs_tools.core.exceptions import ConfigurationError
from hdfs_tools.schemas import HdfsConnectionConfig
from hdfs_tools.webhdfs.client import WebHDFSClient
from hdfs_tools.webhdfs.kerberos import login_with_keytab

logger = get_logger(__name__)

DEFAULT_HTTP_PORT = 9870

NO_NAMENODE_MESSAGE = (
    "Couldn't find a namenode to connect to. You should specify "
    "hdfs://<namenode>:<port> in your paths. Alternatively, set "
    "HADOOP_NAMENODE or HADOOP_CONF_DIR in your environment."
)


@dataclass(frozen=True)
class Session:
    """The cached remote client plus the credential it was built with."""

    client: WebHDFSClient
    credential: Optional[Any] = None


def _read_hadoop_properties(path: str) -> dict[str, str]:
    """Read name/value pairs from a Hadoop *-site.xml file."""
    if not os.path.isfile(path):
        return {}

    try:
        root = ElementTree.parse(path).getroot()
    except ElementTree.ParseError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}")

    properties = {}
    for prop in root.iter("property"):
        name = prop.findtext("name")
        value = prop.findtext("value")
        if name and value:
            properties[name.strip()] = value.strip()
    return properties


def addresses_from_conf_dir(conf_dir: str) -> list[str]:
    """Resolve namenode HTTP addresses from a Hadoop configuration directory.

    ``dfs.namenode.http-address`` keys in hdfs-site.xml win (HA keys of the
    form ``dfs.namenode.http-address.<nameservice>.<namenode>`` are kept in
    file order). Otherwise the host of ``fs.defaultFS`` in core-site.xml is
    used with the default namenode HTTP port.
    """
    hdfs_site = _read_hadoop_properties(os.path.join(conf_dir, "hdfs-site.xml"))
    addresses = [
        value
        for name, value in hdfs_site.items()
        if name.startswith("dfs.namenode.http-address")
    ]
    if addresses:
        return addresses

    core_site = _read_hadoop_properties(os.path.join(conf_dir, "core-site.xml"))
    default_fs = core_site.get("fs.defaultFS", "")
    host = urlparse(default_fs).hostname
    if host:
        return [f"{host}:{DEFAULT_HTTP_PORT}"]
    return []


class SessionProvider:
    """Builds the remote session once and hands out the cached instance."""

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config or settings
        self._session: Optional[Session] = None
        self._lock = threading.Lock()

    def resolve_addresses(self, addresses: Optional[list[str]] = None) -> list[str]:
        """Pick the namenode address list.

        Explicit addresses win, then HADOOP_NAMENODE, then HADOOP_CONF_DIR.

        Raises:
            ConfigurationError: If no address can be resolved
        """
        if addresses:
            return list(addresses)

        if self.settings.namenode:
            return [a.strip() for a in self.settings.namenode.split(",") if a.strip()]

        if self.settings.conf_dir:
            resolved = addresses_from_conf_dir(self.settings.conf_dir)
            if resolved:
                return resolved

        raise ConfigurationError(NO_NAMENODE_MESSAGE)

    def resolve_user(self) -> str:
        return self.settings.user_name or getpass.getuser()

    def get_or_create_session(
        self, addresses: Optional[list[str]] = None
    ) -> Session:
        """Return the cached session, creating it on first use.

        Raises:
            ConfigurationError: If no namenode address is available
            AuthenticationError: If Kerberos login fails
        """
        with self._lock:
            if self._session is None:
                self._session = self._create_session(addresses)
            return self._session

    def _create_session(self, addresses: Optional[list[str]]) -> Session:
        config = HdfsConnectionConfig(
            addresses=self.resolve_addresses(addresses),
            user=self.resolve_user(),
            keytab_path=self.settings.keytab,
            krb5_config_path=self.settings.krb5_config,
            service_name=self.settings.service_name,
            timeout=self.settings.request_timeout,
        )

        credential = None
        if config.keytab_path:
            credential = login_with_keytab(
                config.keytab_path, config.krb5_config_path, config.service_name
            )

        logger.info(
            "Session created",
            addresses=config.addresses,
            user=config.user,
            kerberos=credential is not None,
        )
        return Session(client=WebHDFSClient(config, auth=credential), credential=credential)


_provider = SessionProvider()


def get_session(addresses: Optional[list[str]] = None) -> Session:
    """Return the process-wide session."""
    return _provider.get_or_create_session(addresses)
