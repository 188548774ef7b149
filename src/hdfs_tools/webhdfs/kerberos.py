"""Keytab-based Kerberos login for WebHDFS.

The namenode web endpoint authenticates with SPNEGO. When a keytab is
configured, initiator credentials for the keytab's first principal are
acquired up front and attached to every request.
"""

import os

from hdfs_tools.core import get_logger
from hdfs_tools.core.exceptions import AuthenticationError

logger = get_logger(__name__)


def login_with_keytab(keytab_path: str, krb5_config_path: str, service_name: str):
    """Acquire Kerberos credentials from a keytab.

    Args:
        keytab_path: Path to the keytab file
        krb5_config_path: Kerberos configuration file to use
        service_name: SPNEGO service name of the namenode web endpoint

    Returns:
        A requests auth handler performing SPNEGO with the acquired credentials

    Raises:
        AuthenticationError: If the keytab is unusable or login fails
    """
    if not os.path.isfile(keytab_path) or not os.access(keytab_path, os.R_OK):
        raise AuthenticationError(f"Keytab {keytab_path} is missing or unreadable")
    if not os.path.isfile(krb5_config_path):
        raise AuthenticationError(
            f"Kerberos configuration {krb5_config_path} does not exist"
        )

    # Provided by the optional "kerberos" extra
    import gssapi
    from requests_gssapi import HTTPSPNEGOAuth

    os.environ["KRB5_CONFIG"] = krb5_config_path

    try:
        credentials = gssapi.Credentials(
            usage="initiate",
            store={"client_keytab": keytab_path, "ccache": "MEMORY:hdfs-tools"},
        )
        principal = str(credentials.name)
    except gssapi.exceptions.GSSError as e:
        error_msg = f"Kerberos login with keytab {keytab_path} failed: {e}"
        logger.info("Kerberos login failed", keytab=keytab_path, error=str(e))
        raise AuthenticationError(error_msg)

    logger.info("Kerberos login succeeded", principal=principal)
    return HTTPSPNEGOAuth(creds=credentials, target_name=service_name)
