"""Tests for keytab login."""

import os
import sys
import types
from unittest.mock import Mock, patch

import pytest

from hdfs_tools.core.exceptions import AuthenticationError
from hdfs_tools.webhdfs.kerberos import login_with_keytab


class FakeGSSError(Exception):
    pass


@pytest.fixture
def krb_files(tmp_path):
    keytab = tmp_path / "user.keytab"
    keytab.write_bytes(b"\x05\x02")
    krb5_conf = tmp_path / "krb5.conf"
    krb5_conf.write_text("[libdefaults]\n")
    return str(keytab), str(krb5_conf)


@pytest.fixture
def gss_modules(monkeypatch):
    """Install stand-in gssapi and requests_gssapi modules."""
    monkeypatch.setenv("KRB5_CONFIG", "/unused/krb5.conf")

    gssapi = types.ModuleType("gssapi")
    gssapi.Credentials = Mock()
    gssapi.exceptions = types.SimpleNamespace(GSSError=FakeGSSError)

    requests_gssapi = types.ModuleType("requests_gssapi")
    requests_gssapi.HTTPSPNEGOAuth = Mock()

    with patch.dict(
        sys.modules, {"gssapi": gssapi, "requests_gssapi": requests_gssapi}
    ):
        yield gssapi, requests_gssapi


class TestLoginWithKeytab:
    """Test keytab and configuration checks before login."""

    def test_missing_keytab(self, tmp_path):
        with pytest.raises(AuthenticationError) as exc_info:
            login_with_keytab(str(tmp_path / "none.keytab"), "/etc/krb5.conf", "HTTP")

        assert "missing or unreadable" in str(exc_info.value)

    def test_missing_krb5_config(self, tmp_path):
        keytab = tmp_path / "user.keytab"
        keytab.write_bytes(b"\x05\x02")

        with pytest.raises(AuthenticationError) as exc_info:
            login_with_keytab(str(keytab), str(tmp_path / "krb5.conf"), "HTTP")

        assert "does not exist" in str(exc_info.value)


class TestKeytabCredentials:
    """Test credential acquisition and the returned auth handler."""

    def test_successful_login(self, krb_files, gss_modules):
        keytab, krb5_conf = krb_files
        gssapi, requests_gssapi = gss_modules
        credentials = gssapi.Credentials.return_value
        credentials.name = "alice@EXAMPLE.COM"

        auth = login_with_keytab(keytab, krb5_conf, "HTTP")

        assert os.environ["KRB5_CONFIG"] == krb5_conf
        gssapi.Credentials.assert_called_once_with(
            usage="initiate",
            store={"client_keytab": keytab, "ccache": "MEMORY:hdfs-tools"},
        )
        requests_gssapi.HTTPSPNEGOAuth.assert_called_once_with(
            creds=credentials, target_name="HTTP"
        )
        assert auth is requests_gssapi.HTTPSPNEGOAuth.return_value

    def test_custom_service_name(self, krb_files, gss_modules):
        keytab, krb5_conf = krb_files
        _, requests_gssapi = gss_modules

        login_with_keytab(keytab, krb5_conf, "nn")

        assert requests_gssapi.HTTPSPNEGOAuth.call_args.kwargs["target_name"] == "nn"

    def test_gss_failure_raises_authentication_error(self, krb_files, gss_modules):
        keytab, krb5_conf = krb_files
        gssapi, requests_gssapi = gss_modules
        gssapi.Credentials.side_effect = FakeGSSError("no principal")

        with patch("hdfs_tools.webhdfs.kerberos.logger") as mock_logger:
            with pytest.raises(AuthenticationError) as exc_info:
                login_with_keytab(keytab, krb5_conf, "HTTP")

        assert "no principal" in str(exc_info.value)
        assert keytab in str(exc_info.value)
        requests_gssapi.HTTPSPNEGOAuth.assert_not_called()
        # The CLI prints the error; nothing else may reach stderr
        mock_logger.error.assert_not_called()
        mock_logger.warning.assert_not_called()
