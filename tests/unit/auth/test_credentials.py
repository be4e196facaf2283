"""Tests for credential variants and scheme selection."""

import base64
import dataclasses
import logging

import pytest

from burr.auth import (
    ANONYMOUS,
    Anonymous,
    BasicCredential,
    TokenCredential,
    resolve_credential,
)


class TestResolveCredential:
    """Test picking one variant from a partial identity."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "login,password",
        [("tclem", "pwd"), ("octocat", "ghp_as_password"), ("a", "b")],
    )
    def test_login_and_password_resolve_to_basic(self, login, password):
        credential = resolve_credential(login=login, password=password)

        assert credential == BasicCredential(username=login, password=password)

    @pytest.mark.unit
    def test_token_alone_resolves_to_token(self):
        credential = resolve_credential(token="xyz")

        assert credential == TokenCredential(token="xyz")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "login,password,token",
        [
            (None, None, None),
            ("", "", ""),
            ("tclem", None, None),
            (None, "pwd", None),
            ("tclem", "", ""),
        ],
    )
    def test_incomplete_identity_resolves_to_anonymous(self, login, password, token):
        credential = resolve_credential(login=login, password=password, token=token)

        assert credential is ANONYMOUS
        assert credential.is_anonymous

    @pytest.mark.unit
    def test_partial_basic_with_token_resolves_to_token(self):
        credential = resolve_credential(login="tclem", token="xyz")

        assert credential == TokenCredential(token="xyz")

    @pytest.mark.unit
    def test_basic_takes_precedence_over_token(self, caplog):
        """When everything is configured, Basic wins and the token is ignored."""
        with caplog.at_level(logging.WARNING, logger="burr.auth.credentials"):
            credential = resolve_credential(login="tclem", password="pwd", token="xyz")

        assert credential == BasicCredential(username="tclem", password="pwd")
        assert "token ignored" in caplog.text


class TestAuthorizationHeader:
    """Test the header each variant renders."""

    @pytest.mark.unit
    def test_basic_header(self):
        credential = BasicCredential(username="tclem", password="pwd")
        expected = base64.b64encode(b"tclem:pwd").decode()

        assert credential.authorization_header() == f"Basic {expected}"
        assert credential.scheme == "Basic"

    @pytest.mark.unit
    def test_basic_header_with_unicode_password(self):
        credential = BasicCredential(username="tclem", password="pässwörd")
        encoded = credential.authorization_header().removeprefix("Basic ")

        assert base64.b64decode(encoded).decode() == "tclem:pässwörd"

    @pytest.mark.unit
    def test_token_header(self):
        credential = TokenCredential(token="xyz")

        assert credential.authorization_header() == "Bearer xyz"
        assert credential.scheme == "Bearer"

    @pytest.mark.unit
    def test_anonymous_has_no_header(self):
        assert Anonymous().authorization_header() is None
        assert Anonymous().scheme is None


class TestCredentialValues:
    """Test immutability and secret hygiene."""

    @pytest.mark.unit
    def test_credentials_are_frozen(self):
        credential = TokenCredential(token="xyz")

        with pytest.raises(dataclasses.FrozenInstanceError):
            credential.token = "other"

    @pytest.mark.unit
    def test_repr_hides_secrets(self):
        basic = BasicCredential(username="tclem", password="hunter2")
        token = TokenCredential(token="ghp_secret")

        assert "hunter2" not in repr(basic)
        assert "tclem" in repr(basic)
        assert "ghp_secret" not in repr(token)

    @pytest.mark.unit
    def test_secrets_never_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="burr.auth.credentials"):
            resolve_credential(login="tclem", password="hunter2")
            resolve_credential(token="ghp_secret")

        assert "hunter2" not in caplog.text
        assert "ghp_secret" not in caplog.text
        assert "***" in caplog.text
