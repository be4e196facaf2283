"""Tests for credential resolution exceptions."""

import pytest

from burr.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from burr.errors import BurrError


class TestCredentialError:
    """Test CredentialError base exception."""

    @pytest.mark.unit
    def test_is_burr_error(self):
        """Test that configuration errors share the library base class."""
        with pytest.raises(BurrError):
            raise CredentialError("Test error")

    @pytest.mark.unit
    def test_exception_message(self):
        """Test that exception message is preserved."""
        assert str(CredentialError("Custom error message")) == "Custom error message"


class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    @pytest.mark.unit
    def test_is_credential_error(self):
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    @pytest.mark.unit
    def test_env_var_name_attribute(self):
        error = CredentialNotFoundError("Test error", env_var_name="GITHUB_TOKEN")

        assert error.env_var_name == "GITHUB_TOKEN"

    @pytest.mark.unit
    def test_env_var_name_optional(self):
        assert CredentialNotFoundError("Test error").env_var_name is None


class TestCredentialFileError:
    """Test CredentialFileError exception."""

    @pytest.mark.unit
    def test_is_credential_error(self):
        with pytest.raises(CredentialError):
            raise CredentialFileError("Test error")

    @pytest.mark.unit
    def test_exception_message(self):
        error = CredentialFileError("File not found: /path/to/file")

        assert str(error) == "File not found: /path/to/file"
