"""Pytest configuration and shared fixtures for burr tests."""

import pytest

from burr.testing import RecordingTransport, create_mock_response


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear GitHub and test environment variables before each test.

    This prevents a developer's real GITHUB_TOKEN from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "GITHUB_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def user_payload():
    """A trimmed-down GitHub user object."""
    return {
        "login": "tclem",
        "id": 1234,
        "type": "User",
        "name": "Tim Clem",
        "public_repos": 42,
        "plan": {"name": "pro"},
    }


@pytest.fixture
def user_transport(user_payload):
    """Transport answering every request with the user payload."""
    return RecordingTransport(create_mock_response(200, user_payload))
