"""Tests for the response envelope."""

from datetime import UTC, datetime

import httpx
import pytest

from burr.response import RateLimit, Response


@pytest.mark.unit
def test_defaults():
    response = Response(status_code=204)

    assert response.body is None
    assert len(response.headers) == 0
    assert response.is_success


@pytest.mark.unit
@pytest.mark.parametrize("status_code,expected", [(200, True), (201, True), (299, True), (304, False), (404, False)])
def test_is_success(status_code, expected):
    assert Response(status_code=status_code).is_success is expected


@pytest.mark.unit
def test_rate_limit_surfaced_from_headers():
    headers = httpx.Headers(
        {
            "X-RateLimit-Limit": "5000",
            "X-RateLimit-Remaining": "4987",
            "X-RateLimit-Reset": "1700000000",
            "X-RateLimit-Resource": "core",
        }
    )

    rate_limit = Response(status_code=200, headers=headers).rate_limit

    assert rate_limit == RateLimit(
        limit=5000,
        remaining=4987,
        reset=datetime.fromtimestamp(1700000000, tz=UTC),
        resource="core",
    )


@pytest.mark.unit
def test_rate_limit_absent():
    assert Response(status_code=200).rate_limit is None


@pytest.mark.unit
def test_rate_limit_with_garbage_values():
    headers = httpx.Headers({"X-RateLimit-Limit": "lots", "X-RateLimit-Remaining": "0"})

    assert RateLimit.from_headers(headers) is None


@pytest.mark.unit
def test_rate_limit_with_bad_reset():
    headers = httpx.Headers({"X-RateLimit-Limit": "60", "X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "soon"})

    rate_limit = RateLimit.from_headers(headers)

    assert rate_limit.remaining == 0
    assert rate_limit.reset is None
