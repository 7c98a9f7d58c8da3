"""Testes do cliente OAuth2 (client credentials) com httpx.MockTransport."""

from __future__ import annotations

import logging
from urllib.parse import parse_qs

import httpx
import pytest
import pytest_asyncio

from app.bootstrap.clients import create_oauth_http_client
from app.domain.customer import Credential
from app.infra.oauth import OAuthTokenClient, parse_token_response
from config.settings import OAuthSettings

TOKEN_URL = "https://auth.example.com/oauth2/token"


def _settings() -> OAuthSettings:
    return OAuthSettings(
        token_url=TOKEN_URL,
        client_id="gateway-client",
        client_secret="s3cr3t",
    )


@pytest_asyncio.fixture
async def make_client():
    opened: list[httpx.AsyncClient] = []

    def factory(handler) -> OAuthTokenClient:
        http_client = create_oauth_http_client(_settings(), transport=httpx.MockTransport(handler))
        opened.append(http_client)
        return OAuthTokenClient(http_client=http_client, settings=_settings())

    yield factory
    for http_client in opened:
        await http_client.aclose()


@pytest.mark.asyncio
async def test_request_credential_sends_client_credentials_form(make_client) -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(
            200,
            json={"access_token": "tok-123", "token_type": "Bearer", "expires_in": 3600},
        )

    credential = await make_client(handler).request_credential()

    assert credential == Credential(access_token="tok-123", token_type="Bearer", expires_in=3600)
    assert len(captured) == 1
    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == TOKEN_URL
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert parse_qs(request.content.decode()) == {
        "grant_type": ["client_credentials"],
        "client_id": ["gateway-client"],
        "client_secret": ["s3cr3t"],
        "scope": ["customers"],
    }


@pytest.mark.asyncio
async def test_non_success_status_returns_none_and_logs(
    make_client, caplog: pytest.LogCaptureFixture
) -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(401, text='{"error":"invalid_client"}')

    with caplog.at_level(logging.ERROR, logger="app.infra.oauth.token_client"):
        credential = await make_client(handler).request_credential()

    assert credential is None
    assert calls == 1
    record = next(r for r in caplog.records if r.getMessage() == "oauth_token_request_failed")
    assert record.status_code == 401
    assert "invalid_client" in record.response_body


@pytest.mark.asyncio
async def test_timeout_returns_none_without_retry(make_client) -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise httpx.ReadTimeout("timed out", request=request)

    assert await make_client(handler).request_credential() is None
    assert calls == 1


@pytest.mark.asyncio
async def test_connection_error_returns_none(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert await make_client(handler).request_credential() is None


@pytest.mark.asyncio
async def test_invalid_json_returns_none(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    assert await make_client(handler).request_credential() is None


@pytest.mark.asyncio
async def test_missing_access_token_returns_none(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"token_type": "Bearer"})

    assert await make_client(handler).request_credential() is None


class TestParseTokenResponse:
    def test_defaults_for_optional_fields(self) -> None:
        credential = parse_token_response({"access_token": "abc"})
        assert credential == Credential(access_token="abc", token_type="Bearer", expires_in=0)

    @pytest.mark.parametrize("data", [None, [], {"access_token": ""}, {"access_token": 1}])
    def test_invalid_payloads(self, data: object) -> None:
        assert parse_token_response(data) is None

    def test_repr_hides_token(self) -> None:
        assert "abc" not in repr(Credential(access_token="abc"))
