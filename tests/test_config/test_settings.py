"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import (
    CUSTOMER_API_BASE_URL,
    CustomerApiSettings,
    OAuthSettings,
    get_base_settings,
    get_customer_api_settings,
    get_oauth_settings,
)


def _clear_oauth_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OAUTH2_TOKEN_URL", "OAUTH2_CLIENT_ID", "OAUTH2_CLIENT_SECRET", "OAUTH2_SCOPE"):
        monkeypatch.delenv(name, raising=False)


class TestOAuthSettings:
    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAUTH2_TOKEN_URL", "https://auth.example.com/token")
        monkeypatch.setenv("OAUTH2_CLIENT_ID", "client")
        monkeypatch.setenv("OAUTH2_CLIENT_SECRET", "secret")
        monkeypatch.setenv("OAUTH2_REQUEST_TIMEOUT_SECONDS", "5")

        settings = get_oauth_settings()

        assert settings.token_url == "https://auth.example.com/token"
        assert settings.scope == "customers"
        assert settings.request_timeout_seconds == 5.0
        assert settings.validate() == []

    def test_secret_is_hidden_from_repr(self) -> None:
        assert "topsecret" not in repr(OAuthSettings(client_secret="topsecret"))

    def test_validate_reports_missing_values(self) -> None:
        errors = OAuthSettings().validate()
        assert errors == [
            "OAUTH2_TOKEN_URL não configurado",
            "OAUTH2_CLIENT_ID não configurado",
            "OAUTH2_CLIENT_SECRET não configurado",
        ]

    def test_validate_rejects_non_http_url(self) -> None:
        settings = OAuthSettings(token_url="ftp://x", client_id="a", client_secret="b")
        assert settings.validate() == ["OAUTH2_TOKEN_URL deve ser uma URL http(s)"]


class TestCustomerApiSettings:
    def test_default_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CUSTOMER_API_BASE_URL", raising=False)
        assert get_customer_api_settings().base_url == CUSTOMER_API_BASE_URL

    def test_base_url_from_env_is_kept_verbatim(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUSTOMER_API_BASE_URL", "https://api.example.com/customers")
        assert get_customer_api_settings().base_url == "https://api.example.com/customers"

    def test_validate_timeout(self) -> None:
        errors = CustomerApiSettings(request_timeout_seconds=0).validate()
        assert errors == ["CUSTOMER_API_REQUEST_TIMEOUT_SECONDS deve ser > 0"]


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("prod", "production"), ("stage", "staging"), ("anything", "development")],
    )
    def test_environment_parsing(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", value)
        assert get_base_settings().environment == expected

    def test_docs_only_in_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert get_base_settings().docs_enabled is False


class TestValidateRuntimeSettings:
    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        _clear_oauth_env(monkeypatch)

        with pytest.raises(RuntimeError, match="OAUTH2_CLIENT_ID"):
            validate_runtime_settings()

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        _clear_oauth_env(monkeypatch)

        validate_runtime_settings()
