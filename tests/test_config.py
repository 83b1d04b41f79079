"""Tests for client configuration resolution."""

import dataclasses

import pytest

from grafana_loki_client.config import (
    API_TOKEN_ENV_VAR,
    LokiConfig,
    resolve_api_token,
    resolve_config,
    validate_base_url,
)
from grafana_loki_client.exceptions import InvalidBaseURLError, MissingCredentialError


class TestResolveApiToken:
    """Test resolve_api_token."""

    def test_explicit_token(self) -> None:
        assert resolve_api_token("explicit", environ={API_TOKEN_ENV_VAR: "env"}) == "explicit"

    def test_environment_fallback(self) -> None:
        assert resolve_api_token(None, environ={API_TOKEN_ENV_VAR: "env"}) == "env"

    def test_missing_everywhere(self) -> None:
        with pytest.raises(MissingCredentialError, match=API_TOKEN_ENV_VAR):
            resolve_api_token(None, environ={})

    def test_empty_explicit_token(self) -> None:
        with pytest.raises(MissingCredentialError):
            resolve_api_token("", environ={API_TOKEN_ENV_VAR: "env"})

    def test_empty_environment_token(self) -> None:
        with pytest.raises(MissingCredentialError):
            resolve_api_token(None, environ={API_TOKEN_ENV_VAR: ""})

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(API_TOKEN_ENV_VAR, "from-os")
        assert resolve_api_token() == "from-os"


class TestValidateBaseUrl:
    """Test validate_base_url."""

    @pytest.mark.parametrize(
        "url",
        ["http://localhost:3100", "https://logs.example.com/", "https://example.com/grafana/"],
    )
    def test_valid(self, url: str) -> None:
        assert validate_base_url(url) == url

    @pytest.mark.parametrize(
        "url",
        ["", "localhost:3100", "/loki/api", "ftp://example.com", "https://"],
    )
    def test_invalid(self, url: str) -> None:
        with pytest.raises(InvalidBaseURLError):
            validate_base_url(url)

    def test_not_a_string(self) -> None:
        with pytest.raises(InvalidBaseURLError):
            validate_base_url(None)


class TestLokiConfig:
    """Test LokiConfig."""

    def test_resolve_config(self) -> None:
        config = resolve_config("http://localhost:3100", environ={API_TOKEN_ENV_VAR: "tok"})
        assert config.base_url == "http://localhost:3100"
        assert config.api_token == "tok"
        assert config.org_id is None
        assert config.timeout is None

    def test_immutable(self) -> None:
        config = LokiConfig(base_url="http://localhost:3100", api_token="tok")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_token = "other"

    def test_token_not_in_repr(self) -> None:
        config = LokiConfig(base_url="http://localhost:3100", api_token="secret-token")
        assert "secret-token" not in repr(config)

    def test_headers(self) -> None:
        config = LokiConfig(base_url="http://localhost:3100", api_token="tok")
        assert config.headers == {"Authorization": "Bearer tok"}

    def test_headers_with_org_id(self) -> None:
        config = LokiConfig(base_url="http://localhost:3100", api_token="tok", org_id="tenant-1")
        assert config.headers["X-Scope-OrgID"] == "tenant-1"

    def test_verify_default(self) -> None:
        config = LokiConfig(base_url="https://localhost:3100", api_token="tok")
        assert config.verify is True

    def test_verify_false(self) -> None:
        config = LokiConfig(base_url="https://localhost:3100", api_token="tok", verify_ssl=False)
        assert config.verify is False

    def test_verify_with_ca_cert(self) -> None:
        config = LokiConfig(
            base_url="https://localhost:3100",
            api_token="tok",
            ca_cert="/path/to/ca.pem"
        )
        assert config.verify == "/path/to/ca.pem"
