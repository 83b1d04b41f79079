"""
Client configuration resolution.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union
from urllib.parse import urlsplit

from .exceptions import InvalidBaseURLError, MissingCredentialError

API_TOKEN_ENV_VAR = "GRAFANA_API_TOKEN"


@dataclass(frozen=True)
class LokiConfig:
    """
    Immutable settings shared by every request of a client.

    Attributes:
        base_url: Absolute URL of the Grafana/Loki API root.
        api_token: Bearer token sent with every request.
        org_id: Optional X-Scope-OrgID header for multi-tenant Loki setups.
        ca_cert: Optional path to CA certificate PEM file for self-signed certs.
        verify_ssl: Whether to verify SSL certificates.
        timeout: Request timeout in seconds. None waits indefinitely.
    """

    base_url: str
    api_token: str = field(repr=False)
    org_id: Optional[str] = None
    ca_cert: Optional[str] = None
    verify_ssl: bool = True
    timeout: Optional[float] = None

    @property
    def verify(self) -> Union[bool, str]:
        """Value for the requests `verify` argument."""
        return self.ca_cert if self.ca_cert else self.verify_ssl

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        headers = {"Authorization": f"Bearer {self.api_token}"}
        if self.org_id:
            headers["X-Scope-OrgID"] = self.org_id
        return headers


def resolve_api_token(
    api_token: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None
) -> str:
    """
    Resolve the API token from an explicit value or the environment.

    Args:
        api_token: Explicit token, takes precedence when given.
        environ: Mapping to read GRAFANA_API_TOKEN from. Defaults to os.environ.

    Returns:
        The API token.

    Raises:
        MissingCredentialError: If no non-empty token is available.
    """
    if api_token is None:
        env = os.environ if environ is None else environ
        api_token = env.get(API_TOKEN_ENV_VAR)

    if not api_token:
        raise MissingCredentialError(
            f"An API token must be provided (api_token argument or {API_TOKEN_ENV_VAR} "
            "environment variable) to use the Grafana Loki API"
        )
    return api_token


def validate_base_url(base_url: str) -> str:
    """
    Check that the base URL is an absolute http(s) URL.

    Raises:
        InvalidBaseURLError: If it is not.
    """
    if not isinstance(base_url, str):
        raise InvalidBaseURLError(f"Remote API URL must be a string, got {type(base_url).__name__}")

    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidBaseURLError(f"Remote API URL must be an absolute http(s) URL: {base_url!r}")
    return base_url


def resolve_config(
    base_url: str,
    api_token: Optional[str] = None,
    org_id: Optional[str] = None,
    ca_cert: Optional[str] = None,
    verify_ssl: bool = True,
    timeout: Optional[float] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LokiConfig:
    """
    Build a LokiConfig, validating the URL and resolving the token once.

    Raises:
        InvalidBaseURLError: If base_url is not an absolute http(s) URL.
        MissingCredentialError: If no token is available.
    """
    return LokiConfig(
        base_url=validate_base_url(base_url),
        api_token=resolve_api_token(api_token, environ),
        org_id=org_id,
        ca_cert=ca_cert,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
