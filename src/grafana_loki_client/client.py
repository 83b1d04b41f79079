"""
GrafanaLoki client for querying Grafana Loki logs via REST API.
"""

import logging
from typing import Any, Mapping, Optional, TypeVar
from urllib.parse import quote, urljoin

import requests

from .config import LokiConfig, resolve_config
from .exceptions import LokiAuthError, LokiDecodeError, LokiHTTPError
from .models import (
    LabelsOptions,
    LabelValuesOptions,
    QueryOptions,
    QueryRangeResponse,
    QueryRangeStreamResponse,
)
from .normalizer import normalize_flat, normalize_grouped, parse_query_range_payload
from .parsers import NoopLogParser
from .utils import duration_to_unix_timestamp

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUERY_RANGE_PATH = "loki/api/v1/query_range"
LABELS_PATH = "loki/api/v1/labels"
LABEL_VALUES_PATH = "loki/api/v1/label/{name}/values"


def _coerce_options(options_cls: type, options: Any, overrides: dict) -> Any:
    """Return the options object, building it from keyword arguments when needed."""
    if options is not None and overrides:
        raise TypeError("Pass either an options object or keyword arguments, not both")
    if options is None:
        return options_cls(**overrides)
    if not isinstance(options, options_cls):
        raise TypeError(
            f"options must be a {options_cls.__name__}, got {type(options).__name__}"
        )
    return options


def _time_window_params(options: LabelsOptions) -> dict[str, str]:
    """Build the start/end/since query parameters shared by every endpoint."""
    params = {}

    if options.start is not None:
        params["start"] = duration_to_unix_timestamp(options.start)
    if options.end is not None:
        params["end"] = duration_to_unix_timestamp(options.end)
    if options.since is not None:
        params["since"] = options.since

    return params


class GrafanaLoki:
    """
    Client for querying Grafana Loki logs.

    Example:
        loki = GrafanaLoki(
            remote_api_url="https://logs-prod-eu-west-0.grafana.net",
            api_token="glc_..."
        )

        result = loki.query_range('{app="checkout"} |= "error"', start="2h")
        for line in result.logs:
            print(line)
    """

    def __init__(
        self,
        remote_api_url: str,
        api_token: Optional[str] = None,
        *,
        org_id: Optional[str] = None,
        ca_cert: Optional[str] = None,
        verify_ssl: bool = True,
        timeout: Optional[float] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the Loki client.

        Args:
            remote_api_url: Root URL of the Grafana Loki API (e.g., "https://logs.example.com").
            api_token: Grafana API token. Falls back to the GRAFANA_API_TOKEN environment variable.
            org_id: Optional X-Scope-OrgID header for multi-tenant Loki setups.
            ca_cert: Optional path to CA certificate PEM file for self-signed certs.
            verify_ssl: Whether to verify SSL certificates. Set False to disable (insecure).
            timeout: Request timeout in seconds. None waits indefinitely.
            environ: Mapping used for the token fallback. Defaults to os.environ.

        Raises:
            MissingCredentialError: If no token is given or found in the environment.
            InvalidBaseURLError: If remote_api_url is not an absolute http(s) URL.
        """
        self.config: LokiConfig = resolve_config(
            base_url=remote_api_url,
            api_token=api_token,
            org_id=org_id,
            ca_cert=ca_cert,
            verify_ssl=verify_ssl,
            timeout=timeout,
            environ=environ,
        )

    @property
    def remote_api_url(self) -> str:
        return self.config.base_url

    def _url(self, path: str) -> str:
        return urljoin(self.config.base_url, path)

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        """
        Issue a GET request against the Loki API.

        Args:
            path: API path relative to the configured base URL.
            params: Optional query parameters.

        Returns:
            Decoded JSON body.

        Raises:
            requests.exceptions.RequestException: If the request could not be sent.
            LokiAuthError: If authentication fails (401/403).
            LokiHTTPError: If Loki answers with any other non-2xx status.
            LokiDecodeError: If the body is not valid JSON or reports status "error".
        """
        url = self._url(path)
        logger.debug("GET %s params=%s", url, params)

        try:
            response = requests.get(
                url,
                params=params,
                headers=self.config.headers,
                verify=self.config.verify,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Request to Loki at %s failed: %s", url, e)
            raise

        logger.debug("GET %s -> %s", url, response.status_code)

        if response.status_code == 401:
            raise LokiAuthError(
                401, response.text, "Authentication failed: invalid credentials"
            )
        if response.status_code == 403:
            raise LokiAuthError(
                403, response.text, "Authorization failed: access denied"
            )

        if not 200 <= response.status_code < 300:
            logger.warning("Loki returned status %s for %s", response.status_code, url)
            raise LokiHTTPError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise LokiDecodeError(f"Invalid JSON response from Loki: {e}") from e

        if isinstance(data, dict) and data.get("status") == "error":
            error_msg = data.get("error", "Unknown error")
            raise LokiDecodeError(f"Loki returned an error response: {error_msg}")

        return data

    def _fetch_query_range(self, logql: str, options: QueryOptions) -> dict:
        """
        Fetch the raw query range payload.

        See https://grafana.com/docs/loki/latest/reference/loki-http-api/#query-logs-within-a-range-of-time
        """
        params = {
            "query": logql,
            "limit": str(options.limit),
        }
        params.update(_time_window_params(options))

        return self._get(QUERY_RANGE_PATH, params)

    def query_range(
        self,
        logql: str,
        options: Optional[QueryOptions[T]] = None,
        **kwargs: Any
    ) -> QueryRangeResponse[T]:
        """
        Execute a range query and merge every stream into one chronological log list.

        Args:
            logql: LogQL query string (e.g., '{app="api"} |= "error"').
            options: QueryOptions. Its fields may be passed as keyword arguments instead
                (limit, start, end, since, parser).

        Returns:
            QueryRangeResponse with the parsed logs, oldest first, and their time range
            (None when nothing matched).
        """
        options = _coerce_options(QueryOptions, options, kwargs)
        parser = options.parser or NoopLogParser()

        payload = self._fetch_query_range(logql, options)
        streams = parse_query_range_payload(payload)
        return normalize_flat(streams, parser)

    def query_range_stream(
        self,
        logql: str,
        options: Optional[QueryOptions[T]] = None,
        **kwargs: Any
    ) -> QueryRangeStreamResponse[T]:
        """
        Execute a range query and keep the logs grouped by stream.

        Args:
            logql: LogQL query string.
            options: QueryOptions, or its fields as keyword arguments.

        Returns:
            QueryRangeStreamResponse with one StreamResult per stream and the overall
            time range (None when nothing matched).
        """
        options = _coerce_options(QueryOptions, options, kwargs)
        parser = options.parser or NoopLogParser()

        payload = self._fetch_query_range(logql, options)
        streams = parse_query_range_payload(payload)
        return normalize_grouped(streams, parser)

    def labels(self, options: Optional[LabelsOptions] = None, **kwargs: Any) -> list[str]:
        """
        Get list of known label names.

        Args:
            options: LabelsOptions, or start/end/since as keyword arguments.

        Returns:
            List of label names.
        """
        options = _coerce_options(LabelsOptions, options, kwargs)
        params = _time_window_params(options)

        response = self._get(LABELS_PATH, params or None)
        return _label_data(response)

    def label_values(
        self,
        label: str,
        options: Optional[LabelValuesOptions] = None,
        **kwargs: Any
    ) -> list[str]:
        """
        Get list of known values for a specific label.

        Args:
            label: Label name to get values for.
            options: LabelValuesOptions, or start/end/since/query as keyword arguments.

        Returns:
            List of label values.
        """
        options = _coerce_options(LabelValuesOptions, options, kwargs)
        params = _time_window_params(options)
        if options.query is not None:
            params["query"] = options.query

        path = LABEL_VALUES_PATH.format(name=quote(label, safe=""))
        response = self._get(path, params or None)
        return _label_data(response)


def _label_data(response: Any) -> list[str]:
    """Extract the `data` array of a labels or label values response."""
    if not isinstance(response, dict):
        raise LokiDecodeError(f"Unexpected label response from Loki: {response!r}")

    # Loki omits data when no label matched
    data = response.get("data", [])
    if not isinstance(data, list):
        raise LokiDecodeError(f"Unexpected label response from Loki: {response!r}")
    return data
