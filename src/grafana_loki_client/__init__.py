"""
Python library for querying Grafana Loki logs via REST API
"""

import logging

from .client import GrafanaLoki
from .config import LokiConfig
from .exceptions import (
    InvalidBaseURLError,
    InvalidDurationFormatError,
    LokiAuthError,
    LokiDecodeError,
    LokiError,
    LokiHTTPError,
    MissingCredentialError,
)
from .models import (
    Duration,
    LabelsOptions,
    LabelValuesOptions,
    LogEntry,
    LogStream,
    QueryOptions,
    QueryRangeResponse,
    QueryRangeStreamResponse,
    StreamResult,
    Timestamp,
    TimeRange,
)
from .parsers import LogParser, NoopLogParser, RegexLogParser
from .utils import duration_to_unix_timestamp

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "GrafanaLoki",
    "LokiConfig",
    "Duration",
    "LabelsOptions",
    "LabelValuesOptions",
    "LogEntry",
    "LogStream",
    "QueryOptions",
    "QueryRangeResponse",
    "QueryRangeStreamResponse",
    "StreamResult",
    "Timestamp",
    "TimeRange",
    "LogParser",
    "NoopLogParser",
    "RegexLogParser",
    "duration_to_unix_timestamp",
    "LokiError",
    "MissingCredentialError",
    "InvalidBaseURLError",
    "InvalidDurationFormatError",
    "LokiHTTPError",
    "LokiAuthError",
    "LokiDecodeError",
]
