"""
Data models for grafana-loki-client.
"""

from .log_entry import LogEntry
from .log_stream import LogStream
from .query_options import DEFAULT_LIMIT, LabelsOptions, LabelValuesOptions, QueryOptions
from .query_result import QueryRangeResponse, QueryRangeStreamResponse
from .stream_result import StreamResult
from .time_bound import Duration, TimeBound, Timestamp
from .time_range import TimeRange

__all__ = [
    "DEFAULT_LIMIT",
    "Duration",
    "LabelsOptions",
    "LabelValuesOptions",
    "LogEntry",
    "LogStream",
    "QueryOptions",
    "QueryRangeResponse",
    "QueryRangeStreamResponse",
    "StreamResult",
    "TimeBound",
    "Timestamp",
    "TimeRange",
]
