"""
Normalization of Loki query range responses into flat or grouped logs.
"""

from typing import Optional, TypeVar

from .exceptions import LokiDecodeError
from .models import (
    LogStream,
    QueryRangeResponse,
    QueryRangeStreamResponse,
    StreamResult,
    TimeRange,
)
from .parsers import LogParser
from .utils import compute_time_range

T = TypeVar("T")


def parse_query_range_payload(payload: dict) -> list[LogStream]:
    """
    Extract the raw streams from a query range response body.

    Args:
        payload: Decoded JSON of the form {"data": {"result": [...]}}.

    Returns:
        List of LogStream objects, in the order Loki returned them.

    Raises:
        LokiDecodeError: If the payload is not in the documented shape.
    """
    try:
        result = payload["data"]["result"]
        return [LogStream.from_loki_stream(stream) for stream in result]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise LokiDecodeError(f"Unexpected query range response from Loki: {e!r}") from e


def inline_logs(streams: list[LogStream]) -> Optional[tuple[list[str], TimeRange]]:
    """
    Merge the lines of all streams into one chronological list.

    Loki orders entries within a stream but not across streams, so entries
    are stable-sorted by timestamp once merged.

    Args:
        streams: Raw streams from a query range response.

    Returns:
        Tuple of (lines oldest first, covered TimeRange), or None if there are no entries.
    """
    entries = [entry for stream in streams for entry in stream.entries]
    if not entries:
        return None

    entries.sort(key=lambda entry: entry.timestamp)
    timerange = TimeRange(start=entries[0].timestamp, end=entries[-1].timestamp)
    return [entry.line for entry in entries], timerange


def normalize_flat(streams: list[LogStream], parser: LogParser[T]) -> QueryRangeResponse[T]:
    """
    Build a flattened response: every stream's lines merged, then parsed once.

    Args:
        streams: Raw streams from a query range response.
        parser: Parser applied to the merged lines.

    Returns:
        QueryRangeResponse with an empty log list and no time range when there are no entries.
    """
    inlined = inline_logs(streams)
    if inlined is None:
        return QueryRangeResponse(logs=[], timerange=None)

    lines, timerange = inlined
    return QueryRangeResponse(logs=parser.execute_on_logs(lines), timerange=timerange)


def normalize_grouped(
    streams: list[LogStream],
    parser: LogParser[T]
) -> QueryRangeStreamResponse[T]:
    """
    Build a grouped response: one StreamResult per stream.

    Each line is parsed on its own and the parser output is concatenated in
    order, so every record stays attributed to the stream it came from.
    Streams without entries are kept with empty values.

    Args:
        streams: Raw streams from a query range response.
        parser: Parser applied to each stream's lines.

    Returns:
        QueryRangeStreamResponse with the time range of the unparsed entries.
    """
    results = []
    for stream in streams:
        values: list[T] = []
        for line in stream.lines:
            values.extend(parser.execute_on_logs([line]))
        results.append(StreamResult(stream=stream.labels, values=values))

    return QueryRangeStreamResponse(logs=results, timerange=compute_time_range(streams))
