"""Tests for data models."""

import pytest

from grafana_loki_client.models import (
    LabelValuesOptions,
    LogEntry,
    LogStream,
    QueryOptions,
    QueryRangeResponse,
    QueryRangeStreamResponse,
    StreamResult,
    TimeRange,
)


class TestLogEntry:
    """Test LogEntry model."""

    def test_create_entry(self) -> None:
        entry = LogEntry(timestamp=1704067200000000000, line="test log")
        assert entry.timestamp == 1704067200000000000
        assert entry.line == "test log"

    def test_from_loki_value(self) -> None:
        entry = LogEntry.from_loki_value(["1704067200000000000", "test log message"])
        assert entry.timestamp == 1704067200000000000
        assert entry.line == "test log message"

    def test_from_loki_value_malformed(self) -> None:
        with pytest.raises(ValueError):
            LogEntry.from_loki_value(["1704067200000000000"])


class TestLogStream:
    """Test LogStream model."""

    def test_from_loki_stream(self) -> None:
        loki_data = {
            "stream": {"app": "api", "environment": "prod"},
            "values": [
                ["1704067200000000000", "first log"],
                ["1704067201000000000", "second log"],
            ]
        }
        stream = LogStream.from_loki_stream(loki_data)
        assert stream.labels == {"app": "api", "environment": "prod"}
        assert len(stream.entries) == 2
        assert stream.entries[0].timestamp == 1704067200000000000
        assert stream.lines == ["first log", "second log"]

    def test_from_loki_stream_without_values(self) -> None:
        stream = LogStream.from_loki_stream({"stream": {"app": "api"}})
        assert stream.entries == []


class TestTimeRange:
    """Test TimeRange model."""

    def test_to_dict(self) -> None:
        assert TimeRange(start=50, end=300).to_dict() == {"start": 50, "end": 300}

    def test_is_frozen(self) -> None:
        timerange = TimeRange(start=1, end=2)
        with pytest.raises(AttributeError):
            timerange.start = 5


class TestQueryRangeResponse:
    """Test QueryRangeResponse model."""

    def test_defaults(self) -> None:
        response = QueryRangeResponse()
        assert response.logs == []
        assert response.timerange is None
        assert len(response) == 0

    def test_to_dict(self) -> None:
        response = QueryRangeResponse(logs=["a", "b"], timerange=TimeRange(1, 2))
        assert response.to_dict() == {
            "logs": ["a", "b"],
            "timerange": {"start": 1, "end": 2}
        }

    def test_to_dict_no_timerange(self) -> None:
        assert QueryRangeResponse().to_dict() == {"logs": [], "timerange": None}


class TestQueryRangeStreamResponse:
    """Test QueryRangeStreamResponse model."""

    def test_to_dict(self) -> None:
        response = QueryRangeStreamResponse(
            logs=[StreamResult(stream={"app": "api"}, values=["x"])],
            timerange=TimeRange(10, 10)
        )
        assert response.to_dict() == {
            "logs": [{"stream": {"app": "api"}, "values": ["x"]}],
            "timerange": {"start": 10, "end": 10}
        }

    def test_total_values(self) -> None:
        response = QueryRangeStreamResponse(
            logs=[
                StreamResult(stream={"app": "a"}, values=["1", "2"]),
                StreamResult(stream={"app": "b"}, values=[]),
                StreamResult(stream={"app": "c"}, values=["3"]),
            ]
        )
        assert response.total_values == 3


class TestQueryOptions:
    """Test option models."""

    def test_defaults(self) -> None:
        options = QueryOptions()
        assert options.limit == 100
        assert options.start is None
        assert options.end is None
        assert options.since is None
        assert options.parser is None

    @pytest.mark.parametrize("limit", [0, -1, True, "10"])
    def test_invalid_limit(self, limit: object) -> None:
        with pytest.raises(ValueError, match="limit"):
            QueryOptions(limit=limit)

    def test_label_values_options(self) -> None:
        options = LabelValuesOptions(since="1h", query='{app="api"}')
        assert options.since == "1h"
        assert options.query == '{app="api"}'
