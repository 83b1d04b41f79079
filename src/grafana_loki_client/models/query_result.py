"""
Response models returned by the query range operations.
"""

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from .stream_result import StreamResult
from .time_range import TimeRange

T = TypeVar("T")


@dataclass
class QueryRangeResponse(Generic[T]):
    """
    Logs of every stream merged into a single chronological list.

    Attributes:
        logs: Parsed records, oldest first.
        timerange: Timestamps covered by the result, or None when there were no logs.
    """

    logs: list[T] = field(default_factory=list)
    timerange: Optional[TimeRange] = None

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with logs and timerange.
        """
        return {
            "logs": list(self.logs),
            "timerange": self.timerange.to_dict() if self.timerange else None
        }

    def __len__(self) -> int:
        return len(self.logs)


@dataclass
class QueryRangeStreamResponse(Generic[T]):
    """
    Logs kept grouped by the stream they belong to.

    Attributes:
        logs: One StreamResult per stream, in the order Loki returned them.
        timerange: Timestamps covered by the result, or None when there were no logs.
    """

    logs: list[StreamResult[T]] = field(default_factory=list)
    timerange: Optional[TimeRange] = None

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with logs and timerange.
        """
        return {
            "logs": [stream.to_dict() for stream in self.logs],
            "timerange": self.timerange.to_dict() if self.timerange else None
        }

    @property
    def total_values(self) -> int:
        """
        Get total number of parsed records across all streams.

        Returns:
            Total record count.
        """
        return sum(len(stream.values) for stream in self.logs)
