"""
Option models for the query and label operations.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from ..parsers import LogParser
from .time_bound import TimeBound

T = TypeVar("T")

TimeValue = Union[int, float, str, TimeBound]

DEFAULT_LIMIT = 100


@dataclass
class LabelsOptions:
    """
    Time window of a label lookup.

    Attributes:
        start: Start of the window as a nanosecond epoch or a duration (e.g. "2h").
            Loki defaults to 6 hours ago.
        end: End of the window as a nanosecond epoch or a duration. Loki defaults to now.
        since: Duration used to compute start relative to end. Any start supersedes it.
    """

    start: Optional[TimeValue] = None
    end: Optional[TimeValue] = None
    since: Optional[str] = None


@dataclass
class LabelValuesOptions(LabelsOptions):
    """
    Time window and stream selector of a label values lookup.

    Attributes:
        query: Log stream selector restricting the streams to look at
            (e.g. '{app="myapp", environment="dev"}').
    """

    query: Optional[str] = None


@dataclass
class QueryOptions(LabelsOptions, Generic[T]):
    """
    Options of a range query.

    Attributes:
        limit: Maximum number of log lines to return.
        parser: Parser applied to the raw log lines. Lines are returned as-is when None.
    """

    limit: int = DEFAULT_LIMIT
    parser: Optional[LogParser[T]] = None

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit!r}")
