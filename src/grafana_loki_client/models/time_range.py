"""
TimeRange model summarizing the timestamps covered by a query result.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeRange:
    """
    Inclusive range of nanosecond timestamps.

    Attributes:
        start: Earliest timestamp in nanoseconds.
        end: Latest timestamp in nanoseconds.
    """

    start: int
    end: int

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}
