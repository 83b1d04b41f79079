"""
LogEntry model representing a single raw log line from Loki.
"""

from dataclasses import dataclass


@dataclass
class LogEntry:
    """
    A single log entry from a Loki stream.

    Attributes:
        timestamp: Unix timestamp in nanoseconds when the log was recorded.
        line: The raw log line.
    """

    timestamp: int
    line: str

    @classmethod
    def from_loki_value(cls, value: list) -> "LogEntry":
        """
        Create LogEntry from Loki's [timestamp, line] format.

        Args:
            value: List of [timestamp_string, line_string] from Loki API.

        Returns:
            LogEntry instance.
        """
        timestamp, line = value
        return cls(
            timestamp=int(timestamp),
            line=line
        )
