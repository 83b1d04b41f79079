"""
LogStream model representing a raw stream of logs with common labels.
"""

from dataclasses import dataclass

from .log_entry import LogEntry


@dataclass
class LogStream:
    """
    A stream of raw log entries sharing common labels, as returned by Loki.

    Attributes:
        labels: Dictionary of label key-value pairs (e.g., {"app": "checkout", "env": "prod"}).
        entries: List of LogEntry objects in the order Loki returned them.
    """

    labels: dict[str, str]
    entries: list[LogEntry]

    @property
    def lines(self) -> list[str]:
        """Raw log lines of this stream, in order."""
        return [entry.line for entry in self.entries]

    @classmethod
    def from_loki_stream(cls, stream_data: dict) -> "LogStream":
        """
        Create LogStream from Loki API response format.

        Args:
            stream_data: Dictionary with 'stream' (labels) and 'values' (log entries).

        Returns:
            LogStream instance.
        """
        labels = stream_data.get("stream") or {}
        values = stream_data.get("values") or []
        entries = [LogEntry.from_loki_value(v) for v in values]
        return cls(labels=labels, entries=entries)
