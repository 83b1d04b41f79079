"""
StreamResult model representing a parsed stream of logs.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class StreamResult(Generic[T]):
    """
    A stream's labels together with its parsed log records.

    Attributes:
        stream: Dictionary of label key-value pairs identifying the stream.
        values: Parser output for the stream's lines, in order.
    """

    stream: dict[str, str]
    values: list[T] = field(default_factory=list)

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with stream and values.
        """
        return {
            "stream": self.stream,
            "values": list(self.values)
        }
