"""
Log parsers turning raw Loki log lines into application records.
"""

import re
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class LogParser(ABC, Generic[T]):
    """
    Transforms raw log lines into caller-defined records.

    A parser may return more or fewer records than it was given: expanding
    one line into several records and dropping lines are both allowed. The
    order of the returned records is preserved by the client.

    Example:
        class LevelParser(LogParser[str]):
            def execute_on_logs(self, lines):
                return [line.split(" ", 1)[0] for line in lines]
    """

    @abstractmethod
    def execute_on_logs(self, lines: list[str]) -> list[T]:
        """
        Parse an ordered list of raw log lines.

        Args:
            lines: Raw log lines.

        Returns:
            Parsed records, in order.
        """
        raise NotImplementedError


class NoopLogParser(LogParser[str]):
    """Parser returning the raw lines unchanged."""

    def execute_on_logs(self, lines: list[str]) -> list[str]:
        return list(lines)


class RegexLogParser(LogParser[dict]):
    """
    Extracts the named groups of a regular expression from each line.

    Lines that do not match are dropped.

    Example:
        parser = RegexLogParser(r"(?P<level>\\w+) (?P<message>.*)")
        parser.execute_on_logs(["info started"])  # [{"level": "info", "message": "started"}]
    """

    def __init__(self, pattern: Union[str, re.Pattern]):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        if not self.pattern.groupindex:
            raise ValueError("RegexLogParser pattern must define at least one named group")

    def execute_on_logs(self, lines: list[str]) -> list[dict]:
        records = []
        for line in lines:
            match = self.pattern.search(line)
            if match is not None:
                records.append(match.groupdict())
        return records
