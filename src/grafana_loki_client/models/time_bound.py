"""
Time bound models for the start/end parameters of Loki queries.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Timestamp:
    """
    An absolute point in time.

    Attributes:
        nanoseconds: Unix timestamp in nanoseconds.
    """

    nanoseconds: int


@dataclass(frozen=True)
class Duration:
    """
    A point in time relative to now (e.g. "2h" means two hours ago).

    Attributes:
        expression: Duration string made of a magnitude and a unit.
    """

    expression: str


TimeBound = Union[Timestamp, Duration]
