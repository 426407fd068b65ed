"""Closed parameter intervals within [0, 1]."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_EPSILON = sys.float_info.epsilon


@dataclass
class Interval:
    """A closed interval ``[begin, end]``; the default one is empty."""

    begin: float = 1.0
    end: float = 0.0

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.begin, self.end) < (other.begin, other.end)

    def is_empty(self) -> bool:
        """True if the interval is reversed or shorter than machine epsilon."""
        if self.end - self.begin >= _EPSILON:
            return self.begin > self.end
        return True

    def intersects(self, other: Interval) -> bool:
        """True if both intervals are non-empty and share a point."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.begin <= other.begin <= self.end
            or self.begin <= other.end <= self.end
            or (other.begin <= self.begin and other.end >= self.end)
        )

    def reset(self) -> None:
        """Make the interval empty again."""
        self.begin = 1.0
        self.end = 0.0

    def __str__(self) -> str:
        return f"({self.begin:g}, {self.end:g})"