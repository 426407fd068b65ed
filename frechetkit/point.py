"""Points in Euclidean space and collections of equal-dimension points."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator

from .interval import Interval

_EPSILON = sys.float_info.epsilon


def near_eq(x: float, y: float) -> bool:
    """True if ``x`` and ``y`` agree up to relative machine epsilon."""
    return abs(x - y) <= min(abs(x), abs(y)) * _EPSILON


class Point:
    """An immutable point (or vector) with float coordinates."""

    __slots__ = ("_coords",)

    def __init__(self, coordinates: Iterable[float]) -> None:
        self._coords = tuple(float(c) for c in coordinates)

    @classmethod
    def zeros(cls, dimensions: int) -> Point:
        """The origin in the given number of dimensions."""
        return cls([0.0] * dimensions)

    @property
    def dimensions(self) -> int:
        return len(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __getitem__(self, index: int) -> float:
        return self._coords[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self) -> int:
        return hash(self._coords)

    def _pairs(self, other: Point) -> Iterator[tuple[float, float]]:
        if not isinstance(other, Point):
            raise TypeError(f"expected a Point, got {type(other).__name__}")
        if other.dimensions != self.dimensions:
            raise ValueError(
                f"Wrong number of dimensions; expected {self.dimensions} "
                f"dimensions and got {other.dimensions} dimensions."
            )
        return zip(self._coords, other._coords)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(a + b for a, b in self._pairs(other))

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(a - b for a, b in self._pairs(other))

    def __mul__(self, factor: float) -> Point:
        if isinstance(factor, Point):
            return NotImplemented
        return Point(c * factor for c in self._coords)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        if isinstance(divisor, Point):
            return NotImplemented
        return Point(c / divisor for c in self._coords)

    def dot(self, other: Point) -> float:
        """Scalar product with another point."""
        return sum(a * b for a, b in self._pairs(other))

    def dist_sqr(self, other: Point) -> float:
        """Squared Euclidean distance to another point."""
        return sum((a - b) * (a - b) for a, b in self._pairs(other))

    def dist(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.dist_sqr(other))

    @property
    def length_sqr(self) -> float:
        return sum(c * c for c in self._coords)

    @property
    def length(self) -> float:
        return math.sqrt(self.length_sqr)

    def line_segment_dist_sqr(self, p1: Point, p2: Point) -> float:
        """Squared distance to the segment from ``p1`` to ``p2``.

        A degenerate segment gives NaN; callers handle that case themselves.
        """
        u = p2 - p1
        denominator = u.dot(u)
        if denominator == 0:
            return math.nan
        param = (self - p1).dot(u) / denominator
        param = min(max(param, 0.0), 1.0)
        projection = p1 + u * param
        return projection.dist_sqr(self)

    def line_segment_dist(self, p1: Point, p2: Point) -> float:
        """Distance to the segment from ``p1`` to ``p2``."""
        return math.sqrt(self.line_segment_dist_sqr(p1, p2))

    def ball_intersection_interval(
        self, distance_sqr: float, line_start: Point, line_end: Point
    ) -> Interval:
        """Parameters in [0, 1] of the segment that lie within the ball around this point."""
        u = line_end - line_start
        v = self - line_start
        ulen_sqr = u.length_sqr
        vlen_sqr = v.length_sqr

        if near_eq(ulen_sqr, 0.0):
            return Interval(0.0, 1.0) if vlen_sqr <= distance_sqr else Interval()

        p = -2.0 * (u.dot(v) / ulen_sqr)
        q = vlen_sqr / ulen_sqr - distance_sqr / ulen_sqr
        discriminant = p * p / 4.0 - q
        if discriminant < 0:
            return Interval()

        root = math.sqrt(discriminant)
        middle = -p / 2.0
        r1, r2 = middle + root, middle - root
        return Interval(max(0.0, min(r1, r2)), min(1.0, max(r1, r2)))

    def __str__(self) -> str:
        if not self._coords:
            return ""
        return "(" + ",".join(f"{c:g}" for c in self._coords) + ")"

    def __repr__(self) -> str:
        return f"frechetkit.Point of {self.dimensions} dimensions"


class Points:
    """An ordered collection of points sharing one dimension."""

    def __init__(self, dimensions: int, points: Iterable[Point] | None = None) -> None:
        self._dimensions = dimensions
        self._points: list[Point] = []
        for point in points or ():
            self.add(point)

    def add(self, point: Point) -> None:
        """Append a point; its dimension must match the collection's."""
        if point.dimensions != self._dimensions:
            raise ValueError(
                f"Wrong number of dimensions; expected {self._dimensions} "
                f"dimensions and got {point.dimensions} dimensions."
            )
        self._points.append(point)

    def centroid(self) -> Point:
        """Arithmetic mean of the points; a zero-dimensional point if empty."""
        if not self._points:
            return Point.zeros(0)
        total = self._points[0]
        for point in self._points[1:]:
            total = total + point
        return total / len(self._points)

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def number(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __str__(self) -> str:
        if not self._points:
            return ""
        return "{" + ",".join(str(p) for p in self._points) + "}"

    def __repr__(self) -> str:
        return f"{len(self._points)} frechetkit.Points of {self._dimensions} dimensions"