"""Polygonal curves: ordered sequences of points of one dimension."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .point import Point, Points


def _as_point(value: Point | Iterable[float]) -> Point:
    return value if isinstance(value, Point) else Point(value)


class Curve:
    """A named polygonal curve given by its vertices."""

    def __init__(
        self,
        points: Iterable[Point | Iterable[float]] = (),
        name: str = "unnamed curve",
    ) -> None:
        self.name = name
        self._points: list[Point] = []
        for point in points:
            self.append(point)

    def _check(self, point: Point) -> None:
        if self._points and point.dimensions != self.dimensions:
            raise ValueError(
                f"Wrong number of dimensions; expected {self.dimensions} "
                f"dimensions and got {point.dimensions} dimensions."
            )

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __setitem__(self, index: int, point: Point | Iterable[float]) -> None:
        point = _as_point(point)
        if len(self._points) > 1 or index not in (0, -1):
            self._check(point)
        self._points[index] = point

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    @property
    def complexity(self) -> int:
        """Number of vertices."""
        return len(self._points)

    @property
    def dimensions(self) -> int:
        """Dimension of the vertices; zero for an empty curve."""
        return self._points[0].dimensions if self._points else 0

    @property
    def front(self) -> Point:
        """The first vertex."""
        if not self._points:
            raise IndexError("empty curve has no front")
        return self._points[0]

    @property
    def back(self) -> Point:
        """The last vertex."""
        if not self._points:
            raise IndexError("empty curve has no back")
        return self._points[-1]

    def append(self, point: Point | Iterable[float]) -> None:
        """Add a vertex at the end; its dimension must match the curve's."""
        point = _as_point(point)
        self._check(point)
        self._points.append(point)

    def subcurve(self, start: int, end: int) -> Curve:
        """The curve through vertices ``start`` to ``end``, both included."""
        if not 0 <= start <= end < len(self._points):
            raise IndexError(
                f"invalid subcurve [{start}, {end}] of a curve with "
                f"{len(self._points)} vertices"
            )
        return Curve(self._points[start : end + 1], self.name)

    def centroid(self) -> Point:
        """Mean of the vertices; a zero-dimensional point if empty."""
        return Points(self.dimensions, self._points).centroid()

    def __str__(self) -> str:
        body = "[" + ", ".join(str(p) for p in self._points) + "]" if self._points else ""
        return f"{self.name}\n{body}"

    def __repr__(self) -> str:
        return (
            f"frechetkit.Curve '{self.name}' of complexity {self.complexity} "
            f"and {self.dimensions} dimensions"
        )