"""Regular grids of points around a centre."""

from __future__ import annotations

import itertools
import math

from .point import Point, Points


class Grid:
    """A set of grid points."""

    def __init__(self, points: Points) -> None:
        self._points = points

    @property
    def points(self) -> Points:
        return self._points

    @classmethod
    def build_cube_grid(cls, p: Point, width: float, edge_length: float) -> Grid:
        """Grid of spacing ``width`` filling a cube of half edge ``edge_length`` around ``p``.

        Each axis gets ``2 * ceil(edge_length / width)`` offsets; the first
        coordinate varies fastest.
        """
        half = math.ceil(edge_length / width)
        offsets = [-(half - i) * width for i in range(half)] + [
            i * width for i in range(half)
        ]
        dimensions = p.dimensions
        grid = Points(dimensions)
        for combo in itertools.product(offsets, repeat=dimensions):
            grid.add(Point(reversed(combo)) + p)
        return cls(grid)