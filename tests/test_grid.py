import math

import pytest

from frechetkit.grid import Grid
from frechetkit.point import Point


def test_number_of_points():
    grid = Grid.build_cube_grid(Point([0, 0]), 1.0, 2.0)
    assert len(grid.points) == (2 * 2) ** 2
    grid3 = Grid.build_cube_grid(Point([1, 1, 1]), 0.5, 1.0)
    assert len(grid3.points) == (2 * 2) ** 3


def test_first_dimension_varies_fastest():
    grid = Grid.build_cube_grid(Point([0, 0]), 1.0, 1.0)
    assert [tuple(p) for p in grid.points] == [
        (-1.0, -1.0),
        (0.0, -1.0),
        (-1.0, 0.0),
        (0.0, 0.0),
    ]


def test_points_shifted_by_centre_and_distinct():
    centre = Point([10, -5])
    width, edge = 0.5, 1.2
    grid = Grid.build_cube_grid(centre, width, edge)
    half = math.ceil(edge / width)
    pts = list(grid.points)
    assert len(set(pts)) == len(pts)
    for point in pts:
        for c, base in zip(point, centre):
            assert base - half * width - 1e-9 <= c <= base + (half - 1) * width + 1e-9
    assert centre in pts


def test_grid_dimension_matches_centre():
    grid = Grid.build_cube_grid(Point([0, 0, 0]), 1.0, 1.0)
    assert grid.points.dimensions == 3


@pytest.mark.parametrize("edge", [0.1, 1.0, 3.0])
def test_spacing_along_first_axis(edge):
    grid = Grid.build_cube_grid(Point([0]), 1.0, edge)
    xs = [p[0] for p in grid.points]
    assert all(b - a == pytest.approx(1.0) for a, b in zip(xs, xs[1:]))