import pytest

from frechetkit.collection import Curves
from frechetkit.curve import Curve
from frechetkit.point import Point


def _zigzag(name):
    return Curve([(0, 0), (1, 2), (2, 0), (3, 2), (4, 0)], name=name)


def test_first_curve_fixes_dimensions():
    curves = Curves()
    curves.add(Curve([(0, 0), (1, 1)]))
    assert curves.dimensions == 2
    assert curves.number == 1
    assert len(curves) == 1


def test_wrong_dimensions_raise():
    curves = Curves()
    curves.add(Curve([(0, 0), (1, 1)]))
    with pytest.raises(ValueError):
        curves.add(Curve([(0, 0, 0), (1, 1, 1)]))
    assert curves.number == 1


def test_preset_dimensions_raise():
    curves = Curves(3)
    with pytest.raises(ValueError):
        curves.add(Curve([(0, 0), (1, 1)]))


def test_m_tracks_largest_complexity():
    curves = Curves()
    curves.add(Curve([(0, 0), (1, 1), (2, 2)]))
    curves.add(Curve([(0, 0), (1, 1)]))
    assert curves.m == 3


def test_indexing_and_iteration():
    a = Curve([(0, 0), (1, 1)], name="a")
    b = Curve([(2, 2), (3, 3)], name="b")
    curves = Curves()
    curves.add(a)
    curves.add(b)
    assert curves[1] is b
    assert [c.name for c in curves] == ["a", "b"]
    curves[0] = b
    assert curves[0] is b


def test_str_and_repr():
    curves = Curves()
    assert str(curves) == ""
    curves.add(Curve([(0, 0), (1, 1)]))
    assert str(curves) == "{[(0,0), (1,1)]}"
    assert repr(curves) == "frechetkit.Curves collection with 1 curves"


@pytest.mark.parametrize("approx", [False, True])
def test_simplify(approx):
    curves = Curves()
    curves.add(_zigzag("z1"))
    curves.add(_zigzag("z2"))
    result = curves.simplify(3, approx)
    assert result.number == 2
    assert result.m == 3
    assert result.dimensions == 2
    assert [c.name for c in result] == ["Simplification of z1", "Simplification of z2"]
    for simplified in result:
        assert simplified.complexity == 3
        assert simplified.front == Point((0, 0))
        assert simplified.back == Point((4, 0))


def test_simplify_leaves_original_untouched():
    curves = Curves()
    original = _zigzag("z")
    curves.add(original)
    curves.simplify(2)
    assert curves[0].complexity == 5
    assert curves[0].name == "z"