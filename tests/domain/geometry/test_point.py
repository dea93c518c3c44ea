import pytest
import math
from domain.geometry.constants import EPSILON
from domain.geometry.point import Point


class TestPoint:
    def test_create_point(self):
        p = Point(x=1.0, y=2.0)
        assert p.x == 1.0
        assert p.y == 2.0

    def test_integer_coordinates_become_floats(self):
        p = Point(x=1, y=2)
        assert isinstance(p.x, float)
        assert isinstance(p.y, float)

    def test_invalid_coordinates(self):
        with pytest.raises(ValueError):
            Point(x=float('nan'), y=1.0)
        with pytest.raises(ValueError):
            Point(x=1.0, y=float('inf'))

    def test_distance(self):
        p1 = Point(x=0.0, y=0.0)
        p2 = Point(x=3.0, y=4.0)
        assert p1.distance(p2) == 5.0
        assert p2.distance(p1) == 5.0
        assert Point(x=1.0, y=1.0).distance(p1) == pytest.approx(math.sqrt(2))

    def test_coordinate_by_axis(self):
        p = Point(x=3.0, y=7.0)
        assert p.coordinate(0) == 3.0
        assert p.coordinate(1) == 7.0

    def test_tolerant_equality(self):
        p1 = Point(x=0.0, y=0.0)
        p2 = Point(x=EPSILON / 2, y=-EPSILON / 2)
        p3 = Point(x=EPSILON * 2, y=0.0)

        assert p1 == p2
        assert not p1 != p2
        assert p1 != p3
        assert Point(x=0.1 + 0.2, y=1.0) == Point(x=0.3, y=1.0)

    def test_equality_with_other_types(self):
        assert Point(x=1.0, y=2.0) != (1.0, 2.0)

    def test_relational_operators_combine_axes_with_or(self):
        a = Point(x=0.0, y=1.0)
        b = Point(x=1.0, y=0.0)

        # Not a total order: each point is "less" than the other on one axis
        assert a < b and b < a
        assert a > b and b > a
        assert not a <= b
        assert not a >= b

    def test_relational_operators_on_dominating_points(self):
        low = Point(x=0.0, y=0.0)
        high = Point(x=1.0, y=1.0)
        assert low < high
        assert not low > high
        assert low <= high
        assert high >= low
        assert low <= low and low >= low

    def test_hash_matches_for_identical_coordinates(self):
        assert hash(Point(x=1.5, y=2.5)) == hash(Point(x=1.5, y=2.5))
        assert len({Point(x=1.0, y=1.0), Point(x=1.0, y=1.0)}) == 1

    def test_with_changes(self):
        p = Point(x=1.0, y=2.0)
        moved = p.with_changes(y=5.0)

        assert moved == Point(x=1.0, y=5.0)
        assert p.y == 2.0

        with pytest.raises(ValueError):
            p.with_changes(z=1.0)
        with pytest.raises(ValueError):
            p.with_changes(x=float('nan'))

    def test_immutability(self):
        p = Point(x=1.0, y=2.0)

        with pytest.raises(Exception):
            p.x = 3.0  # Should not be able to modify after creation

    def test_string_representation(self):
        p = Point(x=1.0, y=2.0)
        assert str(p) == "(1.0, 2.0)"
        assert p.format_as_tuple() == "(1.0, 2.0)"
