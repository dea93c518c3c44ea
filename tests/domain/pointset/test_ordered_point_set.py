import copy
import math
import pytest
from domain.geometry.point import Point
from domain.geometry.rectangle import Rectangle
from domain.pointset.ordered import OrderedPointSet


@pytest.fixture
def sample_points():
    return [Point(x=1, y=1), Point(x=2, y=3), Point(x=4, y=4), Point(x=5, y=1)]


@pytest.fixture
def point_set(sample_points):
    return OrderedPointSet(sample_points)


class TestOrderedPointSet:
    def test_empty_set(self):
        point_set = OrderedPointSet()
        assert point_set.empty()
        assert point_set.size() == 0
        assert len(point_set) == 0
        assert list(point_set) == []

    def test_put_and_contains(self):
        point_set = OrderedPointSet()
        point_set.put(Point(x=1.0, y=2.0))

        assert not point_set.empty()
        assert point_set.size() == 1
        assert point_set.contains(Point(x=1.0, y=2.0))
        assert Point(x=1.0, y=2.0) in point_set
        assert not point_set.contains(Point(x=2.0, y=1.0))
        assert "not a point" not in point_set

    def test_put_is_idempotent(self, point_set):
        point_set.put(Point(x=1.0, y=1.0))
        point_set.put(Point(x=1.0 + 1e-17, y=1.0))
        assert point_set.size() == 4

    def test_contains_is_tolerant(self):
        point_set = OrderedPointSet([Point(x=0.1 + 0.2, y=0.0)])
        assert point_set.contains(Point(x=0.3, y=0.0))

    def test_contains_tolerant_match_among_neighbours(self):
        # (0, 6) and (1e-17, 0) sort between the stored (0, 5) and the query
        point_set = OrderedPointSet([
            Point(x=0.0, y=5.0),
            Point(x=0.0, y=6.0),
            Point(x=1e-17, y=0.0),
        ])
        assert point_set.contains(Point(x=1e-17, y=5.0))
        assert point_set.size() == 3

    def test_iterates_in_x_then_y_order(self):
        point_set = OrderedPointSet([
            Point(x=2, y=1), Point(x=1, y=5), Point(x=1, y=2), Point(x=0, y=9),
        ])
        assert [(p.x, p.y) for p in point_set] == [(0, 9), (1, 2), (1, 5), (2, 1)]

    def test_range(self, point_set):
        result = point_set.range(Rectangle.from_bounds(0, 0, 3, 3))
        assert list(result) == [Point(x=1, y=1), Point(x=2, y=3)]

    def test_range_includes_boundary(self, point_set):
        result = point_set.range(Rectangle.from_bounds(4, 4, 5, 5))
        assert list(result) == [Point(x=4, y=4)]

    def test_range_without_matches(self, point_set):
        assert point_set.range(Rectangle.from_bounds(10, 10, 20, 20)).empty()

    def test_range_is_a_snapshot(self, point_set):
        result = point_set.range(Rectangle.from_bounds(0, 0, 3, 3))
        point_set.put(Point(x=1.5, y=1.5))
        assert len(list(result)) == 2

    def test_nearest(self, point_set):
        nearest = point_set.nearest(Point(x=0, y=0))
        assert nearest == Point(x=1, y=1)
        assert nearest.distance(Point(x=0, y=0)) == pytest.approx(math.sqrt(2))

    def test_nearest_on_empty_set(self):
        assert OrderedPointSet().nearest(Point(x=0, y=0)) is None

    def test_nearest_tie_goes_to_first_in_order(self):
        point_set = OrderedPointSet([Point(x=1, y=0), Point(x=-1, y=0)])
        assert point_set.nearest(Point(x=0, y=0)) == Point(x=-1, y=0)

    def test_k_nearest(self, point_set):
        result = point_set.nearest(Point(x=0, y=0), 2)
        assert set(result) == {Point(x=1, y=1), Point(x=2, y=3)}

    def test_k_nearest_zero(self, point_set):
        result = point_set.nearest(Point(x=0, y=0), 0)
        assert result.empty()
        assert list(result) == []

    def test_k_nearest_covers_whole_set(self, point_set, sample_points):
        assert list(point_set.nearest(Point(x=0, y=0), 4)) == sample_points
        assert list(point_set.nearest(Point(x=0, y=0), 100)) == sample_points

    def test_k_nearest_negative(self, point_set):
        with pytest.raises(ValueError):
            point_set.nearest(Point(x=0, y=0), -1)

    def test_copy_is_independent(self, point_set):
        duplicate = copy.deepcopy(point_set)
        duplicate.put(Point(x=0, y=0))

        assert duplicate.size() == 5
        assert point_set.size() == 4
        assert not point_set.contains(Point(x=0, y=0))
        assert list(point_set.copy()) == list(point_set)

    def test_repr(self, point_set):
        assert repr(point_set) == "OrderedPointSet(size=4)"
