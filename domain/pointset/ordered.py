# domain/pointset/ordered.py
from operator import attrgetter
from typing import Iterable, Optional
import logging

from sortedcontainers import SortedKeyList

from domain.geometry.constants import EPSILON
from domain.geometry.point import Point
from domain.geometry.rectangle import Rectangle
from domain.pointset.base import PointSet
from domain.pointset.cursors import ContainerCursor, PointRange

logger = logging.getLogger(__name__)

# Strict x-then-y order; Point's own relational operators are not a total order
_xy_key = attrgetter("x", "y")


class OrderedPointSet(PointSet):
    """
    Point set backed by a sorted container.

    Membership is logarithmic; range and nearest queries scan the points in
    x-then-y order.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        super().__init__()
        self._points = SortedKeyList(key=_xy_key)
        for point in points:
            self.put(point)

    def size(self) -> int:
        return len(self._points)

    def put(self, point: Point) -> None:
        if self.contains(point):
            return
        self._points.add(point)
        self._mark_modified()

    def contains(self, point: Point) -> bool:
        # Tolerantly equal points share x within EPSILON, so they sit in this key window
        window = self._points.irange_key(
            min_key=(point.x - EPSILON, float("-inf")),
            max_key=(point.x + EPSILON, float("inf")),
        )
        return any(candidate == point for candidate in window)

    def range(self, rect: Rectangle) -> PointRange:
        in_rect = [point for point in self._points if rect.contains(point)]
        logger.debug(f"Range {rect} matched {len(in_rect)} of {self.size()} points")
        return PointRange.of(in_rect)

    def begin(self) -> ContainerCursor:
        return ContainerCursor(self, self._points)

    def end(self) -> ContainerCursor:
        return ContainerCursor(self, self._points, len(self._points))

    def _nearest_point(self, point: Point) -> Optional[Point]:
        if not self._points:
            return None
        return min(self._points, key=point.distance)

    def copy(self) -> "OrderedPointSet":
        """Independent point set with the same points."""
        duplicate = OrderedPointSet()
        duplicate._points = self._points.copy()
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo) -> "OrderedPointSet":
        return self.copy()
