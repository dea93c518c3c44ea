# domain/pointset/base.py
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, overload

from domain.geometry.point import Point
from domain.geometry.rectangle import Rectangle
from domain.pointset.cursors import PointCursor, PointRange


def select_k_nearest(points: Iterable[Point], target: Point, k: int) -> List[Point]:
    """
    Collect k points closest to target in a single pass.

    The buffer fills with the first k points; afterwards each point replaces
    the current worst candidate if it is strictly closer. The result is not
    ordered by distance.
    """
    neighbours: List[Point] = []
    distances: List[float] = []
    for point in points:
        distance = point.distance(target)
        if len(neighbours) < k:
            neighbours.append(point)
            distances.append(distance)
            continue
        worst = 0
        for index in range(1, k):
            if distances[index] >= distances[worst]:
                worst = index
        if distance < distances[worst]:
            neighbours[worst] = point
            distances[worst] = distance
    return neighbours


class PointSet(ABC):
    """
    Set of unique 2D points with membership, range and nearest queries.

    Points are unique under the tolerant equality of Point; putting a point
    that is already present changes nothing. Range and k-nearest results are
    returned as PointRange objects, the single nearest point as an optional.
    """

    def __init__(self) -> None:
        self._modification_count = 0

    @property
    def modification_count(self) -> int:
        """Number of mutations so far; live cursors compare against it."""
        return self._modification_count

    def _mark_modified(self) -> None:
        self._modification_count += 1

    @abstractmethod
    def size(self) -> int:
        """Number of points in the set."""

    def empty(self) -> bool:
        return self.size() == 0

    @abstractmethod
    def put(self, point: Point) -> None:
        """Insert a point; no-op if an equal point is present."""

    @abstractmethod
    def contains(self, point: Point) -> bool:
        """Check whether an equal point is present."""

    @abstractmethod
    def range(self, rect: Rectangle) -> PointRange:
        """All points inside rect, boundary included."""

    @abstractmethod
    def begin(self) -> PointCursor:
        """Live cursor at the first point of a full traversal."""

    @abstractmethod
    def end(self) -> PointCursor:
        """Live cursor one past the last point of a full traversal."""

    @abstractmethod
    def _nearest_point(self, point: Point) -> Optional[Point]:
        """Closest point to point, or None if the set is empty."""

    @overload
    def nearest(self, point: Point) -> Optional[Point]: ...

    @overload
    def nearest(self, point: Point, k: int) -> PointRange: ...

    def nearest(self, point, k=None):
        """
        Nearest neighbour query.

        Args:
            point: The query point
            k: If given, return up to k nearest points as a PointRange
               instead of the single closest point

        Returns:
            The closest point (None for an empty set), or a PointRange with
            the whole set when k >= size, nothing when k == 0, and otherwise
            exactly k points in no particular order

        Raises:
            ValueError: If k is negative
        """
        if k is None:
            return self._nearest_point(point)
        if k < 0:
            raise ValueError(f"k must not be negative, got {k}")
        if k >= self.size():
            return PointRange(self.begin(), self.end())
        if k == 0:
            return PointRange(self.begin(), self.begin())
        return PointRange.of(select_k_nearest(self, point, k))

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.contains(point)

    def __iter__(self) -> Iterator[Point]:
        return iter(PointRange(self.begin(), self.end()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"
