# domain/pointset/cursors.py
"""
Forward cursors over point storage.

Query results and full traversals are all exposed through PointCursor, so
callers never see whether the points come from a live ordered container, a
materialized snapshot list or a live kd-tree. A PointRange pairs two cursors
the way a begin/end iterator pair does.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, List, Optional

from domain.geometry.point import Point

if TYPE_CHECKING:
    from sortedcontainers import SortedKeyList
    from domain.pointset.base import PointSet
    from domain.pointset.kdtree import KdNode


class PointCursor(ABC):
    """
    Position inside a sequence of points.

    A cursor is also a Python iterator: next() returns the current point and
    advances. Cursors over live storage become invalid once the owning point
    set is mutated and raise RuntimeError when used afterwards.

    Cursors compare equal when they share storage and position. That
    position changes as the cursor advances, so cursors are deliberately
    unhashable.
    """

    @property
    @abstractmethod
    def exhausted(self) -> bool:
        """True once the cursor has moved past the last point."""

    @property
    @abstractmethod
    def point(self) -> Point:
        """The point under the cursor; IndexError if exhausted."""

    @abstractmethod
    def advance(self) -> None:
        """Move to the next point."""

    @abstractmethod
    def clone(self) -> "PointCursor":
        """Independent cursor at the same position."""

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        if self.exhausted:
            raise StopIteration
        point = self.point
        self.advance()
        return point


class _LiveCursor(PointCursor):
    """Cursor bound to a mutable point set."""

    def __init__(self, owner: "PointSet") -> None:
        self._owner = owner
        self._version = owner.modification_count

    def _check_valid(self) -> None:
        if self._owner.modification_count != self._version:
            raise RuntimeError("point set changed during iteration")


class ContainerCursor(_LiveCursor):
    """Cursor over the sorted container of an OrderedPointSet."""

    def __init__(self, owner: "PointSet", container: "SortedKeyList", index: int = 0) -> None:
        super().__init__(owner)
        self._container = container
        self._index = index

    @property
    def exhausted(self) -> bool:
        self._check_valid()
        return self._index >= len(self._container)

    @property
    def point(self) -> Point:
        if self.exhausted:
            raise IndexError("cursor is exhausted")
        return self._container[self._index]

    def advance(self) -> None:
        self._check_valid()
        self._index += 1

    def clone(self) -> "ContainerCursor":
        cursor = ContainerCursor(self._owner, self._container, self._index)
        cursor._version = self._version
        return cursor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContainerCursor):
            return NotImplemented
        return self._container is other._container and self._index == other._index


class SequenceCursor(PointCursor):
    """Cursor over a materialized list of points, such as a query result."""

    def __init__(self, points: List[Point], index: int = 0) -> None:
        self._points = points
        self._index = index

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._points)

    @property
    def point(self) -> Point:
        if self.exhausted:
            raise IndexError("cursor is exhausted")
        return self._points[self._index]

    def advance(self) -> None:
        self._index += 1

    def clone(self) -> "SequenceCursor":
        return SequenceCursor(self._points, self._index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return self._points is other._points and self._index == other._index


class TreeCursor(_LiveCursor):
    """
    Cursor over a live kd-tree in in-order sequence.

    Holds only the current node; advancing follows child and parent links,
    so a traversal allocates nothing. The end position is the None node.
    """

    def __init__(self, owner: "PointSet", node: Optional["KdNode"]) -> None:
        super().__init__(owner)
        self._node = node

    @property
    def exhausted(self) -> bool:
        self._check_valid()
        return self._node is None

    @property
    def point(self) -> Point:
        if self.exhausted:
            raise IndexError("cursor is exhausted")
        return self._node.point

    def advance(self) -> None:
        self._check_valid()
        if self._node is not None:
            self._node = self._node.successor()

    def clone(self) -> "TreeCursor":
        cursor = TreeCursor(self._owner, self._node)
        cursor._version = self._version
        return cursor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeCursor):
            return NotImplemented
        return self._owner is other._owner and self._node is other._node


class PointRange:
    """
    Half-open range of points between two cursors.

    Iteration starts from a copy of the first cursor, so a range can be
    walked any number of times while its storage is unchanged.
    """

    def __init__(self, first: PointCursor, last: PointCursor) -> None:
        self.first = first
        self.last = last

    @classmethod
    def of(cls, points: List[Point]) -> "PointRange":
        """Range over the whole of a materialized list."""
        return cls(SequenceCursor(points), SequenceCursor(points, len(points)))

    def empty(self) -> bool:
        return self.first == self.last

    def __iter__(self) -> Iterator[Point]:
        cursor = self.first.clone()
        while cursor != self.last:
            yield cursor.point
            cursor.advance()

    def __repr__(self) -> str:
        return f"PointRange([{', '.join(str(p) for p in self)}])"
