# domain/pointset/kdtree.py
"""
Two-dimensional kd-tree point set.

Each node splits the plane on x at even depths and on y at odd depths.
Points whose coordinate on the node axis is less than or equal to the node's
go left, strictly greater go right. Nodes own their children and refer to
their parent through a weak reference, which is what in-order traversal and
copying use to walk back up the tree.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional
import logging
import math
import weakref

import numpy as np

from domain.geometry.constants import EPSILON
from domain.geometry.point import Point
from domain.geometry.rectangle import Rectangle
from domain.pointset.base import PointSet
from domain.pointset.cursors import PointRange, TreeCursor
from domain.pointset.ordered import OrderedPointSet
from utils.constants import REBALANCE_DEPTH_FACTOR

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class KdNode:
    """A kd-tree node; depth parity fixes the splitting axis."""
    point: Point
    depth: int = 0
    left: Optional["KdNode"] = None
    right: Optional["KdNode"] = None
    _parent: Optional[weakref.ref] = field(default=None, init=False, repr=False)

    @property
    def parent(self) -> Optional["KdNode"]:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Optional["KdNode"]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def axis(self) -> int:
        return self.depth % 2

    def split_value(self) -> float:
        return self.point.coordinate(self.axis)

    def routes_left(self, point: Point) -> bool:
        """Ties go left."""
        return point.coordinate(self.axis) <= self.split_value()

    def attach(self, point: Point, left: bool) -> "KdNode":
        """Create a child one level deeper on the given side."""
        child = KdNode(point=point, depth=self.depth + 1)
        child.parent = self
        if left:
            self.left = child
        else:
            self.right = child
        return child

    def leftmost(self) -> "KdNode":
        node = self
        while node.left is not None:
            node = node.left
        return node

    def successor(self) -> Optional["KdNode"]:
        """
        In-order successor computed from child and parent links only.

        Returns None when this is the last node. Climbing through a chain of
        right children until the root ends the traversal rather than
        wrapping back to the root.
        """
        if self.right is not None:
            return self.right.leftmost()
        node = self
        parent = node.parent
        while parent is not None and parent.right is node:
            node = parent
            parent = parent.parent
        return parent


class KdPointSet(PointSet):
    """
    Point set stored in a kd-tree.

    Range and nearest-neighbour searches prune subtrees that cannot hold a
    match. Incremental insertion can unbalance the tree; once the deepest
    node exceeds REBALANCE_DEPTH_FACTOR * ln(size) the tree is rebuilt from
    its points by median partitioning. Tied coordinates can leave even a
    fresh build deeper than floor(log2(size)); that excess is added to the
    threshold so a rebuild that cannot help is not repeated on every put.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        super().__init__()
        self._root: Optional[KdNode] = None
        self._size = 0
        self._max_depth = 0
        self._build_excess = 0
        # Tolerant duplicates are dropped exactly as OrderedPointSet drops them
        points = list(OrderedPointSet(points))
        if points:
            self._build(points)

    @property
    def root(self) -> Optional[KdNode]:
        return self._root

    @property
    def max_depth(self) -> int:
        """Deepest node depth reached since the last rebuild."""
        return self._max_depth

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._root is None

    def _build(self, points: List[Point]) -> None:
        """Replace the tree with a balanced one holding distinct points."""
        self._root = self._build_subtree(points, 0)
        self._mark_modified()
        # Depth a fresh build needs beyond floor(log2(size)) because of tied coordinates
        self._build_excess = max(0, self._max_depth - int(math.log2(self._size))) if self._size else 0

    def _build_subtree(self, points: List[Point], depth: int) -> Optional[KdNode]:
        if not points:
            return None
        axis = depth % 2
        coords = np.fromiter((p.coordinate(axis) for p in points), dtype=float, count=len(points))
        middle = len(points) // 2
        # argpartition finds the median without a full sort
        median_index = int(np.argpartition(coords, middle)[middle])
        split = coords[median_index]
        # Every coordinate tied with the split goes left, as insertion routes it
        goes_left = coords <= split
        goes_left[median_index] = False
        node = KdNode(point=points[median_index], depth=depth)
        self._size += 1
        self._max_depth = max(self._max_depth, depth)
        for child_points, left in (([points[i] for i in np.flatnonzero(goes_left)], True),
                                   ([points[i] for i in np.flatnonzero(coords > split)], False)):
            child = self._build_subtree(child_points, depth + 1)
            if child is not None:
                child.parent = node
                if left:
                    node.left = child
                else:
                    node.right = child
        return node

    def _insert(self, point: Point) -> bool:
        """Add point without rebalancing; False if an equal point exists."""
        if self._find(point) is not None:
            return False
        if self._root is None:
            self._root = KdNode(point=point)
            self._size += 1
            self._mark_modified()
            return True
        node = self._root
        while True:
            goes_left = node.routes_left(point)
            child = node.left if goes_left else node.right
            if child is None:
                child = node.attach(point, goes_left)
                self._max_depth = max(self._max_depth, child.depth)
                self._size += 1
                self._mark_modified()
                return True
            node = child

    def put(self, point: Point) -> None:
        self._insert(point)
        self._rebalance()

    def _rebalance(self) -> None:
        threshold = REBALANCE_DEPTH_FACTOR * math.log(self._size) + self._build_excess
        if self._max_depth > threshold:
            points = list(self)
            logger.debug(f"Rebuilding kd-tree of {self._size} points at depth {self._max_depth}")
            self._root = None
            self._size = 0
            self._max_depth = 0
            self._build(points)

    def _find(self, point: Point) -> Optional[KdNode]:
        """
        Locate a node holding a point equal to point.

        An equal point may differ by less than EPSILON on the splitting
        axis and so sit on the other side of a split; when point is that
        close to a node's split value both subtrees are searched.
        """
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.point == point:
                return node
            offset = point.coordinate(node.axis) - node.split_value()
            if node.right is not None and offset > -EPSILON:
                stack.append(node.right)
            if node.left is not None and offset < EPSILON:
                stack.append(node.left)
        return None

    def contains(self, point: Point) -> bool:
        return self._find(point) is not None

    def range(self, rect: Rectangle) -> PointRange:
        in_rect: List[Point] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if rect.contains(node.point):
                in_rect.append(node.point)
            value = node.split_value()
            # Right is pushed first so the left subtree is visited first
            if node.right is not None and rect.reaches_max(node.axis, value):
                stack.append(node.right)
            if node.left is not None and rect.reaches_min(node.axis, value):
                stack.append(node.left)
        logger.debug(f"Range {rect} matched {len(in_rect)} of {self._size} points")
        return PointRange.of(in_rect)

    def _nearest_point(self, point: Point) -> Optional[Point]:
        if self._root is None:
            return None
        best = self._root.point
        best_distance = best.distance(point)
        # Entries are (node, distance from query to the parent's splitting line);
        # None marks the near side, which is always searched.
        stack = [(self._root, None)]
        while stack:
            node, plane_distance = stack.pop()
            if plane_distance is not None and plane_distance >= best_distance:
                continue
            distance = node.point.distance(point)
            if distance < best_distance:
                best, best_distance = node.point, distance
            if distance == 0:
                break
            delta = node.split_value() - point.coordinate(node.axis)
            near, far = (node.left, node.right) if delta > 0 else (node.right, node.left)
            # The far side is checked only after the near side has been searched
            if far is not None:
                stack.append((far, abs(delta)))
            if near is not None:
                stack.append((near, None))
        return best

    def begin(self) -> TreeCursor:
        return TreeCursor(self, self._root.leftmost() if self._root is not None else None)

    def end(self) -> TreeCursor:
        return TreeCursor(self, None)

    def copy(self) -> "KdPointSet":
        """Deep copy with a fresh node graph and re-derived parent links."""
        duplicate = KdPointSet()
        duplicate._size = self._size
        duplicate._max_depth = self._max_depth
        duplicate._build_excess = self._build_excess
        if self._root is None:
            return duplicate
        duplicate._root = KdNode(point=self._root.point, depth=self._root.depth)
        stack = [(self._root, duplicate._root)]
        while stack:
            source, target = stack.pop()
            for child, left in ((source.left, True), (source.right, False)):
                if child is not None:
                    stack.append((child, target.attach(child.point, left)))
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo) -> "KdPointSet":
        return self.copy()
