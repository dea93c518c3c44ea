# domain/geometry/rectangle.py
from pydantic import Field, model_validator
from domain.geometry.point import Point
from domain.geometry.constants import EPSILON
from utils.base_model import ImmutableModel


class Rectangle(ImmutableModel):
    """
    Axis-aligned rectangle defined by its lower-left and upper-right corners.

    Containment includes the boundary and tolerates EPSILON on each axis,
    matching the tolerant equality of Point.
    """
    left_bottom: Point = Field(description="Lower-left corner")
    right_top: Point = Field(description="Upper-right corner")

    @model_validator(mode="after")
    def validate_corners(self):
        """Validate that the corners are not inverted on either axis."""
        if self.left_bottom.x > self.right_top.x or self.left_bottom.y > self.right_top.y:
            raise ValueError(
                f"Rectangle corners are inverted: {self.left_bottom} is not below-left of {self.right_top}"
            )
        return self

    @classmethod
    def from_bounds(cls, xmin: float, ymin: float, xmax: float, ymax: float) -> "Rectangle":
        """Create a rectangle from its coordinate bounds."""
        return cls(left_bottom=Point(x=xmin, y=ymin), right_top=Point(x=xmax, y=ymax))

    @property
    def xmin(self) -> float:
        return self.left_bottom.x

    @property
    def ymin(self) -> float:
        return self.left_bottom.y

    @property
    def xmax(self) -> float:
        return self.right_top.x

    @property
    def ymax(self) -> float:
        return self.right_top.y

    def axis_bounds(self, axis: int) -> tuple:
        """Return (min, max) of the rectangle along axis 0 (x) or 1 (y)."""
        if axis:
            return self.ymin, self.ymax
        return self.xmin, self.xmax

    def distance(self, point: Point) -> float:
        """
        Distance from a point to the rectangle along the violating axis.

        Zero when the point lies inside. When x is out of range the distance
        to the nearer vertical edge is returned, otherwise the distance to
        the nearer horizontal edge.
        """
        if self.xmin <= point.x <= self.xmax:
            if self.ymin <= point.y <= self.ymax:
                return 0.0
            return min(abs(point.y - self.ymin), abs(point.y - self.ymax))
        return min(abs(point.x - self.xmin), abs(point.x - self.xmax))

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside or on the boundary."""
        return self.reaches_min(0, point.x) and self.reaches_max(0, point.x) \
            and self.reaches_min(1, point.y) and self.reaches_max(1, point.y)

    def reaches_min(self, axis: int, value: float) -> bool:
        """Tolerant check that value is not below the minimum on axis."""
        return value - self.axis_bounds(axis)[0] > -EPSILON

    def reaches_max(self, axis: int, value: float) -> bool:
        """Tolerant check that value is not above the maximum on axis."""
        return self.axis_bounds(axis)[1] - value > -EPSILON

    def intersects(self, other: "Rectangle") -> bool:
        """Check whether two rectangles overlap, touching edges included."""
        # Each product is non-positive exactly when the intervals overlap
        if (other.xmax - self.xmin) * (other.xmin - self.xmax) <= 0:
            if (other.ymax - self.ymin) * (other.ymin - self.ymax) <= 0:
                return True
        return False

    def __str__(self) -> str:
        return f"Rectangle({self.left_bottom} -> {self.right_top})"
