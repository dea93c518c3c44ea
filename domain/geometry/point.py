# domain/geometry/point.py
from pydantic import Field, field_validator
import math
from domain.geometry.constants import EPSILON
from utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Equality is tolerant: two points are equal when both coordinates differ
    by less than EPSILON, which absorbs round-trip error from parsing and
    arithmetic. The relational operators compare each axis separately and
    combine the results with OR, so they do not form a total order; point
    sets never use them as a sort key.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    def distance(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def coordinate(self, axis: int) -> float:
        """Return x for axis 0 and y for axis 1."""
        return self.y if axis else self.x

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __lt__(self, other: "Point") -> bool:
        return self.x < other.x or self.y < other.y

    def __gt__(self, other: "Point") -> bool:
        return self.x > other.x or self.y > other.y

    def __le__(self, other: "Point") -> bool:
        return not self > other

    def __ge__(self, other: "Point") -> bool:
        return not self < other

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        """String representation of the point."""
        return self.format_as_tuple()
