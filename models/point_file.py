"""
Plain-text point files: whitespace-separated coordinate pairs.
"""
from typing import Iterable, List, Type, TypeVar
import logging
import math

from domain.geometry.point import Point
from domain.pointset.base import PointSet

# Configure logging
logger = logging.getLogger(__name__)

S = TypeVar('S', bound=PointSet)


def parse_points(text: str) -> List[Point]:
    """
    Parse whitespace-separated numbers into points, two numbers per point.

    Parsing stops at the first token that is not a finite number, and a
    dangling odd number at the end is dropped; everything read before that
    point is kept.
    """
    tokens = text.split()
    points: List[Point] = []
    for i in range(0, len(tokens) - 1, 2):
        try:
            x, y = float(tokens[i]), float(tokens[i + 1])
        except ValueError:
            break
        if not (math.isfinite(x) and math.isfinite(y)):
            break
        points.append(Point(x=x, y=y))

    if 2 * len(points) < len(tokens):
        logger.warning(f"Input truncated after {len(points)} points at token {2 * len(points) + 1}")
    return points


def load_points(filepath: str) -> List[Point]:
    """
    Load points from a file.

    Args:
        filepath: Path to a file of coordinate pairs

    Returns:
        The parsed points; empty if the file cannot be read
    """
    try:
        with open(filepath, 'r') as file:
            points = parse_points(file.read())
    except OSError as e:
        logger.error(f"Error loading file: {str(e)}")
        return []
    logger.info(f"Loaded {len(points)} points from {filepath}")
    return points


def load_point_set(point_set_cls: Type[S], filepath: str) -> S:
    """Build a point set of the given class from a point file."""
    return point_set_cls(load_points(filepath))


def format_points(points: Iterable[Point]) -> str:
    """Render points one 'x y' pair per line."""
    return "".join(f"{point.x:g} {point.y:g}\n" for point in points)
