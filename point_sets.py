# point_sets.py
"""
2D point sets - main package module
"""
# Import main components to expose them at package level
from domain.geometry.point import Point
from domain.geometry.rectangle import Rectangle
from domain.pointset.base import PointSet
from domain.pointset.cursors import PointCursor, PointRange
from domain.pointset.kdtree import KdPointSet
from domain.pointset.ordered import OrderedPointSet
from models.point_file import format_points, load_point_set, load_points, parse_points

__version__ = "1.0"

# Make them available when someone does 'import point_sets'
__all__ = [
    'Point',
    'Rectangle',
    'PointSet',
    'PointCursor',
    'PointRange',
    'KdPointSet',
    'OrderedPointSet',
    'format_points',
    'load_point_set',
    'load_points',
    'parse_points',
]
