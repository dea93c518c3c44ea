#!/usr/bin/env python3
"""
Point set query harness.

Loads a point file into both point set implementations and either reports
the nearest point to a query point or cross-checks a rectangle range query.

    python main.py points.dat 1 1          # nearest to (1, 1)
    python main.py points.dat 1 1 3 5      # range inside (1, 1)-(3, 5)
"""
__version__ = "1.0"

import argparse
import logging
import sys
from typing import List, Optional

from domain.geometry.point import Point
from domain.geometry.rectangle import Rectangle
from domain.pointset.kdtree import KdPointSet
from domain.pointset.ordered import OrderedPointSet
from models.point_file import format_points, load_points
from utils.constants import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query a point file with the ordered-set and kd-tree point sets.",
        epilog="Example: main.py test/etc/my_test.dat 1 1 3 5",
    )
    parser.add_argument("filename", help="file of whitespace-separated x y pairs")
    parser.add_argument("coords", nargs="+", type=float,
                        help="x y of a query point, or xmin ymin xmax ymax of a rectangle")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run_nearest(points: List[Point], target: Point) -> int:
    for label, point_set in (("ordered", OrderedPointSet(points)), ("kd-tree", KdPointSet(points))):
        found = point_set.nearest(target)
        print(f"{label} result: " + (format_points([found]) if found is not None else "none\n"), end="")
    return 0


def run_range(points: List[Point], rect: Rectangle) -> int:
    ordered = sorted(OrderedPointSet(points).range(rect), key=lambda p: (p.x, p.y))
    kd = sorted(KdPointSet(points).range(rect), key=lambda p: (p.x, p.y))
    print("Comparing result from ordered set and kd-tree:")
    for i, (expected, actual) in enumerate(zip(ordered, kd), start=1):
        if expected != actual:
            print(f"Difference in results from ordered set and kd-tree found in point {i}:")
            print(format_points([expected, actual]), end="")
            return 1
        print(f"{i}) " + format_points([expected]), end="")
    if len(ordered) != len(kd):
        print(f"Result sizes differ: ordered set {len(ordered)}, kd-tree {len(kd)}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the command-line harness."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.coords) not in (2, 4):
        parser.error("provide either 2 coordinates (a point) or 4 (a rectangle)")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else DEFAULT_LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    points = load_points(args.filename)
    try:
        if len(args.coords) == 2:
            return run_nearest(points, Point(x=args.coords[0], y=args.coords[1]))
        return run_range(points, Rectangle.from_bounds(*args.coords))
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
