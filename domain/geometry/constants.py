# domain/geometry/constants.py
"""Constants for geometric calculations."""
import sys

# Tolerance for coordinate comparisons (machine epsilon for doubles)
EPSILON = sys.float_info.epsilon
