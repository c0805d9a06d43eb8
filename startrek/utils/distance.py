"""Distance and course calculations on the sector grid."""

import math
from typing import Tuple


def chebyshev_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Calculate Chebyshev distance between two points.

    Chebyshev distance is the maximum absolute difference of coordinates,
    so every one of the eight surrounding sectors is at distance 1.

    Examples:
        >>> chebyshev_distance(3, 3, 4, 4)
        1
        >>> chebyshev_distance(0, 0, 5, 2)
        5
    """
    return max(abs(x2 - x1), abs(y2 - y1))


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Straight-line distance between two sector coordinates."""
    return math.hypot(x2 - x1, y2 - y1)


def is_adjacent(x1: int, y1: int, x2: int, y2: int) -> bool:
    """True if the points touch, diagonals included, but are not the same point."""
    return chebyshev_distance(x1, y1, x2, y2) == 1


def course_vector(course: float) -> Tuple[float, float]:
    """Convert a course into a unit direction vector.

    Course 1 points north (toward smaller y) and every whole step rotates
    45 degrees clockwise, so 3 is east, 5 is south and 7 is west. Course 9
    wraps back to north. Fractional courses interpolate the bearing.

    Args:
        course: Course value in [1.0, 9.0]

    Returns:
        (dx, dy) unit vector in sector coordinates

    Examples:
        >>> course_vector(3)
        (1.0, 0.0)
    """
    radians = math.radians((course - 1) * 45 - 90)
    dx = math.cos(radians)
    dy = math.sin(radians)
    # Snap floating point noise so cardinal courses stay exact
    return round(dx, 12) + 0.0, round(dy, 12) + 0.0


def course_between(x1: float, y1: float, x2: float, y2: float) -> float:
    """Course from one point to another, inverse of course_vector.

    Returns:
        Course in [1.0, 9.0)
    """
    bearing = math.degrees(math.atan2(y2 - y1, x2 - x1)) + 90
    bearing %= 360
    return bearing / 45 + 1


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
