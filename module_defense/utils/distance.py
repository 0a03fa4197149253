"""Distance calculations for the play area."""

import math


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate straight-line distance between two points.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Euclidean distance between the two points

    Examples:
        >>> euclidean_distance(0, 0, 3, 4)
        5.0
    """
    return math.hypot(x2 - x1, y2 - y1)


def nearest(x: float, y: float, items):
    """Return the item closest to (x, y), or None for an empty iterable.

    Items need ``x`` and ``y`` attributes. Ties keep the first item seen.
    """
    best = None
    best_distance = math.inf
    for item in items:
        distance = euclidean_distance(x, y, item.x, item.y)
        if distance < best_distance:
            best = item
            best_distance = distance
    return best
