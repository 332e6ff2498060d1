"""Small geometric helpers shared by the game objects."""

import math


def check_collision(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    radius1: float = 1.0,
    radius2: float = 1.0,
) -> bool:
    """Return True when two circles touch or overlap."""
    distance = math.hypot(x2 - x1, y2 - y1)
    return distance <= radius1 + radius2