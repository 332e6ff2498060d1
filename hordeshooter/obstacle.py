"""Static map obstacles."""

from dataclasses import dataclass


@dataclass
class Obstacle:
    """An axis-aligned rectangle that blocks movement."""

    x: float
    y: float
    width: float
    height: float
    image_path: str = ""

    def overlaps(self, x: float, y: float, width: float, height: float) -> bool:
        """Return True when the given rectangle strictly overlaps this one."""
        return (
            x < self.x + self.width
            and x + width > self.x
            and y < self.y + self.height
            and y + height > self.y
        )