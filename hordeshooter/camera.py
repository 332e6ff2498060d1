"""A camera that follows the player inside the map bounds."""

from dataclasses import dataclass, field


@dataclass
class Camera:
    """Viewport of a fixed size whose offset tracks a point on the map."""

    width: float
    height: float
    offset_x: float = field(default=0.0, init=False)
    offset_y: float = field(default=0.0, init=False)
    bound_width: float = field(default=0.0, init=False)
    bound_height: float = field(default=0.0, init=False)

    def update(self, player_x: float, player_y: float) -> None:
        """Centre the view on the player, clamped to the map bounds."""
        offset_x = max(player_x - self.width / 2, 0.0)
        offset_y = max(player_y - self.height / 2, 0.0)
        self.offset_x = min(offset_x, self.bound_width - self.width)
        self.offset_y = min(offset_y, self.bound_height - self.height)

    def set_bounds(self, width: float, height: float) -> None:
        """Set the size of the area the camera may show."""
        self.bound_width = width
        self.bound_height = height