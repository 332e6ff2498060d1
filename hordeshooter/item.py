"""Experience pickups dropped by defeated enemies."""

from dataclasses import dataclass, field

ITEM_FRAMES = 2


@dataclass
class Item:
    """A collectible item with a two-frame idle animation."""

    x: float
    y: float
    animation_time: float = field(default=0.0, init=False)
    switch_time: float = field(default=0.25, init=False)
    current_frame: int = field(default=0, init=False)
    collected: bool = field(default=False, init=False)

    def update(self, frame_time: float) -> None:
        """Advance the animation clock, switching frames when due."""
        self.animation_time += frame_time
        if self.animation_time >= self.switch_time:
            self.animation_time = 0.0
            self.current_frame = (self.current_frame + 1) % ITEM_FRAMES

    def collect(self) -> None:
        """Mark the item as picked up."""
        self.collected = True