"""The player character: movement, health, experience and levelling."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from hordeshooter.obstacle import Obstacle

PLAYER_WIDTH = 20.0
PLAYER_HEIGHT = 25.0
RUN_FRAMES = 4
IDLE_FRAMES = 5
LEVEL_UP_EFFECT_FRAMES = 9
LEVEL_UP_EFFECT_DURATION = 1.5
EXPERIENCE_GROWTH = 1.5


@dataclass(frozen=True)
class PlayerState:
    """Snapshot of a player's state as sent to clients."""

    name: str
    id: int
    x: float
    y: float
    speed: float
    health: int
    level: int
    experience: int
    is_dead: bool


class Player:
    """A player that moves on key input and collides with obstacles."""

    width = PLAYER_WIDTH
    height = PLAYER_HEIGHT

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        animation_speed: float,
        on_level_up: Callable[[], None] | None = None,
    ) -> None:
        self.x = x
        self.y = y
        self.speed = speed
        self.animation_speed = animation_speed
        self.on_level_up = on_level_up
        self.current_frame = 0
        self.frame_time_accumulator = 0.0
        self.move_left = False
        self.move_right = False
        self.move_up = False
        self.move_down = False
        self.is_moving = False
        self.direction_left = False
        self.bound_width = 0.0
        self.bound_height = 0.0
        self.level = 1
        self.experience = 0
        self.experience_to_next_level = 100
        self.level_up_effect_time = 0.0
        self.level_up_effect_duration = LEVEL_UP_EFFECT_DURATION
        self.health = 4
        self.max_health = 4
        self.invincibility_time = 2.0
        self.current_invincibility_time = 0.0
        self.id = 0
        self.name = ""

    def set_input(
        self, move_left: bool, move_right: bool, move_up: bool, move_down: bool
    ) -> None:
        """Set which movement directions are currently held."""
        self.move_left = move_left
        self.move_right = move_right
        self.move_up = move_up
        self.move_down = move_down

    def process_key(self, key: str) -> None:
        """Move one step for a single W/A/S/D key, ignoring obstacles."""
        steps = {
            "W": (0.0, -self.speed),
            "A": (-self.speed, 0.0),
            "S": (0.0, self.speed),
            "D": (self.speed, 0.0),
        }
        if key in steps:
            self.move(*steps[key], ())

    def update(self, frame_time: float, obstacles: Iterable[Obstacle]) -> None:
        """Advance timers and animation, then move by the held directions."""
        obstacles = list(obstacles)
        self.frame_time_accumulator += frame_time
        self.level_up_effect_time -= frame_time
        self.update_invincibility(frame_time)

        if self.frame_time_accumulator >= self.animation_speed:
            frames = RUN_FRAMES if self.is_moving else IDLE_FRAMES
            self.current_frame = (self.current_frame + 1) % frames
            self.frame_time_accumulator = 0.0

        moves = (
            (self.move_left, -self.speed, 0.0),
            (self.move_right, self.speed, 0.0),
            (self.move_up, 0.0, -self.speed),
            (self.move_down, 0.0, self.speed),
        )
        self.is_moving = False
        for held, dx, dy in moves:
            if held:
                self.move(dx, dy, obstacles)
                self.is_moving = True

    def move(self, dx: float, dy: float, obstacles: Iterable[Obstacle]) -> None:
        """Move unless an obstacle is in the way, then keep within the bounds."""
        new_x = self.x + dx
        new_y = self.y + dy
        if not self.check_collision(new_x, new_y, obstacles):
            self.x = new_x
            self.y = new_y

        if self.x < 0:
            self.x = 0.0
        if self.y < 0:
            self.y = 0.0
        if self.x > self.bound_width - PLAYER_WIDTH:
            self.x = self.bound_width - PLAYER_WIDTH * 2
        if self.y > self.bound_height - PLAYER_HEIGHT:
            self.y = self.bound_height - PLAYER_HEIGHT * 2

    def check_collision(
        self, new_x: float, new_y: float, obstacles: Iterable[Obstacle]
    ) -> bool:
        """Return True when the player at the new position would hit an obstacle."""
        return any(
            obstacle.overlaps(new_x, new_y, PLAYER_WIDTH, PLAYER_HEIGHT)
            for obstacle in obstacles
        )

    def set_bounds(self, width: float, height: float) -> None:
        """Set the size of the map the player must stay within."""
        self.bound_width = width
        self.bound_height = height

    def add_experience(self, amount: int) -> None:
        """Gain experience, levelling up as many times as it pays for."""
        self.experience += amount
        while self.experience >= self.experience_to_next_level:
            self.experience -= self.experience_to_next_level
            self.level_up()

    def level_up(self) -> None:
        """Raise the level, the next threshold and start the level-up effect."""
        self.level += 1
        self.experience_to_next_level = int(
            self.experience_to_next_level * EXPERIENCE_GROWTH
        )
        self.level_up_effect_time = self.level_up_effect_duration
        if self.on_level_up is not None:
            self.on_level_up()

    def is_invincible(self) -> bool:
        """Return True while recently taken damage grants immunity."""
        return self.current_invincibility_time > 0

    def update_invincibility(self, frame_time: float) -> None:
        """Count down the invincibility window, never below zero."""
        if self.current_invincibility_time > 0:
            self.current_invincibility_time = max(
                self.current_invincibility_time - frame_time, 0.0
            )

    def take_damage(self, amount: int) -> None:
        """Lose health unless invincible, then become invincible for a while."""
        if self.is_invincible():
            return
        self.health = max(self.health - amount, 0)
        self.current_invincibility_time = self.invincibility_time

    def apply_upgrade(self, upgrade: str) -> None:
        """Apply an upgrade named by its menu text; unknown names do nothing."""
        if upgrade == "MaxHp +1":
            self.max_health += 1
            self.health += 1
        elif upgrade == "Add Speed":
            self.speed += 0.5

    def level_up_effect_frame(self) -> int | None:
        """Index of the level-up effect frame to show, or None if none applies."""
        if self.level_up_effect_time <= 0:
            return None
        elapsed = self.level_up_effect_duration - self.level_up_effect_time
        frame = int(elapsed / self.level_up_effect_duration * LEVEL_UP_EFFECT_FRAMES)
        if 0 <= frame < LEVEL_UP_EFFECT_FRAMES:
            return frame
        return None

    def state_packet(self) -> PlayerState:
        """Build the state snapshot sent to clients."""
        return PlayerState(
            name=self.name,
            id=self.id,
            x=self.x,
            y=self.y,
            speed=self.speed,
            health=self.health,
            level=self.level,
            experience=self.experience,
            is_dead=self.health <= 0,
        )