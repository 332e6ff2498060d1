"""Enemies that chase the player, and the dashing boss."""

import math
from collections.abc import Iterable

from hordeshooter.obstacle import Obstacle

DEATH_EFFECT_FRAMES = 4
DEATH_EFFECT_DURATION = 0.5
MONSTER_ANIMATION_SPEED = 0.2


class Enemy:
    """A monster that walks straight at the player, stopped by obstacles."""

    frame_count = 5

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int,
        animation_speed: float = 5.0,
        width: float = 50.0,
        height: float = 50.0,
    ) -> None:
        self.x = x
        self.y = y
        self.speed = speed
        self.health = health
        self.animation_speed = animation_speed
        self.width = width
        self.height = height
        self.current_frame = 0
        self.frame_time_accumulator = 0.0
        self.is_dying = False
        self.death_effect_duration = DEATH_EFFECT_DURATION
        self.death_effect_start = 0.0

    def _direction_to(self, target_x: float, target_y: float) -> tuple[float, float]:
        dx = target_x - self.x
        dy = target_y - self.y
        distance = math.hypot(dx, dy)
        if distance == 0:
            return 0.0, 0.0
        return dx / distance, dy / distance

    def _try_move(
        self, new_x: float, new_y: float, obstacles: Iterable[Obstacle]
    ) -> None:
        if not self.check_collision(new_x, new_y, obstacles):
            self.x = new_x
            self.y = new_y

    def _advance_animation(self, frame_time: float) -> None:
        self.frame_time_accumulator += frame_time
        if self.frame_time_accumulator >= self.animation_speed:
            self.current_frame = (self.current_frame + 1) % self.frame_count
            self.frame_time_accumulator = 0.0

    def _update_death_effect(self, frame_time: float) -> None:
        self.death_effect_start += frame_time
        if self.death_effect_start >= self.death_effect_duration:
            self.is_dying = False
            self.death_effect_start = 0.0

    def update(
        self,
        frame_time: float,
        player_x: float,
        player_y: float,
        obstacles: Iterable[Obstacle],
    ) -> None:
        """Step towards the player, or play out the death effect."""
        if self.is_dying:
            self._update_death_effect(frame_time)
            return
        direction_x, direction_y = self._direction_to(player_x, player_y)
        self._try_move(
            self.x + direction_x * self.speed * frame_time,
            self.y + direction_y * self.speed * frame_time,
            obstacles,
        )
        self._advance_animation(frame_time)

    def update_boss(
        self,
        frame_time: float,
        player_x: float,
        player_y: float,
        obstacles: Iterable[Obstacle],
    ) -> None:
        """Boss behaviour; ordinary enemies have none."""

    def check_collision(
        self, new_x: float, new_y: float, obstacles: Iterable[Obstacle]
    ) -> bool:
        """Return True when the enemy at the new position would hit an obstacle."""
        return any(
            obstacle.overlaps(new_x, new_y, self.width, self.height)
            for obstacle in obstacles
        )

    def take_damage(self, damage: int) -> None:
        """Lose health; at zero the death effect starts."""
        self.health -= damage
        if self.health <= 0 and not self.is_dying:
            self.is_dying = True
            self.health = 0
            self.death_effect_start = 0.0

    def is_dead(self) -> bool:
        """Return True once health is gone and the death effect has finished."""
        return self.health <= 0 and not self.is_dying

    def death_effect_frame(self) -> int | None:
        """Index of the death effect frame to show, or None if none applies."""
        frame = int(
            self.death_effect_start / self.death_effect_duration * DEATH_EFFECT_FRAMES
        )
        if 0 <= frame < DEATH_EFFECT_FRAMES:
            return frame
        return None


class BrainMonster(Enemy):
    frame_count = 4
    sprite = "BrainMonster"

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 50,
        width: float = 27.0,
        height: float = 36.0,
    ) -> None:
        super().__init__(x, y, 20.0, health, MONSTER_ANIMATION_SPEED, width, height)


class EyeMonster(Enemy):
    frame_count = 3
    sprite = "EyeMonster"

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 50,
        width: float = 37.0,
        height: float = 29.0,
    ) -> None:
        super().__init__(x, y, 40.0, health, MONSTER_ANIMATION_SPEED, width, height)


class BigBoomer(Enemy):
    frame_count = 4
    sprite = "BigBoomer"

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 500,
        width: float = 45.0,
        height: float = 51.0,
    ) -> None:
        super().__init__(x, y, 30.0, health, MONSTER_ANIMATION_SPEED, width, height)


class Lamprey(Enemy):
    frame_count = 5
    sprite = "T_Lamprey"

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 1000,
        width: float = 50.0,
        height: float = 50.0,
    ) -> None:
        super().__init__(x, y, 40.0, health, MONSTER_ANIMATION_SPEED, width, height)


class Yog(Enemy):
    frame_count = 4
    sprite = "T_Yog"

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 2500,
        width: float = 64.0,
        height: float = 54.0,
    ) -> None:
        super().__init__(x, y, 50.0, health, MONSTER_ANIMATION_SPEED, width, height)


class WingedMonster(Enemy):
    """The boss: chases the player and dashes at it every few seconds."""

    frame_count = 5
    sprite = "WingedMonster"
    dash_duration = 0.2

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 10000,
        width: float = 50.0,
        height: float = 50.0,
    ) -> None:
        super().__init__(x, y, 60.0, health, MONSTER_ANIMATION_SPEED, width, height)
        self.is_dashing = False
        self.dash_cooldown = 1.5
        self.dash_speed = 600.0
        self.dash_timer = 0.0
        self.dash_direction_x = 0.0
        self.dash_direction_y = 0.0

    def update_boss(
        self,
        frame_time: float,
        player_x: float,
        player_y: float,
        obstacles: Iterable[Obstacle],
    ) -> None:
        """Chase or dash, depending on the dash timer."""
        obstacles = list(obstacles)
        self.dash_timer += frame_time

        if self.is_dying:
            self._update_death_effect(frame_time)
            return

        if self.is_dashing:
            self._try_move(
                self.x + self.dash_direction_x * self.dash_speed * frame_time,
                self.y + self.dash_direction_y * self.dash_speed * frame_time,
                obstacles,
            )
            if self.dash_timer >= self.dash_duration:
                self.is_dashing = False
                self.dash_timer = 0.0
        else:
            direction_x, direction_y = self._direction_to(player_x, player_y)
            self._try_move(
                self.x + direction_x * self.speed * frame_time,
                self.y + direction_y * self.speed * frame_time,
                obstacles,
            )
            if self.dash_timer >= self.dash_cooldown:
                self.is_dashing = True
                self.dash_direction_x = direction_x
                self.dash_direction_y = direction_y
                self.dash_timer = 0.0

        self._advance_animation(frame_time)