"""Projectiles fired by the player's guns."""

import math

HIT_EFFECT_FRAMES = 2
HIT_EFFECT_DURATION = 0.25
BULLET_SPEED = 1500.0


class Bullet:
    """A projectile travelling in a straight line towards its target."""

    def __init__(
        self,
        x: float,
        y: float,
        target_x: float,
        target_y: float,
        damage: int,
        speed: float,
    ) -> None:
        dx = target_x - x
        dy = target_y - y
        distance = math.hypot(dx, dy)
        if distance == 0:
            raise ValueError("bullet target coincides with its origin")
        self.x = x
        self.y = y
        self.speed = speed
        self.damage = damage
        self.direction_x = dx / distance
        self.direction_y = dy / distance
        self.is_hit = False
        self.hit_effect_duration = HIT_EFFECT_DURATION
        self.hit_effect_time = 0.0

    def update(self, frame_time: float) -> None:
        """Move the bullet, or run its hit effect once it has struck."""
        if self.is_hit:
            self.hit_effect_time += frame_time
        else:
            self.x += self.direction_x * self.speed * frame_time
            self.y += self.direction_y * self.speed * frame_time

    def is_out_of_bounds(self, width: float, height: float) -> bool:
        """Return True when the bullet has left the map."""
        return self.x < 0 or self.y < 0 or self.x > width or self.y > height

    def check_collision(
        self,
        enemy_x: float,
        enemy_y: float,
        enemy_width: float,
        enemy_height: float,
    ) -> bool:
        """Return True when the bullet lies strictly inside the rectangle."""
        return (
            enemy_x < self.x < enemy_x + enemy_width
            and enemy_y < self.y < enemy_y + enemy_height
        )

    def is_effect_finished(self) -> bool:
        """Return True once the hit effect has played out."""
        return self.hit_effect_time >= self.hit_effect_duration

    def hit_effect_frame(self) -> int:
        """Index of the hit effect frame to show, holding the last one."""
        frame = int(self.hit_effect_time / self.hit_effect_duration * HIT_EFFECT_FRAMES)
        return max(0, min(frame, HIT_EFFECT_FRAMES - 1))


class RevolverBullet(Bullet):
    def __init__(self, x: float, y: float, target_x: float, target_y: float) -> None:
        super().__init__(x, y, target_x, target_y, 50, BULLET_SPEED)


class HeadshotGunBullet(Bullet):
    def __init__(self, x: float, y: float, target_x: float, target_y: float) -> None:
        super().__init__(x, y, target_x, target_y, 100, BULLET_SPEED)


class ClusterGunBullet(Bullet):
    def __init__(self, x: float, y: float, target_x: float, target_y: float) -> None:
        super().__init__(x, y, target_x, target_y, 75, BULLET_SPEED)


class DualShotgunBullet(Bullet):
    """A shotgun pellet whose direction is rotated by a spread angle (radians)."""

    def __init__(
        self,
        x: float,
        y: float,
        target_x: float,
        target_y: float,
        spread_angle: float,
    ) -> None:
        super().__init__(x, y, target_x, target_y, 100, BULLET_SPEED)
        cos_a = math.cos(spread_angle)
        sin_a = math.sin(spread_angle)
        dx, dy = self.direction_x, self.direction_y
        self.direction_x = dx * cos_a - dy * sin_a
        self.direction_y = dx * sin_a + dy * cos_a