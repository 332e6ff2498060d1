"""Guns with limited magazines and timed reloads."""

import math

RELOAD_FRAMES = 3


class Gun:
    """A gun holding a magazine that reloads automatically when emptied."""

    sprite = ""

    def __init__(self, max_ammo: int) -> None:
        self.max_ammo = max_ammo
        self.current_ammo = max_ammo
        self.reloading = False
        self.reload_time = 1.0
        self.reload_timer = 0.0
        self.reload_frame = 0

    def reload(self) -> None:
        """Start reloading from the beginning."""
        self.reloading = True
        self.reload_timer = 0.0
        self.reload_frame = 0

    def fire(self) -> bool:
        """Spend one round; return False if the gun cannot fire."""
        if self.reloading or self.current_ammo <= 0:
            return False
        self.current_ammo -= 1
        if self.current_ammo == 0:
            self.reload()
        return True

    def update_reload(self, frame_time: float) -> None:
        """Advance an ongoing reload, refilling the magazine when done."""
        if not self.reloading:
            return
        self.reload_timer += frame_time
        if self.reload_timer >= self.reload_time:
            self.reloading = False
            self.current_ammo = self.max_ammo
        else:
            time_per_frame = self.reload_time / RELOAD_FRAMES
            self.reload_frame = int(self.reload_timer / time_per_frame) % RELOAD_FRAMES

    def aim_angle(
        self,
        player_x: float,
        player_y: float,
        cursor_x: float,
        cursor_y: float,
        direction_left: bool,
    ) -> float:
        """Angle in degrees at which to draw the gun, turned round when facing left."""
        angle = math.degrees(math.atan2(cursor_y - player_y, cursor_x - player_x))
        if direction_left:
            angle += 180.0
        return angle


class Revolver(Gun):
    sprite = "RevolverStill.png"

    def __init__(self) -> None:
        super().__init__(5)


class HeadshotGun(Gun):
    sprite = "Headshot_Gun.png"

    def __init__(self) -> None:
        super().__init__(7)


class ClusterGun(Gun):
    sprite = "Cluster_Gun.png"

    def __init__(self) -> None:
        super().__init__(10)


class DualShotgun(Gun):
    sprite = "DualShotgun_Gun.png"

    def __init__(self) -> None:
        super().__init__(4)