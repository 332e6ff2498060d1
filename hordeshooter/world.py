"""The game world: player, enemies, bullets, items, spawning and game modes."""

import math
import random

from hordeshooter.bullet import (
    Bullet,
    ClusterGunBullet,
    DualShotgunBullet,
    HeadshotGunBullet,
    RevolverBullet,
)
from hordeshooter.camera import Camera
from hordeshooter.enemy import (
    BigBoomer,
    BrainMonster,
    Enemy,
    EyeMonster,
    Lamprey,
    WingedMonster,
    Yog,
)
from hordeshooter.gun import ClusterGun, DualShotgun, Gun, HeadshotGun, Revolver
from hordeshooter.item import Item
from hordeshooter.menus import (
    MainMenu,
    MenuAction,
    PauseMenu,
    UpgradeOption,
    UpgradePanel,
)
from hordeshooter.menus import game_time_text as _format_game_time
from hordeshooter.obstacle import Obstacle
from hordeshooter.player import PLAYER_HEIGHT, PLAYER_WIDTH, Player

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

PLAYER_SPEED = 2.0
PLAYER_ANIMATION_SPEED = 0.2

SPAWN_RADIUS = 600.0
BOSS_SPAWN_RADIUS = 100.0
ENEMY_SPAWN_SPEED = 5.0

ENEMY_SPAWN_INTERVAL = 10.0
BIG_BOOMER_SPAWN_INTERVAL = 30.0
LAMPREY_SPAWN_INTERVAL = 45.0
YOG_SPAWN_INTERVAL = 60.0

STARTING_OBSTACLES = 100
ITEM_EXPERIENCE = 10
ITEM_PICKUP_X = 20.0
ITEM_PICKUP_Y = 25.0

UPGRADE_SPEED_BONUS = 0.3

SHOTGUN_PELLETS = 5
SHOTGUN_SPREAD = math.radians(10.0)
CLUSTER_OFFSET_Y = 10.0
AIM_DISTANCE = 100.0

OBSTACLE_IMAGES = (
    "./resources/background/T_TempleTallColumn.png",
    "./resources/background/Tree_0.png",
    "./resources/background/Tree_1.png",
    "./resources/background/Tree_2.png",
    "./resources/background/Tree_3.png",
)


class GameWorld:
    """All the state of one running game and the rules that advance it."""

    obstacle_size = (32.0, 64.0)

    def __init__(
        self,
        map_width: int,
        map_height: int,
        rng: random.Random | None = None,
    ) -> None:
        self.map_width = int(map_width)
        self.map_height = int(map_height)
        self.rng = rng if rng is not None else random.Random()

        self.revolver = Revolver()
        self.headshot_gun = HeadshotGun()
        self.cluster_gun = ClusterGun()
        self.dual_shotgun = DualShotgun()
        self.current_gun: Gun = self.revolver

        self.camera = Camera(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.camera.set_bounds(self.map_width, self.map_height)

        self.main_menu = MainMenu()
        self.pause_menu = PauseMenu()
        self.upgrade_panel = UpgradePanel(self.rng)

        self.in_main_menu = True
        self.paused = False
        self.quit_requested = False

        self.enemies: list[Enemy] = []
        self.obstacles: list[Obstacle] = []
        self.bullets: list[Bullet] = []
        self.items: list[Item] = []

        self.frame_time = 0.0
        self.game_time_seconds = 0
        self._time_accumulator = 0.0

        self.enemy_spawn_timer = 0.0
        self.big_boomer_spawn_timer = 0.0
        self.lamprey_spawn_timer = 0.0
        self.yog_spawn_timer = 0.0

        self.player = self._new_player()
        self._spawn_starting_enemies()
        self.create_obstacles(STARTING_OBSTACLES)

    def _new_player(self) -> Player:
        player = Player(
            self.map_width / 2.0,
            self.map_height / 2.0,
            PLAYER_SPEED,
            PLAYER_ANIMATION_SPEED,
            on_level_up=self.show_upgrade_panel,
        )
        player.set_bounds(self.map_width, self.map_height)
        return player

    def _spawn_starting_enemies(self) -> None:
        for _ in range(10):
            self.spawn_enemy(BrainMonster)
            self.spawn_enemy(EyeMonster)

    def reset(self) -> None:
        """Start a fresh game on the same map with the same guns."""
        self.player = self._new_player()
        self.enemies.clear()
        self.items.clear()
        self.obstacles.clear()
        self.game_time_seconds = 0
        self.enemy_spawn_timer = 0.0
        self.big_boomer_spawn_timer = 0.0
        self.lamprey_spawn_timer = 0.0
        self.yog_spawn_timer = 0.0
        self.camera.set_bounds(self.map_width, self.map_height)
        self._spawn_starting_enemies()
        self.create_obstacles(STARTING_OBSTACLES)

    def update(self, frame_time: float) -> None:
        """Advance the game by one frame."""
        if self.paused or self.upgrade_panel.visible:
            return

        self.frame_time = frame_time
        self._time_accumulator += frame_time
        if self._time_accumulator >= 1.0:
            self.game_time_seconds += int(self._time_accumulator)
            self._time_accumulator = 0.0

        player = self.player
        player.update(frame_time, self.obstacles)
        self.camera.update(player.x, player.y)

        if player.health <= 0:
            self.reset()
            return

        self._hurt_player_on_contact()
        self._update_items(frame_time)
        self._update_enemies(frame_time)
        self._update_bullets(frame_time)
        self._run_spawn_schedule(frame_time)
        self.current_gun.update_reload(frame_time)

    def _hurt_player_on_contact(self) -> None:
        player = self.player
        for enemy in self.enemies:
            if (
                not player.is_invincible()
                and abs(player.x - enemy.x) < (PLAYER_WIDTH + enemy.width) / 2
                and abs(player.y - enemy.y) < (PLAYER_HEIGHT + enemy.height) / 2
            ):
                player.take_damage(1)

    def _update_items(self, frame_time: float) -> None:
        remaining = []
        for item in self.items:
            item.update(frame_time)
            if (
                abs(self.player.x - item.x) < ITEM_PICKUP_X
                and abs(self.player.y - item.y) < ITEM_PICKUP_Y
            ):
                item.collect()
                self.player.add_experience(ITEM_EXPERIENCE)
            else:
                remaining.append(item)
        self.items = remaining

    def _update_enemies(self, frame_time: float) -> None:
        px, py = self.player.x, self.player.y
        remaining = []
        for enemy in self.enemies:
            if isinstance(enemy, WingedMonster):
                enemy.update_boss(frame_time, px, py, self.obstacles)
            else:
                enemy.update(frame_time, px, py, self.obstacles)
            if enemy.is_dead():
                self.spawn_item(enemy.x, enemy.y)
            else:
                remaining.append(enemy)
        self.enemies = remaining

    def _update_bullets(self, frame_time: float) -> None:
        remaining = []
        for bullet in self.bullets:
            bullet.update(frame_time)
            if bullet.is_out_of_bounds(self.map_width, self.map_height):
                continue
            if bullet.is_hit:
                if bullet.is_effect_finished():
                    continue
            else:
                for enemy in self.enemies:
                    if bullet.check_collision(enemy.x, enemy.y, enemy.width, enemy.height):
                        enemy.take_damage(bullet.damage)
                        bullet.is_hit = True
                        break
            remaining.append(bullet)
        self.bullets = remaining

    def _run_spawn_schedule(self, frame_time: float) -> None:
        self.enemy_spawn_timer += frame_time
        if self.enemy_spawn_timer >= ENEMY_SPAWN_INTERVAL:
            self._spawn_starting_enemies()
            self.enemy_spawn_timer = 0.0

        self.big_boomer_spawn_timer += frame_time
        if self.big_boomer_spawn_timer >= BIG_BOOMER_SPAWN_INTERVAL:
            for _ in range(3):
                self.spawn_enemy(BigBoomer)
            self.big_boomer_spawn_timer = 0.0

        self.lamprey_spawn_timer += frame_time
        if self.lamprey_spawn_timer >= LAMPREY_SPAWN_INTERVAL:
            for _ in range(4):
                self.spawn_enemy(Lamprey)
            self.lamprey_spawn_timer = 0.0

        self.yog_spawn_timer += frame_time
        if self.yog_spawn_timer >= YOG_SPAWN_INTERVAL:
            self.spawn_enemy(Yog)
            self.yog_spawn_timer = 0.0

    def fire_bullet(
        self, x: float, y: float, target_x: float, target_y: float
    ) -> list[Bullet]:
        """Fire the current gun from (x, y) at a target; return the new bullets."""
        if not self.current_gun.fire():
            return []

        gun = self.current_gun
        if isinstance(gun, Revolver):
            fired: list[Bullet] = [RevolverBullet(x, y, target_x, target_y)]
        elif isinstance(gun, HeadshotGun):
            fired = [HeadshotGunBullet(x, y, target_x, target_y)]
        elif isinstance(gun, ClusterGun):
            fired = [
                ClusterGunBullet(x, y, target_x, target_y),
                ClusterGunBullet(x, y, target_x, target_y + CLUSTER_OFFSET_Y),
            ]
        elif isinstance(gun, DualShotgun):
            base_angle = math.atan2(target_y - y, target_x - x)
            middle = SHOTGUN_PELLETS // 2
            fired = []
            for pellet in range(SHOTGUN_PELLETS):
                angle = base_angle + SHOTGUN_SPREAD * (pellet - middle)
                fired.append(
                    DualShotgunBullet(
                        x,
                        y,
                        x + math.cos(angle) * AIM_DISTANCE,
                        y + math.sin(angle) * AIM_DISTANCE,
                        0.0,
                    )
                )
        else:
            fired = []

        self.bullets.extend(fired)
        return fired

    def spawn_item(self, x: float, y: float) -> Item:
        """Drop an experience item at the given position."""
        item = Item(x, y)
        self.items.append(item)
        return item

    def spawn_enemy(
        self, kind: type[Enemy], radius: float = SPAWN_RADIUS
    ) -> Enemy:
        """Spawn an enemy of the given kind on a circle around the player."""
        angle = math.radians(self.rng.randrange(360))
        enemy = kind(
            self.player.x + radius * math.cos(angle),
            self.player.y + radius * math.sin(angle),
            ENEMY_SPAWN_SPEED,
        )
        self.enemies.append(enemy)
        return enemy

    def create_obstacles(self, count: int) -> list[Obstacle]:
        """Scatter obstacles at random places on the map; return the new ones."""
        width, height = self.obstacle_size
        created = [
            Obstacle(
                float(self.rng.randrange(self.map_width)),
                float(self.rng.randrange(self.map_height)),
                width,
                height,
                self.rng.choice(OBSTACLE_IMAGES),
            )
            for _ in range(count)
        ]
        self.obstacles.extend(created)
        return created

    def clear_enemies(self) -> None:
        """Remove every enemy."""
        self.enemies.clear()

    def spawn_boss_near_player(self) -> WingedMonster:
        """Spawn the winged boss close to the player."""
        boss = self.spawn_enemy(WingedMonster, BOSS_SPAWN_RADIUS)
        assert isinstance(boss, WingedMonster)
        return boss

    def select_gun(self, number: int) -> Gun:
        """Switch to gun 1 to 4 and return it."""
        guns = {
            1: self.revolver,
            2: self.headshot_gun,
            3: self.cluster_gun,
            4: self.dual_shotgun,
        }
        if number not in guns:
            raise ValueError(f"gun number must be 1 to 4, not {number!r}")
        self.current_gun = guns[number]
        return self.current_gun

    def upgrade_gun(self) -> Gun:
        """Move to the next gun in line; the shotgun is the last."""
        following = {
            id(self.revolver): self.headshot_gun,
            id(self.headshot_gun): self.cluster_gun,
            id(self.cluster_gun): self.dual_shotgun,
        }
        self.current_gun = following.get(id(self.current_gun), self.dual_shotgun)
        return self.current_gun

    def show_upgrade_panel(self) -> tuple[UpgradeOption, ...]:
        """Offer two random upgrades; the game halts until one is chosen."""
        return self.upgrade_panel.show()

    def choose_upgrade(self, index: int) -> UpgradeOption:
        """Apply the upgrade on the left (0) or right (1) panel and close it."""
        if not self.upgrade_panel.visible:
            raise RuntimeError("no upgrade panel is being shown")
        self.upgrade_panel.select(index)
        option = self.upgrade_panel.selected_option()
        if option is UpgradeOption.MAX_HP:
            self.player.max_health += 1
            self.player.health += 1
        elif option is UpgradeOption.MAX_AMMO:
            self.current_gun.max_ammo += 1
        elif option is UpgradeOption.ADD_SPEED:
            self.player.speed += UPGRADE_SPEED_BONUS
        elif option is UpgradeOption.UPGRADE_GUN:
            self.upgrade_gun()
        self.upgrade_panel.hide()
        return option

    def toggle_pause(self) -> None:
        """Pause or resume the game."""
        self.paused = not self.paused

    def pause_key_down(self, key: str) -> MenuAction:
        """Handle a key on the pause menu and carry out what it chooses."""
        action = self.pause_menu.key_down(key)
        if action is MenuAction.RESUME:
            self.toggle_pause()
        elif action is MenuAction.MAIN_MENU:
            self.paused = False
            self.in_main_menu = True
            self.reset()
        elif action is MenuAction.QUIT:
            self.quit_requested = True
        return action

    def menu_key_down(self, key: str) -> MenuAction:
        """Handle a key on the main menu and carry out what it chooses."""
        action = self.main_menu.key_down(key)
        if action is MenuAction.START:
            self.toggle_main_menu()
            self.reset()
        elif action is MenuAction.QUIT:
            self.quit_requested = True
        return action

    def toggle_main_menu(self) -> None:
        """Enter or leave the main menu; entering it resets the game."""
        self.in_main_menu = not self.in_main_menu
        if self.in_main_menu:
            self.reset()

    def game_time_text(self) -> str:
        """Elapsed game time as MM:SS."""
        return _format_game_time(self.game_time_seconds)