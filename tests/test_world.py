import math
import random

import pytest

from hordeshooter.bullet import (
    ClusterGunBullet,
    DualShotgunBullet,
    HeadshotGunBullet,
    RevolverBullet,
)
from hordeshooter.enemy import BrainMonster, EyeMonster, WingedMonster
from hordeshooter.gun import ClusterGun, DualShotgun, HeadshotGun, Revolver
from hordeshooter.menus import MenuAction, UpgradeOption
from hordeshooter.world import GameWorld


def make_world(seed=1):
    return GameWorld(2000, 2000, random.Random(seed))


def empty_world(seed=1):
    world = make_world(seed)
    world.enemies = []
    world.obstacles = []
    return world


def test_initial_state():
    world = make_world()
    assert len(world.enemies) == 20
    assert sum(isinstance(e, BrainMonster) for e in world.enemies) == 10
    assert sum(isinstance(e, EyeMonster) for e in world.enemies) == 10
    assert len(world.obstacles) == 100
    assert (world.player.x, world.player.y) == (1000.0, 1000.0)
    assert isinstance(world.current_gun, Revolver)
    assert world.in_main_menu is True
    assert world.paused is False


def test_same_seed_gives_same_world():
    a = make_world(7)
    b = make_world(7)
    assert [(o.x, o.y, o.image_path) for o in a.obstacles] == [
        (o.x, o.y, o.image_path) for o in b.obstacles
    ]
    assert [(e.x, e.y) for e in a.enemies] == [(e.x, e.y) for e in b.enemies]


def test_spawn_enemy_on_circle():
    world = empty_world()
    enemy = world.spawn_enemy(EyeMonster, 600.0)
    distance = math.hypot(enemy.x - world.player.x, enemy.y - world.player.y)
    assert distance == pytest.approx(600.0, rel=1e-6)
    assert world.enemies == [enemy]


def test_spawn_boss_near_player():
    world = empty_world()
    boss = world.spawn_boss_near_player()
    assert isinstance(boss, WingedMonster)
    distance = math.hypot(boss.x - world.player.x, boss.y - world.player.y)
    assert distance == pytest.approx(100.0, rel=1e-6)


def test_clear_enemies():
    world = make_world()
    world.clear_enemies()
    assert world.enemies == []


def test_create_obstacles_within_map():
    world = empty_world()
    created = world.create_obstacles(30)
    assert len(created) == 30
    assert world.obstacles == created
    for obstacle in created:
        assert 0 <= obstacle.x < world.map_width
        assert 0 <= obstacle.y < world.map_height


def test_fire_revolver():
    world = empty_world()
    fired = world.fire_bullet(100.0, 100.0, 200.0, 100.0)
    assert len(fired) == 1
    assert isinstance(fired[0], RevolverBullet)
    assert world.current_gun.current_ammo == 4
    assert world.bullets == fired


def test_fire_headshot_gun():
    world = empty_world()
    world.select_gun(2)
    fired = world.fire_bullet(100.0, 100.0, 200.0, 100.0)
    assert [type(b) for b in fired] == [HeadshotGunBullet]


def test_fire_cluster_gun_gives_two_bullets():
    world = empty_world()
    world.select_gun(3)
    fired = world.fire_bullet(100.0, 100.0, 200.0, 100.0)
    assert len(fired) == 2
    assert all(isinstance(b, ClusterGunBullet) for b in fired)
    assert fired[0].direction_y == pytest.approx(0.0)
    assert fired[1].direction_y > 0


def test_fire_dual_shotgun_spread():
    world = empty_world()
    world.select_gun(4)
    fired = world.fire_bullet(100.0, 100.0, 200.0, 100.0)
    assert len(fired) == 5
    assert all(isinstance(b, DualShotgunBullet) for b in fired)
    assert fired[2].direction_x == pytest.approx(1.0)
    assert fired[0].direction_y == pytest.approx(-fired[4].direction_y)
    for bullet in fired:
        assert math.hypot(bullet.direction_x, bullet.direction_y) == pytest.approx(1.0)


def test_fire_fails_while_reloading():
    world = empty_world()
    for _ in range(5):
        assert world.fire_bullet(100.0, 100.0, 200.0, 100.0)
    assert world.current_gun.reloading
    assert world.fire_bullet(100.0, 100.0, 200.0, 100.0) == []
    assert len(world.bullets) == 5


def test_reload_completes_during_update():
    world = empty_world()
    for _ in range(5):
        world.fire_bullet(100.0, 100.0, 200.0, 100.0)
    world.bullets = []
    world.update(1.0)
    assert world.current_gun.current_ammo == world.current_gun.max_ammo
    assert not world.current_gun.reloading


def test_select_gun():
    world = empty_world()
    assert isinstance(world.select_gun(1), Revolver)
    assert isinstance(world.select_gun(2), HeadshotGun)
    assert isinstance(world.select_gun(3), ClusterGun)
    assert isinstance(world.select_gun(4), DualShotgun)
    with pytest.raises(ValueError):
        world.select_gun(5)


def test_upgrade_gun_chain():
    world = empty_world()
    kinds = [type(world.upgrade_gun()) for _ in range(4)]
    assert kinds == [HeadshotGun, ClusterGun, DualShotgun, DualShotgun]


def test_choose_upgrade_without_panel():
    world = empty_world()
    with pytest.raises(RuntimeError):
        world.choose_upgrade(0)


def test_choose_upgrade_max_hp():
    world = empty_world()
    world.show_upgrade_panel()
    world.upgrade_panel.options = (UpgradeOption.MAX_HP, UpgradeOption.ADD_SPEED)
    before_max, before_health = world.player.max_health, world.player.health
    assert world.choose_upgrade(0) is UpgradeOption.MAX_HP
    assert world.player.max_health == before_max + 1
    assert world.player.health == before_health + 1
    assert world.upgrade_panel.visible is False


def test_choose_upgrade_speed_and_ammo_and_gun():
    world = empty_world()
    world.show_upgrade_panel()
    world.upgrade_panel.options = (UpgradeOption.MAX_AMMO, UpgradeOption.ADD_SPEED)
    speed = world.player.speed
    world.choose_upgrade(1)
    assert world.player.speed == pytest.approx(speed + 0.3)

    world.show_upgrade_panel()
    world.upgrade_panel.options = (UpgradeOption.MAX_AMMO, UpgradeOption.UPGRADE_GUN)
    ammo = world.current_gun.max_ammo
    world.choose_upgrade(0)
    assert world.current_gun.max_ammo == ammo + 1

    world.show_upgrade_panel()
    world.upgrade_panel.options = (UpgradeOption.MAX_AMMO, UpgradeOption.UPGRADE_GUN)
    world.choose_upgrade(1)
    assert isinstance(world.current_gun, HeadshotGun)


def test_level_up_opens_upgrade_panel():
    world = empty_world()
    world.player.add_experience(100)
    assert world.player.level == 2
    assert world.upgrade_panel.visible
    assert len(set(world.upgrade_panel.options)) == 2


def test_update_halts_while_paused():
    world = empty_world()
    world.toggle_pause()
    world.update(2.0)
    assert world.game_time_seconds == 0
    world.toggle_pause()
    world.update(2.0)
    assert world.game_time_seconds == 2


def test_update_halts_while_upgrade_panel_shown():
    world = empty_world()
    world.show_upgrade_panel()
    world.player.set_input(True, False, False, False)
    x = world.player.x
    world.update(1.0)
    assert world.player.x == x
    assert world.game_time_seconds == 0


def test_game_time_text():
    world = empty_world()
    world.update(1.0)
    assert world.game_time_text() == "00:01"
    world.game_time_seconds = 75
    assert world.game_time_text() == "01:15"


def test_item_pickup_gives_experience():
    world = empty_world()
    world.spawn_item(world.player.x, world.player.y)
    world.update(0.01)
    assert world.items == []
    assert world.player.experience == 10


def test_bullet_hits_enemy():
    world = empty_world()
    enemy = BrainMonster(500.0, 500.0, 5.0)
    world.enemies = [enemy]
    bullet = RevolverBullet(510.0, 505.0, 520.0, 505.0)
    world.bullets = [bullet]
    world.update(0.001)
    assert bullet.is_hit
    assert enemy.health == 0
    assert world.bullets == [bullet]


def test_hit_bullet_removed_after_effect():
    world = empty_world()
    bullet = RevolverBullet(500.0, 500.0, 600.0, 500.0)
    bullet.is_hit = True
    world.bullets = [bullet]
    world.update(0.3)
    assert world.bullets == []


def test_out_of_bounds_bullet_removed():
    world = empty_world()
    world.bullets = [RevolverBullet(1990.0, 500.0, 2100.0, 500.0)]
    world.update(0.1)
    assert world.bullets == []


def test_dead_enemy_drops_item():
    world = empty_world()
    enemy = BrainMonster(300.0, 300.0, 5.0)
    enemy.take_damage(1000)
    world.enemies = [enemy]
    world.update(0.6)
    assert world.enemies == []
    assert len(world.items) == 1
    assert (world.items[0].x, world.items[0].y) == (enemy.x, enemy.y)


def test_enemy_contact_hurts_player():
    world = empty_world()
    world.enemies = [BrainMonster(world.player.x, world.player.y, 5.0)]
    world.update(0.01)
    assert world.player.health == 3
    assert world.player.is_invincible()


def test_player_death_resets_game():
    world = empty_world()
    old_player = world.player
    world.game_time_seconds = 42
    old_player.health = 0
    world.update(0.01)
    assert world.player is not old_player
    assert world.player.health == 4
    assert world.game_time_seconds == 0
    assert len(world.enemies) == 20
    assert len(world.obstacles) == 100


def test_enemy_wave_spawns_when_due():
    world = empty_world()
    world.enemy_spawn_timer = 9.99
    world.update(0.02)
    assert len(world.enemies) == 20
    assert world.enemy_spawn_timer == 0.0


def test_pause_menu_resume_and_main_menu():
    world = empty_world()
    world.in_main_menu = False
    world.toggle_pause()
    assert world.pause_key_down("RETURN") is MenuAction.RESUME
    assert world.paused is False

    world.toggle_pause()
    world.pause_key_down("DOWN")
    assert world.pause_key_down("RETURN") is MenuAction.MAIN_MENU
    assert world.paused is False
    assert world.in_main_menu is True


def test_pause_menu_quit():
    world = empty_world()
    world.toggle_pause()
    world.pause_key_down("UP")
    assert world.pause_key_down("RETURN") is MenuAction.QUIT
    assert world.quit_requested is True


def test_main_menu_start_and_quit():
    world = make_world()
    assert world.menu_key_down("RETURN") is MenuAction.START
    assert world.in_main_menu is False
    assert len(world.enemies) == 20

    other = make_world()
    other.menu_key_down("DOWN")
    assert other.menu_key_down("RETURN") is MenuAction.QUIT
    assert other.quit_requested is True


def test_toggle_main_menu_resets_on_entry():
    world = make_world()
    world.toggle_main_menu()
    assert world.in_main_menu is False
    world.game_time_seconds = 30
    world.toggle_main_menu()
    assert world.in_main_menu is True
    assert world.game_time_seconds == 0