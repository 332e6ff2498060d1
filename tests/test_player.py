import pytest

from hordeshooter.obstacle import Obstacle
from hordeshooter.player import Player


def make_player(x=100.0, y=100.0, speed=2.0, on_level_up=None):
    player = Player(x, y, speed, 0.2, on_level_up)
    player.set_bounds(1000.0, 1000.0)
    return player


def test_initial_state():
    player = make_player()
    assert player.level == 1
    assert player.experience == 0
    assert player.experience_to_next_level == 100
    assert player.health == 4
    assert player.max_health == 4
    assert not player.is_invincible()


def test_move_without_obstacles():
    player = make_player()
    player.move(5.0, -3.0, [])
    assert player.x == pytest.approx(105.0)
    assert player.y == pytest.approx(97.0)


def test_move_blocked_by_obstacle():
    player = make_player()
    wall = Obstacle(110.0, 100.0, 10.0, 10.0)
    player.move(5.0, 0.0, [wall])
    assert player.x == pytest.approx(100.0)
    assert player.y == pytest.approx(100.0)


def test_check_collision_matches_obstacle_overlap():
    player = make_player()
    wall = Obstacle(110.0, 100.0, 10.0, 10.0)
    assert player.check_collision(95.0, 100.0, [wall])
    assert not player.check_collision(80.0, 100.0, [wall])


def test_move_clamps_to_zero():
    player = make_player()
    player.move(-500.0, -500.0, [])
    assert player.x == 0
    assert player.y == 0


def test_move_past_right_edge_pulls_back():
    player = make_player(x=170.0, y=10.0)
    player.set_bounds(200.0, 200.0)
    player.move(15.0, 0.0, [])
    assert player.x == pytest.approx(160.0)
    assert player.x < 200.0 - player.width


def test_update_moves_by_held_direction():
    player = make_player(speed=2.0)
    player.set_input(True, False, False, False)
    player.update(0.01, [])
    assert player.x == pytest.approx(98.0)
    assert player.is_moving


def test_update_opposite_directions_cancel():
    player = make_player()
    player.set_input(True, True, True, True)
    player.update(0.01, [])
    assert player.x == pytest.approx(100.0)
    assert player.y == pytest.approx(100.0)
    assert player.is_moving


def test_update_without_input_is_idle():
    player = make_player()
    player.update(0.01, [])
    assert not player.is_moving
    assert (player.x, player.y) == (100.0, 100.0)


def test_animation_advances_after_animation_speed():
    player = make_player()
    player.update(0.2, [])
    assert player.current_frame == 1
    assert player.frame_time_accumulator == 0.0


def test_idle_animation_wraps():
    player = make_player()
    for _ in range(5):
        player.update(0.2, [])
    assert player.current_frame == 0


@pytest.mark.parametrize(
    "key, dx, dy",
    [("W", 0.0, -2.0), ("A", -2.0, 0.0), ("S", 0.0, 2.0), ("D", 2.0, 0.0)],
)
def test_process_key(key, dx, dy):
    player = make_player(speed=2.0)
    player.process_key(key)
    assert player.x == pytest.approx(100.0 + dx)
    assert player.y == pytest.approx(100.0 + dy)


def test_process_unknown_key_does_nothing():
    player = make_player()
    player.process_key("Q")
    assert (player.x, player.y) == (100.0, 100.0)


def test_take_damage_grants_invincibility():
    player = make_player()
    player.take_damage(1)
    assert player.health == 3
    assert player.is_invincible()
    player.take_damage(1)
    assert player.health == 3


def test_invincibility_wears_off():
    player = make_player()
    player.take_damage(1)
    player.update_invincibility(player.invincibility_time + 1.0)
    assert player.current_invincibility_time == 0
    assert not player.is_invincible()
    player.take_damage(1)
    assert player.health == 2


def test_health_never_negative():
    player = make_player()
    player.take_damage(10)
    assert player.health == 0
    assert player.state_packet().is_dead


def test_add_experience_below_threshold():
    player = make_player()
    player.add_experience(10)
    assert player.experience == 10
    assert player.level == 1


def test_add_experience_levels_up_and_calls_back():
    calls = []
    player = make_player(on_level_up=lambda: calls.append(1))
    player.add_experience(100)
    assert player.level == 2
    assert player.experience == 0
    assert player.experience_to_next_level == 150
    assert len(calls) == 1


def test_add_experience_multiple_levels():
    calls = []
    player = make_player(on_level_up=lambda: calls.append(1))
    player.add_experience(250)
    assert player.level == 3
    assert player.experience == 0
    assert len(calls) == 2
    assert player.experience < player.experience_to_next_level


def test_level_up_without_callback():
    player = make_player()
    player.level_up()
    assert player.level == 2
    assert player.level_up_effect_time == player.level_up_effect_duration


def test_apply_upgrades():
    player = make_player(speed=2.0)
    player.apply_upgrade("MaxHp +1")
    assert player.max_health == 5
    assert player.health == 5
    player.apply_upgrade("Add Speed")
    assert player.speed == pytest.approx(2.5)
    player.apply_upgrade("Upgrade Gun")
    assert player.speed == pytest.approx(2.5)
    assert player.max_health == 5


def test_state_packet_reflects_player():
    player = make_player(x=12.0, y=34.0, speed=3.0)
    player.id = 7
    player.name = "alice"
    state = player.state_packet()
    assert state.name == "alice"
    assert state.id == 7
    assert (state.x, state.y) == (12.0, 34.0)
    assert state.speed == 3.0
    assert state.health == player.health
    assert state.level == player.level
    assert not state.is_dead