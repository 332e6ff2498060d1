# hordeshooter

The game logic of a top-down survival shooter, as plain Python objects with no dependencies. The package contains the following modules:

- `hordeshooter.player`: `Player` handles movement on held directions (`set_input`, `update`) or on single W/A/S/D keys (`process_key`). It stays inside the map bounds, collides with obstacles, takes damage and then has a short invincibility window, and gains experience and levels. Each level-up raises the next threshold by 1.5×. `state_packet()` returns a frozen `PlayerState` snapshot.
- `hordeshooter.gun`: `Gun` and its four kinds, `Revolver` (5 rounds), `HeadshotGun` (7), `ClusterGun` (10) and `DualShotgun` (4). Each gun reloads for one second when its magazine is empty. `aim_angle` gives the angle, in degrees, at which the gun is drawn.
- `hordeshooter.bullet`: `Bullet` and its kinds `RevolverBullet` (50 damage), `HeadshotGunBullet` (100), `ClusterGunBullet` (75) and `DualShotgunBullet` (100, rotated by a spread angle in radians). Bullets move in a straight line, test themselves against the map bounds and enemy rectangles, and play a short hit effect.
- `hordeshooter.enemy`: `Enemy` and the monsters `BrainMonster`, `EyeMonster`, `BigBoomer`, `Lamprey` and `Yog`. These walk straight at the player and are stopped by obstacles. `WingedMonster` is the boss: it chases the player and dashes every 1.5 s. An enemy is `is_dead()` once its death effect has played out.
- `hordeshooter.item`: `Item` is an experience pickup with a two-frame animation.
- `hordeshooter.obstacle`: `Obstacle` is a blocking rectangle with `overlaps(x, y, width, height)`.
- `hordeshooter.camera`: `Camera` is a viewport centred on the player and clamped to the map.
- `hordeshooter.utility`: `check_collision` tests whether two circles touch.
- `hordeshooter.menus`: `MainMenu`, `PauseMenu` and `UpgradePanel` keep the state of each screen. `MenuAction` is the enum of actions a menu can return, and `UpgradeOption` is the enum of upgrades offered on level-up. The module also has `upgrade_option_text` and `game_time_text`.
- `hordeshooter.world`: `GameWorld` ties all of these together. It handles contact damage, item pickup, bullet hits, enemy drops and the timed spawning of enemies. It also covers gun selection and upgrades, the upgrade panel, pausing and the main menu.
- `hordeshooter.game_thread`: `GameThread` is a fixed-step loop, about 30 FPS by default. Each frame it applies one queued `InputState` to its players and hands every player's `PlayerState` to an optional `send` callback.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Example

```python
import random
from hordeshooter.world import GameWorld

world = GameWorld(2000, 2000, random.Random(1))
world.toggle_main_menu()            # leave the title screen
world.fire_bullet(1000, 1000, 1200, 1000)
for _ in range(4):
    world.update(0.5)
print(world.game_time_text())       # "00:02"
```

Keys are passed to the menus by name: `"UP"`, `"DOWN"` and `"RETURN"`. `GameWorld.menu_key_down` and `GameWorld.pause_key_down` carry out the chosen `MenuAction`. When the player chooses to quit, the game sets `quit_requested`.

The following example shows an input-driven loop:

```python
from hordeshooter.player import Player
from hordeshooter.game_thread import GameThread, InputState

player = Player(100, 100, 2.0, 0.2, None)
player.set_bounds(800, 600)
loop = GameThread([player], [], 0.033)
loop.submit_input(InputState(move_right=True))
states = loop.step()
print(states[0].x)                  # 102.0
```

`GameThread.run()` loops until `stop()` is called, sleeping to keep the frame time. Inputs can be submitted from other threads.

## What it does not do

The package draws nothing and plays no sound. It has no window and no keyboard or mouse handling beyond the key names above. It has no networking: `GameThread` does not open sockets and does not match clients. It only calls a `send` callback that you supply. The package installs no command.