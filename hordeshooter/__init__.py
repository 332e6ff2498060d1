"""Game-state simulation for a top-down horde shooter: player, guns, bullets, enemies, menus, world and game loop."""

__version__ = "0.1.0"