"""Menu state: the main menu, the pause menu and the level-up upgrade panel."""

import random
from enum import Enum

MAIN_MENU_ITEMS = 2
PAUSE_MENU_ITEMS = 3
MENU_ANIMATION_FRAMES = 3
MENU_ANIMATION_INTERVAL = 1.0
UPGRADE_CHOICES = 2


class UpgradeOption(Enum):
    """Upgrades that may be offered when the player levels up."""

    MAX_HP = 0
    MAX_AMMO = 1
    ADD_SPEED = 2
    UPGRADE_GUN = 3


_OPTION_TEXT = {
    UpgradeOption.MAX_HP: "MaxHp +1",
    UpgradeOption.MAX_AMMO: "Max Ammo +1",
    UpgradeOption.ADD_SPEED: "Add Speed",
    UpgradeOption.UPGRADE_GUN: "Upgrade Gun",
}


def upgrade_option_text(option: object) -> str:
    """Label shown on an upgrade panel; "Unknown" for anything else."""
    return _OPTION_TEXT.get(option, "Unknown")  # type: ignore[arg-type]


def game_time_text(seconds: int) -> str:
    """Format elapsed seconds as MM:SS."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class MenuAction(Enum):
    """What a menu key press asks the game to do."""

    NONE = "none"
    START = "start"
    QUIT = "quit"
    RESUME = "resume"
    MAIN_MENU = "main_menu"


def _normalise(key: str) -> str:
    return key.strip().upper()


class MainMenu:
    """Title screen with START and QUIT entries and an animated background."""

    _actions = (MenuAction.START, MenuAction.QUIT)

    def __init__(self) -> None:
        self.selected = 0
        self.animation_frame = 0
        self.animation_accumulator = 0.0

    def key_down(self, key: str) -> MenuAction:
        """Handle UP, DOWN or RETURN; return the action chosen, if any."""
        key = _normalise(key)
        if key == "UP":
            self.selected = (self.selected - 1) % MAIN_MENU_ITEMS
        elif key == "DOWN":
            self.selected = (self.selected + 1) % MAIN_MENU_ITEMS
        elif key == "RETURN":
            return self._actions[self.selected]
        return MenuAction.NONE

    def advance_animation(self, frame_time: float) -> int:
        """Advance the background animation and return the frame to show."""
        self.animation_accumulator += frame_time
        if self.animation_accumulator >= MENU_ANIMATION_INTERVAL:
            self.animation_frame = (self.animation_frame + 1) % MENU_ANIMATION_FRAMES
            self.animation_accumulator = 0.0
        return self.animation_frame


class PauseMenu:
    """Pause screen with Resume, Main Menu and Quit entries."""

    _actions = (MenuAction.RESUME, MenuAction.MAIN_MENU, MenuAction.QUIT)

    def __init__(self) -> None:
        self.selected = 0

    def key_down(self, key: str) -> MenuAction:
        """Handle UP, DOWN or RETURN; return the action chosen, if any."""
        key = _normalise(key)
        if key == "UP":
            self.selected = (self.selected - 1) % PAUSE_MENU_ITEMS
        elif key == "DOWN":
            self.selected = (self.selected + 1) % PAUSE_MENU_ITEMS
        elif key == "RETURN":
            return self._actions[self.selected]
        return MenuAction.NONE


class UpgradePanel:
    """Two randomly chosen upgrades, one of which the player picks."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.visible = False
        self.options: tuple[UpgradeOption, ...] = ()
        self.selected = 0

    def show(self) -> tuple[UpgradeOption, ...]:
        """Open the panel with two distinct upgrades, the left one selected."""
        choices = list(UpgradeOption)
        self.rng.shuffle(choices)
        self.options = tuple(choices[:UPGRADE_CHOICES])
        self.selected = 0
        self.visible = True
        return self.options

    def hide(self) -> None:
        """Close the panel."""
        self.visible = False

    def select(self, index: int) -> None:
        """Select the left (0) or right (1) panel."""
        if index not in range(UPGRADE_CHOICES):
            raise ValueError(f"upgrade panel index must be 0 or 1, not {index!r}")
        self.selected = index

    def selected_option(self) -> UpgradeOption:
        """The upgrade currently selected."""
        if not self.options:
            raise RuntimeError("the upgrade panel has not been shown")
        return self.options[self.selected]