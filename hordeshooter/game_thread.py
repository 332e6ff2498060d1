"""Server-side game loop: applies client input to players at a fixed frame rate."""

import logging
import threading
import time
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from hordeshooter.obstacle import Obstacle
from hordeshooter.player import Player, PlayerState

FRAME_TIME = 0.033

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputState:
    """Movement keys held by a client during one frame."""

    move_left: bool = False
    move_right: bool = False
    move_up: bool = False
    move_down: bool = False


class GameThread:
    """Fixed-step loop that consumes queued input and publishes player states.

    Input is submitted from network threads with ``submit_input`` and consumed
    one entry per frame, oldest first. After each frame every player's state is
    handed to ``send``, when one is set.
    """

    def __init__(
        self,
        players: Iterable[Player],
        obstacles: Iterable[Obstacle] = (),
        frame_time: float = FRAME_TIME,
    ) -> None:
        if frame_time <= 0:
            raise ValueError(f"frame time must be positive, not {frame_time!r}")
        self.players = list(players)
        self.obstacles = list(obstacles)
        self.frame_time = frame_time
        self.send: Callable[[PlayerState], None] | None = None
        self._inputs: deque[InputState] = deque()
        self._lock = threading.Lock()
        self._running = threading.Event()

    @property
    def running(self) -> bool:
        """True while ``run`` is looping."""
        return self._running.is_set()

    @property
    def pending(self) -> int:
        """Number of inputs waiting to be applied."""
        with self._lock:
            return len(self._inputs)

    def submit_input(self, state: InputState) -> None:
        """Queue an input to be applied on a later frame."""
        with self._lock:
            self._inputs.append(state)

    def _next_input(self) -> InputState | None:
        with self._lock:
            return self._inputs.popleft() if self._inputs else None

    def _update_game_objects(self) -> None:
        state = self._next_input()
        if state is None:
            logger.warning("no input queued for this frame")
            return
        for player in self.players:
            player.set_input(
                state.move_left, state.move_right, state.move_up, state.move_down
            )
            player.update(self.frame_time, self.obstacles)
            logger.debug(
                "applied input: left=%s right=%s up=%s down=%s",
                state.move_left,
                state.move_right,
                state.move_up,
                state.move_down,
            )

    def step(self) -> list[PlayerState]:
        """Run one frame: apply the oldest input, then publish every player's state."""
        self._update_game_objects()
        states = [player.state_packet() for player in self.players]
        if self.send is not None:
            for state in states:
                self.send(state)
        return states

    def run(self) -> None:
        """Loop over frames until ``stop`` is called, keeping the frame rate."""
        self._running.set()
        while self._running.is_set():
            started = time.monotonic()
            self.step()
            remaining = self.frame_time - (time.monotonic() - started)
            if remaining > 0:
                time.sleep(remaining)

    def stop(self) -> None:
        """Ask the loop to end after the current frame."""
        self._running.clear()