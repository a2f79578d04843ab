"""Fixed-step game loop."""

from __future__ import annotations

from typing import Protocol

from litegame.interfaces import Clock, Platform

FIXED_DELTA = 1.0 / 60.0


class _Steppable(Protocol):
    def update(self, delta_time: float) -> None: ...

    def render(self, alpha: float) -> None: ...


class GameLoop:
    """Runs updates in fixed steps and renders once per frame until the platform exits."""

    def __init__(self, scene_manager: _Steppable, clock: Clock, platform: Platform) -> None:
        self.scene_manager = scene_manager
        self.clock = clock
        self.platform = platform
        self.fixed_delta = FIXED_DELTA
        self.accumulator = 0.0
        self._last_frame_time = clock.get_time()

    def _delta_time(self) -> float:
        now = self.clock.get_time()
        delta = now - self._last_frame_time
        self._last_frame_time = now
        return delta

    def run(self) -> None:
        """Loop until the platform asks to exit."""
        while not self.platform.should_exit():
            delta = self._delta_time()
            self.accumulator += delta

            while self.accumulator >= self.fixed_delta:
                self.scene_manager.update(delta)
                self.accumulator -= self.fixed_delta

            self.scene_manager.render(self.accumulator / self.fixed_delta)
            self.platform.poll_events()