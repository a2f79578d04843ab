"""Abstract platform, window, clock and renderer interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from litegame.types import Model, Texture


class Window(ABC):
    """A native window with a drawing context."""

    @abstractmethod
    def make_context_current(self) -> None:
        """Bind the window's drawing context to the calling thread."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the back buffer."""

    @abstractmethod
    def should_close(self) -> bool:
        """Whether the user asked to close the window."""

    @abstractmethod
    def poll_events(self) -> None:
        """Process pending window events."""

    @abstractmethod
    def shutdown(self) -> None:
        """Destroy the window."""

    @abstractmethod
    def get_size(self) -> tuple[int, int]:
        """Return the window size as (width, height)."""


class Platform(ABC):
    """Owns the window and drives event processing."""

    @abstractmethod
    def poll_events(self) -> None:
        """Process pending events."""

    @abstractmethod
    def should_exit(self) -> bool:
        """Whether the main loop should stop."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the back buffer."""

    @abstractmethod
    def get_window(self) -> Window:
        """Return the platform's window."""


class Clock(ABC):
    """Source of elapsed time in seconds."""

    @abstractmethod
    def get_time(self) -> float:
        """Seconds since an arbitrary fixed origin."""


class Renderer(ABC):
    """Draws models with the current camera matrices."""

    @abstractmethod
    def begin_frame(self) -> None:
        """Clear the frame."""

    @abstractmethod
    def end_frame(self) -> None:
        """Finish and present the frame."""

    @abstractmethod
    def draw(self, model: Model, texture: Optional[Texture] = None) -> None:
        """Draw a model, with a texture or with the default one."""

    @abstractmethod
    def set_view_matrix(self, view: Any, projection: Any) -> None:
        """Set the camera's view and projection matrices."""

    @abstractmethod
    def initialize(self) -> bool:
        """Prepare the renderer; return False on failure."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release the renderer's resources."""


@dataclass
class PlatformEnv:
    """The platform, clock and renderer created together for one backend."""

    platform: Optional[Platform] = None
    clock: Optional[Clock] = None
    renderer: Optional[Renderer] = None

    def is_complete(self) -> bool:
        """Whether all three parts are present."""
        return self.platform is not None and self.clock is not None and self.renderer is not None