"""Scenes and the manager that holds the current one."""

from __future__ import annotations

from typing import Optional

from litegame.interfaces import Renderer, Window
from litegame.world import ECSWorld


class Scene:
    """One ECS world together with the renderer it draws with."""

    def __init__(self) -> None:
        self._world: Optional[ECSWorld] = None
        self.renderer: Optional[Renderer] = None

    def init(self, window: Window, renderer: Renderer) -> None:
        """Create a fresh world and register its built-in systems."""
        self.renderer = renderer
        self._world = ECSWorld()
        self._world.init(window, renderer)

    @property
    def world(self) -> ECSWorld:
        """The scene's ECS world; RuntimeError before `init`."""
        if self._world is None:
            raise RuntimeError("ECSWorld must not be null")
        return self._world

    def update(self, delta_time: float) -> None:
        self.world.update(delta_time)

    def render(self, alpha: float) -> None:
        self.world.render(alpha)


class SceneManager:
    """Holds the active scene and forwards updates and rendering to it."""

    def __init__(self) -> None:
        self.current_scene: Optional[Scene] = None

    def load_initial_scene(self, window: Window, renderer: Renderer) -> None:
        """Replace the current scene with a newly initialised one."""
        scene = Scene()
        scene.init(window, renderer)
        self.current_scene = scene

    def update(self, delta_time: float) -> None:
        """Update the current scene, if there is one."""
        if self.current_scene is not None:
            self.current_scene.update(delta_time)

    def render(self, alpha: float) -> None:
        """Render the current scene, if there is one."""
        if self.current_scene is not None:
            self.current_scene.render(alpha)

    @property
    def world(self) -> ECSWorld:
        """The current scene's world; RuntimeError if no scene is loaded."""
        if self.current_scene is None:
            raise RuntimeError("no scene loaded")
        return self.current_scene.world