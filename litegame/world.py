"""The ECS world: entities, components and the systems run over them."""

from __future__ import annotations

from typing import TypeVar

from litegame.ecs import Entity, EntityManager
from litegame.interfaces import Renderer, Window
from litegame.systems import CameraSystem, DrawSystem, RenderSystem, UpdateSystem

T = TypeVar("T")


class ECSWorld:
    """Owns an entity manager and runs its update and render systems in order."""

    def __init__(self) -> None:
        self.entity_manager = EntityManager()
        self._update_systems: list[UpdateSystem] = []
        self._render_systems: list[DrawSystem] = []

    def init(self, window: Window, renderer: Renderer) -> None:
        """Register the built-in render and camera systems."""
        self.add_render_system(RenderSystem(renderer, self.entity_manager))
        self.add_update_system(CameraSystem(window, renderer, self.entity_manager))

    def add_component(self, entity: Entity, component: object) -> None:
        self.entity_manager.add_component(entity, component)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        return self.entity_manager.get_component(entity, component_type)

    def add_update_system(self, system: UpdateSystem) -> None:
        self._update_systems.append(system)

    def add_render_system(self, system: DrawSystem) -> None:
        self._render_systems.append(system)

    def update(self, delta_time: float) -> None:
        """Run every update system in the order added."""
        for system in self._update_systems:
            system.update(delta_time)

    def render(self, alpha: float) -> None:
        """Run every render system in the order added."""
        for system in self._render_systems:
            system.render(alpha)