"""Render and camera components and the systems that act on them."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from litegame.camera import CameraComponent
from litegame.ecs import EntityManager
from litegame.interfaces import Renderer, Window
from litegame.types import Model, Texture

logger = logging.getLogger(__name__)


@dataclass
class RenderComponent:
    """A model to draw, with an optional texture."""

    model: Optional[Model] = None
    texture: Optional[Texture] = None


@dataclass(frozen=True)
class MainCameraTag:
    """Marks the entity whose camera drives the renderer."""


class UpdateSystem(ABC):
    """A system run once per fixed update step."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the system by `delta_time` seconds."""


class DrawSystem(ABC):
    """A system run once per rendered frame."""

    @abstractmethod
    def render(self, alpha: float) -> None:
        """Draw, with `alpha` the fraction of an update step since the last one."""


def _ratio(width: int, height: int) -> float:
    """width / height with floating-point semantics for a zero height."""
    if height == 0:
        return math.nan if width == 0 else math.copysign(math.inf, width)
    return width / height


class CameraSystem(UpdateSystem):
    """Keeps camera matrices in step with the window and feeds the main camera to the renderer."""

    def __init__(self, window: Window, renderer: Renderer, entity_manager: EntityManager) -> None:
        self.window = window
        self.renderer = renderer
        self.entity_manager = entity_manager

    def update(self, delta_time: float) -> None:
        cameras = self.entity_manager.component_map(CameraComponent)
        main_tags = self.entity_manager.component_map(MainCameraTag)

        width, height = self.window.get_size()
        aspect = _ratio(width, height)
        for camera in cameras.values():
            camera.aspect = aspect
            camera.update_matrices()

        if not main_tags:
            logger.warning("[CameraSystem] Warning: No entity has MainCameraTag!")
            return
        if len(main_tags) > 1:
            logger.warning("[CameraSystem] Warning: Multiple entities have MainCameraTag!")

        entity_id = next(iter(main_tags))
        camera = cameras.get(entity_id)
        if camera is None:
            logger.warning(
                "[CameraSystem] Warning: Entity with MainCameraTag has no CameraComponent!"
            )
            return
        self.renderer.set_view_matrix(camera.view_matrix, camera.projection_matrix)


class RenderSystem(DrawSystem):
    """Draws every entity that has a render component with a model."""

    def __init__(self, renderer: Renderer, entity_manager: EntityManager) -> None:
        self.renderer = renderer
        self.entity_manager = entity_manager

    def render(self, alpha: float) -> None:
        self.renderer.begin_frame()
        for component in self.entity_manager.component_map(RenderComponent).values():
            if component.model is None:
                continue
            if component.texture is not None:
                self.renderer.draw(component.model, component.texture)
            else:
                self.renderer.draw(component.model)
        self.renderer.end_frame()