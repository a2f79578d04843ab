"""Top-level game object that wires platform, renderer, scenes and resources."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from litegame.config import Config, PlatformType
from litegame.game_loop import GameLoop
from litegame.interfaces import PlatformEnv, Renderer
from litegame.resource_manager import ResourceManager
from litegame.scene import SceneManager
from litegame.world import ECSWorld

logger = logging.getLogger(__name__)

EnvFactory = Callable[[PlatformType, int, int, str], PlatformEnv]

DEFAULT_CONFIG_PATH = "../config.json"


class Game:
    """Creates the platform environment from a config and runs the main loop."""

    def __init__(self, env_factory: EnvFactory, resources: Optional[ResourceManager] = None) -> None:
        self.env_factory = env_factory
        self.resources = resources if resources is not None else ResourceManager()
        self.renderer: Optional[Renderer] = None
        self.scene_manager: Optional[SceneManager] = None
        self.game_loop: Optional[GameLoop] = None

    def init(self, config_path: str = DEFAULT_CONFIG_PATH) -> bool:
        """Set everything up; return False if the platform or renderer could not be created."""
        config = Config.load(config_path)
        logger.info("[Game] Initializing...")

        env = self.env_factory(
            config.platform_type,
            config.window_width,
            config.window_height,
            config.window_title,
        )
        if not env.is_complete():
            logger.error("[Game] Failed to initialize platform environment!")
            return False
        logger.info("[Game] Initialized platform environment")

        self.renderer = env.renderer
        if not self.renderer.initialize():
            logger.error("[Game] Failed to initialize renderer!")
            return False
        logger.info("[Game] Initialized renderer")

        self.scene_manager = SceneManager()
        self.scene_manager.load_initial_scene(env.platform.get_window(), self.renderer)
        logger.info("[Game] Initialized scene")

        self.game_loop = GameLoop(self.scene_manager, env.clock, env.platform)
        logger.info("[Game] Initialized game loop")

        self.resources.init()
        logger.info("[Game] Initialized.")
        return True

    def run(self) -> None:
        """Run the main loop, if initialisation got that far."""
        if self.game_loop is not None:
            self.game_loop.run()

    def shutdown(self) -> None:
        """Shut the renderer down and drop the loop, scenes and renderer."""
        logger.info("[Game] Shutting down...")
        if self.renderer is not None:
            self.renderer.shutdown()
        self.game_loop = None
        self.scene_manager = None
        self.renderer = None
        logger.info("[Game] Shutdown complete.")

    @property
    def world(self) -> ECSWorld:
        """The current scene's world; RuntimeError if no scene is loaded."""
        if self.scene_manager is None:
            raise RuntimeError("game is not initialised")
        return self.scene_manager.world