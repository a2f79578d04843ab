"""Cached loading of models and textures."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from litegame.model_loader import ModelLoader
from litegame.texture_loader import TextureLoader
from litegame.types import Model, Texture

logger = logging.getLogger(__name__)


class _ModelSource(Protocol):
    def load_from_obj(self, path: str) -> Model: ...


class _TextureSource(Protocol):
    def load_from_file(self, path: str) -> Texture: ...


class ResourceManager:
    """Loads resources through pluggable loaders and caches them by path."""

    def __init__(
        self,
        model_loader: Optional[_ModelSource] = None,
        texture_loader: Optional[_TextureSource] = None,
    ) -> None:
        self.model_loader = model_loader
        self.texture_loader = texture_loader
        self._models: dict[str, Model] = {}
        self._textures: dict[str, Texture] = {}

    def init(self) -> bool:
        """Install the default OBJ and image loaders."""
        self.set_model_loader(ModelLoader())
        self.set_texture_loader(TextureLoader())
        return True

    def shutdown(self) -> None:
        """Drop every cached resource and both loaders."""
        self._models.clear()
        self._textures.clear()
        self.model_loader = None
        self.texture_loader = None

    def set_model_loader(self, loader: Optional[_ModelSource]) -> None:
        self.model_loader = loader

    def set_texture_loader(self, loader: Optional[_TextureSource]) -> None:
        self.texture_loader = loader

    def load_model(self, path: str) -> Optional[Model]:
        """Return the cached model for `path`, loading it first if needed; None on failure."""
        if path in self._models:
            return self._models[path]
        if self.model_loader is None:
            raise RuntimeError("no model loader set")
        try:
            model = self.model_loader.load_from_obj(path)
        except Exception:
            logger.error("[ResourceManager] Failed to load model: %s", path)
            return None
        self._models[path] = model
        return model

    def get_model(self, path: str) -> Optional[Model]:
        """The cached model for `path`, or None."""
        return self._models.get(path)

    def load_texture(self, path: str) -> Optional[Texture]:
        """Return the cached texture for `path`, loading it first if needed; None on failure."""
        if path in self._textures:
            return self._textures[path]
        if self.texture_loader is None:
            raise RuntimeError("no texture loader set")
        try:
            texture = self.texture_loader.load_from_file(path)
        except Exception:
            logger.error("[ResourceManager] Failed to load texture: %s", path)
            return None
        self._textures[path] = texture
        return texture

    def get_texture(self, path: str) -> Optional[Texture]:
        """The cached texture for `path`, or None."""
        return self._textures.get(path)