"""Game configuration loaded from a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class PlatformType(Enum):
    """Rendering backend to create."""

    OPENGL = "OpenGL"
    UNKNOWN = "Unknown"


def _member(document: Any, key: str) -> Any:
    """Look up `key` in a JSON object; a missing key or null document yields None."""
    if document is None:
        return None
    if not isinstance(document, dict):
        raise TypeError(f"cannot use key {key!r} with a JSON {type(document).__name__}")
    return document.get(key)


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise TypeError(f"type must be number, but is {type(value).__name__}")


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise TypeError(f"type must be string, but is {type(value).__name__}")


@dataclass
class Config:
    """Window and platform settings."""

    window_width: int = 1280
    window_height: int = 720
    window_title: str = "Game"
    platform_type: PlatformType = PlatformType.OPENGL

    @classmethod
    def load(cls, path: str) -> "Config":
        """Read a config file, falling back to defaults for whatever cannot be read.

        Fields are taken in order (width, height, title, platform); a malformed
        field stops reading and leaves it and the later fields at their defaults.
        """
        config = cls()
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError:
            logger.warning("[Config] Failed to open %s. Using default config.", path)
            return config

        try:
            document = json.loads(data)
            window = _member(document, "window")
            config.window_width = _as_int(_member(window, "width"))
            config.window_height = _as_int(_member(window, "height"))
            config.window_title = _as_str(_member(window, "title"))
            platform = _as_str(_member(document, "platform"))
            config.platform_type = (
                PlatformType.OPENGL if platform == PlatformType.OPENGL.value else PlatformType.UNKNOWN
            )
        except (ValueError, TypeError, OverflowError) as exc:
            logger.warning("[Config] Error parsing JSON: %s. Using defaults.", exc)

        return config