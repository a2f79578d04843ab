"""Plain data types for meshes, models, textures and audio clips."""

from __future__ import annotations

from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass
class Vertex:
    """A single mesh vertex: position, normal and texture coordinate."""

    position: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tex_coord: Vec2 = (0.0, 0.0)


@dataclass
class Mesh:
    """Indexed triangle list."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


@dataclass
class Model:
    """A named collection of meshes."""

    name: str = ""
    meshes: list[Mesh] = field(default_factory=list)


@dataclass
class Texture:
    """Decoded image data, row by row, `channels` bytes per pixel."""

    width: int
    height: int
    channels: int
    pixels: bytes = b""
    name: str = ""


@dataclass
class AudioClip:
    """A loaded sound: its buffer handle, length in seconds and source path."""

    buffer_id: int = 0
    duration: float = 0.0
    path: str = ""