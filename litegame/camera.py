"""Camera component and the view/projection matrix helpers it uses.

Matrices are 4x4 numpy arrays that transform column vectors (``m @ v``),
in a right-handed system with clip-space depth from -1 to 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def look_at(eye, target, up) -> np.ndarray:
    """View matrix for a camera at `eye` looking at `target`."""
    eye = np.asarray(eye, dtype=float)
    target = np.asarray(target, dtype=float)
    up = np.asarray(up, dtype=float)

    forward = _normalize(target - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)

    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye)
    matrix[1, 3] = -np.dot(upward, eye)
    matrix[2, 3] = np.dot(forward, eye)
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; `fovy` is the vertical field of view in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")

    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def _vec3(x: float, y: float, z: float):
    return lambda: np.array([x, y, z], dtype=float)


@dataclass(eq=False)
class CameraComponent:
    """Camera placement and lens; `fov` is in degrees."""

    position: np.ndarray = field(default_factory=_vec3(0.0, 0.0, 5.0))
    target: np.ndarray = field(default_factory=_vec3(0.0, 0.0, 0.0))
    up: np.ndarray = field(default_factory=_vec3(0.0, 1.0, 0.0))

    fov: float = 45.0
    aspect: float = 4.0 / 3.0
    near_plane: float = 0.1
    far_plane: float = 100.0

    view_matrix: np.ndarray = field(default_factory=lambda: np.zeros((4, 4)))
    projection_matrix: np.ndarray = field(default_factory=lambda: np.zeros((4, 4)))

    def update_matrices(self) -> None:
        """Recompute the view and projection matrices from the current settings."""
        self.view_matrix = look_at(self.position, self.target, self.up)
        self.projection_matrix = perspective(
            math.radians(self.fov), self.aspect, self.near_plane, self.far_plane
        )