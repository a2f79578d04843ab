"""Wavefront OBJ loading into a single-mesh model."""

from __future__ import annotations

from typing import Optional

from litegame.filesystem import FileSystem
from litegame.types import Mesh, Model, Vertex


def _floats(tokens: list[str], count: int) -> tuple[float, ...]:
    """Read up to `count` numbers; reading stops at the first bad token, the rest are 0."""
    values: list[float] = []
    for token in tokens[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def _split_reference(reference: str) -> tuple[str, str, str]:
    """Split a face element such as ``1/2/3``, ``1//3`` or ``1`` into its three parts."""
    parts = reference.split("/")
    position = parts[0]
    tex_coord = parts[1] if len(parts) > 1 else ""
    normal = parts[2] if len(parts) > 2 else ""
    return position, tex_coord, normal


def _parse_index(text: str, reference: str) -> int:
    try:
        return int(text) - 1
    except ValueError:
        raise ValueError(f"invalid index {text!r} in face element {reference!r}") from None


def _lookup(items: list, index: int, reference: str, what: str):
    if not 0 <= index < len(items):
        raise ValueError(f"{what} index out of range in face element {reference!r}")
    return items[index]


def parse_obj(text: str, name: str) -> Model:
    """Parse OBJ text into a model named `name` holding one mesh.

    Polygons are split into triangle fans; identical face elements share a vertex.
    """
    positions: list[tuple[float, ...]] = []
    tex_coords: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    vertices: list[Vertex] = []
    indices: list[int] = []
    unique: dict[str, int] = {}

    def vertex_index(reference: str) -> int:
        if reference not in unique:
            pos_text, tex_text, normal_text = _split_reference(reference)
            vertex = Vertex()
            vertex.position = _lookup(
                positions, _parse_index(pos_text, reference), reference, "position"
            )
            if tex_text:
                ti = _parse_index(tex_text, reference)
                if ti >= 0:
                    vertex.tex_coord = _lookup(tex_coords, ti, reference, "texture coordinate")
            if normal_text:
                ni = _parse_index(normal_text, reference)
                if ni >= 0:
                    vertex.normal = _lookup(normals, ni, reference, "normal")
            vertices.append(vertex)
            unique[reference] = len(vertices) - 1
        return unique[reference]

    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        prefix, args = tokens[0], tokens[1:]
        if prefix == "v":
            positions.append(_floats(args, 3))
        elif prefix == "vt":
            tex_coords.append(_floats(args, 2))
        elif prefix == "vn":
            normals.append(_floats(args, 3))
        elif prefix == "f":
            if len(args) < 3:
                continue
            first = args[0]
            for second, third in zip(args[1:], args[2:]):
                for reference in (first, second, third):
                    indices.append(vertex_index(reference))

    return Model(name=name, meshes=[Mesh(vertices=vertices, indices=indices)])


class ModelLoader:
    """Loads OBJ models through a file system."""

    def __init__(self, filesystem: Optional[FileSystem] = None) -> None:
        self.filesystem = filesystem if filesystem is not None else FileSystem()

    def load_from_obj(self, path: str) -> Model:
        """Read and parse an OBJ file; the model is named after `path`."""
        return parse_obj(self.filesystem.read_text_file(path), path)