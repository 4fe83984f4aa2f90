"""Vertex and index storage for a drawable object, and its upload to the GPU."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

VERTEX_SIZE = 8 * 4
INDEX_SIZE = 4

POSITION_ATTRIBUTE = 0
NORMAL_ATTRIBUTE = 1
UV_ATTRIBUTE = 2

_MAX_INDEX = 2**32 - 1


class Topology(Enum):
    """How indices are grouped into primitives."""

    LINE = 0
    TRIANGLE = 1


def _floats(values: Sequence[float], count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(value) for value in values)
    if len(result) != count:
        raise ValueError(f"{name} must have {count} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """A vertex with a position, a normal and texture coordinates."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    uv: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3, "position"))
        object.__setattr__(self, "normal", _floats(self.normal, 3, "normal"))
        object.__setattr__(self, "uv", _floats(self.uv, 2, "uv"))


class Mesh:
    """Vertices and indices, drawable once uploaded to a vertex array."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []
        self._vertex_array: Any = None
        self._buffers: tuple[Any, ...] = ()

    @property
    def is_uploaded(self) -> bool:
        """Whether the mesh has been sent to the GPU."""
        return self._vertex_array is not None

    def add_vertex(self, vertex: Vertex) -> None:
        """Append one vertex."""
        if not isinstance(vertex, Vertex):
            raise TypeError(f"expected a Vertex, got {type(vertex).__name__}")
        self.vertices.append(vertex)

    def add_index(self, index: int) -> None:
        """Append one index; it must fit an unsigned 32-bit integer."""
        self.indices.append(self._checked_index(index))

    def add_vertices(
        self,
        positions: Iterable[Sequence[float]],
        normals: Iterable[Sequence[float]] | None = None,
        uvs: Iterable[Sequence[float]] | None = None,
    ) -> None:
        """Append vertices built from parallel lists; missing normals and uvs are zero."""
        position_list = list(positions)
        count = len(position_list)
        normal_list = [(0.0, 0.0, 0.0)] * count if normals is None else list(normals)
        uv_list = [(0.0, 0.0)] * count if uvs is None else list(uvs)
        if len(normal_list) != count or len(uv_list) != count:
            raise ValueError("positions, normals and uvs must have the same length")
        self.vertices.extend(
            Vertex(position, normal, uv) for position, normal, uv in zip(position_list, normal_list, uv_list)
        )

    def add_indices(self, indices: Iterable[int]) -> None:
        """Append several indices; nothing is added if any of them is invalid."""
        checked = [self._checked_index(index) for index in indices]
        self.indices.extend(checked)

    def vertex_bytes(self) -> int:
        """Size of the packed vertex data in bytes."""
        return len(self.vertices) * VERTEX_SIZE

    def index_bytes(self) -> int:
        """Size of the packed index data in bytes."""
        return len(self.indices) * INDEX_SIZE

    def upload(self) -> None:
        """Copy vertices and indices into GPU buffers; needs a current GL context."""
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        vertex_data = np.array(
            [(*vertex.position, *vertex.normal, *vertex.uv) for vertex in self.vertices],
            dtype=np.float32,
        ).reshape(-1, 8)
        index_data = np.array(self.indices, dtype=np.uint32)

        vertex_array = VertexArray()
        vertex_array.bind()

        index_buffer = BufferObject(max(self.index_bytes(), INDEX_SIZE), usage=gl.GL_STATIC_DRAW)
        if self.indices:
            index_buffer.set_data(index_data.tobytes())
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, index_buffer.id)

        vertex_buffer = BufferObject(max(self.vertex_bytes(), VERTEX_SIZE), usage=gl.GL_STATIC_DRAW)
        if self.vertices:
            vertex_buffer.set_data(vertex_data.tobytes())
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vertex_buffer.id)

        layout = ((POSITION_ATTRIBUTE, 3, 0), (NORMAL_ATTRIBUTE, 3, 12), (UV_ATTRIBUTE, 2, 24))
        for attribute, _, _ in layout:
            gl.glEnableVertexAttribArray(attribute)
        for attribute, size, offset in layout:
            gl.glVertexAttribPointer(attribute, size, gl.GL_FLOAT, gl.GL_FALSE, VERTEX_SIZE, offset)

        vertex_array.unbind()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

        self._vertex_array = vertex_array
        self._buffers = (vertex_buffer, index_buffer)

    def render(self, topology: Topology) -> None:
        """Draw the indexed primitives of the uploaded mesh."""
        topology = Topology(topology)
        if self._vertex_array is None:
            raise RuntimeError("mesh must be uploaded before it is rendered")
        from pyglet import gl

        mode = gl.GL_LINES if topology is Topology.LINE else gl.GL_TRIANGLES
        self._vertex_array.bind()
        gl.glDrawElements(mode, len(self.indices), gl.GL_UNSIGNED_INT, None)
        self._vertex_array.unbind()

    @staticmethod
    def _checked_index(index: int) -> int:
        value = operator.index(index)
        if not 0 <= value <= _MAX_INDEX:
            raise ValueError(f"index {value} does not fit an unsigned 32-bit integer")
        return value