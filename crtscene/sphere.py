"""A unit sphere built from stacks and sectors of triangles."""

from __future__ import annotations

import math

import numpy as np

from .colour import GREY_RGB, high_precision_rgb
from .linalg import translate
from .mesh import Mesh, Topology, Vertex
from .shader import Shader


class Sphere:
    """A sphere of fixed radius placed at a position in the world."""

    RADIUS = 1.0
    STACKS = 50
    SECTORS = 50
    TOPOLOGY = Topology.TRIANGLE

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.position = np.array([x, y, z], dtype=np.float64)
        self.mesh = Mesh()
        self._create()

    @property
    def radius(self) -> float:
        """Radius of the sphere."""
        return self.RADIUS

    def _create(self) -> None:
        sector_step = 2.0 * math.pi / self.SECTORS
        stack_step = math.pi / self.STACKS
        length_inverse = 1.0 / self.RADIUS

        for stack_index in range(self.STACKS + 1):
            stack_angle = math.pi / 2.0 - stack_index * stack_step
            xy = self.RADIUS * math.cos(stack_angle)
            z = self.RADIUS * math.sin(stack_angle)
            for sector_index in range(self.SECTORS + 1):
                sector_angle = sector_index * sector_step
                x = xy * math.cos(sector_angle)
                y = xy * math.sin(sector_angle)
                normal = (x * length_inverse, y * length_inverse, z * length_inverse)
                uv = (sector_index / self.SECTORS, stack_index / self.STACKS)
                self.mesh.add_vertex(Vertex((x, y, z), normal, uv))

        row = self.SECTORS + 1
        for stack_index in range(self.STACKS):
            for sector_index in range(self.SECTORS):
                k1 = stack_index * row + sector_index
                k2 = k1 + row
                if stack_index != 0:
                    self.mesh.add_indices((k1, k2, k1 + 1))
                if stack_index != self.STACKS - 1:
                    self.mesh.add_indices((k1 + 1, k2, k2 + 1))

    def model_matrix(self) -> np.ndarray:
        """Return the model matrix; the mesh is already built at full size."""
        return translate(np.eye(4), self.position)

    def render(self, shader: Shader) -> None:
        """Set the model and colour uniforms and draw the sphere."""
        shader.set_matrix4fv("u_model", self.model_matrix())
        shader.set_vector3f("u_colour", high_precision_rgb(GREY_RGB))
        if not self.mesh.is_uploaded:
            self.mesh.upload()
        self.mesh.render(self.TOPOLOGY)