"""An axis-aligned bounding box drawn as a wireframe cube."""

from __future__ import annotations

import numpy as np

from .colour import WHITE_RGB
from .mesh import Mesh, Topology, Vertex
from .shader import Shader
from .sphere import Sphere

_INDICES = (
    0, 1,
    1, 2,
    2, 3,
    3, 0,
    4, 5,
    5, 6,
    6, 7,
    7, 4,
    0, 4,
    1, 5,
    2, 6,
    3, 7,
)


class AABB:
    """A cube anchored at its minimum corner, listed bottom to top, anti-clockwise."""

    TOPOLOGY = Topology.LINE

    def __init__(self, x: float, y: float, z: float, size: float) -> None:
        self.minimum = np.array([x, y, z], dtype=np.float64)
        self.maximum = self.minimum + size
        self.mesh = Mesh()
        min_x, min_y, min_z = self.minimum
        max_x, max_y, max_z = self.maximum
        corners = (
            (min_x, min_y, min_z),
            (min_x, min_y, max_z),
            (max_x, min_y, max_z),
            (max_x, min_y, min_z),
            (min_x, max_y, min_z),
            (min_x, max_y, max_z),
            (max_x, max_y, max_z),
            (max_x, max_y, min_z),
        )
        for corner in corners:
            self.mesh.add_vertex(Vertex(corner))
        self.mesh.add_indices(_INDICES)

    def render(self, shader: Shader) -> None:
        """Set the model and colour uniforms and draw the box edges."""
        shader.set_matrix4fv("u_model", np.eye(4))
        shader.set_vector3f("u_colour", WHITE_RGB)
        if not self.mesh.is_uploaded:
            self.mesh.upload()
        self.mesh.render(self.TOPOLOGY)

    def collide(self, sphere: Sphere) -> bool:
        """Tell whether the sphere touches or overlaps the box."""
        centre = np.asarray(sphere.position, dtype=np.float64)
        closest = np.clip(centre, self.minimum, self.maximum)
        delta = centre - closest
        return bool(np.dot(delta, delta) <= sphere.radius * sphere.radius)