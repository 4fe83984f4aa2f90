"""A flat rectangle with normals and texture coordinates."""

from __future__ import annotations

import numpy as np

from .colour import GREY_RGB, high_precision_rgb
from .linalg import scale, translate
from .mesh import Mesh, Topology
from .shader import Shader
from .transform import Transform, quaternion_to_matrix

_VERTICES = (
    (-1.0, -1.0, 0.0),
    (1.0, -1.0, 0.0),
    (1.0, 1.0, 0.0),
    (-1.0, 1.0, 0.0),
)
_NORMALS = ((0.0, 0.0, 1.0),) * 4
_UVS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_INDICES = (0, 1, 2, 2, 3, 0)


class Quad:
    """A square of side two in the xy plane, placed by a transform."""

    TOPOLOGY = Topology.TRIANGLE

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        width: float = 1.0,
        height: float = 1.0,
        angle_x: float = 0.0,
        angle_y: float = 0.0,
        angle_z: float = 0.0,
    ) -> None:
        self.transform = Transform(position=(x, y, z), scale=(width, height, 1.0))
        self.transform.set_rotation_euler_xyz(angle_x, angle_y, angle_z)
        self.mesh = Mesh()
        self.mesh.add_vertices(_VERTICES, _NORMALS, _UVS)
        self.mesh.add_indices(_INDICES)

    def model_matrix(self) -> np.ndarray:
        """Return translation, then rotation, then scale as one matrix."""
        model = translate(np.eye(4), self.transform.position)
        model = model @ quaternion_to_matrix(self.transform.rotation)
        return scale(model, self.transform.scale)

    def render(self, shader: Shader) -> None:
        """Set the model and colour uniforms and draw the uploaded quad."""
        shader.set_matrix4fv("u_model", self.model_matrix())
        shader.set_vector3f("u_colour", high_precision_rgb(GREY_RGB))
        self.mesh.render(self.TOPOLOGY)