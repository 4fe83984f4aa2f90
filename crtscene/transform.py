"""Position, scale and rotation of an object, with quaternion helpers.

Quaternions are numpy arrays ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike


def angle_axis(angle: float, axis: ArrayLike) -> np.ndarray:
    """Return the quaternion rotating by an angle in radians about an axis."""
    axis_vector = np.asarray(axis, dtype=np.float64)
    if axis_vector.shape != (3,):
        raise ValueError("axis must have three components")
    half = angle / 2.0
    return np.array([math.cos(half), *(axis_vector * math.sin(half))])


def quaternion_multiply(first: ArrayLike, second: ArrayLike) -> np.ndarray:
    """Return the Hamilton product; the result applies ``second`` then ``first``."""
    w1, x1, y1, z1 = np.asarray(first, dtype=np.float64)
    w2, x2, y2, z2 = np.asarray(second, dtype=np.float64)
    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ]
    )


def quaternion_to_matrix(quaternion: ArrayLike) -> np.ndarray:
    """Return the 4x4 rotation matrix of a unit quaternion."""
    w, x, y, z = np.asarray(quaternion, dtype=np.float64)
    matrix = np.eye(4)
    matrix[:3, :3] = [
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
        [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x)],
        [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y)],
    ]
    return matrix


def _identity_quaternion() -> np.ndarray:
    return np.array([1.0, 0.0, 0.0, 0.0])


@dataclass(eq=False)
class Transform:
    """Placement of an object in the world."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    rotation: np.ndarray = field(default_factory=_identity_quaternion)

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=np.float64)
        self.scale = np.array(self.scale, dtype=np.float64)
        self.rotation = np.array(self.rotation, dtype=np.float64)
        if self.position.shape != (3,) or self.scale.shape != (3,):
            raise ValueError("position and scale must have three components")
        if self.rotation.shape != (4,):
            raise ValueError("rotation must be a quaternion of four components")

    def set_rotation_euler_xyz(self, angle_x: float, angle_y: float, angle_z: float) -> None:
        """Set the rotation from Euler angles in degrees, applied x, then y, then z."""
        around_x = angle_axis(math.radians(angle_x), (1.0, 0.0, 0.0))
        around_y = angle_axis(math.radians(angle_y), (0.0, 1.0, 0.0))
        around_z = angle_axis(math.radians(angle_z), (0.0, 0.0, 1.0))
        self.rotation = quaternion_multiply(quaternion_multiply(around_z, around_y), around_x)