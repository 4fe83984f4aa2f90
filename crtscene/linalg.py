"""Small 4x4 matrix helpers following right-handed OpenGL conventions.

Matrices are numpy arrays in mathematical (row-major) layout, so a point is
transformed with ``matrix @ point``. They are transposed when sent to the GPU.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike


def _vector3(vector: ArrayLike, name: str) -> np.ndarray:
    array = np.asarray(vector, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"{name} must have three components, got shape {array.shape}")
    return array


def normalize(vector: ArrayLike) -> np.ndarray:
    """Return the vector scaled to unit length."""
    array = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(array))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError("cannot normalise a vector of zero or non-finite length")
    return array / length


def perspective(field_of_view: float, aspect_ratio: float, near: float, far: float) -> np.ndarray:
    """Build a perspective projection; the field of view is vertical and in radians."""
    if aspect_ratio == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(field_of_view / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect_ratio * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye: ArrayLike, centre: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Build a view matrix for an eye looking at a centre point."""
    eye_vector = _vector3(eye, "eye")
    forward = normalize(_vector3(centre, "centre") - eye_vector)
    side = normalize(np.cross(forward, _vector3(up, "up")))
    upward = np.cross(side, forward)
    matrix = np.eye(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye_vector))
    matrix[1, 3] = -float(np.dot(upward, eye_vector))
    matrix[2, 3] = float(np.dot(forward, eye_vector))
    return matrix


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Build an orthographic projection of the given box."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic box must have non-zero extent on every axis")
    matrix = np.eye(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def translate(matrix: ArrayLike, offset: ArrayLike) -> np.ndarray:
    """Return the matrix followed by a translation in its local space."""
    translation = np.eye(4)
    translation[:3, 3] = _vector3(offset, "offset")
    return np.asarray(matrix, dtype=np.float64) @ translation


def scale(matrix: ArrayLike, factors: ArrayLike) -> np.ndarray:
    """Return the matrix followed by a per-axis scale in its local space."""
    scaling = np.diag([*_vector3(factors, "factors"), 1.0])
    return np.asarray(matrix, dtype=np.float64) @ scaling