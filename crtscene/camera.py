"""A free-flying perspective camera driven by keys, cursor and scroll wheel."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum, auto

import numpy as np
from numpy.typing import ArrayLike

from .linalg import look_at, normalize, perspective
from .logger import debug
from .shader import Shader


class Direction(Enum):
    """A direction the camera can move in."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


_MOVEMENT_ORDER = (
    Direction.FORWARD,
    Direction.BACKWARD,
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
)


class Camera:
    """Position, orientation and projection of the viewer."""

    FIELD_OF_VIEW = 45.0
    FIELD_OF_VIEW_LIMITS = (1.0, 90.0)
    NEAR = 0.1
    FAR = 100.0
    PITCH_LIMIT = 89.0
    SENSITIVITY = 0.025
    SPEED = 10.0
    ASPECT_RATIO = 1280.0 / 720.0

    def __init__(self, position: ArrayLike = (0.0, 0.0, 0.0)) -> None:
        self.position = np.array(position, dtype=np.float64)
        if self.position.shape != (3,):
            raise ValueError("camera position must have three components")
        self.model = np.eye(4)
        self.view = np.eye(4)
        self.projection = np.eye(4)
        self.right = np.zeros(3)
        self.up = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.yaw = 0.0
        self.pitch = 0.0
        self.direction = np.zeros(3)
        self.field_of_view = self.FIELD_OF_VIEW
        self._last_cursor_position: tuple[float, float] | None = None

    def update(self, keys: Iterable[Direction], delta_time: float) -> None:
        """Move in every held direction for the elapsed time."""
        held = set(keys)
        for direction in _MOVEMENT_ORDER:
            if direction in held:
                self.move(direction, delta_time)

    def update_view(self) -> None:
        """Rebuild the view matrix from position and orientation."""
        self.view = look_at(self.position, self.position + self.front, self.up)

    def update_projection(self) -> None:
        """Rebuild the projection matrix from the field of view."""
        self.projection = perspective(math.radians(self.field_of_view), self.ASPECT_RATIO, self.NEAR, self.FAR)

    def upload_view_projection(self, shader: Shader) -> None:
        """Send view and projection matrices to a shader."""
        shader.set_matrix4fv("u_view", self.view)
        shader.set_matrix4fv("u_projection", self.projection)

    def upload_model_view_projection(self, shader: Shader) -> None:
        """Send model, view and projection matrices to a shader."""
        shader.set_matrix4fv("u_model", self.model)
        shader.set_matrix4fv("u_view", self.view)
        shader.set_matrix4fv("u_projection", self.projection)

    def upload_position(self, shader: Shader) -> None:
        """Send the camera position to a shader."""
        shader.set_vector3f("u_view_position", self.position)

    def move(self, direction: Direction, delta_time: float) -> None:
        """Move along one of the camera's axes at the camera speed."""
        offsets = {
            Direction.FORWARD: self.front,
            Direction.BACKWARD: -self.front,
            Direction.LEFT: -self.right,
            Direction.RIGHT: self.right,
            Direction.UP: self.up,
            Direction.DOWN: -self.up,
        }
        velocity = self.SPEED * delta_time
        self.position = self.position + offsets[Direction(direction)] * velocity
        self.update_view()

    def rotate(self, x: float, y: float) -> None:
        """Turn the camera by the cursor's movement since the previous position."""
        cursor = (float(x), float(y))
        if self._last_cursor_position is None:
            self._last_cursor_position = cursor
        last_x, last_y = self._last_cursor_position
        offset_x = (cursor[0] - last_x) * self.SENSITIVITY
        offset_y = (last_y - cursor[1]) * self.SENSITIVITY
        self._last_cursor_position = cursor
        self._update_rotation(offset_x, offset_y)
        self._update_orientation()

    def scroll(self, x: float, y: float) -> None:
        """Zoom by narrowing or widening the field of view."""
        low, high = self.FIELD_OF_VIEW_LIMITS
        self.field_of_view = min(max(self.field_of_view - float(y), low), high)
        debug("FOV: {}", self.field_of_view)
        self.update_projection()

    def _update_rotation(self, offset_x: float, offset_y: float) -> None:
        self.yaw += offset_x
        self.pitch = min(max(self.pitch + offset_y, -self.PITCH_LIMIT), self.PITCH_LIMIT)
        theta = math.radians(self.yaw)
        omega = math.radians(self.pitch)
        self.direction = np.array(
            [math.cos(theta) * math.cos(omega), math.sin(omega), math.sin(theta) * math.cos(omega)]
        )

    def _update_orientation(self) -> None:
        self.front = normalize(self.direction)
        self.right = np.cross(self.front, self.up)
        self.update_view()