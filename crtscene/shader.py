"""A GPU shader program and the uniforms set on it."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from .files import read_file
from .logger import error


def _components(name: str, args: Sequence[Any], count: int) -> tuple[float, ...]:
    values = tuple(args[0]) if len(args) == 1 else tuple(args)
    if len(values) != count:
        raise TypeError(f"uniform {name!r} needs {count} components, got {len(values)}")
    return tuple(float(value) for value in values)


class Shader:
    """A vertex and fragment shader linked into one program.

    Uniform values are remembered in ``uniforms`` and sent to the program when
    one has been built; without paths no program is built.
    """

    def __init__(self, vertex_shader_path: str | None = None, fragment_shader_path: str | None = None) -> None:
        if (vertex_shader_path is None) != (fragment_shader_path is None):
            raise ValueError("both a vertex and a fragment shader path are required")
        self.vertex_shader_path = vertex_shader_path
        self.fragment_shader_path = fragment_shader_path
        self.uniforms: dict[str, Any] = {}
        self._program: Any = None
        if vertex_shader_path is not None and fragment_shader_path is not None:
            self._program = self._build(vertex_shader_path, fragment_shader_path)

    @staticmethod
    def _build(vertex_shader_path: str, fragment_shader_path: str) -> Any:
        from pyglet.graphics.shader import Shader as StageShader
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        vertex_source = read_file(vertex_shader_path)
        fragment_source = read_file(fragment_shader_path)
        try:
            vertex = StageShader(vertex_source, "vertex")
            fragment = StageShader(fragment_source, "fragment")
        except ShaderException as exc:
            error("Compile Error: \n {}", exc)
            return None
        try:
            program = ShaderProgram(vertex, fragment)
        except ShaderException as exc:
            error("Link Error: \n {}", exc)
            program = None
        vertex.delete()
        fragment.delete()
        return program

    def use(self) -> None:
        """Make this program the active one."""
        if self._program is None:
            raise RuntimeError("shader program has not been built")
        self._program.use()

    def detach(self) -> None:
        """Stop using this program."""
        if self._program is not None:
            self._program.stop()

    def _set(self, name: str, value: Any, gpu_value: Any) -> None:
        self.uniforms[name] = value
        if self._program is None:
            return
        from pyglet.graphics.shader import ShaderException

        try:
            self._program[name] = gpu_value
        except (ShaderException, KeyError):
            # An inactive uniform is ignored, as a location of -1 would be.
            return

    def set_float(self, name: str, value: float) -> None:
        """Set a float uniform."""
        number = float(value)
        self._set(name, number, number)

    def set_integer(self, name: str, value: int) -> None:
        """Set an integer or sampler uniform."""
        number = int(value)
        self._set(name, number, number)

    def set_vector2f(self, name: str, *args: Any) -> None:
        """Set a vec2 uniform from two numbers or one two-element sequence."""
        vector = _components(name, args, 2)
        self._set(name, vector, vector)

    def set_vector3f(self, name: str, *args: Any) -> None:
        """Set a vec3 uniform from three numbers or one three-element sequence."""
        vector = _components(name, args, 3)
        self._set(name, vector, vector)

    def set_matrix4fv(self, name: str, matrix: ArrayLike) -> None:
        """Set a mat4 uniform from a 4x4 matrix in row-major mathematical layout."""
        array = np.array(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError(f"uniform {name!r} needs a 4x4 matrix, got shape {array.shape}")
        self._set(name, array, tuple(float(value) for value in array.T.flatten()))