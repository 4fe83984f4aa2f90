"""The scene: a shadow pass, a lit scene pass into a texture and a CRT post-process pass."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from .camera import Camera, Direction
from .display import DisplayManager, get_display_manager
from .linalg import look_at, normalize, ortho
from .quad import Quad
from .shaders import ShaderManager, get_shader_manager
from .sphere import Sphere

SHADOW_MAP_SIZE = 1024

_LIGHT_DISTANCE = 10.0

# Maps clip space [-1, 1] into texture space [0, 1].
_BIAS = np.array(
    [
        [0.5, 0.0, 0.0, 0.5],
        [0.0, 0.5, 0.0, 0.5],
        [0.0, 0.0, 0.5, 0.5],
        [0.0, 0.0, 0.0, 1.0],
    ]
)


def light_space_matrix() -> np.ndarray:
    """Return the projection-view matrix of the directional light casting shadows."""
    light_direction = normalize((-1.0, -1.0, 0.0))
    light_position = -light_direction * _LIGHT_DISTANCE
    projection = ortho(-10.0, 10.0, -10.0, 10.0, -10.0, 20.0)
    view = look_at(light_position, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    return projection @ view


@dataclass(frozen=True)
class _RenderTargets:
    fbo: int
    texture: int
    rbo: int
    shadow_fbo: int
    shadow_texture: int


def _generate(function: Callable[..., Any]) -> int:
    from pyglet import gl

    handle = gl.GLuint()
    # The GL binding declares a pointer argument, so the handle is passed by reference.
    function(1, handle)
    return handle.value


class Engine:
    """Owns the camera and the scene objects and renders a frame through three passes."""

    NUMBER_OF_SPHERES = 10

    def __init__(
        self,
        shader_manager: ShaderManager | None = None,
        display_manager: DisplayManager | None = None,
    ) -> None:
        self.camera = Camera()
        self.spheres: list[Sphere] = []
        self.quads: list[Quad] = []
        self.crt = Quad()
        self._shader_manager = shader_manager if shader_manager is not None else get_shader_manager()
        self._display_manager = display_manager if display_manager is not None else get_display_manager()
        self._targets: _RenderTargets | None = None

    def initialise(self) -> None:
        """Build the scene and create the GPU render targets; needs a current GL context."""
        from pyglet import gl

        self.camera.update_projection()

        self.quads.append(Quad(0.0, -1.0, 0.0, 3.0, 3.0, -90.0, 0.0, 0.0))
        self.spheres.append(Sphere())

        for quad in self.quads:
            quad.mesh.upload()
        self.crt.mesh.upload()

        fbo = _generate(gl.glGenFramebuffers)
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, fbo)
        texture = _generate(gl.glGenTextures)
        rbo = _generate(gl.glGenRenderbuffers)
        self._allocate_scene_target(texture, rbo, self._display_manager.width, self._display_manager.height)

        shadow_fbo = _generate(gl.glGenFramebuffers)
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, shadow_fbo)
        shadow_texture = _generate(gl.glGenTextures)
        gl.glBindTexture(gl.GL_TEXTURE_2D, shadow_texture)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            gl.GL_DEPTH_COMPONENT16,
            SHADOW_MAP_SIZE,
            SHADOW_MAP_SIZE,
            0,
            gl.GL_DEPTH_COMPONENT,
            gl.GL_FLOAT,
            None,
        )
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_COMPARE_MODE, gl.GL_COMPARE_REF_TO_TEXTURE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_COMPARE_FUNC, gl.GL_LESS)
        gl.glFramebufferTexture2D(gl.GL_FRAMEBUFFER, gl.GL_DEPTH_ATTACHMENT, gl.GL_TEXTURE_2D, shadow_texture, 0)

        gl.glDrawBuffer(gl.GL_NONE)
        gl.glReadBuffer(gl.GL_NONE)

        self._targets = _RenderTargets(fbo, texture, rbo, shadow_fbo, shadow_texture)

    def update(self, keys: Iterable[Direction], delta_time: float) -> None:
        """Advance the camera by the directions held during the elapsed time."""
        self.camera.update(keys, delta_time)

    def render(self) -> None:
        """Draw the shadow map, the lit scene into a texture, then the CRT-filtered result."""
        if self._targets is None:
            raise RuntimeError("engine must be initialised before it renders")
        from pyglet import gl

        targets = self._targets

        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, targets.shadow_fbo)
        gl.glViewport(0, 0, SHADOW_MAP_SIZE, SHADOW_MAP_SIZE)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glClear(gl.GL_DEPTH_BUFFER_BIT)

        shadow = self._shader_manager.get_shader("shadow")
        shadow.use()
        light_space = light_space_matrix()
        shadow.set_matrix4fv("u_light_space", light_space)
        self._draw_scene(shadow)

        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, targets.fbo)
        display = self._display_manager
        width, height = display.width, display.height
        if display.is_window_resized:
            self._allocate_scene_target(targets.texture, targets.rbo, width, height)
            gl.glViewport(0, 0, width, height)

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glViewport(0, 0, width, height)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        scene = self._shader_manager.get_shader("scene")
        scene.use()
        self.camera.upload_model_view_projection(scene)
        self.camera.upload_position(scene)

        scene.set_vector3f("u_light.direction", -0.2, -1.0, -0.3)
        scene.set_vector3f("u_light.ambient", (0.1, 0.1, 0.1))
        scene.set_vector3f("u_light.diffuse", (0.8, 0.8, 0.8))
        scene.set_vector3f("u_light.specular", (1.0, 1.0, 1.0))
        scene.set_matrix4fv("u_bias", _BIAS @ light_space)
        scene.set_matrix4fv("u_light_space", light_space)
        scene.set_float("u_fog.start", 1.0)
        scene.set_float("u_fog.end", 50.0)
        scene.set_vector3f("u_fog.colour", (0.5, 0.5, 0.5))

        scene.set_integer("u_shadow_map", 1)
        gl.glActiveTexture(gl.GL_TEXTURE1)
        gl.glBindTexture(gl.GL_TEXTURE_2D, targets.shadow_texture)
        self._draw_scene(scene)

        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, 0)
        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        crt = self._shader_manager.get_shader("crt")
        crt.use()
        crt.set_integer("u_scene", 0)
        crt.set_float("u_brightness", 1.0)
        crt.set_float("u_vignette_opacity", 1.0)
        crt.set_float("u_vignette_roundness", 1.0)
        crt.set_vector2f("u_curvature", 4.0, 4.0)
        crt.set_vector2f("u_resolution", float(width), float(height))
        crt.set_vector2f("u_scanline_opacity", 0.25, 0.25)

        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, targets.texture)
        self.crt.render(crt)

        display.set_is_window_resized(False)

    def _draw_scene(self, shader: Any) -> None:
        for sphere in self.spheres:
            sphere.render(shader)
        for quad in self.quads:
            quad.render(shader)

    @staticmethod
    def _allocate_scene_target(texture: int, rbo: int, width: int, height: int) -> None:
        from pyglet import gl

        gl.glBindTexture(gl.GL_TEXTURE_2D, texture)
        gl.glTexImage2D(gl.GL_TEXTURE_2D, 0, gl.GL_RGB8, width, height, 0, gl.GL_RGB, gl.GL_UNSIGNED_BYTE, None)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glFramebufferTexture2D(gl.GL_FRAMEBUFFER, gl.GL_COLOR_ATTACHMENT0, gl.GL_TEXTURE_2D, texture, 0)

        gl.glBindRenderbuffer(gl.GL_RENDERBUFFER, rbo)
        gl.glRenderbufferStorage(gl.GL_RENDERBUFFER, gl.GL_DEPTH24_STENCIL8, width, height)
        gl.glFramebufferRenderbuffer(gl.GL_FRAMEBUFFER, gl.GL_DEPTH_STENCIL_ATTACHMENT, gl.GL_RENDERBUFFER, rbo)