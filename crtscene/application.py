"""The window, its event handlers and the main loop."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import Any

from .camera import Direction
from .display import DisplayManager, get_display_manager
from .engine import Engine
from .logger import error
from .shaders import ShaderManager, get_shader_manager

TITLE = "Octree Visualiser"

# Key symbols as reported by the windowing library.
KEY_ESCAPE = 0xFF1B
KEY_E = ord("e")
KEY_W = ord("w")
KEY_A = ord("a")
KEY_S = ord("s")
KEY_D = ord("d")
KEY_SPACE = ord(" ")
KEY_LSHIFT = 0xFFE1

MOVEMENT_KEYS = {
    KEY_W: Direction.FORWARD,
    KEY_S: Direction.BACKWARD,
    KEY_D: Direction.RIGHT,
    KEY_A: Direction.LEFT,
    KEY_SPACE: Direction.UP,
    KEY_LSHIFT: Direction.DOWN,
}

_CLEAR_COLOUR = (50.0 / 255.0, 51.0 / 255.0, 76.0 / 255.0, 0.0)


class Application:
    """Opens a window, forwards input to the engine and drives the frame loop."""

    def __init__(
        self,
        engine: Engine | None = None,
        display_manager: DisplayManager | None = None,
        shader_manager: ShaderManager | None = None,
    ) -> None:
        self.display_manager = display_manager if display_manager is not None else get_display_manager()
        self.shader_manager = shader_manager if shader_manager is not None else get_shader_manager()
        self.engine = engine if engine is not None else Engine(self.shader_manager, self.display_manager)
        self.should_close = False
        self.cursor_captured = False
        self._window: Any = None
        self._keys: Any = None
        self._start = time.perf_counter()
        self._last_time = 0.0
        self._cursor_x = 0.0
        self._cursor_y = 0.0

    def initialise(self) -> bool:
        """Create the window and its GL 3.3 core context; False if that fails."""
        try:
            import pyglet
            from pyglet.window import key

            config = pyglet.gl.Config(
                major_version=3,
                minor_version=3,
                forward_compatible=True,
                double_buffer=True,
                depth_size=24,
            )
            window = pyglet.window.Window(
                DisplayManager.WIDTH,
                DisplayManager.HEIGHT,
                caption=TITLE,
                resizable=True,
                config=config,
                vsync=False,
            )
        except Exception as exc:  # the windowing layer raises many kinds of errors
            error("Failed to create window: {}", exc)
            self._cleanup()
            return False

        self._keys = key.KeyStateHandler()
        window.push_handlers(self._keys)
        window.push_handlers(
            on_key_press=self.on_key_press,
            on_resize=self.on_resize,
            on_mouse_motion=self.on_mouse_motion,
            on_mouse_scroll=self.on_mouse_scroll,
        )
        self._window = window
        self._start = time.perf_counter()
        self._last_time = 0.0
        return True

    def load(self) -> None:
        """Set the viewport and load shaders and display settings."""
        if self._window is None:
            raise RuntimeError("application must be initialised before loading")
        from pyglet import gl

        width, height = self._window.get_framebuffer_size()
        gl.glViewport(0, 0, width, height)
        self.shader_manager.initialise()
        self.display_manager.initialise()

    def run(self) -> None:
        """Run frames until the window is asked to close, then release it."""
        if self._window is None:
            raise RuntimeError("application must be initialised before running")
        from pyglet import gl

        self.engine.initialise()
        gl.glEnable(gl.GL_DEPTH_TEST)
        try:
            while not self.should_close and not self._window.has_exit:
                self._window.switch_to()
                self._update()
                self._render()
                self._window.flip()
                self._window.dispatch_events()
        finally:
            self._cleanup()

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        """Close on Escape; toggle cursor capture on E."""
        if symbol == KEY_ESCAPE:
            self.should_close = True
        if symbol == KEY_E:
            self.cursor_captured = not self.cursor_captured
            if self._window is not None:
                self._window.set_exclusive_mouse(self.cursor_captured)
        return True

    def on_resize(self, width: int, height: int) -> bool:
        """Resize the viewport and record the new framebuffer size."""
        if self._window is not None:
            from pyglet import gl

            width, height = self._window.get_framebuffer_size()
            gl.glViewport(0, 0, width, height)
        self.display_manager.update(width, height)
        return True

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        """Turn the camera by the cursor's movement, with y growing downwards."""
        self._cursor_x += dx
        self._cursor_y -= dy
        self.engine.camera.rotate(self._cursor_x, self._cursor_y)

    def on_mouse_scroll(self, x: float, y: float, scroll_x: float, scroll_y: float) -> None:
        """Zoom the camera with the scroll wheel."""
        self.engine.camera.scroll(scroll_x, scroll_y)

    def _held_directions(self) -> list[Direction]:
        if self._keys is None:
            return []
        return [direction for symbol, direction in MOVEMENT_KEYS.items() if self._keys.get(symbol, False)]

    def _update(self) -> None:
        now = time.perf_counter() - self._start
        delta_time = now - self._last_time
        self._last_time = now
        self.engine.update(self._held_directions(), delta_time)

    def _render(self) -> None:
        from pyglet import gl

        gl.glClearColor(*_CLEAR_COLOUR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.engine.render()

    def _cleanup(self) -> None:
        if self._window is not None:
            self._window.close()
            self._window = None


def main(argv: Sequence[str] | None = None) -> int:
    """Open the scene window and run it until closed."""
    parser = argparse.ArgumentParser(prog="crtscene", description="Render a lit scene through a CRT filter.")
    parser.parse_args(argv)

    application = Application()
    if not application.initialise():
        error("Failed to initialise application")
        return 1
    application.load()
    application.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())