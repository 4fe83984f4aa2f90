"""Registry of shader programs loaded from a directory of source pairs."""

from __future__ import annotations

import functools
from collections.abc import Callable

from .files import basename_from_path, files_in_directory, parent_directory
from .logger import error, warn
from .shader import Shader

DIRECTORY = "resources/shaders/"
VERTEX_SHADER_EXTENSION = ".vert"
FRAGMENT_SHADER_EXTENSION = ".frag"


class ShaderManager:
    """Loads every ``name.vert``/``name.frag`` pair below a directory, keyed by name."""

    def __init__(
        self,
        directory: str = DIRECTORY,
        factory: Callable[[str, str], Shader] = Shader,
    ) -> None:
        self.directory = directory
        self.shaders: dict[str, Shader] = {}
        self._factory = factory

    def initialise(self) -> None:
        """Load a shader for every source file found below the directory."""
        for path in files_in_directory(self.directory):
            self.add_shader(path)

    def get_shader(self, name: str) -> Shader:
        """Return a loaded shader; an unknown name is logged and raises KeyError."""
        try:
            return self.shaders[name]
        except KeyError:
            error("Shader '{}' not found", name)
            raise KeyError(f"shader {name!r} not found") from None

    def add_shader(self, path: str) -> None:
        """Load the shader pair that a source file belongs to, unless already loaded."""
        basename = basename_from_path(path)
        if basename in self.shaders:
            warn("Shader '{}' is already loaded, skipping...", path)
            return
        shader_path = parent_directory(path) + "/" + basename
        self.shaders[basename] = self._factory(
            shader_path + VERTEX_SHADER_EXTENSION,
            shader_path + FRAGMENT_SHADER_EXTENSION,
        )


@functools.lru_cache(maxsize=1)
def get_shader_manager() -> ShaderManager:
    """Return the shared shader manager."""
    return ShaderManager()