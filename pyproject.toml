[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crtscene"
version = "0.0.1"
description = "A small real-time 3D scene with shadow mapping and a CRT post-processing filter"
requires-python = ">=3.10"
keywords = ["opengl", "shader", "crt", "rendering", "shadow-mapping", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crtscene = "crtscene.application:main"

[tool.hatch.build.targets.wheel]
packages = ["crtscene"]

[tool.pytest.ini_options]
addopts = "-ra"
