"""Real-time 3D scene with shadow mapping and a CRT post-processing pass, plus its building blocks."""

__version__ = "0.0.1"