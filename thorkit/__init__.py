"""Helpers for 2D games: timing, randomness, input names, events, resources, animations, particles and shapes."""

__version__ = "0.1.0"

__all__ = [
    "algorithms",
    "animations",
    "connection",
    "exceptions",
    "graphics",
    "input_names",
    "joystick",
    "loaders",
    "particles",
    "random",
    "resource_holder",
    "shapes",
    "stopwatch",
]