"""A small 2D game engine core: vectors, collisions, actors, levels, animation timing and key state."""

__version__ = "0.1.0"