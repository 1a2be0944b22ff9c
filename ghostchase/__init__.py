"""Game-AI building blocks for a grid-based ghost-chase game: maths, bodies, steering, pathfinding, decisions and state machines."""

__version__ = "0.1.0"