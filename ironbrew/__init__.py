"""Ironbrew Inn, a terminal roguelike: game logic, rendering helpers and a console loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]