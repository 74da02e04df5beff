"""Raycasting first-person maze explorer for .cub scene files."""

__version__ = "0.1.0"
__all__ = ["geometry", "raycast", "player", "textutil", "scene", "render", "app"]