#!/usr/bin/env python3
# ascii_cube/errors.py
"""
Exceptions raised by the render pipeline.

Both describe invariant violations rather than recoverable conditions:
the loop never catches them.
"""

__all__ = [
    "RenderError",
    "DegenerateProjectionError",
    "RasterBoundsError",
]


class RenderError(Exception):
    """Base class for render pipeline failures."""


class DegenerateProjectionError(RenderError, ValueError):
    """A vertex landed on (or too near) the camera plane."""

    def __init__(self, index: int, depth: float):
        self.index = index
        self.depth = depth
        super().__init__(f"vertex {index} has view-space depth {depth!r}; cannot project")


class RasterBoundsError(RenderError, IndexError):
    """A rasterized cell fell outside the frame buffer."""

    def __init__(self, row: int, col: int, height: int, width: int):
        self.row = row
        self.col = col
        super().__init__(f"cell ({row}, {col}) outside {width}x{height} frame buffer")
