#!/usr/bin/env python3
# ascii_cube/rendering/projection.py
"""
Per-frame view transform and perspective projection.

The view matrix is rebuilt from the frame time on every call; nothing here
keeps state between frames.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from ascii_cube.errors import DegenerateProjectionError
from ascii_cube.linalg import Matrix, Vector, transform

__all__ = [
    "DEFAULT_CAMERA_Z",
    "MIN_DEPTH",
    "rotation_matrix",
    "project_point",
    "project_vertices",
]

# Pushes the cube away from the viewer so every vertex has negative depth.
DEFAULT_CAMERA_Z = -2.5

# Depths closer to zero than this are rejected by the perspective divide.
MIN_DEPTH = 1e-6


def rotation_matrix(t: float, camera_z: float = DEFAULT_CAMERA_Z) -> Matrix:
    """
    Rotation by ``t`` radians about the Y axis followed by a translation of
    ``camera_z`` along the depth axis.
    """
    c, s = math.cos(t), math.sin(t)
    return Matrix.from_columns(
        [  c, 0.0,   s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [ -s, 0.0,   c, 0.0],
        [0.0, 0.0, camera_z, 1.0],
    )


def project_point(
    matrix: Matrix,
    vertex: Vector,
    width: int,
    height: int,
    index: int = 0,
) -> Tuple[float, float]:
    """Transform one vertex and map it to character-cell coordinates."""
    view = transform(matrix, vertex)
    if not abs(view.z) >= MIN_DEPTH:
        raise DegenerateProjectionError(index, view.z)
    recip_z = 1.0 / view.z
    half_w = width * 0.5
    half_h = height * 0.5
    screen_x = view.x * recip_z * half_w + half_w
    screen_y = view.y * recip_z * half_h + half_h
    return screen_x, screen_y


def project_vertices(
    matrix: Matrix,
    vertices: Sequence[Vector],
    width: int,
    height: int,
) -> np.ndarray:
    """
    Project every vertex; returns an (N, 2) float array indexed like ``vertices``.
    Coordinates may fall outside the screen, the rasterizer deals with that.
    """
    out = np.empty((len(vertices), 2), dtype=np.float64)
    for i, v in enumerate(vertices):
        out[i] = project_point(matrix, v, width, height, index=i)
    return out
