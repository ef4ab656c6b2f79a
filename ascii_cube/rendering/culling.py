#!/usr/bin/env python3
# ascii_cube/rendering/culling.py
"""
Screen-space back-face test.

Valid for the cube because its faces are planar convex quads: the winding
of the first three projected vertices decides the orientation of the face.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np

__all__ = [
    "is_back_facing",
    "visible_faces",
]

logger = logging.getLogger("ascii_cube.culling")

Point = Sequence[float]


def is_back_facing(p0: Point, p1: Point, p2: Point) -> bool:
    """
    True when the face should be culled.

    Compares the two halves of the 2D cross product of (p1 - p0) and
    (p2 - p1). Strict ``>``: a zero cross product (collinear points) is drawn.
    """
    dx0, dy0 = p1[0] - p0[0], p1[1] - p0[1]
    dx1, dy1 = p2[0] - p1[0], p2[1] - p1[1]
    return bool(dx0 * dy1 > dx1 * dy0)


def visible_faces(
    faces: Iterable[Tuple[int, ...]],
    screen_pos: np.ndarray,
) -> List[Tuple[int, ...]]:
    """Return the faces that pass the cull test, in their original order."""
    out = []
    for face in faces:
        p0, p1, p2 = (screen_pos[i] for i in face[:3])
        if not is_back_facing(p0, p1, p2):
            out.append(face)
    logger.debug("visible faces: %d", len(out))
    return out
