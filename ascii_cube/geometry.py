#!/usr/bin/env python3
# ascii_cube/geometry.py
"""
Fixed cube geometry.

    4    +------+  6
        /|     /|
    5  +------+ |  7
       | |    | |
    0  | +----|-+  2
       |/     |/
    1  +------+    3

Faces list their vertex indices in winding order; the cull test only
looks at the first three.
"""

from typing import Tuple

from ascii_cube.linalg import Vector

__all__ = [
    "VERTICES",
    "FACES",
    "face_edges",
]

VERTICES: Tuple[Vector, ...] = (
    Vector(-1.0, -1.0, -1.0, 1.0),
    Vector(-1.0, -1.0,  1.0, 1.0),
    Vector( 1.0, -1.0, -1.0, 1.0),
    Vector( 1.0, -1.0,  1.0, 1.0),
    Vector(-1.0,  1.0, -1.0, 1.0),
    Vector(-1.0,  1.0,  1.0, 1.0),
    Vector( 1.0,  1.0, -1.0, 1.0),
    Vector( 1.0,  1.0,  1.0, 1.0),
)

FACES: Tuple[Tuple[int, int, int, int], ...] = (
    (1, 5, 7, 3),
    (3, 7, 6, 2),
    (0, 4, 5, 1),
    (2, 6, 4, 0),
    (0, 1, 3, 2),
    (5, 4, 6, 7),
)


def face_edges(face: Tuple[int, ...]) -> Tuple[Tuple[int, int], ...]:
    """
    Return (start, end) index pairs in draw order.
    The first edge closes the loop: it runs from face[0] back to face[-1].
    """
    end = face[-1]
    edges = []
    for start in face:
        edges.append((start, end))
        end = start
    return tuple(edges)
