#!/usr/bin/env python3
# ascii_cube/rendering/renderer.py
"""
Frame renderer for the spinning cube.

- Pure API: CubeRenderer.render_frame(frame_number) -> buffer
- Stateful API: CubeRenderer.next_frame() renders the current frame and
  advances the counter; the counter is the only state carried between frames.
- Buffers are numpy uint8 grids, see ascii_cube.rendering.raster.

Pipeline per frame: time -> rotation matrix -> projected vertices ->
cull test per face -> edges rasterized into a fresh buffer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ascii_cube.config import Config
from ascii_cube.geometry import FACES, VERTICES, face_edges
from ascii_cube.linalg import Matrix, Vector
from ascii_cube.rendering.culling import visible_faces
from ascii_cube.rendering.projection import project_vertices, rotation_matrix
from ascii_cube.rendering.raster import BOUNDS_POLICIES, draw_line, frame_to_lines, new_frame, plot

__all__ = [
    "Glyphs",
    "CubeRenderer",
]


@dataclass(frozen=True)
class Glyphs:
    blank: str = " "
    horizontal: str = "-"
    vertical: str = "|"
    vertex: str = "."


@dataclass
class CubeRenderer:
    """
    Renders cube frames into character buffers.
    Build with CubeRenderer.from_config(cfg) to pick up user settings.
    """
    width: int = 80
    height: int = 40
    time_step: float = 0.01
    camera_z: float = -2.5
    glyphs: Glyphs = field(default_factory=Glyphs)
    show_vertices: bool = False
    bounds_policy: str = "drop"
    frame_number: int = 0
    vertices: Sequence[Vector] = VERTICES
    faces: Sequence[Tuple[int, ...]] = FACES

    def __post_init__(self):
        if self.bounds_policy not in BOUNDS_POLICIES:
            raise ValueError(
                f"unknown bounds policy {self.bounds_policy!r}; expected one of {BOUNDS_POLICIES}"
            )

    @classmethod
    def from_config(cls, cfg: Config) -> "CubeRenderer":
        scr = cfg["screen"]
        anim = cfg["animation"]
        r = cfg["render"]
        return cls(
            width=int(scr["width_chars"]),
            height=int(scr["height_chars"]),
            time_step=float(anim["time_step"]),
            camera_z=float(anim["camera_z"]),
            glyphs=Glyphs(
                blank=r["blank_char"],
                horizontal=r["horizontal_char"],
                vertical=r["vertical_char"],
                vertex=r["vertex_char"],
            ),
            show_vertices=bool(r["show_vertices"]),
            bounds_policy=r["bounds_policy"],
            frame_number=int(anim["start_frame"]),
        )

    # -------------
    # Stages
    # -------------

    def frame_time(self, frame_number: int) -> float:
        return frame_number * self.time_step

    def view_matrix(self, frame_number: int) -> Matrix:
        return rotation_matrix(self.frame_time(frame_number), self.camera_z)

    def screen_positions(self, frame_number: int) -> np.ndarray:
        """(N, 2) projected vertex positions for ``frame_number``."""
        return project_vertices(
            self.view_matrix(frame_number), self.vertices, self.width, self.height
        )

    def rasterize(self, screen_pos: np.ndarray) -> np.ndarray:
        """Draw visible faces for already-projected positions into a new buffer."""
        g = self.glyphs
        frame = new_frame(self.width, self.height, g.blank)

        if self.show_vertices:
            for x, y in screen_pos:
                plot(frame, int(y), int(x), g.vertex, self.bounds_policy)

        for face in visible_faces(self.faces, screen_pos):
            for start, end in face_edges(face):
                draw_line(
                    frame,
                    screen_pos[start],
                    screen_pos[end],
                    horizontal=g.horizontal,
                    vertical=g.vertical,
                    policy=self.bounds_policy,
                )
        return frame

    # -------------
    # Frames
    # -------------

    def render_frame(self, frame_number: Optional[int] = None) -> np.ndarray:
        """Render one frame without touching the counter."""
        if frame_number is None:
            frame_number = self.frame_number
        return self.rasterize(self.screen_positions(frame_number))

    def next_frame(self) -> np.ndarray:
        frame = self.render_frame(self.frame_number)
        self.frame_number += 1
        return frame

    def reset(self, frame_number: int = 0) -> None:
        self.frame_number = frame_number

    @staticmethod
    def frame_to_lines(frame: np.ndarray) -> List[str]:
        return frame_to_lines(frame)
