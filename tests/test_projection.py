"""Tests for the per-frame view matrix and perspective projection."""

import math

import numpy as np
import pytest

from ascii_cube.errors import DegenerateProjectionError, RenderError
from ascii_cube.geometry import VERTICES
from ascii_cube.linalg import Matrix, Vector, transform
from ascii_cube.rendering.projection import (
    project_point,
    project_vertices,
    rotation_matrix,
)

W, H = 80, 40

# Screen positions of the eight cube vertices at t = 0 on an 80x40 grid.
GOLDEN_T0 = np.array([
    [360 / 7, 180 / 7],     # (51.428571, 25.714286)
    [200 / 3, 100 / 3],     # (66.666667, 33.333333)
    [200 / 7, 180 / 7],     # (28.571429, 25.714286)
    [40 / 3, 100 / 3],      # (13.333333, 33.333333)
    [360 / 7, 100 / 7],     # (51.428571, 14.285714)
    [200 / 3, 20 / 3],      # (66.666667,  6.666667)
    [200 / 7, 100 / 7],     # (28.571429, 14.285714)
    [40 / 3, 20 / 3],       # (13.333333,  6.666667)
])


# ---------------------------------------------------------------------------
# Rotation matrix
# ---------------------------------------------------------------------------


class TestRotationMatrix:
    def test_identity_rotation_keeps_translation(self):
        m = rotation_matrix(0.0)
        expected = np.array([
            [1, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, 1, 0],
            [0, 0, -2.5, 1],
        ], dtype=float)
        np.testing.assert_allclose(m.columns, expected)

    def test_custom_camera_offset(self):
        m = rotation_matrix(0.0, camera_z=-7.0)
        assert m.column(3)[2] == -7.0

    def test_quarter_turn_direction(self):
        # +x swings onto +z for a positive angle.
        v = transform(rotation_matrix(math.pi / 2, camera_z=0.0), Vector(1.0, 0.0, 0.0))
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.z == pytest.approx(1.0)

    def test_y_axis_is_fixed(self):
        v = transform(rotation_matrix(1.234, camera_z=0.0), Vector(0.0, 1.0, 0.0))
        assert v == pytest.approx((0.0, 1.0, 0.0, 1.0))


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


class TestProjectVertices:
    def test_golden_identity_rotation(self):
        pos = project_vertices(rotation_matrix(0.0), VERTICES, W, H)
        assert pos.shape == (8, 2)
        np.testing.assert_allclose(pos, GOLDEN_T0, rtol=0, atol=1e-9)

    def test_full_revolution_is_periodic(self):
        for t in (0.0, 0.37, 1.0, 2.5):
            a = project_vertices(rotation_matrix(t), VERTICES, W, H)
            b = project_vertices(rotation_matrix(t + 2 * math.pi), VERTICES, W, H)
            np.testing.assert_allclose(a, b, atol=1e-9)

    def test_scales_with_screen_size(self):
        small = project_vertices(rotation_matrix(0.3), VERTICES, 40, 20)
        big = project_vertices(rotation_matrix(0.3), VERTICES, 80, 40)
        np.testing.assert_allclose(big, small * 2)

    def test_point_on_axis_lands_at_center(self):
        assert project_point(rotation_matrix(0.0), Vector(0.0, 0.0, 0.0), W, H) == (40.0, 20.0)


class TestDegenerateDepth:
    def test_zero_depth_raises(self):
        with pytest.raises(DegenerateProjectionError) as exc:
            project_point(Matrix.identity(), Vector(0.5, 0.5, 0.0), W, H, index=3)
        assert exc.value.index == 3
        assert exc.value.depth == 0.0

    def test_error_hierarchy(self):
        with pytest.raises(RenderError):
            project_point(Matrix.identity(), Vector(0.5, 0.5, 1e-9), W, H)
        with pytest.raises(ValueError):
            project_point(Matrix.identity(), Vector(0.5, 0.5, -1e-9), W, H)

    def test_nan_depth_raises(self):
        with pytest.raises(DegenerateProjectionError):
            project_point(Matrix.identity(), Vector(0.0, 0.0, float("nan")), W, H)

    def test_project_vertices_reports_vertex_index(self):
        verts = [Vector(0.0, 0.0, -1.0), Vector(1.0, 1.0, 0.0)]
        with pytest.raises(DegenerateProjectionError) as exc:
            project_vertices(Matrix.identity(), verts, W, H)
        assert exc.value.index == 1
