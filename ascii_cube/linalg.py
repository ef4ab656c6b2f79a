#!/usr/bin/env python3
# ascii_cube/linalg.py
"""
Homogeneous 4-vectors and 4x4 matrices.

Matrices are stored column-major: ``Matrix.columns[i]`` is the i-th column,
and applying a matrix to a vector is the weighted sum of its columns using
the vector's components as weights. Flipping this convention mirrors the
cube's rotation direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence

import numpy as np

__all__ = [
    "Vector",
    "Matrix",
    "transform",
]


class Vector(NamedTuple):
    """Homogeneous 3D point (x, y, z, w)."""
    x: float
    y: float
    z: float
    w: float = 1.0


@dataclass(frozen=True, eq=False)
class Matrix:
    """4x4 matrix held as four columns of four floats."""
    columns: np.ndarray

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self.columns, other.columns))

    def __hash__(self):
        return hash(self.columns.tobytes())

    def __post_init__(self):
        cols = np.array(self.columns, dtype=np.float64)
        if cols.shape != (4, 4):
            raise ValueError(f"Matrix needs 4 columns of 4 values, got shape {cols.shape}")
        cols.setflags(write=False)
        object.__setattr__(self, "columns", cols)

    @classmethod
    def from_columns(cls, *columns: Sequence[float]) -> "Matrix":
        return cls(np.array(columns, dtype=np.float64))

    @classmethod
    def identity(cls) -> "Matrix":
        return cls(np.eye(4))

    def column(self, i: int) -> np.ndarray:
        return self.columns[i]


def transform(matrix: Matrix, vector: Vector) -> Vector:
    """Apply ``matrix`` to ``vector``: sum of vector[i] * column[i]."""
    weights = np.asarray(vector, dtype=np.float64)
    # Row i of ``columns`` is column i, so a row-vector product is the weighted column sum.
    out = weights @ matrix.columns
    return Vector(*out.tolist())
