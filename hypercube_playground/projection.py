"""
Orthographic projection from n-space to the plane.

Each source axis i gets a 2D direction (cos a_i, sin a_i) with the angles
spread evenly over [0, pi). A point is projected as the coordinate-weighted
sum of those directions. There is no depth, so nothing is ever occluded.
"""
from __future__ import annotations

import numpy as np

from .errors import DimensionMismatch
from .linalg import matmul


def projection_basis(n: int) -> np.ndarray:
    """(n, 2) array; row i is the plane direction of axis i, angle pi*i/n."""
    if n <= 0:
        return np.zeros((0, 2))
    angles = np.pi * np.arange(n) / n
    basis = np.column_stack([np.cos(angles), np.sin(angles)])
    basis.flags.writeable = False
    return basis


def project(point, basis) -> np.ndarray:
    """Single point -> (x, y)."""
    point = np.asarray(point, dtype=float)
    basis = np.asarray(basis, dtype=float).reshape(-1, 2)
    if point.ndim != 1 or point.shape[0] != basis.shape[0]:
        raise DimensionMismatch(
            f"point of length {point.size} does not match a basis of "
            f"{basis.shape[0]} axes")
    return point @ basis


def project_points(points, basis) -> np.ndarray:
    """(k, n) points -> (k, 2)."""
    return matmul(points, np.asarray(basis, dtype=float).reshape(-1, 2))


def transform_points(vertices, rotation, scale) -> np.ndarray:
    """
    Apply R . S to every vertex (scale first, then rotate).

    Row-vector convention: returns V @ (R S)^T.
    """
    M = matmul(rotation, scale)
    V = np.asarray(vertices, dtype=float)
    if V.ndim == 1:
        V = V[np.newaxis, :]
    return matmul(V, M.T)
