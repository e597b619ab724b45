"""
Runtime-sized linear algebra for the n-dimensional transform.

Matrices are 2D float arrays. Every product goes through matmul so that a
size mismatch raises DimensionMismatch instead of broadcasting silently.
"""
from __future__ import annotations

import numpy as np

from .errors import DimensionMismatch


def as_matrix(m) -> np.ndarray:
    """2D float view of m; a 1D input becomes a column."""
    m = np.asarray(m, dtype=float)
    if m.ndim == 1:
        return m.reshape(-1, 1)
    if m.ndim != 2:
        raise DimensionMismatch(f"expected a matrix, got an array with {m.ndim} axes")
    return m


def matmul(a, b) -> np.ndarray:
    """
    A @ B with an explicit inner-dimension check.

    The result has A's row count and B's column count.
    """
    A = as_matrix(a)
    B = as_matrix(b)
    if A.shape[1] != B.shape[0]:
        raise DimensionMismatch(
            f"cannot multiply {A.shape[0]}x{A.shape[1]} by {B.shape[0]}x{B.shape[1]}")
    return A @ B


def identity(n: int) -> np.ndarray:
    return np.eye(n)


def transpose(m) -> np.ndarray:
    return as_matrix(m).T


def plane_rotation(n: int, i: int, j: int, angle: float) -> np.ndarray:
    """
    n x n rotation by `angle` in the plane of axes i and j, identity elsewhere.
    """
    if not (0 <= i < n and 0 <= j < n) or i == j:
        raise DimensionMismatch(
            f"plane ({i}, {j}) is not a valid pair of axes in {n} dimensions")
    c, s = np.cos(angle), np.sin(angle)
    R = np.eye(n)
    R[i, i] = c
    R[i, j] = -s
    R[j, i] = s
    R[j, j] = c
    return R


def composed_rotation(n: int, angle: float) -> np.ndarray:
    """
    Product of the elementary rotations in planes (0,1), (1,2), ..., (n-2,n-1),
    all by the same angle.

    Each new plane rotation is multiplied on the left of the accumulated
    product, so plane (0,1) is applied to a vector first.
    """
    acc = identity(n)
    for i in range(n - 1):
        acc = matmul(plane_rotation(n, i, i + 1, angle), acc)
    return acc


def scale_matrix(n: int, appear_amount: float) -> np.ndarray:
    """Identity with the newest axis (last diagonal entry) scaled."""
    S = identity(n)
    if n > 0:
        S[n - 1, n - 1] = appear_amount
    return S


def is_orthogonal(m, tol: float = 1e-9) -> bool:
    """R @ R^T == I within tol."""
    M = as_matrix(m)
    if M.shape[0] != M.shape[1]:
        return False
    return bool(np.allclose(matmul(M, transpose(M)), identity(M.shape[0]), rtol=0.0, atol=tol))
