"""
Hypercube vertices and edges.

Vertices of the n-cube are all vectors over {-1, +1}^n. Two vertices share
an edge iff they differ in exactly one coordinate, which in the +/-1
encoding is the same as an L1 distance of exactly 2.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError, DimensionMismatch

SIGNS = (-1.0, 1.0)
EDGE_L1_DISTANCE = 2.0


def append_permutations(options: Sequence[float], bases: List[tuple]) -> List[tuple]:
    """
    Prepend every option to every base.

    options=(-1, 1), bases=[(-1,), (1,)] -> [(-1,-1), (-1,1), (1,-1), (1,1)]
    """
    return [(option,) + base for option in options for base in bases]


def generate_vertices(n: int) -> np.ndarray:
    """
    All 2**n vertices of the n-cube as a read-only (2**n, n) float array.

    Built by iterative expansion from the single empty vector; each step
    prepends -1 then +1 to every existing vector, so the first coordinate is
    the slowest to change. n=0 gives one empty vertex.
    """
    if n < 0:
        raise ConfigurationError(f"dimension must be >= 0, got {n}")

    vectors: List[tuple] = [()]
    for _ in range(n):
        vectors = append_permutations(SIGNS, vectors)

    vertices = np.array(vectors, dtype=float).reshape(len(vectors), n)
    vertices.flags.writeable = False
    return vertices


def l1_distance(a, b) -> float:
    """Sum of absolute coordinate differences."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise DimensionMismatch(
            f"cannot compare vectors of length {a.size} and {b.size}")
    return float(np.abs(a - b).sum())


def are_adjacent(a, b) -> bool:
    """Edge predicate: True iff the vertices differ in exactly one sign."""
    return l1_distance(a, b) == EDGE_L1_DISTANCE


def edge_axis(a, b) -> int:
    """Index of the coordinate an edge runs along."""
    if not are_adjacent(a, b):
        raise ValueError("vertices are not connected by an edge")
    diff = np.asarray(a, dtype=float) != np.asarray(b, dtype=float)
    return int(np.flatnonzero(diff)[0])


def iter_edges(vertices) -> Iterator[Tuple[int, int]]:
    """
    Lazily yield (i, j) index pairs, i < j, for every edge.

    Same predicate as are_adjacent, evaluated one row of the distance
    table at a time so a 12-cube stays fast.
    """
    vertices = np.asarray(vertices, dtype=float)
    n_vertices = vertices.shape[0]
    for i in range(n_vertices):
        dists = np.abs(vertices[i + 1:] - vertices[i]).sum(axis=1)
        for offset in np.flatnonzero(dists == EDGE_L1_DISTANCE):
            yield i, i + 1 + int(offset)


def edge_list(vertices) -> List[Tuple[int, int]]:
    return list(iter_edges(vertices))


def expected_edge_count(n: int) -> int:
    """An n-cube has n * 2**(n-1) edges."""
    if n <= 0:
        return 0
    return n * 2 ** (n - 1)
