"""
Tests for hypercube vertex generation and the edge predicate.
"""
import itertools

import numpy as np
import pytest

from hypercube_playground.errors import ConfigurationError, DimensionMismatch
from hypercube_playground.topology import (
    append_permutations,
    are_adjacent,
    edge_axis,
    edge_list,
    expected_edge_count,
    generate_vertices,
    iter_edges,
    l1_distance,
)


class TestGenerateVertices:
    """Vertex sets of the n-cube."""

    @pytest.mark.parametrize("n", range(0, 13))
    def test_vertex_count_and_coordinates(self, n):
        """2**n distinct vertices, all coordinates +/-1."""
        vertices = generate_vertices(n)
        assert vertices.shape == (2 ** n, n)
        assert np.all(np.isin(vertices, (-1.0, 1.0)))
        assert len({tuple(v) for v in vertices}) == 2 ** n

    def test_zero_dimensions_is_single_empty_vertex(self):
        vertices = generate_vertices(0)
        assert vertices.shape == (1, 0)

    def test_square_order(self):
        """-1 is prepended before +1."""
        expected = [[-1, -1], [-1, 1], [1, -1], [1, 1]]
        np.testing.assert_array_equal(generate_vertices(2), expected)

    def test_first_coordinate_changes_slowest(self):
        vertices = generate_vertices(3)
        assert np.all(vertices[:4, 0] == -1)
        assert np.all(vertices[4:, 0] == 1)

    def test_vertices_are_read_only(self):
        vertices = generate_vertices(3)
        with pytest.raises(ValueError):
            vertices[0, 0] = 5.0

    def test_negative_dimension_rejected(self):
        with pytest.raises(ConfigurationError):
            generate_vertices(-1)

    def test_append_permutations(self):
        assert append_permutations((-1, 1), [(-1,), (1,)]) == [
            (-1, -1), (-1, 1), (1, -1), (1, 1)]


class TestAdjacency:
    """Edges are pairs at L1 distance exactly 2."""

    def test_l1_distance(self):
        assert l1_distance([-1, 1, 1], [1, 1, -1]) == 4.0

    def test_length_mismatch_raises(self):
        with pytest.raises(DimensionMismatch):
            are_adjacent([1, 1], [1, 1, 1])

    def test_square_edges(self):
        """Four sides, no diagonals."""
        vertices = generate_vertices(2)
        assert edge_list(vertices) == [(0, 1), (0, 2), (1, 3), (2, 3)]
        assert not are_adjacent(vertices[0], vertices[3])
        assert not are_adjacent(vertices[1], vertices[2])

    def test_vertex_is_not_its_own_neighbour(self):
        v = generate_vertices(3)[5]
        assert not are_adjacent(v, v)

    def test_symmetry(self):
        vertices = generate_vertices(4)
        for a, b in itertools.product(vertices, repeat=2):
            assert are_adjacent(a, b) == are_adjacent(b, a)

    @pytest.mark.parametrize("n", range(1, 8))
    def test_every_vertex_has_n_neighbours(self, n):
        vertices = generate_vertices(n)
        degree = np.zeros(len(vertices), dtype=int)
        for i, j in iter_edges(vertices):
            degree[i] += 1
            degree[j] += 1
        assert np.all(degree == n)

    @pytest.mark.parametrize("n", range(0, 9))
    def test_edge_count(self, n):
        assert len(edge_list(generate_vertices(n))) == expected_edge_count(n)

    def test_iter_edges_matches_pairwise_predicate(self):
        vertices = generate_vertices(4)
        brute = [
            (i, j)
            for i in range(len(vertices))
            for j in range(i + 1, len(vertices))
            if are_adjacent(vertices[i], vertices[j])
        ]
        assert edge_list(vertices) == brute

    def test_iter_edges_is_lazy(self):
        edges = iter_edges(generate_vertices(3))
        assert next(edges) == (0, 1)

    def test_edge_axis(self):
        vertices = generate_vertices(3)
        # indices 0 and 4 differ only in the first coordinate
        assert edge_axis(vertices[0], vertices[4]) == 0
        assert edge_axis(vertices[0], vertices[1]) == 2

    def test_edge_axis_rejects_non_edges(self):
        vertices = generate_vertices(2)
        with pytest.raises(ValueError):
            edge_axis(vertices[0], vertices[3])
