"""Shared fixtures: reference lattices and chains used across tests."""

import math

import numpy as np
import pytest

from spatialstatpy.core.weights import (
    create_contiguity_weights,
    create_grid_coords,
    create_inverse_distance_weights,
)

CHAIN_DATA = [0, 0, 0, 1, 1, 1, 0, 1, 0, 0]

SPARSE_POINTS = [
    1, 0, 0, 1, 0, 0, 1, 0, 0, 0,
    0, 1, 1, 0, 0, 1, 0, 0, 0, 0,
    1, 0, 0, 1, 0, 0, 0, 0, 1, 0,
    0, 0, 1, 0, 1, 0, 1, 0, 0, 0,
    1, 0, 0, 0, 0, 0, 0, 1, 0, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, 1, 0, 0, 0, 1, 0, 1, 0,
    1, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 1, 0, 1, 0, 1, 0, 0, 0,
    1, 0, 0, 0, 0, 0, 0, 0, 1, 0,
]

CLUSTERED_POINTS = [
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 1, 1, 0, 0, 0, 0, 0,
    0, 0, 1, 1, 1, 1, 0, 0, 0, 0,
    0, 0, 1, 1, 1, 1, 0, 0, 0, 0,
    0, 0, 0, 1, 1, 1, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 1, 0,
    0, 0, 0, 0, 0, 0, 0, 1, 1, 1,
    0, 0, 0, 0, 0, 0, 0, 1, 1, 1,
    0, 0, 0, 0, 0, 0, 0, 1, 1, 1,
]


class EuclidLocality:
    """Inverse-distance weights on an nx x ny lattice, evaluated on demand."""

    def __init__(self, nx, ny):
        self.nx = nx
        self.ny = ny

    def dims(self):
        d = self.nx * self.ny
        return d, d

    def at(self, i, j):
        if i == j:
            return 0.0
        x = j % self.nx - i % self.nx
        y = j // self.nx - i // self.nx
        return 1 / math.hypot(x, y)


@pytest.fixture
def chain_data():
    return np.array(CHAIN_DATA, dtype=np.float64)


@pytest.fixture
def path_locality():
    """10-point path graph: neighbours i and i+1, no self-weight."""
    return create_contiguity_weights(10)


@pytest.fixture
def window_locality():
    """10-point window of three: |i - j| <= 1 including self."""
    return create_contiguity_weights(10, same_spot=True)


@pytest.fixture
def grid_locality():
    """Inverse-distance weights on a 10 x 10 lattice."""
    return create_inverse_distance_weights(create_grid_coords(10, 10))


@pytest.fixture
def random_problem():
    """Random data with an asymmetric, non-negative locality."""
    rng = np.random.default_rng(42)
    n = 30
    data = rng.standard_normal(n)
    locality = rng.random((n, n))
    locality[rng.random((n, n)) < 0.7] = 0.0
    np.fill_diagonal(locality, 0.0)
    return data, locality


@pytest.fixture
def sparse_points():
    """24 scattered occupied cells on the 10 x 10 lattice."""
    return np.array(SPARSE_POINTS, dtype=np.float64)


@pytest.fixture
def clustered_points():
    """24 occupied cells on the 10 x 10 lattice forming two clusters."""
    return np.array(CLUSTERED_POINTS, dtype=np.float64)


@pytest.fixture
def euclid_locality():
    """Element-addressable inverse-distance locality on the 10 x 10 lattice."""
    return EuclidLocality(10, 10)
