"""
Locality (spatial weight) matrix construction.

Implements:
- Regular lattice coordinates
- Inverse-distance weights, w_ij = 1 / d_ij with a zero diagonal
- Contiguity weights on a 1-D chain (path graph and banded windows)
- Fixed distance band weights (binary or Gaussian kernel)
- Row normalization

Any of these can be handed directly to ``GetisOrd``, ``Moran`` or
``global_morans_i``; sparse outputs are densified by the engines.
"""

from typing import Optional, Union

import numpy as np
from scipy import sparse as sp_sparse
from scipy.spatial import cKDTree


def create_grid_coords(nx: int, ny: int) -> np.ndarray:
    """
    Coordinates of a regular nx x ny lattice in row-major order.

    Location k sits at ``(k % nx, k // nx)``, so a data vector laid out row by
    row over the grid lines up with the returned coordinates.

    Parameters
    ----------
    nx : int
        Number of columns.
    ny : int
        Number of rows.

    Returns
    -------
    np.ndarray
        Array of shape (nx * ny, 2).

    Examples
    --------
    >>> create_grid_coords(3, 2)[:4]
    array([[0., 0.],
           [1., 0.],
           [2., 0.],
           [0., 1.]])
    """
    k = np.arange(nx * ny)
    return np.column_stack([k % nx, k // nx]).astype(np.float64)


def create_inverse_distance_weights(
    coords,
    sparse: bool = False,
) -> Union[np.ndarray, sp_sparse.csr_matrix]:
    """
    Create an inverse Euclidean distance weight matrix.

    Weight formula: w_ij = 1 / hypot(x_j - x_i, y_j - y_i), w_ii = 0

    Parameters
    ----------
    coords : array-like
        Spatial coordinates of shape (n, 2).
    sparse : bool, default=False
        Return a CSR matrix instead of a dense array. The matrix is fully
        populated off the diagonal, so this rarely saves memory.

    Returns
    -------
    np.ndarray or scipy.sparse.csr_matrix
        Weight matrix of shape (n, n).

    Notes
    -----
    Distinct locations that share coordinates get an infinite weight.
    """
    coords = np.asarray(coords, dtype=np.float64)

    dx = coords[:, 0:1] - coords[:, 0].reshape(1, -1)
    dy = coords[:, 1:2] - coords[:, 1].reshape(1, -1)
    with np.errstate(divide="ignore"):
        W = 1.0 / np.hypot(dx, dy)
    np.fill_diagonal(W, 0.0)

    if sparse:
        return sp_sparse.csr_matrix(W)
    return W


def create_contiguity_weights(
    n: int,
    bandwidth: int = 1,
    same_spot: bool = False,
    sparse: bool = False,
) -> Union[np.ndarray, sp_sparse.csr_matrix]:
    """
    Create binary contiguity weights for locations along a chain.

    w_ij = 1 when 0 < |i - j| <= bandwidth (and when i == j if ``same_spot``),
    0 otherwise.

    Parameters
    ----------
    n : int
        Number of locations.
    bandwidth : int, default=1
        Neighbourhood half-width. ``bandwidth=1`` without self-connections is
        the path graph; with ``same_spot=True`` it is a window of three.
    same_spot : bool, default=False
        Whether to include self-connections (diagonal). G* is usually computed
        with the location itself in its neighbourhood.
    sparse : bool, default=False
        Return a CSR matrix instead of a dense array.

    Returns
    -------
    np.ndarray or scipy.sparse.csr_matrix
        Symmetric weight matrix of shape (n, n).

    Examples
    --------
    >>> create_contiguity_weights(3)
    array([[0., 1., 0.],
           [1., 0., 1.],
           [0., 1., 0.]])
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if bandwidth < 0:
        raise ValueError(f"bandwidth must be non-negative, got {bandwidth}")

    offsets = [
        k
        for k in range(-bandwidth, bandwidth + 1)
        if abs(k) < n and (k != 0 or same_spot)
    ]

    if offsets:
        W = sp_sparse.diags(
            [np.ones(n - abs(k)) for k in offsets],
            offsets,
            shape=(n, n),
            format="csr",
            dtype=np.float64,
        )
    else:
        W = sp_sparse.csr_matrix((n, n), dtype=np.float64)

    if not sparse:
        W = W.toarray()

    return W


def create_distance_band_weights(
    coords,
    radius: float,
    kernel: str = "binary",
    sigma: Optional[float] = None,
    same_spot: bool = True,
    sparse: bool = True,
) -> Union[np.ndarray, sp_sparse.csr_matrix]:
    """
    Fixed distance band neighbourhoods, the usual locality for G*.

    Location j is a neighbour of i when their distance is at most ``radius``.
    With ``kernel="binary"`` every neighbour gets weight 1; with
    ``kernel="gaussian"`` the weight is exp(-d^2 / (2 sigma^2)).

    Parameters
    ----------
    coords : array-like
        Spatial coordinates of shape (n, 2).
    radius : float
        Band radius (inclusive).
    kernel : {"binary", "gaussian"}, default="binary"
        Weight given to each neighbour.
    sigma : float, optional
        Gaussian bandwidth. Default: radius / 2.
    same_spot : bool, default=True
        Count each location as its own neighbour, as G* (unlike G) does.
    sparse : bool, default=True
        Return a CSR matrix instead of a dense array.

    Returns
    -------
    scipy.sparse.csr_matrix or np.ndarray
        Symmetric weight matrix of shape (n, n).

    Examples
    --------
    >>> W = create_distance_band_weights(create_grid_coords(3, 3), 1.0, sparse=False)
    >>> W[4]
    array([0., 1., 0., 1., 1., 1., 0., 1., 0.])
    """
    if kernel not in ("binary", "gaussian"):
        raise ValueError(f"Unknown kernel: {kernel}. Use 'binary' or 'gaussian'.")
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    coords = np.asarray(coords, dtype=np.float64)
    n = coords.shape[0]

    neighbors = cKDTree(coords).query_ball_point(coords, radius)
    rows = np.repeat(np.arange(n), [len(nb) for nb in neighbors])
    cols = np.fromiter((j for nb in neighbors for j in nb), dtype=np.int64, count=len(rows))

    if not same_spot:
        keep = rows != cols
        rows, cols = rows[keep], cols[keep]

    if kernel == "binary":
        weights = np.ones(len(rows))
    else:
        if sigma is None:
            sigma = radius / 2.0
        d = coords[rows] - coords[cols]
        weights = np.exp(-(d[:, 0] ** 2 + d[:, 1] ** 2) / (2.0 * sigma * sigma))

    W = sp_sparse.csr_matrix((weights, (rows, cols)), shape=(n, n), dtype=np.float64)

    if not sparse:
        W = W.toarray()

    return W


def row_normalize_weights(W) -> sp_sparse.csr_matrix:
    """
    Row-normalize a weight matrix.

    Each non-zero row sums to 1. Rows with zero sum (isolated locations)
    stay all zeros; G* at such a location is then non-finite.

    Parameters
    ----------
    W : sparse matrix or np.ndarray
        Weight matrix.

    Returns
    -------
    scipy.sparse.csr_matrix
        Row-normalized weight matrix.
    """
    if not sp_sparse.issparse(W):
        W = sp_sparse.csr_matrix(W)
    else:
        W = W.tocsr()

    row_sums = np.array(W.sum(axis=1)).ravel()
    with np.errstate(divide="ignore"):
        row_sums_inv = np.where(row_sums > 0, 1.0 / row_sums, 0.0)

    D_inv = sp_sparse.diags(row_sums_inv, format="csr")
    return D_inv @ W
