"""
Adapters between caller-supplied containers and the dense arrays the engines
operate on.

A locality matrix can arrive as a NumPy array, a nested sequence, a
``scipy.sparse`` matrix, or a lazily evaluated object that only knows its
dimensions and how to produce single entries (``shape`` or ``dims()`` plus
``at(i, j)``). Whatever the source, the engines own a private float64 copy.
"""

import numpy as np
from scipy import sparse as sp_sparse

from spatialstatpy.errors import DimensionMismatch


def _lazy_dims(locality) -> tuple[int, int]:
    if hasattr(locality, "dims"):
        r, c = locality.dims()
    else:
        r, c = locality.shape
    return int(r), int(c)


def as_locality(locality) -> np.ndarray:
    """
    Deep copy a locality matrix into a dense float64 array.

    Parameters
    ----------
    locality : array-like, sparse matrix or element-addressable object
        Spatial weights, ``locality[i][j]`` being the influence of location
        j on location i.

    Returns
    -------
    np.ndarray
        A freshly allocated 2-D array that shares no memory with the input.

    Raises
    ------
    DimensionMismatch
        If the input is not two-dimensional.

    Examples
    --------
    >>> W = as_locality([[0, 1], [1, 0]])
    >>> W.dtype
    dtype('float64')
    """
    if sp_sparse.issparse(locality):
        W = np.asarray(locality.toarray(), dtype=np.float64)
    elif callable(getattr(locality, "at", None)):
        r, c = _lazy_dims(locality)
        W = np.empty((r, c), dtype=np.float64)
        for i in range(r):
            for j in range(c):
                W[i, j] = locality.at(i, j)
    else:
        W = np.array(locality, dtype=np.float64)

    if W.ndim != 2:
        raise DimensionMismatch(f"locality must be a 2-D matrix, got shape {W.shape}")

    return W


def as_data(data) -> np.ndarray:
    """
    Deep copy an observation vector into a 1-D float64 array.

    Raises
    ------
    DimensionMismatch
        If the input is not one-dimensional.
    """
    x = np.array(data, dtype=np.float64)
    if x.ndim != 1:
        raise DimensionMismatch(f"data must be one-dimensional, got shape {x.shape}")
    return x


def dims(locality) -> tuple[int, int]:
    """Return ``(rows, cols)`` of a locality matrix."""
    r, c = locality.shape
    return int(r), int(c)


def check_dims(n: int, shape: tuple[int, int]) -> None:
    """
    Enforce ``rows == cols == n``.

    Raises
    ------
    DimensionMismatch
        If the locality shape does not match the number of observations.
    """
    r, c = shape
    if r != n or c != n:
        raise DimensionMismatch(
            f"data length mismatch: {n} observations but locality is {r}x{c}"
        )


def row_view(locality: np.ndarray, i: int) -> np.ndarray:
    """Read-only view of row ``i`` (the weights of every location on ``i``)."""
    wi = locality[i]
    wi.flags.writeable = False
    return wi


def weight_sum(W) -> float:
    """Total sum of weights in a dense or sparse matrix."""
    if sp_sparse.issparse(W):
        return float(W.sum())
    return float(np.sum(W))
