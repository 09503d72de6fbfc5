"""
Observation vector and locality matrix holder shared by the engines.

A DataSet owns private copies of n observations and an n x n locality
matrix, and keeps derived moments (the mean, plus whatever a subclass adds
in ``_update_moments``) in step with the data. The invariant

    rows(locality) == cols(locality) == len(data)

is checked on construction and on every mutation, before any state is
replaced, so a rejected mutation leaves the object unchanged.

Queries are read-only and may be shared between threads; mutations are not
synchronized and must be serialized by the caller.
"""

import logging

import numpy as np

from spatialstatpy.core.matrix import as_data, as_locality, check_dims, dims
from spatialstatpy.core.moments import mean
from spatialstatpy.errors import WeightingNotImplementedError

logger = logging.getLogger(__name__)


def check_unweighted(weights) -> None:
    """
    Reject per-observation weighting.

    Raises
    ------
    WeightingNotImplementedError
        If ``weights`` is not None and not empty.
    """
    if weights is not None and np.size(weights) > 0:
        raise WeightingNotImplementedError(
            "weighted observations are not implemented; pass weights=None"
        )


class DataSet:
    """
    Observations on a fixed spatial structure.

    Parameters
    ----------
    data : array-like
        Observation vector of length n.
    locality : array-like, sparse matrix or element-addressable object
        n x n spatial weights; ``locality[i][j]`` is the influence of
        location j on location i. Need not be symmetric, and the diagonal
        is used as supplied.
    weights : array-like, optional
        Per-observation weights. Not supported; anything non-empty raises.

    Raises
    ------
    DimensionMismatch
        If the locality is not square with side ``len(data)``.
    WeightingNotImplementedError
        If ``weights`` is non-empty.
    """

    def __init__(self, data, locality, weights=None):
        check_unweighted(weights)
        x = as_data(data)
        W = as_locality(locality)
        check_dims(x.shape[0], dims(W))

        self._data = x
        self._locality = W
        self._update_moments()
        logger.debug(f"{type(self).__name__} created with {len(self)} observations")

    def _update_moments(self) -> None:
        self._mean = mean(self._data)

    def __len__(self) -> int:
        return self._data.shape[0]

    @property
    def data(self) -> np.ndarray:
        """Copy of the observation vector."""
        return self._data.copy()

    @property
    def locality(self) -> np.ndarray:
        """Copy of the locality matrix."""
        return self._locality.copy()

    @property
    def mean(self) -> float:
        """Mean of the observation vector."""
        return self._mean

    def set_data(self, data) -> None:
        """
        Replace the observation vector and recompute cached moments.

        Raises
        ------
        DimensionMismatch
            If ``len(data)`` differs from the current number of observations.
        """
        x = as_data(data)
        check_dims(x.shape[0], dims(self._locality))
        self._data = x
        self._update_moments()
        logger.debug(f"{type(self).__name__}: data replaced")

    def set_locality(self, locality) -> None:
        """
        Replace the locality matrix. Cached moments are left untouched.

        Raises
        ------
        DimensionMismatch
            If the new matrix is not square with side ``len(self)``.
        """
        W = as_locality(locality)
        check_dims(self._data.shape[0], dims(W))
        self._locality = W
        logger.debug(f"{type(self).__name__}: locality replaced")

    def reset(self, data=None, locality=None) -> None:
        """
        Replace the data, the locality, both, or neither.

        Omitted arguments keep their current value. The resulting combination
        is validated before anything is replaced. Moments are recomputed
        whenever ``data`` is given, even if it equals the current data.

        Raises
        ------
        DimensionMismatch
            If the resulting combination violates the dimension invariant.
        """
        if data is None and locality is None:
            return

        x = as_data(data) if data is not None else self._data
        W = as_locality(locality) if locality is not None else self._locality
        check_dims(x.shape[0], dims(W))

        self._data = x
        self._locality = W
        if data is not None:
            self._update_moments()
        logger.debug(
            f"{type(self).__name__}: reset (data={'new' if data is not None else 'kept'}, "
            f"locality={'new' if locality is not None else 'kept'})"
        )
