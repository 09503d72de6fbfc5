"""
Global Moran's I with its moments under the randomization null hypothesis.

With z = x - mean(x), W the locality matrix and S0 = sum(W):

    I      = n * sum_ij(w_ij * z_i * z_j) / (S0 * sum_i(z_i**2))
    E(I)   = -1 / (n - 1)
    Var(I) = (A - B) / C - E(I)**2

where

    S1 = 1/2 * sum_ij((w_ij + w_ji)**2)
    S2 = sum_i((sum_j w_ij + sum_j w_ji)**2)
    A  = n * ((n**2 - 3n + 3) * S1 - n * S2 + 3 * S0**2)
    B  = D * ((n**2 - n) * S1 - 2n * S2 + 6 * S0**2),  D = sum(z**4) / sum(z**2)**2
    C  = (n - 1)(n - 2)(n - 3) * S0**2

See https://en.wikipedia.org/wiki/Moran%27s_I and
http://pro.arcgis.com/en/pro-app/tool-reference/spatial-statistics/h-global-morans-i-additional-math.htm

Both the ``Moran`` engine and the stateless ``global_morans_i`` go through the
same kernel functions below, so they return identical values for identical
inputs.
"""

from typing import Literal, NamedTuple

import numpy as np

from spatialstatpy.core.dataset import DataSet, check_unweighted
from spatialstatpy.core.inference import zscore_pvalue
from spatialstatpy.core.matrix import as_data, as_locality, check_dims, dims
from spatialstatpy.core.moments import mean


class MoranResult(NamedTuple):
    """Moran's I, its variance under randomization and the z-score."""

    I: float
    var: float
    z: float


def _morans_i(x: np.ndarray, mean_x: float, W: np.ndarray) -> float:
    z = x - mean_x
    n = np.float64(x.shape[0])
    with np.errstate(divide="ignore", invalid="ignore"):
        num = (z @ W) @ z
        den = np.dot(z, z)
        return float(n * num / (np.sum(W) * den))


def _expectation(n: int) -> float:
    with np.errstate(divide="ignore"):
        return float(np.float64(-1.0) / np.float64(n - 1))


def _variance(x: np.ndarray, mean_x: float, W: np.ndarray) -> float:
    z = x - mean_x
    z2 = z * z
    var2 = np.sum(z2)
    var4 = np.sum(z2 * z2)

    s0 = np.sum(W)
    sym = W + W.T
    s1 = 0.5 * np.sum(sym * sym)
    # Row sum plus column sum per location
    p2 = np.sum(W, axis=1) + np.sum(W, axis=0)
    s2 = np.sum(p2 * p2)

    n = np.float64(x.shape[0])
    e = _expectation(x.shape[0])
    with np.errstate(divide="ignore", invalid="ignore"):
        a = n * ((n * n - 3 * n + 3) * s1 - n * s2 + 3 * s0 * s0)
        c = (n - 1) * (n - 2) * (n - 3) * s0 * s0
        d = var4 / (var2 * var2)
        b = d * ((n * n - n) * s1 - 2 * n * s2 + 6 * s0 * s0)
        return float((a - b) / c - e * e)


def _zscore(i: float, e: float, v: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((np.float64(i) - e) / np.sqrt(np.float64(v)))


class Moran(DataSet):
    """
    Global Moran's I engine.

    Parameters
    ----------
    data : array-like
        Observation vector of length n.
    locality : array-like, sparse matrix or element-addressable object
        n x n spatial weights, not necessarily symmetric.
    weights : array-like, optional
        Per-observation weights. Not supported; anything non-empty raises
        ``WeightingNotImplementedError``.

    Examples
    --------
    >>> from spatialstatpy.core.weights import create_contiguity_weights
    >>> m = Moran([0, 0, 0, 1, 1, 1, 0, 1, 0, 0], create_contiguity_weights(10))
    >>> round(m.I(), 4), round(m.Z(), 4)
    (0.1111, 0.6335)

    Notes
    -----
    Every query is recomputed from the held data: ``I()`` and ``Var()`` are
    O(n^2), and ``Z()`` evaluates all of ``I()``, ``E()`` and ``Var()``.
    Cache the components yourself if you need them repeatedly.

    ``E()`` needs n >= 2 and ``Var()`` needs n >= 4; below that the result
    is inf or NaN, not an error.
    """

    def I(self) -> float:  # noqa: E743
        """Moran's I."""
        return _morans_i(self._data, self._mean, self._locality)

    def E(self) -> float:
        """Expected value of I under randomization, ``-1 / (n - 1)``."""
        return _expectation(len(self))

    def Var(self) -> float:
        """Variance of I under randomization."""
        return _variance(self._data, self._mean, self._locality)

    def Z(self) -> float:
        """z-score ``(I - E) / sqrt(Var)``."""
        return _zscore(self.I(), self.E(), self.Var())

    def result(self) -> MoranResult:
        """``(I, Var, Z)`` computed in one pass over the components."""
        i = self.I()
        v = self.Var()
        return MoranResult(i, v, _zscore(i, self.E(), v))

    def p_value(
        self, alternative: Literal["two-sided", "greater", "less"] = "two-sided"
    ) -> float:
        """
        Normal-approximation p-value of ``Z()``.

        ``"greater"`` tests for clustering, ``"less"`` for dispersion.
        """
        return zscore_pvalue(self.Z(), alternative=alternative)


def global_morans_i(data, locality, weights=None) -> MoranResult:
    """
    Global Moran's I without keeping an engine around.

    Parameters
    ----------
    data : array-like
        Observation vector of length n.
    locality : array-like, sparse matrix or element-addressable object
        n x n spatial weights.
    weights : array-like, optional
        Per-observation weights. Not supported.

    Returns
    -------
    MoranResult
        Named tuple ``(I, var, z)``; unpacks as ``i, v, z = global_morans_i(...)``.
        Identical to ``Moran(data, locality)`` followed by ``I()``, ``Var()``
        and ``Z()``.

    Raises
    ------
    DimensionMismatch
        If the locality is not square with side ``len(data)``.
    WeightingNotImplementedError
        If ``weights`` is non-empty.
    """
    check_unweighted(weights)
    x = as_data(data)
    W = as_locality(locality)
    check_dims(x.shape[0], dims(W))

    mean_x = mean(x)
    i = _morans_i(x, mean_x, W)
    v = _variance(x, mean_x, W)
    z = _zscore(i, _expectation(x.shape[0]), v)

    return MoranResult(i, v, z)
