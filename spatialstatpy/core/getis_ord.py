"""
Local Getis-Ord G* statistic.

For location i with weight row w_i, data x and cached moments
(mean, s = mean(x**2) - mean**2):

    ws    = mean * sum(w_i)
    G*_i  = (w_i . x - ws) / (s * sqrt((n * w_i . w_i - ws**2) / (n - 1)))

The result is a z-score: how far the weighted neighbourhood sum around i
departs from what spatial randomness would give.
"""

import numpy as np

from spatialstatpy.core.dataset import DataSet
from spatialstatpy.core.matrix import row_view
from spatialstatpy.core.moments import second_moment
from spatialstatpy.gpu.backend import ensure_numpy, get_array_module


class GetisOrd(DataSet):
    """
    Local Getis-Ord G* engine.

    Parameters
    ----------
    data : array-like
        Observation vector of length n.
    locality : array-like, sparse matrix or element-addressable object
        n x n spatial weights. Row i holds the weights of every location on
        location i; the diagonal is normally non-zero for G*.
    weights : array-like, optional
        Per-observation weights. Not supported; anything non-empty raises
        ``WeightingNotImplementedError``.

    Examples
    --------
    >>> from spatialstatpy.core.weights import create_contiguity_weights
    >>> data = [0, 0, 0, 1, 1, 1, 0, 1, 0, 0]
    >>> W = create_contiguity_weights(10, same_spot=True)
    >>> g = GetisOrd(data, W)
    >>> round(g.gstar(4), 2)
    4.21

    Notes
    -----
    Requires n >= 2. With n = 1, or with an all-zero weight row, the
    denominator vanishes and the result is inf or NaN rather than an error.
    """

    def _update_moments(self) -> None:
        super()._update_moments()
        self._s = second_moment(self._data, self._mean)

    @property
    def s(self) -> float:
        """Population second moment ``mean(x**2) - mean(x)**2``."""
        return self._s

    def gstar(self, i: int) -> float:
        """
        Local G* z-score for location ``i``.

        Raises
        ------
        IndexError
            If ``i`` is outside ``[0, n)``.
        """
        n = len(self)
        if not 0 <= i < n:
            raise IndexError(f"index {i} out of range for {n} observations")

        wi = row_view(self._locality, i)
        nf = np.float64(n)
        with np.errstate(divide="ignore", invalid="ignore"):
            ws = self._mean * np.sum(wi)
            num = np.dot(wi, self._data) - ws
            den = self._s * np.sqrt((nf * np.dot(wi, wi) - ws * ws) / (nf - 1))
            return float(num / den)

    def gstar_all(self, use_gpu: bool = True) -> np.ndarray:
        """
        G* z-scores for every location at once.

        Parameters
        ----------
        use_gpu : bool, default=True
            Use CuPy when available.

        Returns
        -------
        np.ndarray
            Vector of length n, equal to ``[self.gstar(i) for i in range(n)]``
            up to floating-point rounding.
        """
        xp = get_array_module(use_gpu)
        W = xp.asarray(self._locality, dtype=xp.float64)
        x = xp.asarray(self._data, dtype=xp.float64)
        n = float(len(self))

        # errstate only governs NumPy; CuPy never warns on inf/NaN results.
        with np.errstate(divide="ignore", invalid="ignore"):
            ws = self._mean * xp.sum(W, axis=1)
            num = W @ x - ws
            den = self._s * xp.sqrt((n * xp.sum(W * W, axis=1) - ws * ws) / (n - 1))
            result = num / den

        return ensure_numpy(result)
