"""
Moment helpers for observation vectors.

Population moments (divide by N), matching the cached quantities the engines
keep alongside their data.
"""

import numpy as np


def mean(x: np.ndarray) -> float:
    """
    Population arithmetic mean.

    Returns NaN for an empty vector.
    """
    if x.size == 0:
        return float("nan")
    return float(np.mean(x))


def second_moment(x: np.ndarray, mean_x: float) -> float:
    """
    Population variance computed as ``mean(x**2) - mean(x)**2``.

    Parameters
    ----------
    x : np.ndarray
        Observation vector.
    mean_x : float
        Precomputed mean of ``x``.

    Returns
    -------
    float
        ``s = (1/n) * sum(x_i**2) - mean**2``, NaN for an empty vector.

    Notes
    -----
    This is the raw-moment form, not the two-pass ``mean((x - mean)**2)``;
    the Getis-Ord normalization is defined on it.
    """
    if x.size == 0:
        return float("nan")
    return float(np.dot(x, x) / x.size - mean_x * mean_x)
