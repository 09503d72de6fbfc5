"""
Normal-approximation p-values for z-scores.
"""

from typing import Literal

import numpy as np
from scipy.stats import norm

ALTERNATIVES = ("two-sided", "greater", "less")


def zscore_pvalue(z, alternative: Literal["two-sided", "greater", "less"] = "two-sided"):
    """
    Tail probability of a standard normal z-score.

    Parameters
    ----------
    z : float or array-like
        One or more z-scores.
    alternative : {"two-sided", "greater", "less"}, default="two-sided"
        - "two-sided": 2 * P(Z >= |z|)
        - "greater": P(Z >= z), evidence of clustering / hot spots
        - "less": P(Z <= z), evidence of dispersion / cold spots

    Returns
    -------
    float or np.ndarray
        P-value(s), same shape as ``z``. NaN z-scores give NaN.

    Examples
    --------
    >>> round(zscore_pvalue(1.959964), 3)
    0.05
    """
    if alternative not in ALTERNATIVES:
        raise ValueError(
            f"Unknown alternative: '{alternative}'. Use 'two-sided', 'greater', or 'less'."
        )

    z_arr = np.asarray(z, dtype=np.float64)

    if alternative == "two-sided":
        p = 2.0 * norm.sf(np.abs(z_arr))
    elif alternative == "greater":
        p = norm.sf(z_arr)
    else:
        p = norm.cdf(z_arr)

    if p.ndim == 0:
        return float(p)
    return p
