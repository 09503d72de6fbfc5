"""
Multiple-testing correction for per-location p-values.

Implements:
- Benjamini-Hochberg (BH)
- Benjamini-Yekutieli (BY)
- Bonferroni
"""

from typing import Literal

import numpy as np


def _step_up(pvalues: np.ndarray, scale: float) -> np.ndarray:
    """Step-up adjustment p_(k) * scale / k with the monotone cumulative minimum."""
    m = len(pvalues)
    order = np.argsort(pvalues)
    ranks = np.arange(1, m + 1)

    adjusted_sorted = pvalues[order] * scale / ranks
    adjusted_sorted = np.minimum.accumulate(adjusted_sorted[::-1])[::-1]
    adjusted_sorted = np.minimum(adjusted_sorted, 1.0)

    adjusted = np.empty(m)
    adjusted[order] = adjusted_sorted
    return adjusted


def apply_fdr_correction(
    pvalues,
    method: Literal["bh", "by", "bonferroni"] = "bh",
    alpha: float = 0.05,
) -> dict:
    """
    Adjust p-values for the number of locations tested.

    Parameters
    ----------
    pvalues : array-like
        Array of p-values, e.g. one per location from G*. NaN entries (from
        non-finite z-scores) are ignored and stay NaN.
    method : {"bh", "by", "bonferroni"}, default="bh"
        Correction method:
        - "bh": Benjamini-Hochberg (controls FDR)
        - "by": Benjamini-Yekutieli (controls FDR under dependency, which
          overlapping neighbourhoods always introduce)
        - "bonferroni": Bonferroni (controls FWER)
    alpha : float, default=0.05
        Significance threshold after correction.

    Returns
    -------
    dict
        Dictionary with:
        - 'adjusted_pvalues': Corrected p-values
        - 'significant': Boolean mask of significant tests
        - 'n_significant': Number of significant tests
        - 'method': Method used
        - 'alpha': Alpha threshold used

    Examples
    --------
    >>> pvalues = np.array([0.001, 0.01, 0.05, 0.1, 0.5])
    >>> apply_fdr_correction(pvalues, method="bh")["n_significant"]
    2
    """
    if method not in ("bh", "by", "bonferroni"):
        raise ValueError(f"Unknown method: '{method}'. Use 'bh', 'by', or 'bonferroni'.")

    pvalues = np.asarray(pvalues, dtype=np.float64)
    n = len(pvalues)

    valid = ~np.isnan(pvalues)
    valid_pvalues = pvalues[valid]
    m = len(valid_pvalues)

    adjusted = np.full(n, np.nan)

    if m > 0:
        if method == "bonferroni":
            adjusted[valid] = np.minimum(valid_pvalues * m, 1.0)
        elif method == "bh":
            adjusted[valid] = _step_up(valid_pvalues, m)
        else:
            c_m = np.sum(1.0 / np.arange(1, m + 1))
            adjusted[valid] = _step_up(valid_pvalues, m * c_m)

    significant = np.zeros(n, dtype=bool)
    significant[valid] = adjusted[valid] < alpha

    return {
        "adjusted_pvalues": adjusted,
        "significant": significant,
        "n_significant": int(np.sum(significant)),
        "method": method,
        "alpha": alpha,
    }
