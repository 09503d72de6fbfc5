"""
Getis-Ord G* hot spot analysis.

Computes G* for every location, converts the z-scores to p-values, corrects
for the number of locations tested and labels each location as a hot spot,
a cold spot or not significant.
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from spatialstatpy.config import InferenceConfig
from spatialstatpy.core.getis_ord import GetisOrd
from spatialstatpy.core.inference import zscore_pvalue
from spatialstatpy.stats.fdr import apply_fdr_correction

logger = logging.getLogger(__name__)


def getis_ord_hotspots(
    data,
    locality,
    config: Optional[InferenceConfig] = None,
) -> pd.DataFrame:
    """
    Classify locations into G* hot and cold spots.

    Parameters
    ----------
    data : array-like
        Observation vector of length n.
    locality : array-like, sparse matrix or element-addressable object
        n x n spatial weights, usually including self-connections.
    config : InferenceConfig, optional
        Significance settings (alpha, FDR method, alternative, GPU use).
        Defaults to ``InferenceConfig()``.

    Returns
    -------
    pd.DataFrame
        One row per location with columns:
        - 'value': the observation
        - 'gstar': G* z-score
        - 'pvalue': normal-approximation p-value
        - 'padj': p-value after multiple-testing correction
        - 'hotspot': "hot", "cold" or "ns"

    Examples
    --------
    >>> from spatialstatpy.core.weights import create_contiguity_weights
    >>> W = create_contiguity_weights(10, same_spot=True)
    >>> df = getis_ord_hotspots([0, 0, 0, 1, 1, 1, 0, 1, 0, 0], W)
    >>> df.loc[4, "hotspot"]
    'hot'

    Notes
    -----
    Locations whose G* is not finite (n = 1, all-zero weight rows, constant
    data) get NaN p-values and are labelled "ns".
    """
    if config is None:
        config = InferenceConfig()

    g = GetisOrd(data, locality)
    gstar = g.gstar_all(use_gpu=config.use_gpu)

    pvalues = zscore_pvalue(gstar, alternative=config.alternative.value)
    fdr = apply_fdr_correction(pvalues, method=config.fdr_method.value, alpha=config.alpha)
    significant = fdr["significant"]

    hotspot = np.full(len(g), "ns", dtype=object)
    hotspot[significant & (gstar > 0)] = "hot"
    hotspot[significant & (gstar < 0)] = "cold"

    df = pd.DataFrame(
        {
            "value": g.data,
            "gstar": gstar,
            "pvalue": pvalues,
            "padj": fdr["adjusted_pvalues"],
            "hotspot": hotspot,
        }
    )

    n_hot = int(np.sum(hotspot == "hot"))
    n_cold = int(np.sum(hotspot == "cold"))
    logger.info(
        f"G* hot spots: {n_hot} hot, {n_cold} cold of {len(df)} locations "
        f"(alpha={config.alpha}, {config.fdr_method.value})"
    )

    return df
