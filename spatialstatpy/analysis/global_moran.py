"""
One-call summary of Global Moran's I.
"""

import logging
from typing import Optional

from spatialstatpy.config import InferenceConfig
from spatialstatpy.core.moran import Moran
from spatialstatpy.stats.permutation import moran_permutation_test

logger = logging.getLogger(__name__)


def moran_summary(
    data,
    locality,
    config: Optional[InferenceConfig] = None,
    permutations: bool = False,
) -> dict:
    """
    Moran's I with its analytical moments and p-values.

    Parameters
    ----------
    data : array-like
        Observation vector of length n (n >= 4 for a finite variance).
    locality : array-like, sparse matrix or element-addressable object
        n x n spatial weights.
    config : InferenceConfig, optional
        Alternative hypothesis and permutation settings.
    permutations : bool, default=False
        Also run a permutation test and report its pseudo p-value.

    Returns
    -------
    dict
        Keys 'I', 'E', 'var', 'z', 'p_norm', and 'p_sim' when
        ``permutations`` is set.
    """
    if config is None:
        config = InferenceConfig()

    moran = Moran(data, locality)
    i, var, z = moran.result()

    summary = {
        "I": i,
        "E": moran.E(),
        "var": var,
        "z": z,
        "p_norm": moran.p_value(alternative=config.alternative.value),
    }

    if permutations:
        perm = moran_permutation_test(
            data,
            locality,
            n_permutations=config.n_permutations,
            alternative=config.alternative.value,
            random_seed=config.random_seed,
            use_gpu=config.use_gpu,
        )
        summary["p_sim"] = perm["pvalue"]

    logger.info(f"Moran's I={i:.4g} z={z:.4g} over {len(moran)} locations")

    return summary
