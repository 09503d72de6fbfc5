"""Statistical testing modules."""

from spatialstatpy.core.inference import zscore_pvalue
from spatialstatpy.stats.fdr import apply_fdr_correction
from spatialstatpy.stats.permutation import moran_permutation_test

__all__ = [
    "apply_fdr_correction",
    "moran_permutation_test",
    "zscore_pvalue",
]
