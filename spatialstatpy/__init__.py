"""
spatialstatpy - spatial autocorrelation statistics

Computes Global Moran's I and Local Getis-Ord G* for scalar observations on a
fixed spatial structure described by an n x n locality (spatial weights)
matrix.

Key Features:
- Stateful Moran and GetisOrd engines that keep cached moments in step with
  in-place updates of data and weights
- Stateless global_morans_i for one-off calculations
- Locality builders (inverse distance, contiguity, distance band)
- Normal-approximation and permutation p-values, FDR-corrected hot spots
- Optional GPU acceleration via CuPy for batch computations

Example:
    >>> from spatialstatpy import Moran, create_contiguity_weights
    >>> m = Moran([0, 0, 0, 1, 1, 1, 0, 1, 0, 0], create_contiguity_weights(10))
    >>> m.I(), m.Z()
"""

__version__ = "0.1.0"

from spatialstatpy.analysis.global_moran import moran_summary
from spatialstatpy.analysis.hotspots import getis_ord_hotspots
from spatialstatpy.config import Alternative, FDRMethod, InferenceConfig
from spatialstatpy.core.dataset import DataSet
from spatialstatpy.core.getis_ord import GetisOrd
from spatialstatpy.core.moran import Moran, MoranResult, global_morans_i
from spatialstatpy.core.weights import (
    create_contiguity_weights,
    create_distance_band_weights,
    create_grid_coords,
    create_inverse_distance_weights,
    row_normalize_weights,
)
from spatialstatpy.errors import (
    DimensionMismatch,
    SpatialStatError,
    WeightingNotImplementedError,
)
from spatialstatpy.gpu.backend import GPU_AVAILABLE, get_array_module
from spatialstatpy.stats.fdr import apply_fdr_correction
from spatialstatpy.stats.permutation import moran_permutation_test

__all__ = [
    # Version
    "__version__",
    # Engines
    "DataSet",
    "GetisOrd",
    "Moran",
    "MoranResult",
    "global_morans_i",
    # Locality builders
    "create_contiguity_weights",
    "create_distance_band_weights",
    "create_grid_coords",
    "create_inverse_distance_weights",
    "row_normalize_weights",
    # Inference
    "apply_fdr_correction",
    "moran_permutation_test",
    "moran_summary",
    "getis_ord_hotspots",
    # Configuration
    "Alternative",
    "FDRMethod",
    "InferenceConfig",
    # Errors
    "DimensionMismatch",
    "SpatialStatError",
    "WeightingNotImplementedError",
    # GPU
    "get_array_module",
    "GPU_AVAILABLE",
]
