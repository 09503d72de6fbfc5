"""Core spatial autocorrelation engines and locality builders."""

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

__all__ = [
    "DataSet",
    "GetisOrd",
    "Moran",
    "MoranResult",
    "global_morans_i",
    "create_contiguity_weights",
    "create_distance_band_weights",
    "create_grid_coords",
    "create_inverse_distance_weights",
    "row_normalize_weights",
]
