"""Analysis workflows built on the engines."""

from spatialstatpy.analysis.global_moran import moran_summary
from spatialstatpy.analysis.hotspots import getis_ord_hotspots

__all__ = [
    "getis_ord_hotspots",
    "moran_summary",
]
