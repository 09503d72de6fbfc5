"""Array backend selection (NumPy or CuPy)."""

from spatialstatpy.gpu.backend import GPU_AVAILABLE, ensure_numpy, get_array_module

__all__ = ["GPU_AVAILABLE", "ensure_numpy", "get_array_module"]
