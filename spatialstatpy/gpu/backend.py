"""
Array backend abstraction for the vectorized statistics.

The engines hold their observations and locality matrices as NumPy arrays.
Batch operations (all-index G*, permutation nulls) can be offloaded to the GPU
through CuPy when it is installed; otherwise they run on NumPy unchanged.
"""

import numpy as np

try:
    import cupy as cp

    GPU_AVAILABLE = True
except ImportError:
    cp = None
    GPU_AVAILABLE = False


def get_array_module(use_gpu: bool = True):
    """
    Return the array module used for a batch computation.

    Parameters
    ----------
    use_gpu : bool, default=True
        Prefer CuPy when it is importable. Falls back to NumPy otherwise.

    Returns
    -------
    module
        Either ``cupy`` or ``numpy``.

    Examples
    --------
    >>> xp = get_array_module(use_gpu=False)
    >>> xp is np
    True
    """
    if use_gpu and GPU_AVAILABLE:
        return cp
    return np


def ensure_numpy(arr) -> np.ndarray:
    """
    Bring an array back to host memory as a NumPy array.

    Parameters
    ----------
    arr : array-like
        NumPy array, CuPy array or anything ``np.asarray`` accepts.

    Returns
    -------
    np.ndarray
    """
    if GPU_AVAILABLE and hasattr(arr, "get"):
        return arr.get()
    return np.asarray(arr)
