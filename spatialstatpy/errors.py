"""
Exceptions raised by spatialstatpy.

Contract violations (mismatched dimensions, unsupported weighting) are raised
immediately and abort the operation. Arithmetic edge cases such as zero
denominators are not errors: they propagate as IEEE infinities or NaNs.
"""


class SpatialStatError(Exception):
    """Base class for spatialstatpy errors."""


class DimensionMismatch(SpatialStatError, ValueError):
    """Data length and locality matrix dimensions disagree."""


class WeightingNotImplementedError(SpatialStatError, NotImplementedError):
    """Per-observation weighting was requested but is not supported."""
