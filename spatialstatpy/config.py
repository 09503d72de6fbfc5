"""
Configuration dataclasses for significance testing.

Groups the knobs shared by the permutation test and the hot spot analysis so
they can be stored alongside results and reloaded.
"""

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional

import numpy as np


class Alternative(Enum):
    """Alternative hypothesis for z-score and permutation tests."""

    TWO_SIDED = "two-sided"
    GREATER = "greater"
    LESS = "less"


class FDRMethod(Enum):
    """Multiple-testing correction methods."""

    BH = "bh"
    BY = "by"
    BONFERRONI = "bonferroni"


def _convert_to_native(obj: Any) -> Any:
    """Convert numpy and enum values to native Python types for JSON."""
    if isinstance(obj, dict):
        return {k: _convert_to_native(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_convert_to_native(v) for v in obj]
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, Enum):
        return obj.value
    else:
        return obj


@dataclass
class InferenceConfig:
    """
    Significance testing configuration.

    Parameters
    ----------
    alpha : float
        Significance threshold applied to adjusted p-values.
    fdr_method : FDRMethod
        Correction applied across locations in the hot spot analysis.
    alternative : Alternative
        Alternative hypothesis.
    n_permutations : int
        Number of permutations for the Moran's I permutation test.
    random_seed : int, optional
        Seed for the permutation test.
    use_gpu : bool
        Run batch computations on the GPU when CuPy is available.

    Example
    -------
    >>> config = InferenceConfig(alpha=0.01, fdr_method="by")
    >>> config.fdr_method
    <FDRMethod.BY: 'by'>
    >>> config.save("inference.json")
    """

    alpha: float = 0.05
    fdr_method: FDRMethod = FDRMethod.BH
    alternative: Alternative = Alternative.TWO_SIDED
    n_permutations: int = 999
    random_seed: Optional[int] = None
    use_gpu: bool = False

    def __post_init__(self):
        # Accept plain strings as well as enum members
        self.fdr_method = FDRMethod(self.fdr_method)
        self.alternative = Alternative(self.alternative)

        if not 0.0 < self.alpha < 1.0:
            raise ValueError(f"alpha must be in (0, 1), got {self.alpha}")
        if self.n_permutations < 1:
            raise ValueError(f"n_permutations must be positive, got {self.n_permutations}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return _convert_to_native(asdict(self))

    def save(self, path: str) -> None:
        """Save configuration to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str) -> "InferenceConfig":
        """Load configuration from JSON file."""
        with open(path) as f:
            d = json.load(f)
        return cls(**d)
