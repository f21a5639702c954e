"""
numstat: descriptive statistics and random sampling primitives.

Sub-packages:
    * ``numstat.stats`` - mean, variance, std_dev, skewness, covariance, correlation
    * ``numstat.sampling`` - weighted choice, distribution draws, evenly spaced ranges
    * ``numstat.core`` - configuration, logging, validation and random sources
"""

from __future__ import annotations

from .core import (
    DistributionConstructionError,
    InvalidInputError,
    NumpyRandomSource,
    NumstatError,
    RandomSource,
    configure,
    get_config,
)
from .sampling import (
    WeightedSampler,
    arange,
    binomial,
    choice,
    linspace,
    normal,
    randint,
)
from .stats import (
    CovarianceMatrix,
    Summary,
    correlation,
    covariance,
    mean,
    skewness,
    std_dev,
    summarize,
    variance,
)

__version__ = "0.1.0"

__all__ = [
    "CovarianceMatrix",
    "DistributionConstructionError",
    "InvalidInputError",
    "NumpyRandomSource",
    "NumstatError",
    "RandomSource",
    "Summary",
    "WeightedSampler",
    "arange",
    "binomial",
    "choice",
    "configure",
    "correlation",
    "covariance",
    "get_config",
    "linspace",
    "mean",
    "normal",
    "randint",
    "skewness",
    "std_dev",
    "summarize",
    "variance",
]
