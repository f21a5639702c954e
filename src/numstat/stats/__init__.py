"""Descriptive statistics for one sample or a pair of samples."""

from .descriptive import (
    correlation,
    covariance,
    mean,
    skewness,
    std_dev,
    summarize,
    variance,
)
from .types import CovarianceMatrix, Summary

__all__ = [
    "CovarianceMatrix",
    "Summary",
    "correlation",
    "covariance",
    "mean",
    "skewness",
    "std_dev",
    "summarize",
    "variance",
]
