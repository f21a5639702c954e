"""Sampling from finite populations and parametric distributions."""

from .choice import ProbabilityState, WeightedSampler, choice
from .distributions import binomial, normal, randint
from .ranges import arange, linspace

__all__ = [
    "ProbabilityState",
    "WeightedSampler",
    "arange",
    "binomial",
    "choice",
    "linspace",
    "normal",
    "randint",
]
