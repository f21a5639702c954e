"""Entry point for the core library components."""

from .exceptions import (
    DistributionConstructionError,
    InvalidInputError,
    NumstatError,
)
from .utils import (
    NumpyRandomSource,
    ParamValidationError,
    RandomSource,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__ = [
    "DistributionConstructionError",
    "InvalidInputError",
    "NumstatError",
    "NumpyRandomSource",
    "ParamValidationError",
    "RandomSource",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
