"""Shared utility helpers used across the library."""

from .math_utils import (
    as_sample,
    as_probabilities,
    kahan_sum,
    undefined_safe,
)
from .random import (
    RandomSource,
    NumpyRandomSource,
    create_rng,
    split_rng,
    default_source,
    resolve_source,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
    SequenceFilter,
)
from .param_validation import (
    ensure,
    ensure_type,
    non_negative_int,
    validate_arguments,
    ParamValidationError,
)

__all__ = [
    "as_sample",
    "as_probabilities",
    "kahan_sum",
    "undefined_safe",
    "RandomSource",
    "NumpyRandomSource",
    "create_rng",
    "split_rng",
    "default_source",
    "resolve_source",
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "SequenceFilter",
    "ensure",
    "ensure_type",
    "non_negative_int",
    "validate_arguments",
    "ParamValidationError",
]
