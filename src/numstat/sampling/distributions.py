"""
Draws from normal, binomial and integer-uniform distributions.
"""
# 说明：正态 / 二项 / 整数均匀分布的批量抽样。
# 职责：
# - normal(mean, std, size)：正态分布样本
# - binomial(n, p, size)：n 次独立伯努利试验成功次数
# - randint(low, high, size)：[low, high) 上的整数均匀样本
# 约定：
# - 分布参数非法时在抽样前抛出 DistributionConstructionError，不做重试
# - size 经 validate_arguments 统一校验为非负整数（否则为 ParamValidationError）
# - 每次抽样都调用一次注入的随机源，未传入时使用 default_source()

from __future__ import annotations

import math
from typing import Any

import numpy as np

from ..core.exceptions import DistributionConstructionError
from ..core.utils.logging import get_logger
from ..core.utils.param_validation import ensure, non_negative_int, validate_arguments
from ..core.utils.random import resolve_source

logger = get_logger(__name__)

_SIZE = {"size": non_negative_int}


@validate_arguments(_SIZE)
def normal(mean: float, std: float, size: int, *, source: Any = None) -> np.ndarray:
    """
    Return ``size`` samples from ``N(mean, std ** 2)``.

    Raises:
        DistributionConstructionError: if ``mean`` is not finite or ``std`` is
            negative or not finite.
    """
    ensure(
        math.isfinite(mean),
        f"normal mean must be finite, got {mean}",
        error=DistributionConstructionError,
    )
    ensure(
        math.isfinite(std) and std >= 0.0,
        f"normal std must be finite and non-negative, got {std}",
        error=DistributionConstructionError,
    )
    rng = resolve_source(source)
    return np.array([rng.normal(mean, std) for _ in range(size)], dtype=np.float64)


@validate_arguments(_SIZE)
def binomial(n: int, p: float, size: int, *, source: Any = None) -> np.ndarray:
    """
    Return ``size`` success counts of ``n`` Bernoulli trials with probability ``p``.

    Raises:
        DistributionConstructionError: if ``n`` is negative or ``p`` lies
            outside ``[0, 1]``.
    """
    ensure(
        not isinstance(n, bool) and isinstance(n, (int, np.integer)) and n >= 0,
        f"binomial trial count must be a non-negative integer, got {n!r}",
        error=DistributionConstructionError,
    )
    ensure(
        0.0 <= p <= 1.0,
        f"binomial success probability must lie in [0, 1], got {p}",
        error=DistributionConstructionError,
    )
    rng = resolve_source(source)
    return np.array([rng.binomial(int(n), p) for _ in range(size)], dtype=np.int64)


@validate_arguments(_SIZE)
def randint(low: int, high: int, size: int, *, source: Any = None) -> np.ndarray:
    """
    Return ``size`` integers drawn uniformly from ``[low, high)``.

    Raises:
        DistributionConstructionError: if ``low >= high``.
    """
    ensure(
        low < high,
        f"randint requires low < high, got low={low}, high={high}",
        error=DistributionConstructionError,
    )
    rng = resolve_source(source)
    logger.debug("randint over [%d, %d) x %d", low, high, size)
    return np.array([rng.integers(low, high) for _ in range(size)], dtype=np.int64)
