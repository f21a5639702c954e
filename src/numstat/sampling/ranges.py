"""
Evenly spaced ranges.
"""
# 说明：等间距数列生成。
# - arange：半开区间 [start, stop)，步长为零时报 InvalidInputError
# - linspace：闭区间 [start, stop] 上的 num 个点

from __future__ import annotations

import math

import numpy as np

from ..core.exceptions import InvalidInputError
from ..core.utils.param_validation import ensure, non_negative_int


def arange(start: float, stop: float, step: float = 1.0) -> np.ndarray:
    """
    Return ``start, start + step, ...`` up to but excluding ``stop``.

    A step pointing away from ``stop`` yields an empty array.
    """
    ensure(step != 0, "arange step must be non-zero", error=InvalidInputError)
    ensure(
        all(math.isfinite(v) for v in (start, stop, step)),
        "arange bounds and step must be finite",
        error=InvalidInputError,
    )
    count = max(int(math.ceil((stop - start) / step)), 0)
    # 以 start + k * step 计算每一项，避免逐项累加带来的误差漂移
    return start + step * np.arange(count, dtype=np.float64)


def linspace(start: float, stop: float, num: int) -> np.ndarray:
    """Return ``num`` evenly spaced points from ``start`` to ``stop`` inclusive."""
    num = non_negative_int(num, label="num")
    return np.linspace(start, stop, num, dtype=np.float64)
