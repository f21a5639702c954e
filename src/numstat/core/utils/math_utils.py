"""
Numerical utilities shared across the library.

Responsibilities
  - Normalise user samples into one-dimensional float64 arrays.
  - Validate and normalise weight vectors into probability masses.
  - Provide a compensated summation used by the moment formulas.

Usage Context
  - Statistics functions call ``as_sample`` before computing moments.
  - Sampling calls ``as_probabilities`` once per sampler construction.

Limitations
  - Assumes numeric inputs convertible to numpy arrays.
  - Only one-dimensional data is supported.
"""
# 说明：库内共享的数值工具函数集合。
# 职责：
# - as_sample：将任意可转换为实数的序列规整为一维 float64 数组，转换失败统一报 InvalidInputError
# - as_probabilities：校验权重向量（非负、有限、总和为正）并归一化为概率质量
# - kahan_sum：带 Kahan 补偿的求和，降低长序列上的浮点累加误差
# - undefined_safe：numpy errstate 上下文，除零 / 0/0 直接得到 inf / NaN 哨兵值而不发出警告

from __future__ import annotations

from typing import Any, Iterable, Sequence, Union

import numpy as np

from ..exceptions import InvalidInputError

ArrayLike = Union[Sequence[float], np.ndarray]

NAN = float("nan")


def undefined_safe() -> np.errstate:
    """Context in which division by zero yields the NaN/inf sentinel silently."""
    return np.errstate(divide="ignore", invalid="ignore")


def as_sample(values: Iterable[Any], *, label: str = "sample") -> np.ndarray:
    """Return ``values`` as a one-dimensional float64 array."""
    # 惰性可迭代对象（生成器等）先物化为列表，再交给 numpy 转换
    try:
        if not isinstance(values, (np.ndarray, Sequence)):
            values = list(values)
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{label} must contain real numbers: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidInputError(f"{label} must be one-dimensional, got shape {arr.shape}")
    return arr


def as_probabilities(weights: ArrayLike, *, label: str = "weights") -> np.ndarray:
    """Validate non-negative weights and rescale them to sum to one."""
    arr = as_sample(weights, label=label)
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{label} must be finite")
    if np.any(arr < 0.0):
        raise InvalidInputError(f"{label} must be non-negative")
    total = kahan_sum(arr)
    if arr.size and total <= 0.0:
        raise InvalidInputError(f"{label} must have a positive sum")
    if arr.size == 0:
        return arr
    return arr / total


def kahan_sum(values: Iterable[float]) -> float:
    """Return the sum of values with Kahan compensation."""
    total = 0.0
    compensation = 0.0
    for value in values:
        y = float(value) - compensation
        t = total + y
        compensation = (t - total) - y
        total = t
    return total
