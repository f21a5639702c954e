"""
Descriptive statistics over one-dimensional samples.

Responsibilities:
    * mean, unbiased variance and standard deviation of one sample
    * skewness as the third standardized moment
    * covariance and correlation of a pair of equal-length samples

Conventions:
    * ``variance``, ``std_dev`` and ``covariance`` divide by ``n - 1``.
    * ``skewness`` computes its own population moments, dividing by ``n``.
    * Mathematically undefined results (empty sample, single point, zero
      spread) are returned as NaN rather than raised.
    * Length mismatches between paired samples raise ``InvalidInputError``.
"""
# 说明：单样本与成对样本的描述性统计。
# 职责：
# - mean / variance / std_dev：均值、无偏方差（分母 n-1）与标准差
# - skewness：三阶标准化矩，内部使用分母为 n 的总体方差（与 variance 的 n-1 约定不同，需保持）
# - covariance / correlation：两变量 2x2 协方差 / 相关矩阵
# 约定：
# - 无定义的结果一律返回 NaN 哨兵值：除零在 undefined_safe() 中静默得到 NaN，并沿后续算术传播
# - 调用方误用（长度不一致、非数值输入）抛出 InvalidInputError

from __future__ import annotations

import math
from typing import Any, Iterable, Tuple

import numpy as np

from ..core.exceptions import InvalidInputError
from ..core.utils.math_utils import as_sample, kahan_sum, undefined_safe
from .types import CovarianceMatrix, Summary


def _deviations(arr: np.ndarray) -> np.ndarray:
    # 常数样本：均值的舍入误差（如 [0.1] * 3）会留下极小偏差，这里按零离散度处理
    if arr.size and np.ptp(arr) == 0.0:
        return np.zeros_like(arr)
    return arr - _mean(arr)


def _centered_cross_sum(a: np.ndarray, b: np.ndarray) -> float:
    # 中心化交叉积之和 sum((a - mean(a)) * (b - mean(b)))；方差与协方差共用，保证 cov(x, x) == variance(x)
    return kahan_sum(_deviations(a) * _deviations(b))


def _dof(n: int) -> np.float64:
    # 分母 n - 1 截断到 0：空样本与单点样本都得到 0/0 = NaN，而不是 0/-1 = -0.0
    return np.float64(max(n - 1, 0))


def _mean(arr: np.ndarray) -> float:
    with undefined_safe():
        return float(np.float64(kahan_sum(arr)) / np.float64(arr.size))


def _variance(arr: np.ndarray) -> float:
    with undefined_safe():
        return float(np.float64(_centered_cross_sum(arr, arr)) / _dof(arr.size))


def _paired(x: Iterable[Any], y: Iterable[Any]) -> Tuple[np.ndarray, np.ndarray]:
    xs = as_sample(x, label="x")
    ys = as_sample(y, label="y")
    if xs.size != ys.size:
        raise InvalidInputError(
            f"x and y must have the same length, got {xs.size} and {ys.size}"
        )
    return xs, ys


def mean(sample: Iterable[Any]) -> float:
    """Return the arithmetic mean, or NaN for an empty sample."""
    return _mean(as_sample(sample))


def variance(sample: Iterable[Any]) -> float:
    """
    Return the unbiased sample variance (denominator ``n - 1``).

    NaN for samples with fewer than two values.
    """
    arr = as_sample(sample)
    # 空样本与单点样本的中心化平方和均为 0，分母截断为 0，得到 0/0 = NaN
    return _variance(arr)


def std_dev(sample: Iterable[Any]) -> float:
    """Return ``sqrt(variance(sample))``; NaN exactly when the variance is."""
    return float(np.sqrt(variance(sample)))


def skewness(sample: Iterable[Any]) -> float:
    """
    Return the third standardized moment ``m3 / m2 ** 1.5``.

    Both central moments use the population denominator ``n``, so the
    spread used here is not the one reported by :func:`variance`. Empty
    and constant samples have no defined skewness and yield NaN.
    """
    arr = as_sample(sample)
    with undefined_safe():
        n = np.float64(arr.size)
        deviations = _deviations(arr)
        m2 = np.float64(kahan_sum(deviations ** 2)) / n
        m3 = np.float64(kahan_sum(deviations ** 3)) / n
        return float(m3 / (np.sqrt(m2) ** 3))


def covariance(x: Iterable[Any], y: Iterable[Any]) -> CovarianceMatrix:
    """
    Return the 2x2 sample covariance matrix of ``x`` and ``y``.

    Every entry divides by ``n - 1``; the off-diagonal entry is computed once
    and shared, so the matrix is symmetric by construction.

    Raises:
        InvalidInputError: if ``x`` and ``y`` differ in length.
    """
    xs, ys = _paired(x, y)
    with undefined_safe():
        xy = float(np.float64(_centered_cross_sum(xs, ys)) / _dof(xs.size))
    return CovarianceMatrix(xx=_variance(xs), xy=xy, yy=_variance(ys))


def correlation(x: Iterable[Any], y: Iterable[Any]) -> CovarianceMatrix:
    """
    Return the 2x2 Pearson correlation matrix of ``x`` and ``y``.

    The diagonal is fixed at 1.0. The off-diagonal entry is
    ``cov(x, y) / (std_dev(x) * std_dev(y))`` and is NaN when either sample
    has zero (or undefined) variance.

    Raises:
        InvalidInputError: if ``x`` and ``y`` differ in length.
    """
    cov = covariance(x, y)
    with undefined_safe():
        scale = np.sqrt(np.float64(cov.xx)) * np.sqrt(np.float64(cov.yy))
        xy = float(np.float64(cov.xy) / scale)
    if math.isfinite(xy):
        # 舍入可能使 |r| 略超过 1（如 correlation(x, x)），与 np.corrcoef 一样截断到 [-1, 1]
        xy = min(max(xy, -1.0), 1.0)
    return CovarianceMatrix(xx=1.0, xy=xy, yy=1.0)


def summarize(sample: Iterable[Any]) -> Summary:
    """Return count, mean, variance, std_dev and skewness for one sample."""
    arr = as_sample(sample)
    return Summary(
        count=int(arr.size),
        mean=mean(arr),
        variance=variance(arr),
        std_dev=std_dev(arr),
        skewness=skewness(arr),
    )
