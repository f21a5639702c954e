"""
Result containers for descriptive statistics.
"""
# 说明：描述性统计的结果类型。
# - CovarianceMatrix：固定 2x2 对称矩阵；非对角元只存一份，对称性由构造保证
# - Summary：单个样本的计数与各阶矩汇总

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class CovarianceMatrix:
    """
    Symmetric 2x2 matrix for a pair of samples.

    - Layout
      - ``xx`` and ``yy`` are the diagonal entries.
      - ``xy`` is stored once and served for both ``[0][1]`` and ``[1][0]``.

    - Usage Notes
      - Supports ``matrix[i][j]`` indexing and ``to_array()``.
      - Entries may be NaN when the underlying moment is undefined.
    """

    xx: float
    xy: float
    yy: float

    @property
    def rows(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return ((self.xx, self.xy), (self.xy, self.yy))

    def __getitem__(self, index: int) -> Tuple[float, float]:
        return self.rows[index]

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return 2

    def to_array(self) -> np.ndarray:
        return np.array(self.rows, dtype=np.float64)


@dataclass(frozen=True)
class Summary:
    """Count and moments of one sample; undefined moments are NaN."""

    count: int
    mean: float
    variance: float
    std_dev: float
    skewness: float
