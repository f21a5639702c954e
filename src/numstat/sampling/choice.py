"""
Uniform and weighted sampling from a finite population.

Responsibilities:
    * validate population / weight / sample-size combinations before drawing
    * draw with replacement from a fixed categorical distribution
    * draw without replacement, renormalising the surviving probability
      mass after every draw

Usage Context:
    * ``choice`` for one-off draws.
    * ``WeightedSampler`` when the same population is sampled repeatedly.

Limitations:
    * The population is materialised in memory.
    * Thread safety depends on the injected random source.
"""
# 说明：有限总体上的均匀 / 加权抽样。
# 职责：
# - ProbabilityState：无放回抽样期间“存活下标 -> 当前概率质量”的可变状态，仅属于一次采样调用
# - WeightedSampler：持有总体、归一化后的概率与随机源，按有放回 / 无放回模式抽样
# - choice：函数式入口，等价于构造一次性的 WeightedSampler 并调用 sample
# 约定：
# - 所有 InvalidInputError 均在第一次抽取之前抛出，不返回部分结果
# - 结果保持抽取顺序，而非总体顺序
# - 无放回时每次移除下标 i 后，剩余质量按 p[j] / (1 - p[i]) 重新归一，
#   其中 1 - p[i] 取剩余质量的补偿求和（二者在精确算术下相等），使剩余质量之和始终为 1

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, TypeVar

import numpy as np

from ..core.exceptions import InvalidInputError
from ..core.utils.config import get_config
from ..core.utils.logging import get_logger
from ..core.utils.math_utils import as_probabilities, as_sample, kahan_sum
from ..core.utils.param_validation import ensure, ensure_type, non_negative_int
from ..core.utils.random import RandomSource, resolve_source

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass
class ProbabilityState:
    """
    Probability mass over the population indices that have not been drawn yet.

    - Invariant
      - ``masses`` sums to 1.0 (up to floating-point tolerance) after every
        call to :meth:`remove`.
      - ``indices[k]`` is the population index owning ``masses[k]``.
    """

    indices: List[int]
    masses: np.ndarray
    tolerance: float = 1e-9

    @classmethod
    def from_probabilities(cls, probabilities: np.ndarray, *, tolerance: float = 1e-9) -> "ProbabilityState":
        return cls(
            indices=list(range(len(probabilities))),
            masses=np.array(probabilities, dtype=np.float64, copy=True),
            tolerance=tolerance,
        )

    def __len__(self) -> int:
        return len(self.indices)

    @property
    def total(self) -> float:
        return kahan_sum(self.masses)

    def draw(self, source: RandomSource) -> int:
        """Draw one surviving population index, remove it and renormalise."""
        position = source.categorical(self.masses)
        index = self.indices[position]
        self.remove(position)
        return index

    def remove(self, position: int) -> None:
        # 移除 position 处的质量 p_i，并将剩余质量重新归一
        removed = float(self.masses[position])
        del self.indices[position]
        self.masses = np.delete(self.masses, position)
        if self.masses.size == 0:
            return
        # 精确算术下剩余质量之和等于 1 - p_i；直接对剩余质量求和作分母，
        # 避免 p_i 接近 1 时 1 - p_i 的减法抵消，以及舍入误差在多次抽取间被 1 / (1 - p_i) 逐步放大
        denominator = self.total
        if abs(denominator - (1.0 - removed)) > self.tolerance:
            logger.debug(
                "surviving mass %.17g differs from 1 - p = %.17g after removing p=%.17g",
                denominator,
                1.0 - removed,
                removed,
            )
        if denominator > 0.0:
            self.masses = self.masses / denominator


class WeightedSampler(Generic[T]):
    """
    Draw samples from a fixed population with optional per-element weights.

    - Configuration
      - population: elements to draw from; returned elements are the
        original objects, not copies.
      - weights: optional non-negative weights, one per element. They are
        rescaled once to sum to 1; omitted weights mean ``1 / N`` each.
      - source: a ``RandomSource``, a seed, or ``None`` for
        ``default_source()``.

    - Behavior
      - ``sample(size, with_replacement=True)`` draws every element from
        the original distribution.
      - ``sample(size, with_replacement=False)`` removes each drawn element
        and renormalises the remaining probability mass.
    """

    def __init__(
        self,
        population: Sequence[T],
        weights: Optional[Sequence[float]] = None,
        *,
        source: Any = None,
    ):
        self.population: List[T] = list(population)
        size = len(self.population)
        if weights is None:
            self.probabilities = np.full(size, 1.0 / size) if size else np.empty(0)
        else:
            raw = as_sample(weights, label="weights")
            ensure(
                raw.size == size,
                f"weights must be the same length as population, got {raw.size} weights "
                f"for {size} elements",
                error=InvalidInputError,
            )
            self.probabilities = as_probabilities(raw)
            self._check_normalised(raw)
        self._source: RandomSource = resolve_source(source)

    @staticmethod
    def _check_normalised(raw: np.ndarray) -> None:
        config = get_config()
        if not config.strict_validation or raw.size == 0:
            return
        total = kahan_sum(raw)
        if abs(total - 1.0) > config.probability_tolerance:
            logger.warning(
                "weights sum to %.6g rather than 1; rescaling",
                total,
                extra={"weights": raw.tolist()},
            )

    @property
    def source(self) -> RandomSource:
        return self._source

    def __len__(self) -> int:
        return len(self.population)

    def sample(self, size: int, with_replacement: bool = True) -> List[T]:
        """
        Return ``size`` elements in draw order.

        Raises:
            InvalidInputError: if ``size`` is negative, the population is empty
                while ``size > 0``, or (without replacement) ``size`` exceeds the
                number of elements that can still be drawn.
        """
        size = non_negative_int(size, label="sample_size")
        ensure_type(with_replacement, (bool, np.bool_), label="with_replacement")
        self._validate_request(size, with_replacement)
        if size == 0:
            return []
        logger.debug(
            "drawing %d of %d elements (with_replacement=%s)",
            size,
            len(self.population),
            with_replacement,
        )
        if with_replacement:
            return self._sample_with_replacement(size)
        return self._sample_without_replacement(size)

    def _validate_request(self, size: int, with_replacement: bool) -> None:
        population_size = len(self.population)
        if size > 0 and population_size == 0:
            raise InvalidInputError("cannot sample from an empty population")
        if with_replacement:
            return
        if size > population_size:
            raise InvalidInputError(
                f"sample_size ({size}) cannot be greater than the population size "
                f"({population_size}) when sampling without replacement"
            )
        positive = int(np.count_nonzero(self.probabilities > 0.0))
        if size > positive:
            raise InvalidInputError(
                f"sample_size ({size}) exceeds the number of elements with positive "
                f"weight ({positive}) when sampling without replacement"
            )

    def _sample_with_replacement(self, size: int) -> List[T]:
        # 分布只构造一次，抽样过程中不修改
        probabilities = self.probabilities
        return [self.population[self._source.categorical(probabilities)] for _ in range(size)]

    def _sample_without_replacement(self, size: int) -> List[T]:
        state = ProbabilityState.from_probabilities(
            self.probabilities, tolerance=get_config().probability_tolerance
        )
        return [self.population[state.draw(self._source)] for _ in range(size)]


def choice(
    population: Sequence[T],
    sample_size: int,
    with_replacement: bool = True,
    weights: Optional[Sequence[float]] = None,
    *,
    source: Any = None,
) -> List[T]:
    """
    Return ``sample_size`` elements drawn from ``population``.

    Args:
        population: Elements to draw from.
        sample_size: Number of elements to draw.
        with_replacement: Draw independently from the original distribution
            when ``True``; otherwise never return the same position twice.
        weights: Optional non-negative weights, same length as ``population``.
        source: ``RandomSource``, seed, or ``None``.

    Raises:
        InvalidInputError: on a weight/population length mismatch or an
            oversized without-replacement request.

    Example:
        >>> from numstat.core.utils import NumpyRandomSource
        >>> colors = ["red", "blue", "green"]
        >>> len(choice(colors, 5, True, [0.7, 0.2, 0.1], source=NumpyRandomSource(0)))
        5
    """
    sampler = WeightedSampler(population, weights, source=source)
    return sampler.sample(sample_size, with_replacement)
