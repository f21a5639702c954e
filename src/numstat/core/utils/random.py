"""
Random number generation helpers.

Responsibilities
  - Centralize RNG creation and seeding.
  - Define the ``RandomSource`` capability injected into sampling code.
  - Provide reproducible splits for parallel workloads.

Usage Context
  - Pass a ``NumpyRandomSource`` explicitly for seeded, testable draws.
  - Use ``split_rng`` to give each worker thread its own generator.

Limitations
  - Relies on numpy Generator behavior for reproducibility.
  - A single generator is not safe for concurrent use from several threads.
"""
# 说明：随机数生成辅助工具，统一管理 RNG 的创建、重置与派生，并定义采样代码依赖的随机源接口。
# 职责：
# - RandomSource：采样模块依赖的随机源能力（按权重抽取索引、正态 / 二项 / 整数均匀抽样）
# - NumpyRandomSource：基于 numpy.random.Generator 的默认实现
# - create_rng：集中封装 numpy Generator 的创建逻辑，支持显式种子与已有生成器
# - split_rng / NumpyRandomSource.spawn：从单一 RNG 派生出多个独立生成器，便于多线程各自持有随机源
# - default_source：调用方未显式传入随机源时，按 RuntimeConfig.rng_seed 构造新的随机源
# 约定：
# - 不存在进程级共享的生成器；每次 default_source() 都返回新对象

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, Union, runtime_checkable

import numpy as np

from .config import get_config

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


@runtime_checkable
class RandomSource(Protocol):
    """Capability consumed by the sampling modules."""

    def categorical(self, probabilities: Sequence[float]) -> int:
        """Return an index drawn according to non-negative ``probabilities``."""
        ...

    def normal(self, mean: float, std: float) -> float:
        ...

    def binomial(self, n: int, p: float) -> int:
        ...

    def integers(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""
        ...


class NumpyRandomSource:
    """``RandomSource`` backed by a ``numpy.random.Generator``."""

    def __init__(self, seed: SeedLike = None):
        self.rng: np.random.Generator = create_rng(seed)

    def categorical(self, probabilities: Sequence[float]) -> int:
        # 逆 CDF 法：在累积质量上做二分查找；质量无需严格归一，按总和缩放均匀数
        cumulative = np.cumsum(np.asarray(probabilities, dtype=np.float64))
        if cumulative.size == 0 or cumulative[-1] <= 0.0:
            raise ValueError("categorical draw requires a positive total mass")
        u = self.rng.random() * cumulative[-1]
        index = int(np.searchsorted(cumulative, u, side="right"))
        # u 落在尾部零质量区间之后时（浮点舍入），回退到最后一个正质量下标
        if index >= cumulative.size:
            index = int(np.flatnonzero(np.diff(cumulative, prepend=0.0) > 0.0)[-1])
        return index

    def normal(self, mean: float, std: float) -> float:
        return float(self.rng.normal(mean, std))

    def binomial(self, n: int, p: float) -> int:
        return int(self.rng.binomial(n, p))

    def integers(self, low: int, high: int) -> int:
        return int(self.rng.integers(low, high))

    def spawn(self, num: int) -> List["NumpyRandomSource"]:
        """Return ``num`` independent sources, e.g. one per worker thread."""
        return [NumpyRandomSource(rng) for rng in split_rng(self.rng, num)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rng!r})"


def create_rng(seed: SeedLike = None) -> np.random.Generator:
    """Create a numpy Generator from a seed, SeedSequence, or existing generator."""
    # 将输入规范化为 numpy.random.Generator；若已是 Generator 则直接返回
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def split_rng(rng: np.random.Generator, num: int) -> List[np.random.Generator]:
    """Split an RNG into `num` independent generators."""
    # 基于底层 SeedSequence.spawn 从单一 RNG 派生出 num 个彼此独立的生成器
    if num <= 0:
        raise ValueError("num must be positive")
    seeds = rng.bit_generator.seed_seq.spawn(num)
    return [np.random.default_rng(seed) for seed in seeds]


def default_source() -> NumpyRandomSource:
    """Return a fresh source seeded from ``RuntimeConfig.rng_seed``."""
    return NumpyRandomSource(get_config().rng_seed)


def resolve_source(source: Any = None) -> RandomSource:
    # 接受 None（使用默认随机源）、已有 RandomSource，或任意可作为种子的对象
    if source is None:
        return default_source()
    if isinstance(source, RandomSource):
        return source
    return NumpyRandomSource(source)
