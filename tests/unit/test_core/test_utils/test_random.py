"""
Unit tests for random number generation helpers.
"""
# 说明：随机数生成工具与 NumpyRandomSource 的单元测试。
# 覆盖：
# - create_rng：基于种子的 RNG 创建是否可复现
# - NumpyRandomSource.spawn：为多线程派生独立随机源
# - split_rng：从单一 RNG 派生多个子生成器
# - NumpyRandomSource.categorical：零质量下标永不被抽中，未归一的质量同样可用
# - resolve_source / default_source：随机源的解析规则与配置种子

import numpy as np
import pytest

from numstat.core.utils import (
    NumpyRandomSource,
    RandomSource,
    configure,
    create_rng,
    default_source,
    resolve_source,
    split_rng,
)


def test_create_rng_is_reproducible() -> None:
    assert create_rng(42).normal() == pytest.approx(create_rng(42).normal())
    rng = create_rng(0)
    assert create_rng(rng) is rng


def test_spawn_gives_independent_sources() -> None:
    children = NumpyRandomSource(8).spawn(3)
    assert len(children) == 3
    assert all(isinstance(child, NumpyRandomSource) for child in children)
    assert len({child.normal(0.0, 1.0) for child in children}) == 3
    # 相同种子派生出的子随机源可复现
    first, second = NumpyRandomSource(8).spawn(2)[0], NumpyRandomSource(8).spawn(2)[0]
    assert first.integers(0, 10**9) == second.integers(0, 10**9)


def test_split_rng_produces_independent_generators() -> None:
    children = split_rng(create_rng(123), 3)
    assert len(children) == 3
    samples = [child.normal() for child in children]
    assert len(set(samples)) == len(samples)
    with pytest.raises(ValueError):
        split_rng(create_rng(0), 0)


def test_categorical_skips_zero_mass() -> None:
    source = NumpyRandomSource(0)
    draws = {source.categorical([0.0, 0.5, 0.0, 0.5, 0.0]) for _ in range(500)}
    assert draws == {1, 3}


def test_categorical_accepts_unnormalized_mass() -> None:
    source = NumpyRandomSource(1)
    counts = np.bincount([source.categorical([3.0, 1.0]) for _ in range(4000)], minlength=2)
    assert counts[0] / counts.sum() == pytest.approx(0.75, abs=0.03)


def test_categorical_rejects_zero_total() -> None:
    with pytest.raises(ValueError):
        NumpyRandomSource(0).categorical([0.0, 0.0])


def test_numpy_source_is_a_random_source() -> None:
    assert isinstance(NumpyRandomSource(0), RandomSource)
    assert not isinstance(np.random.default_rng(0), RandomSource)


def test_resolve_source_rules() -> None:
    source = NumpyRandomSource(5)
    assert resolve_source(source) is source
    seeded_a = resolve_source(9)
    seeded_b = resolve_source(9)
    assert seeded_a.integers(0, 1_000_000) == seeded_b.integers(0, 1_000_000)
    wrapped = resolve_source(np.random.default_rng(3))
    assert isinstance(wrapped, NumpyRandomSource)


def test_default_source_uses_configured_seed() -> None:
    configure(rng_seed=2024)
    try:
        assert default_source().normal(0.0, 1.0) == default_source().normal(0.0, 1.0)
    finally:
        configure(rng_seed=None)
