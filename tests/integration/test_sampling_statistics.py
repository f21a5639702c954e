"""
Integration tests combining sampling with descriptive statistics.
"""
# 说明：采样模块与统计模块联动的集成测试
# 覆盖：
# - 正态样本的均值 / 标准差 / 偏度与分布参数一致
# - 加权抽样结果的经验比例与权重一致
# - 同一种子的随机源在采样 + 统计流水线上可复现
from __future__ import annotations

import pytest

from numstat import NumpyRandomSource, choice, correlation, mean, normal, skewness, std_dev, summarize


def test_normal_draws_have_expected_moments() -> None:
    data = normal(10.0, 2.0, 10_000, source=NumpyRandomSource(0))
    assert mean(data) == pytest.approx(10.0, abs=0.05 * 2)
    assert std_dev(data) == pytest.approx(2.0, abs=0.1)
    assert skewness(data) == pytest.approx(0.0, abs=0.1)


def test_weighted_choice_indicator_mean() -> None:
    draws = choice([1.0, 0.0], 10_000, True, [0.3, 0.7], source=NumpyRandomSource(5))
    assert mean(draws) == pytest.approx(0.3, abs=0.02)


def test_independent_normals_are_uncorrelated() -> None:
    source = NumpyRandomSource(17)
    x = normal(0.0, 1.0, 5000, source=source)
    y = normal(0.0, 1.0, 5000, source=source)
    assert correlation(x, y)[0][1] == pytest.approx(0.0, abs=0.05)


def test_pipeline_is_reproducible_with_seeded_sources() -> None:
    def run(seed: int):
        source = NumpyRandomSource(seed)
        population = normal(0.0, 1.0, 50, source=source).tolist()
        picked = choice(population, 20, False, source=source)
        return summarize(picked)

    assert run(123) == run(123)
