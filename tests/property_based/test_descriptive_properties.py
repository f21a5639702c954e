"""
Property-based tests for descriptive statistics.
"""
# 说明：描述性统计的属性测试。
# 覆盖：
# - std_dev 与 sqrt(variance) 精确一致
# - 方差非负、与 numpy ddof=1 结果一致
# - cov(x, x) 对角元等于 variance(x)，协方差 / 相关矩阵严格对称，相关矩阵对角元恒为 1
# - 相关系数严格落在 [-1, 1]，自相关不超过 1
# - 长度不一致时抛出 InvalidInputError

import math

import numpy as np
import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from numstat.core.exceptions import InvalidInputError
from numstat.stats import correlation, covariance, mean, skewness, std_dev, variance

from numstat_strategies import paired_samples, samples


@given(samples(min_size=2))
def test_std_dev_is_sqrt_of_variance(values):
    assert std_dev(values) == math.sqrt(variance(values))


@given(samples(min_size=2))
def test_variance_non_negative_and_matches_numpy(values):
    var = variance(values)
    assert var >= 0.0
    assert var == pytest.approx(np.var(values, ddof=1), rel=1e-6, abs=1e-6)


@given(samples(min_size=1))
def test_mean_lies_within_range(values):
    margin = 1e-9 * max(abs(v) for v in values) + 1e-9
    assert min(values) - margin <= mean(values) <= max(values) + margin


@given(samples(min_size=2))
def test_covariance_diagonal_is_variance(values):
    cov = covariance(values, values)
    assert cov[0][0] == variance(values)
    assert cov[1][1] == variance(values)


@given(paired_samples())
def test_covariance_and_correlation_are_symmetric(pair):
    x, y = pair
    cov = covariance(x, y)
    corr = correlation(x, y)
    assert cov[0][1] == cov[1][0] or (math.isnan(cov[0][1]) and math.isnan(cov[1][0]))
    assert corr[0][1] == corr[1][0] or (math.isnan(corr[0][1]) and math.isnan(corr[1][0]))
    assert corr[0][0] == 1.0
    assert corr[1][1] == 1.0


@given(paired_samples(min_size=2))
def test_correlation_is_bounded(pair):
    x, y = pair
    assume(np.ptp(x) > 1e-3 and np.ptp(y) > 1e-3)
    r = correlation(x, y)[0][1]
    assert -1.0 <= r <= 1.0


@given(samples(min_size=2, max_size=10))
def test_self_correlation_never_exceeds_one(values):
    assume(np.ptp(values) > 1e-3)
    assert correlation(values, values)[0][1] <= 1.0


@given(samples(min_size=1, max_size=20), st.integers(min_value=1, max_value=5))
def test_paired_statistics_reject_mismatched_lengths(values, extra):
    other = values + [0.0] * extra
    with pytest.raises(InvalidInputError):
        covariance(values, other)
    with pytest.raises(InvalidInputError):
        correlation(other, values)


@given(samples(min_size=3, max_size=20))
def test_skewness_flips_sign_under_negation(values):
    values = [round(v, 3) for v in values]
    assume(np.ptp(values) > 1.0)
    assert skewness([-v for v in values]) == pytest.approx(-skewness(values), abs=1e-6)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False), st.integers(min_value=1, max_value=10))
def test_constant_sample_has_undefined_skewness(value, n):
    assert math.isnan(skewness([value] * n))
