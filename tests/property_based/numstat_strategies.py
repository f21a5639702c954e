"""
Shared Hypothesis strategies for property-based testing across numstat.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 生成有限、数值范围受控的一维样本，避免溢出干扰矩的性质检验
# - 生成等长的成对样本，用于协方差 / 相关矩阵测试
# - 生成总体与对应的非负权重向量，用于加权抽样测试
# - 暴露稳定的 RNG 种子生成策略以支持可复现性测试

import numpy as np
from hypothesis import strategies as st

from numstat.core.utils import NumpyRandomSource


# ------------------------------------------------------------------ Basic Types
def finite_floats(bound: float = 1e6):
    # 有限浮点数，排除 NaN / inf，并限制量级以避免三阶矩溢出
    return st.floats(min_value=-bound, max_value=bound, allow_nan=False, allow_infinity=False)


@st.composite
def samples(draw, min_size=0, max_size=30):
    return draw(st.lists(finite_floats(), min_size=min_size, max_size=max_size))


@st.composite
def paired_samples(draw, min_size=0, max_size=30):
    # 先确定公共长度，再分别生成两个等长样本
    n = draw(st.integers(min_value=min_size, max_value=max_size))
    x = draw(st.lists(finite_floats(), min_size=n, max_size=n))
    y = draw(st.lists(finite_floats(), min_size=n, max_size=n))
    return x, y


# ------------------------------------------------------------------ Sampling
@st.composite
def weighted_populations(draw, min_size=1, max_size=12):
    # 总体元素取互不相同的整数；权重取 0、极小值 [1e-12, 1e-6] 或常规值，避免次正规数归一化后下溢为 0，且至少有一个为正
    n = draw(st.integers(min_value=min_size, max_value=max_size))
    population = list(range(n))
    weights = draw(
        st.lists(st.one_of(st.just(0.0), st.floats(min_value=1e-12, max_value=1e-6), st.floats(min_value=1e-3, max_value=10.0)), min_size=n, max_size=n)
        .filter(lambda ws: sum(ws) > 0.0)
    )
    return population, weights


@st.composite
def seeds(draw):
    return draw(st.integers(min_value=0, max_value=2**32 - 1))


@st.composite
def sources(draw):
    return NumpyRandomSource(draw(seeds()))


def as_array(values) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)
