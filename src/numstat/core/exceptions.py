"""
Exception hierarchy shared by the statistics and sampling modules.

Responsibilities:
    * separate caller misuse (InvalidInputError) from bad distribution
      parameters (DistributionConstructionError)
    * keep every library error catchable through NumstatError
"""
# 说明：统计与采样模块共享的异常类型。
# 职责：
# - InvalidInputError：调用方误用（长度不一致、无放回采样数量过大等），在任何计算之前同步抛出
# - DistributionConstructionError：分布参数非法（概率越界、标准差为负等），视为不可恢复的编程错误
# 约定：
# - 数学上无定义但语法合法的输入（空样本均值等）不抛异常，而是返回 NaN 哨兵值

from __future__ import annotations


class NumstatError(Exception):
    """Base exception for numstat errors."""


class InvalidInputError(NumstatError, ValueError):
    """Raised when arguments are malformed or mutually inconsistent."""


class DistributionConstructionError(NumstatError, ValueError):
    """Raised when a distribution cannot be built from its parameters."""
