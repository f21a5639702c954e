"""
Reusable validation helpers and decorators.
"""
# 说明：参数验证相关的辅助函数与装饰器，用于在库内部统一进行轻量级参数检查与转换。
# 职责：
# - ParamValidationError：参数校验失败的异常类型，属于 InvalidInputError 分支
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合，并在失败时给出带 label 的错误提示
# - non_negative_int：将 size / sample_size 等计数参数规整为非负整数
# - validate_arguments：根据 schema 为函数参数应用验证/转换逻辑的装饰器，统一处理位置参数与关键字参数

from __future__ import annotations

import functools
import numbers
from typing import Any, Callable, Dict, Mapping, Tuple, Type

from ..exceptions import InvalidInputError


class ParamValidationError(InvalidInputError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的 ParamValidationError
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def non_negative_int(value: Any, *, label: str = "size") -> int:
    """Return ``value`` as an ``int`` after checking it is a non-negative integral."""
    # bool 是 int 的子类，这里显式排除，避免 True/False 被当成 1/0 的计数
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ParamValidationError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ParamValidationError(f"{label} must be non-negative, got {value}")
    return int(value)


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator validating arguments according to callables.

    Each validator receives the argument and should return the (possibly
    transformed) value or raise ParamValidationError.
    """
    # schema：以参数名为键、验证/转换函数为值的映射，用于在调用前统一处理入参

    def decorator(func: Callable) -> Callable:
        arg_names = func.__code__.co_varnames[: func.__code__.co_argcount]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            mutable = list(args)
            kw: Dict[str, Any] = dict(kwargs)
            for name, validator in schema.items():
                # 以关键字形式传入时直接校验
                if name in kw:
                    kw[name] = validator(kw[name])
                    continue
                if name not in arg_names:
                    continue
                index = arg_names.index(name)
                # 未显式提供对应位置参数（使用默认值），不强制验证
                if index >= len(mutable):
                    continue
                mutable[index] = validator(mutable[index])
            return func(*tuple(mutable), **kw)

        return wrapper

    return decorator
