"""
Lightweight logging helpers with compact defaults for sequence payloads.
"""
# 说明：轻量级日志工具，提供统一的 logger 获取入口，并对日志记录中附带的长序列进行截断。
# 职责：
# - SequenceFilter：按运行时配置对 population / weights / sample 等序列字段做截断摘要
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载序列过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 截断长度由 RuntimeConfig.log_sequence_limit 控制
# - 日志级别优先级：显式参数 level > 环境变量 NUMSTAT_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from .config import get_config

_SEQUENCE_ATTRS = ("population", "weights", "sample")


def _abbreviate(value: Any, limit: int) -> Any:
    # 字符串与标量原样返回；其余可迭代对象超过 limit 时只保留前 limit 项并注明总长度
    if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
        return value
    items = list(value)
    if len(items) <= limit:
        return items
    return f"{items[:limit]!r}... ({len(items)} items)"


class SequenceFilter(logging.Filter):
    """Filter that shortens sequence payloads attached to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        limit = get_config().log_sequence_limit
        for attr in _SEQUENCE_ATTRS:
            if hasattr(record, attr):
                setattr(record, attr, _abbreviate(getattr(record, attr), limit))
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 SequenceFilter（避免重复挂载）
    log_level = level or os.environ.get("NUMSTAT_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, SequenceFilter) for f in root.filters):
        root.addFilter(SequenceFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，并为其挂载 SequenceFilter；若根 logger 尚无 handler，则懒加载初始化
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        configure_logging()
    if not any(isinstance(f, SequenceFilter) for f in logger.filters):
        logger.addFilter(SequenceFilter())
    return logger
