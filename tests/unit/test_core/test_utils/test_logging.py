"""
Unit tests for logging utilities.
"""
# 说明：日志配置与序列截断过滤相关的单元测试。
# 覆盖：
# - configure_logging(...)：根据给定日志级别初始化 logging 系统
# - get_logger(...)：获取带 SequenceFilter 的 logger 实例
# - 验证 population / weights 等长序列字段在日志记录中被截断，而短序列保持原样

import logging

from numstat.core.utils import SequenceFilter, configure, configure_logging, get_logger


def test_get_logger_attaches_sequence_filter() -> None:
    configure_logging(level="INFO")
    logger = get_logger("numstat.test")
    assert any(isinstance(f, SequenceFilter) for f in logger.filters)


def test_long_sequences_are_abbreviated(caplog) -> None:
    # 验证超过 log_sequence_limit 的序列被截断为摘要字符串
    configure(log_sequence_limit=3)
    logger = get_logger("numstat.test.abbrev")
    with caplog.at_level(logging.INFO):
        logger.info("message", extra={"population": list(range(100)), "weights": [0.5, 0.5]})
    record = caplog.records[-1]
    assert "message" in caplog.text
    assert record.population == "[0, 1, 2]... (100 items)"
    assert record.weights == [0.5, 0.5]


def test_scalars_and_strings_are_untouched() -> None:
    record = logging.LogRecord("numstat", logging.INFO, __file__, 1, "msg", None, None)
    record.sample = "abcdefghijklmnop"
    assert SequenceFilter().filter(record) is True
    assert record.sample == "abcdefghijklmnop"
