"""Shared pytest configuration and path setup for test modules."""

import dataclasses
import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from numstat.core.utils import NumpyRandomSource, get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局 RuntimeConfig，避免 configure(...) 的修改泄漏到其他测试
    config = get_config()
    snapshot = dataclasses.asdict(config)
    yield
    config.update(**snapshot)


@pytest.fixture
def source() -> NumpyRandomSource:
    # 固定种子的随机源，保证随机化测试可复现
    return NumpyRandomSource(20240601)
