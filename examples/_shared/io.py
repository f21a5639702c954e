"""
Input/Output helpers for examples.
"""
import json
import math
from pathlib import Path
from typing import Any, Dict, Union


def ensure_outdir(path: Union[str, Path]) -> Path:
    """Ensure the output directory exists."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def _jsonable(value: Any) -> Any:
    # NaN 哨兵值在 JSON 中没有合法表示，写出为 null
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def write_json(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write data to a JSON file."""
    p = Path(path)
    ensure_outdir(p.parent)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(_jsonable(data), f, indent=2, default=str)
    return p


def print_summary(result: Dict[str, Any]) -> None:
    """
    Print a summary of the example result to stdout.

    Expects result dict to have keys: 'name', 'config', 'metrics', 'artifacts'.
    """
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")
    print("-" * 60)

    for section in ("config", "metrics", "artifacts"):
        if result.get(section):
            print(f"{section.capitalize()}:")
            for k, v in result[section].items():
                print(f"  {k}: {v}")
            print("-" * 60)
