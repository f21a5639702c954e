"""
Example 01: Descriptive statistics and undefined values.

Goal:
    Summarise a small sample, show the covariance/correlation matrices of a
    pair, and show which inputs produce the NaN "undefined" sentinel.

Usage:
    python examples/basic/01_descriptive_statistics.py
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from numstat import correlation, covariance, mean, skewness, summarize, variance
from numstat.core.utils import configure_logging


def main(argv=None):
    args = cli.parse_args("Descriptive Statistics Demo", argv)
    configure_logging(args.log_level)

    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    y = [2.0, 1.0, 4.0, 3.0, 6.0]
    summary = summarize([6, 6, 6, 9])

    result = {
        "name": "basic/01_descriptive_statistics",
        "config": {"x": x, "y": y},
        "outputs": {
            "covariance": [list(row) for row in covariance(x, y)],
            "correlation": [list(row) for row in correlation(x, y)],
        },
        "metrics": {
            "skewed_mean": summary.mean,
            "skewed_variance": summary.variance,
            "skewed_skewness": summary.skewness,
            "mean_of_empty": mean([]),
            "variance_of_single": variance([42.0]),
            "skewness_of_constant": skewness([3.0, 3.0, 3.0]),
        },
        "artifacts": {},
    }
    out_path = io.write_json(result, Path(args.outdir) / "01_descriptive_statistics.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
