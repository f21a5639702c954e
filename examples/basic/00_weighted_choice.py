"""
Example 00: Weighted choice with and without replacement.

Goal:
    Draw colours with weights [0.7, 0.2, 0.1], count how often each colour
    appears, and compare the with/without-replacement behaviour.

Usage:
    python examples/basic/00_weighted_choice.py --seed 123 --quick
"""
import sys
from collections import Counter
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from numstat import NumpyRandomSource, choice
from numstat.core.utils import configure_logging


def main(argv=None):
    args = cli.parse_args("Weighted Choice Demo", argv)
    configure_logging(args.log_level)
    source = NumpyRandomSource(args.seed)

    colors = ["red", "blue", "green"]
    weights = [0.7, 0.2, 0.1]
    n_draws = 1_000 if args.quick else 20_000

    with_replacement = Counter(choice(colors, n_draws, True, weights, source=source))
    pair = choice(colors, 2, False, weights, source=source)

    result = {
        "name": "basic/00_weighted_choice",
        "config": {"seed": args.seed, "quick": args.quick, "n_draws": n_draws},
        "outputs": {"pair_without_replacement": pair},
        "metrics": {
            f"freq_{color}": with_replacement[color] / n_draws for color in colors
        },
        "artifacts": {},
    }
    out_path = io.write_json(result, Path(args.outdir) / "00_weighted_choice.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
