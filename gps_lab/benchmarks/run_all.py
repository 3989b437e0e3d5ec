# gps_lab/benchmarks/run_all.py
# Runs every strategy on one problem and writes results.json (see plot_results.py for charts).
#   python -m gps_lab.benchmarks.run_all --problem romania
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ..config import LabConfig, configure_logging
from ..core.metrics import SearchResult
from ..engine.runner import solve
from ..engine.strategy import FrontierOrdering, SearchStrategy

logger = logging.getLogger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
NUMBERS_GOAL  = int(os.getenv("NUMBERS_GOAL", "10"))
NUMBERS_LIMIT = int(os.getenv("NUMBERS_LIMIT", "64"))   # keeps DFS finite
FLOOD_SIZE    = int(os.getenv("FLOOD_SIZE", "5"))
FLOOD_COLORS  = int(os.getenv("FLOOD_COLORS", "4"))
FLOOD_SEED    = int(os.getenv("FLOOD_SEED", "7"))

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _numbers():
    from ..problems.integers import NumberProblem
    return NumberProblem(start=1, goal=NUMBERS_GOAL, limit=NUMBERS_LIMIT)

def _grid():
    from ..problems.grid import make_grid_problem
    return make_grid_problem()

def _romania():
    from ..problems.romania import romania_problem
    return romania_problem()

def _flood():
    from ..problems.flood_it import random_flood_it
    return random_flood_it(FLOOD_SIZE, FLOOD_SIZE, FLOOD_COLORS, seed=FLOOD_SEED)

PROBLEMS: Dict[str, Callable] = {
    "numbers": _numbers,
    "grid": _grid,
    "romania": _romania,
    "flood": _flood,
}

def _load_problem(name: str):
    try:
        factory = PROBLEMS[name]
    except KeyError:
        raise SystemExit(f"Unknown problem {name!r}. Available: {', '.join(PROBLEMS)}") from None
    return factory()

def _load_algos(strategies: List[SearchStrategy],
                ordering: Optional[FrontierOrdering] = None) -> List[Tuple[SearchStrategy, FrontierOrdering]]:
    """
    Pairs each strategy with `ordering`, or with ordering=None, with the batch ordering
    plus the global one for informed strategies. Ordering only matters to informed ones.
    """
    algos = []
    for strategy in strategies:
        if ordering is not None:
            algos.append((strategy, ordering))
            continue
        algos.append((strategy, FrontierOrdering.BATCH))
        if strategy.informed:
            algos.append((strategy, FrontierOrdering.GLOBAL))
    return algos

def run(problem_name: str, strategies: List[SearchStrategy],
        ordering: Optional[FrontierOrdering] = None) -> List[SearchResult]:
    problem = _load_problem(problem_name)
    results = []
    for strategy, order in _load_algos(strategies, ordering):
        logger.info("running %s (%s) on %s", strategy.name, order.value, problem_name)
        r = solve(problem, strategy, order)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} steps={r.steps} "
            f"expanded={r.nodes_expanded} passes={r.passes}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        results.append(r)
    return results

def main(argv=None):
    config = LabConfig.from_env()
    parser = argparse.ArgumentParser(description="Benchmark every GPS strategy on one problem.")
    parser.add_argument("--problem", default=config.problem, choices=sorted(PROBLEMS))
    default_strategies = [config.strategy.name] if config.strategy else [s.name for s in SearchStrategy]
    parser.add_argument("--strategies", nargs="*", default=default_strategies,
                        help="subset of strategies to run (default: GPS_STRATEGY, else all)")
    parser.add_argument("--ordering", choices=[o.value for o in FrontierOrdering],
                        default=config.ordering.value if config.ordering else None,
                        help="frontier ordering for informed strategies (default: GPS_ORDERING, else both)")
    parser.add_argument("--out", type=Path, default=config.results_dir,
                        help="directory for results.json")
    parser.add_argument("--plot", action="store_true", help="also save a comparison chart")
    parser.add_argument("--log-level", default=config.log_level)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    try:
        strategies = [SearchStrategy.parse(s) for s in args.strategies]
    except ValueError as e:
        parser.error(str(e))

    print(f"→ Problem: {args.problem}")
    ordering = FrontierOrdering.parse(args.ordering) if args.ordering else None
    results = run(args.problem, strategies, ordering)

    out = {"problem": args.problem, "results": [r.to_row() for r in results], "ts": time.time()}
    args.out.mkdir(parents=True, exist_ok=True)
    out_path = args.out / "results.json"
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")

    if args.plot:
        from ..plots.plotting import save_comparison
        png = save_comparison(results, args.out / "comparison.png", title=f"GPS strategies on {args.problem}")
        print(f"Wrote {png}")
    return results

if __name__ == "__main__":
    main()
