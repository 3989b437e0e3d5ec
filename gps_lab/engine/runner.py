# gps_lab/engine/runner.py
# Runs the engine once and packs the outcome into a SearchResult (time, memory, path).
from __future__ import annotations
from typing import Optional

from ..core.metrics import MeasuredRun, SearchResult
from ..core.problem import Problem
from ..core.utils import path_states, reconstruct_path
from .gps import GPSEngine
from .strategy import FrontierOrdering, SearchStrategy


def label(strategy: SearchStrategy, ordering: FrontierOrdering) -> str:
    if strategy.informed and ordering is FrontierOrdering.GLOBAL:
        return f"{strategy.name}/global"
    return strategy.name


def solve(
    problem: Problem,
    strategy: "SearchStrategy | str",
    ordering: "FrontierOrdering | str" = FrontierOrdering.BATCH,
    name: Optional[str] = None,
) -> SearchResult:
    engine = GPSEngine(problem, strategy, ordering)
    name = name or label(engine.strategy, engine.ordering)

    with MeasuredRun() as meter:
        engine.run()

    if engine.failed or engine.solution is None:
        return SearchResult(name, False, [], float("inf"), engine.explosions,
                            meter.elapsed, meter.peak_kb, passes=engine.passes)

    actions, cost = reconstruct_path(engine.solution)
    return SearchResult(name, True, actions, cost, engine.explosions,
                        meter.elapsed, meter.peak_kb,
                        path=path_states(engine.solution), passes=engine.passes)
