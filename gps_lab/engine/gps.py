# gps_lab/engine/gps.py
"""
General Problem Solver engine.

One expansion routine serves all five strategies. The open list is a single
double-ended Frontier that is always read from the front; what changes per
strategy is the end children are pushed to, whether a state may be expanded
again, and how a batch of children is ordered before it is queued.

The closed map (state -> cheapest cost expanded so far) lives for one bounded
pass only. IDDFS relies on that: every deeper pass starts from a clean slate.
"""
from __future__ import annotations
import logging
import sys
from operator import itemgetter
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..core.frontiers import Frontier
from ..core.node import SearchNode
from ..core.problem import Problem, State, is_valid_cost
from ..core.utils import path_states
from .strategy import FrontierOrdering, SearchStrategy

logger = logging.getLogger(__name__)

# Depth bound for every strategy except IDDFS; never reached in practice.
UNBOUNDED = sys.maxsize


class GPSEngine:
    def __init__(self, problem: Problem, strategy: "SearchStrategy | str",
                 ordering: "FrontierOrdering | str" = FrontierOrdering.BATCH):
        self._problem = problem
        self._strategy = SearchStrategy.parse(strategy)
        self._ordering = FrontierOrdering.parse(ordering)

        self._open = Frontier()
        self._closed: Dict[State, int] = {}

        self._solution: Optional[SearchNode] = None
        self._explosions = 0
        self._finished = False
        self._failed = False
        self._passes = 0
        self._depth_bound = 0

    # ------------------------------------------------------------------ run

    def run(self) -> Optional[SearchNode]:
        """
        Search until a goal is found or the reachable space is exhausted.

        Blocks until finished. DFS and GREEDY may never return on infinite or
        cyclic spaces without a reachable goal. Returns the solution node, or
        None when the run failed.
        """
        self._reset()
        max_depth = 0 if self._strategy.iterative else UNBOUNDED
        while not self._finished:
            self._explore(max_depth)
            max_depth += 1

        if self._failed:
            logger.info("%s failed after %d expansions (%d passes)",
                        self._strategy.name, self._explosions, self._passes)
        else:
            logger.info("%s found a solution at cost %d after %d expansions (%d passes)",
                        self._strategy.name, self._solution.cost, self._explosions, self._passes)
        return self._solution

    def _reset(self) -> None:
        self._open.clear()
        self._closed.clear()
        self._solution = None
        self._explosions = 0
        self._finished = False
        self._failed = False
        self._passes = 0
        self._depth_bound = 0

    def _explore(self, max_depth: int) -> None:
        """One pass bounded by max_depth. Marks the run finished on a goal or on exhaustion."""
        self._passes += 1
        self._depth_bound = max_depth
        self._closed.clear()
        self._open.clear()
        limit_hit = False
        peak_frontier = 1

        logger.debug("pass %d starting (max depth %s)", self._passes,
                     "unbounded" if max_depth == UNBOUNDED else max_depth)

        self._open.push_back(SearchNode(self._problem.initial_state()))
        while self._open:
            peak_frontier = max(peak_frontier, len(self._open))
            node = self._open.pop_front()
            depth = node.depth()

            if depth > max_depth:
                limit_hit = True
            # goal test happens on pop, even past the bound
            if self._problem.is_goal(node.state):
                self._solution = node
                self._finished = True
                logger.debug("pass %d: goal at depth %d after %d expansions, frontier %d (peak %d)",
                             self._passes, depth, self._explosions, len(self._open), peak_frontier)
                return
            if depth <= max_depth:
                self._explode(node)

        logger.debug("pass %d drained: %d expansions, %d closed states, peak frontier %d, bound hit: %s",
                     self._passes, self._explosions, len(self._closed), peak_frontier, limit_hit)
        if not limit_hit:
            self._failed = True
            self._finished = True

    # ------------------------------------------------------------ expansion

    def _explode(self, node: SearchNode) -> None:
        strategy = self._strategy

        if strategy is SearchStrategy.BFS:
            # first expansion of a state wins for the rest of the pass
            if node.state in self._closed:
                return
            for child in self._candidates(node):
                self._open.push_back(child)

        elif strategy is SearchStrategy.DFS or strategy is SearchStrategy.IDDFS:
            if not self._is_best(node):
                return
            for child in self._candidates(node):
                self._open.push_front(child)

        elif strategy is SearchStrategy.ASTAR:
            if not self._is_best(node):
                return
            self._enqueue_by_evaluation(self._candidates(node))

        elif strategy is SearchStrategy.GREEDY:
            # no admission test, a state can be expanded again at any cost
            self._enqueue_by_evaluation(self._candidates(node))

    def _candidates(self, node: SearchNode) -> List[SearchNode]:
        """Counts the expansion, closes the node's state and applies every rule in order."""
        self._explosions += 1
        self._closed[node.state] = node.cost

        children = []
        for rule in self._problem.rules():
            outcome = rule.apply(node.state)
            if outcome is None:
                continue
            state, cost = outcome
            if not is_valid_cost(cost):
                raise ValueError(
                    f"Rule {getattr(rule, 'name', rule)!r} returned cost {cost!r} for state {node.state!r}; "
                    "rule costs must be non-negative integers."
                )
            children.append(SearchNode(state, node.cost + int(cost), parent=node, rule=rule))
        return children

    def _enqueue_by_evaluation(self, children: List[SearchNode]) -> None:
        # f is computed once per child; sorted() is stable, so equal evaluations keep rule order
        batch = sorted(((self.evaluation(child), child) for child in children), key=itemgetter(0))
        if self._ordering is FrontierOrdering.GLOBAL:
            for f, child in batch:
                self._open.insert_ordered(child, f)
        else:
            for f, child in batch:
                self._open.push_back(child, key=f)

    def _is_best(self, node: SearchNode) -> bool:
        """True if the state was never closed this pass, or was closed at a higher cost."""
        best = self._closed.get(node.state)
        return best is None or node.cost < best

    # ----------------------------------------------------------- evaluation

    def evaluation(self, node: SearchNode) -> int:
        """f(n): g(n) for uninformed strategies, g(n) + h(n) for A*, h(n) for greedy."""
        if self._strategy is SearchStrategy.ASTAR:
            return node.cost + self._heuristic(node.state)
        if self._strategy is SearchStrategy.GREEDY:
            return self._heuristic(node.state)
        return node.cost

    def _heuristic(self, state: State) -> int:
        estimate = getattr(self._problem, "heuristic", None)
        if estimate is None:
            return 0
        value = estimate(state)
        return 0 if value is None else value

    # -------------------------------------------------------------- queries

    @property
    def problem(self) -> Problem:
        return self._problem

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    @property
    def ordering(self) -> FrontierOrdering:
        return self._ordering

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def failed(self) -> bool:
        return self._failed

    @property
    def solution(self) -> Optional[SearchNode]:
        return self._solution

    @property
    def explosions(self) -> int:
        """Number of node expansions in the last run, across all of its passes."""
        return self._explosions

    @property
    def passes(self) -> int:
        return self._passes

    @property
    def depth_bound(self) -> int:
        return self._depth_bound

    @property
    def open(self) -> Tuple[SearchNode, ...]:
        """Snapshot of the frontier, front first."""
        return tuple(self._open)

    @property
    def best_costs(self) -> Mapping[State, int]:
        """Read-only view of the current pass's closed map."""
        return MappingProxyType(self._closed)

    def solution_path(self) -> List[State]:
        if self._solution is None:
            return []
        return path_states(self._solution)
