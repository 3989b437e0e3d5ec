# gps_lab/problems/integers.py
# Integer puzzles: reach a goal number from a start number with cheap arithmetic moves.
from __future__ import annotations
from typing import List, Optional

from ..core.problem import SimpleRule


class NumberProblem:
    """
    - State: an int
    - Rules (in this order): increment n -> n+1, double n -> 2n, both cost 1
    - A rule is inapplicable when its result would exceed `limit` (if set),
      which keeps the space finite for DFS and for failure tests.
    - heuristic(s): doublings from s that still stay below the goal; no move more than
      doubles a positive number, so this never overestimates.
    """
    def __init__(self, start: int = 1, goal: int = 10, limit: Optional[int] = None):
        self.start = start
        self.goal = goal
        self.limit = limit
        self._rules = [
            SimpleRule("increment", self._bounded(lambda n: n + 1)),
            SimpleRule("double", self._bounded(lambda n: n * 2)),
        ]

    def _bounded(self, fn):
        def transition(n: int) -> Optional[int]:
            n2 = fn(n)
            if self.limit is not None and n2 > self.limit:
                return None
            return n2
        return transition

    def initial_state(self) -> int:
        return self.start

    def is_goal(self, state: int) -> bool:
        return state == self.goal

    def rules(self) -> List[SimpleRule]:
        return self._rules

    def heuristic(self, state: int) -> Optional[int]:
        if state >= self.goal or state <= 0:
            return None
        steps, reach = 0, state
        while reach * 2 < self.goal:
            reach *= 2
            steps += 1
        return steps


class EvenNumberProblem:
    """Even integers only (add_two, double) chasing an odd goal: no solution exists."""
    def __init__(self, start: int = 2, goal: int = 7, limit: int = 64):
        self.start = start
        self.goal = goal
        self.limit = limit
        self._rules = [
            SimpleRule("add_two", lambda n: n + 2 if n + 2 <= self.limit else None),
            SimpleRule("double", lambda n: n * 2 if n * 2 <= self.limit else None),
        ]

    def initial_state(self) -> int:
        return self.start

    def is_goal(self, state: int) -> bool:
        return state == self.goal

    def rules(self) -> List[SimpleRule]:
        return self._rules
