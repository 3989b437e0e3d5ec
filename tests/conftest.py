"""Shared fixtures: a tiny explicit-graph problem for hand-checked expansion orders."""

from typing import Dict, List, Optional, Tuple

import pytest


class Edge:
    def __init__(self, source: str, target: str, cost: int = 1):
        self.source = source
        self.target = target
        self.cost = cost
        self.name = f"{source}->{target}"

    def apply(self, state):
        if state != self.source:
            return None
        return self.target, self.cost


class GraphProblem:
    """Directed graph given as (source, target, cost) triples; rule order = edge order."""

    def __init__(self, edges: List[Tuple[str, str, int]], start: str, goal: str,
                 h: Optional[Dict[str, int]] = None):
        self._rules = [Edge(s, t, c) for s, t, c in edges]
        self.start = start
        self.goal = goal
        self.h = h or {}

    def initial_state(self):
        return self.start

    def is_goal(self, state):
        return state == self.goal

    def rules(self):
        return self._rules

    def heuristic(self, state):
        return self.h.get(state)


@pytest.fixture
def graph_problem():
    """Factory for GraphProblem instances."""
    return GraphProblem
