# gps_lab/problems/grid.py
from __future__ import annotations
from typing import List, Optional, Set, Tuple

from ..core.problem import SimpleRule

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridProblem:
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) tuple
    - Rules: one per direction in {'Up','Down','Left','Right'}; a move is inapplicable
      when it leaves the grid or runs into a wall
    - IS-GOAL(s): s == goal
    - heuristic(s): Manhattan distance (admissible and consistent on a 4-neighbor grid)
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Set[Coord] | None = None):
        self.rows = rows
        self.cols = cols
        self._start = start
        self._goal = goal
        self.walls = walls or set()
        self._rules = [SimpleRule(name, self._mover(dr, dc)) for name, (dr, dc) in _MOVES.items()]

    def _mover(self, dr: int, dc: int):
        def move(state: Coord) -> Optional[Coord]:
            r, c = state
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols and (nr, nc) not in self.walls:
                return (nr, nc)
            return None
        return move

    def initial_state(self) -> Coord:
        return self._start

    def is_goal(self, state: Coord) -> bool:
        return state == self._goal

    def rules(self) -> List[SimpleRule]:
        return self._rules

    def heuristic(self, state: Coord) -> int:
        r, c = state
        gr, gc = self._goal
        return abs(r - gr) + abs(c - gc)

def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    walls = {(1,3), (2,3), (3,3), (3,4)}
    return GridProblem(rows=5, cols=7, start=(0,0), goal=(4,6), walls=walls)
