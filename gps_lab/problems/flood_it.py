# gps_lab/problems/flood_it.py
# Flood-It: the top-left island is repainted one colour at a time and swallows every
# neighbouring island of that colour. The puzzle is solved when the board is a single colour.
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

Cell = Tuple[int, int]

ORIGIN: Cell = (0, 0)


class FloodBoard:
    """Immutable colour board; equality and hashing go through the raw bytes of the array."""
    __slots__ = ("cells", "_hash")

    def __init__(self, cells: "np.ndarray | Sequence[Sequence[int]]"):
        arr = np.array(cells, dtype=np.int8)
        if arr.ndim != 2 or arr.size == 0:
            raise ValueError(f"Flood-It board must be a non-empty 2D grid, got shape {arr.shape}")
        arr.setflags(write=False)
        self.cells = arr
        self._hash = hash((arr.shape, arr.tobytes()))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    @property
    def color(self) -> int:
        """Colour of the distinguished (top-left) island."""
        return int(self.cells[ORIGIN])

    def flooded(self) -> np.ndarray:
        """Boolean mask of the distinguished island."""
        return _island_mask(self.cells, ORIGIN)

    def border_colors(self) -> Set[int]:
        """Colours of the islands touching the distinguished one."""
        mask = self.flooded()
        rows, cols = self.shape
        colors = set()
        for r, c in zip(*np.nonzero(mask)):
            for nr, nc in _neighbours(r, c, rows, cols):
                if not mask[nr, nc]:
                    colors.add(int(self.cells[nr, nc]))
        return colors

    def paint(self, color: int) -> "FloodBoard":
        out = self.cells.copy()
        out[self.flooded()] = color
        return FloodBoard(out)

    def is_uniform(self) -> bool:
        return bool((self.cells == self.cells[ORIGIN]).all())

    def __eq__(self, other) -> bool:
        if not isinstance(other, FloodBoard):
            return NotImplemented
        return self._hash == other._hash and np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"FloodBoard({self.cells.tolist()})"


def _neighbours(r: int, c: int, rows: int, cols: int) -> Iterable[Cell]:
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _island_mask(cells: np.ndarray, seed: Cell) -> np.ndarray:
    rows, cols = cells.shape
    color = cells[seed]
    mask = np.zeros(cells.shape, dtype=bool)
    mask[seed] = True
    q = deque([seed])
    while q:
        r, c = q.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if not mask[nr, nc] and cells[nr, nc] == color:
                mask[nr, nc] = True
                q.append((nr, nc))
    return mask


@dataclass(frozen=True)
class Paint:
    """paint(<color>): recolour the distinguished island; only useful when a neighbour has that colour."""
    color: int
    cost: int = 1

    @property
    def name(self) -> str:
        return f"paint({self.color})"

    def apply(self, board: FloodBoard) -> Optional[Tuple[FloodBoard, int]]:
        if self.color == board.color or self.color not in board.border_colors():
            return None
        return board.paint(self.color), self.cost


class FloodItProblem:
    """
    - State: FloodBoard
    - Rules: paint(c) for every colour c in range(colors), in colour order
    - IS-GOAL(s): the whole board is one colour
    - heuristic(s): distinct colours left outside the flooded island; a move removes at
      most one of them, so it is admissible and consistent
    """
    def __init__(self, board: "np.ndarray | Sequence[Sequence[int]]", colors: Optional[int] = None):
        self.board = board if isinstance(board, FloodBoard) else FloodBoard(board)
        if colors is None:
            colors = int(self.board.cells.max()) + 1
        self.colors = colors
        self._rules = [Paint(c) for c in range(colors)]

    def initial_state(self) -> FloodBoard:
        return self.board

    def is_goal(self, state: FloodBoard) -> bool:
        return state.is_uniform()

    def rules(self) -> List[Paint]:
        return self._rules

    def heuristic(self, state: FloodBoard) -> int:
        outside = state.cells[~state.flooded()]
        return int(np.unique(outside).size)


def random_flood_it(rows: int = 6, cols: int = 6, colors: int = 4, seed: Optional[int] = None) -> FloodItProblem:
    rng = np.random.default_rng(seed)
    return FloodItProblem(rng.integers(0, colors, size=(rows, cols)), colors=colors)
