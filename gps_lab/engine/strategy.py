# gps_lab/engine/strategy.py
# The five search modes the engine supports, plus how informed strategies order the open list.
from __future__ import annotations
from enum import Enum


class SearchStrategy(Enum):
    BFS = "bfs"
    DFS = "dfs"
    IDDFS = "iddfs"
    ASTAR = "astar"
    GREEDY = "greedy"

    @property
    def iterative(self) -> bool:
        """True when run() deepens the bound pass after pass."""
        return self is SearchStrategy.IDDFS

    @property
    def informed(self) -> bool:
        return self in (SearchStrategy.ASTAR, SearchStrategy.GREEDY)

    @classmethod
    def parse(cls, name: "str | SearchStrategy") -> "SearchStrategy":
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        if key in _ALIASES:
            return _ALIASES[key]
        for member in cls:
            if key == member.value:
                return member
        accepted = ", ".join(m.name for m in cls)
        raise ValueError(f"Unknown search strategy: {name!r}. Available: {accepted}")


_ALIASES = {
    "breadthfirst": SearchStrategy.BFS,
    "depthfirst": SearchStrategy.DFS,
    "ids": SearchStrategy.IDDFS,
    "iterativedeepening": SearchStrategy.IDDFS,
    "a*": SearchStrategy.ASTAR,
    "bestfirst": SearchStrategy.GREEDY,
    "greedybestfirst": SearchStrategy.GREEDY,
}


class FrontierOrdering(Enum):
    # each expansion sorts only its own children and appends them at the tail
    BATCH = "batch"
    # each child is inserted behind every queued node with an evaluation <= its own
    GLOBAL = "global"

    @classmethod
    def parse(cls, name: "str | FrontierOrdering") -> "FrontierOrdering":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            accepted = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown frontier ordering: {name!r}. Available: {accepted}") from None
