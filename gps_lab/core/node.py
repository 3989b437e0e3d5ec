# gps_lab/core/node.py
# A SearchNode pairs a state with the cost of the path that reached it and a link to its parent.
# Nodes form a tree: the same state can appear in many nodes, one per path.
from __future__ import annotations
from typing import List, Optional

from .problem import Rule, State


class SearchNode:
    def __init__(self, state: State, cost: int = 0, parent: Optional[SearchNode] = None,
                 rule: Optional[Rule] = None):
        self.state = state
        self.cost = cost
        self.parent = parent
        self.rule = rule  # rule that produced this node, None for the root

    def depth(self) -> int:
        """Number of rule applications between the root and this node."""
        depth = 0
        cur = self.parent
        while cur is not None:
            depth += 1
            cur = cur.parent
        return depth

    def path(self) -> List[SearchNode]:
        nodes = []
        cur: Optional[SearchNode] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes

    def __repr__(self) -> str:
        return f"SearchNode(state={self.state!r}, cost={self.cost})"
