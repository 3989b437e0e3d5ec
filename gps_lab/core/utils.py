# gps_lab/core/utils.py
# Helpers for turning a solution node back into the path that produced it.
from __future__ import annotations
from typing import List, Tuple

from .node import SearchNode
from .problem import State


def reconstruct_path(node: SearchNode) -> Tuple[List[str], int]:
    actions = []
    cost = node.cost
    cur = node
    while cur.parent is not None:
        actions.append(cur.rule.name if cur.rule is not None else "?")
        cur = cur.parent
    actions.reverse()
    return actions, cost


def path_states(node: SearchNode) -> List[State]:
    return [n.state for n in node.path()]
