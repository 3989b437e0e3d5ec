# Defines the interface the engine expects from any problem (initial state, goal test, rules, heuristic).
# gps_lab/core/problem.py
from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Callable, Hashable, Optional, Protocol, Sequence, Tuple

State = Hashable


class Rule(Protocol):
    """A state transition with a non-negative integer cost."""
    name: str

    def apply(self, s: State) -> Optional[Tuple[State, int]]: ...


class Problem(Protocol):
    """GPS problem interface: the engine only ever talks to these four methods."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    # Order matters: it decides child order and tie-breaks inside a frontier batch.
    def rules(self) -> Sequence[Rule]: ...
    # Optional estimate for informed search; None means "no estimate" (treated as 0)
    def heuristic(self, s: State) -> Optional[int]: return None


@dataclass(frozen=True)
class SimpleRule:
    """
    Wraps a plain function `state -> next state or None` as a Rule.
    The rule is inapplicable whenever the transition returns None.
    """
    name: str
    transition: Callable[[State], Optional[State]]
    cost: int = 1

    def apply(self, s: State) -> Optional[Tuple[State, int]]:
        s2 = self.transition(s)
        if s2 is None:
            return None
        return s2, self.cost


def is_valid_cost(cost) -> bool:
    """Rule costs are non-negative integers; bool is rejected even though it is an int."""
    return not isinstance(cost, bool) and isinstance(cost, numbers.Integral) and cost >= 0
