from collections import deque

from ..core.problem import is_valid_cost


def sanity_check_problem(problem, max_states: int = 10_000):
    """Walks states breadth-first and checks every applicable rule returns a non-negative integer cost."""
    seen = set()
    q = deque([problem.initial_state()])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for rule in problem.rules():
            outcome = rule.apply(s)
            if outcome is None:
                continue
            s2, cost = outcome
            if not is_valid_cost(cost):
                raise AssertionError(f"rule {rule.name} gave cost {cost!r} for (s={s}, s'={s2})")
            q.append(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; all rule costs are non-negative integers."
