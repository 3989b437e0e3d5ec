"""Tests for SearchNode, Frontier, SimpleRule and the path helpers."""

import pytest

from gps_lab.core.frontiers import Frontier
from gps_lab.core.metrics import MeasuredRun, SearchResult
from gps_lab.core.node import SearchNode
from gps_lab.core.problem import SimpleRule, is_valid_cost
from gps_lab.core.utils import path_states, reconstruct_path


class TestSearchNode:

    def test_root(self):
        root = SearchNode("a")
        assert root.cost == 0
        assert root.parent is None
        assert root.rule is None
        assert root.depth() == 0
        assert root.path() == [root]

    def test_depth_follows_parent_chain(self):
        node = SearchNode(0)
        chain = [node]
        for i in range(1, 50):
            node = SearchNode(i, cost=i, parent=node)
            chain.append(node)

        for expected, n in enumerate(chain):
            assert n.depth() == expected
            if n.parent is not None:
                assert n.depth() == 1 + n.parent.depth()

    def test_deep_chain_does_not_recurse(self):
        node = SearchNode(0)
        for i in range(1, 5000):
            node = SearchNode(i, parent=node)
        assert node.depth() == 4999

    def test_path_and_actions(self):
        inc = SimpleRule("inc", lambda n: n + 1)
        dbl = SimpleRule("dbl", lambda n: n * 2, cost=3)
        root = SearchNode(1)
        a = SearchNode(2, cost=1, parent=root, rule=inc)
        b = SearchNode(4, cost=4, parent=a, rule=dbl)

        assert [n.state for n in b.path()] == [1, 2, 4]
        assert path_states(b) == [1, 2, 4]
        assert reconstruct_path(b) == (["inc", "dbl"], 4)
        assert reconstruct_path(root) == ([], 0)


class TestSimpleRule:

    def test_applicable(self):
        rule = SimpleRule("double", lambda n: n * 2, cost=2)
        assert rule.apply(3) == (6, 2)

    def test_inapplicable(self):
        rule = SimpleRule("halve", lambda n: n // 2 if n % 2 == 0 else None)
        assert rule.apply(3) is None
        assert rule.apply(4) == (2, 1)


class TestFrontier:

    def test_fifo_when_pushing_back(self):
        f = Frontier()
        for i in range(3):
            f.push_back(SearchNode(i))
        assert [f.pop_front().state for _ in range(3)] == [0, 1, 2]

    def test_lifo_when_pushing_front(self):
        f = Frontier()
        for i in range(3):
            f.push_front(SearchNode(i))
        assert [f.pop_front().state for _ in range(3)] == [2, 1, 0]

    def test_both_ends(self):
        f = Frontier()
        f.push_back(SearchNode("b"))
        f.push_front(SearchNode("a"))
        f.push_back(SearchNode("c"))
        assert len(f) == 3
        assert f.peek().state == "a"
        assert f.pop_back().state == "c"
        assert [n.state for n in f] == ["a", "b"]
        f.clear()
        assert not f
        assert len(f) == 0

    def test_insert_ordered_keeps_fifo_among_equal_keys(self):
        f = Frontier()
        for state, cost in [("x", 1), ("y", 3), ("z", 5)]:
            f.push_back(SearchNode(state, cost), key=cost)

        f.insert_ordered(SearchNode("y2", 3), 3)
        f.insert_ordered(SearchNode("first", 0), 0)
        f.insert_ordered(SearchNode("last", 9), 9)

        assert [n.state for n in f] == ["first", "x", "y", "y2", "z", "last"]
        assert list(f.keys) == [0, 1, 3, 3, 5, 9]

    def test_keys_follow_pops(self):
        f = Frontier()
        for cost in (2, 4, 6):
            f.insert_ordered(SearchNode(cost, cost), cost)
        assert f.pop_front().state == 2
        assert f.pop_back().state == 6
        assert list(f.keys) == [4]
        f.insert_ordered(SearchNode("early", 1), 1)
        assert [n.state for n in f] == ["early", 4]
        f.clear()
        assert not f.keys


class TestCostContract:

    @pytest.mark.parametrize("cost", [0, 1, 418])
    def test_accepts_non_negative_ints(self, cost):
        assert is_valid_cost(cost)

    @pytest.mark.parametrize("cost", [-1, 1.5, 2.0, None, True, False, "3"])
    def test_rejects_everything_else(self, cost):
        assert not is_valid_cost(cost)

    def test_engine_and_sanity_check_agree(self):
        from gps_lab.engine.gps import GPSEngine
        from gps_lab.problems.checks import sanity_check_problem
        from gps_lab.problems.integers import NumberProblem

        class BoolCost(NumberProblem):
            def rules(self):
                return [SimpleRule("flag", lambda n: n + 1 if n < 3 else None, cost=True)]

        with pytest.raises(AssertionError, match="flag"):
            sanity_check_problem(BoolCost(start=1, goal=3))
        with pytest.raises(ValueError, match="non-negative integers"):
            GPSEngine(BoolCost(start=1, goal=3), "bfs").run()


class TestMetrics:

    def test_measured_run(self):
        with MeasuredRun() as meter:
            data = [0] * 10_000
            assert meter.elapsed >= 0.0
        assert meter.elapsed >= 0.0
        assert meter.peak_kb >= 0
        assert len(data) == 10_000

    def test_nested_measured_runs(self):
        with MeasuredRun() as outer:
            with MeasuredRun() as inner:
                pass
            assert outer.peak_kb >= 0
        assert inner.elapsed <= outer.elapsed

    def test_result_row(self):
        ok = SearchResult("BFS", True, ["a", "b"], 2, 5, 0.1, 12, path=[0, 1, 2], passes=1)
        assert ok.steps == 2
        row = ok.to_row()
        assert row["cost"] == 2
        assert row["steps"] == 2
        assert row["nodes_expanded"] == 5

        failed = SearchResult("DFS", False, [], float("inf"), 7, 0.1, 3)
        assert failed.to_row()["cost"] is None
