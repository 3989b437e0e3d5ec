"""Tests for environment-driven configuration and logging setup."""

import logging
from pathlib import Path

import pytest

from gps_lab.config import LabConfig, configure_logging, results_dir_from_env
from gps_lab.engine.strategy import FrontierOrdering, SearchStrategy


def test_defaults():
    config = LabConfig.from_env({})
    assert config == LabConfig()
    assert config.strategy is None
    assert config.ordering is None
    assert config.problem == "romania"
    assert config.results_dir.name == "benchmarks"


def test_overrides():
    config = LabConfig.from_env({
        "GPS_STRATEGY": "a*",
        "GPS_ORDERING": "GLOBAL",
        "GPS_PROBLEM": " Grid ",
        "GPS_LOG_LEVEL": "debug",
        "GPS_RESULTS_DIR": "/tmp/gps-results",
    })
    assert config.strategy is SearchStrategy.ASTAR
    assert config.ordering is FrontierOrdering.GLOBAL
    assert config.problem == "grid"
    assert config.log_level == "DEBUG"
    assert config.results_dir == Path("/tmp/gps-results")


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("GPS_STRATEGY", "ids")
    assert LabConfig.from_env().strategy is SearchStrategy.IDDFS


def test_bad_strategy():
    with pytest.raises(ValueError):
        LabConfig.from_env({"GPS_STRATEGY": "genetic"})


def test_results_dir_ignores_strategy_settings():
    env = {"GPS_STRATEGY": "genetic", "GPS_RESULTS_DIR": "/tmp/gps-results"}
    assert results_dir_from_env(env) == Path("/tmp/gps-results")
    assert results_dir_from_env({}) == LabConfig().results_dir


def test_configure_logging_levels():
    configure_logging("info")
    configure_logging(logging.DEBUG)
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")


def test_engine_logs_outcome(caplog):
    from gps_lab.engine.gps import GPSEngine
    from gps_lab.problems.integers import EvenNumberProblem, NumberProblem

    with caplog.at_level(logging.DEBUG, logger="gps_lab.engine.gps"):
        GPSEngine(NumberProblem(start=1, goal=10), "bfs").run()
        GPSEngine(EvenNumberProblem(), "bfs").run()

    messages = [r.getMessage() for r in caplog.records]
    assert any("found a solution at cost 4" in m for m in messages)
    assert any("BFS failed" in m for m in messages)
    assert any(m.startswith("pass 1 starting (max depth unbounded)") for m in messages)


def test_pass_logs_report_frontier(caplog):
    from gps_lab.engine.gps import GPSEngine
    from gps_lab.problems.integers import EvenNumberProblem, NumberProblem

    with caplog.at_level(logging.DEBUG, logger="gps_lab.engine.gps"):
        GPSEngine(NumberProblem(start=1, goal=10), "bfs").run()
        GPSEngine(EvenNumberProblem(), "bfs").run()

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("pass 1: goal at depth 4 after 9 expansions, frontier 6 (peak ") for m in messages)
    assert any("32 expansions, 32 closed states, peak frontier" in m and "bound hit: False" in m
               for m in messages)
