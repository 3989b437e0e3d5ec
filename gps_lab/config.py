# gps_lab/config.py
# Defaults for the command-line tools, overridable via environment variables.
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .engine.strategy import FrontierOrdering, SearchStrategy

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_RESULTS_DIR = Path(__file__).parent / "benchmarks"


def results_dir_from_env(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    return Path(env.get("GPS_RESULTS_DIR", str(DEFAULT_RESULTS_DIR)))


@dataclass(frozen=True)
class LabConfig:
    # None means "all strategies" / "both orderings for the informed ones"
    strategy: Optional[SearchStrategy] = None
    ordering: Optional[FrontierOrdering] = None
    problem: str = "romania"
    log_level: str = "WARNING"
    results_dir: Path = DEFAULT_RESULTS_DIR

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "LabConfig":
        """
        Reads GPS_STRATEGY, GPS_ORDERING, GPS_PROBLEM, GPS_LOG_LEVEL and GPS_RESULTS_DIR.
        Unset variables keep the dataclass defaults; bad strategy/ordering names raise ValueError.
        """
        env = os.environ if env is None else env
        default = cls()
        strategy = env.get("GPS_STRATEGY")
        ordering = env.get("GPS_ORDERING")
        return cls(
            strategy=SearchStrategy.parse(strategy) if strategy else None,
            ordering=FrontierOrdering.parse(ordering) if ordering else None,
            problem=env.get("GPS_PROBLEM", default.problem).strip().lower(),
            log_level=env.get("GPS_LOG_LEVEL", default.log_level).strip().upper(),
            results_dir=results_dir_from_env(env),
        )


def configure_logging(level: "str | int" = "WARNING") -> None:
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = numeric
    logging.basicConfig(level=level, format=LOG_FORMAT)
