# gps_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc

@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[str]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None
    path: List[Any] = field(default_factory=list)
    passes: int = 0

    @property
    def steps(self) -> int:
        return len(self.actions)

    def to_row(self) -> Dict[str, Any]:
        """Flat JSON-friendly view used by the benchmarks."""
        return {
            "algo": self.algo,
            "success": self.success,
            "cost": self.cost if self.success else None,
            "steps": self.steps,
            "nodes_expanded": self.nodes_expanded,
            "passes": self.passes,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }

class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        # nested runs share the outer trace instead of restarting it
        self._owns_trace = not tracemalloc.is_tracing()
        if self._owns_trace:
            tracemalloc.start()
        self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        current, peak = tracemalloc.get_traced_memory()
        if self._owns_trace:
            tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
