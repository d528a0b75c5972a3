# bucket_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
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
    goal: Optional[Any] = None
    error: Optional[str] = None

    def as_row(self) -> dict:
        """JSON-friendly view (the goal node itself is left out)."""
        return {
            "algo": self.algo,
            "success": self.success,
            "actions": list(self.actions),
            "cost": self.cost if self.success else None,
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }

class MeasuredRun:
    """
    Times a search and tracks peak traced memory while it runs.
    Searches return from inside the with-block, so ``sample()`` is read there.
    """
    def __enter__(self) -> "MeasuredRun":
        tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        tracemalloc.stop()
        return False

    def sample(self) -> Tuple[float, int]:
        """(seconds elapsed, peak KB) so far."""
        _, peak = tracemalloc.get_traced_memory()
        return time.perf_counter() - self.t0, peak // 1024
