# statesearch/core/metrics.py
# Result record and wall-time / peak-memory meter used by the benchmark runner.
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional
import time, tracemalloc


@dataclass
class SearchResult:
    algo: str
    success: bool
    path_length: int          # number of states on the path, 0 when not found
    cost: float
    nodes_generated: int
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MeasuredRun:
    """
    Context manager timing a block and (optionally) tracking peak traced memory.
    .elapsed and .peak_kb are readable inside or after the with-block.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.trace_memory = trace_memory
        self._start: Optional[float] = None
        self._stop: Optional[float] = None
        self._peak_bytes = 0
        self._owns_trace = False

    def __enter__(self) -> "MeasuredRun":
        # Nested meters reuse an already running tracer instead of restarting it.
        if self.trace_memory and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._owns_trace = True
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._stop = time.perf_counter()
        if self.trace_memory and tracemalloc.is_tracing():
            self._peak_bytes = max(self._peak_bytes, tracemalloc.get_traced_memory()[1])
            if self._owns_trace:
                tracemalloc.stop()
                self._owns_trace = False
        return False

    @property
    def elapsed(self) -> float:
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start

    @property
    def peak_kb(self) -> int:
        peak = self._peak_bytes
        if self._stop is None and self.trace_memory and tracemalloc.is_tracing():
            peak = max(peak, tracemalloc.get_traced_memory()[1])
        return peak // 1024
