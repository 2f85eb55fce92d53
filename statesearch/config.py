# statesearch/config.py
# Tunables, each overridable through an environment variable.
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


# ==== Logging ==============================================================
# Unset means the package logger follows the root logger level.
LOG_LEVEL: Optional[str] = (os.getenv("STATESEARCH_LOG_LEVEL") or "").upper() or None

# ==== Search ===============================================================
# Expansion budget used by the benchmark runner; None means unbounded.
MAX_EXPANSIONS: Optional[int] = _optional_int("STATESEARCH_MAX_EXPANSIONS")

# ==== Benchmark maze =======================================================
MAZE_ROWS: int = int(os.getenv("MAZE_ROWS", "10"))
MAZE_COLUMNS: int = int(os.getenv("MAZE_COLUMNS", "10"))
MAZE_SPARSENESS: float = float(os.getenv("MAZE_SPARSENESS", "0.2"))
MAZE_SEED: Optional[int] = _optional_int("MAZE_SEED")

RESULTS_PATH: Path = Path(
    os.getenv("STATESEARCH_RESULTS", str(Path(__file__).parent / "benchmarks" / "results.json"))
)
