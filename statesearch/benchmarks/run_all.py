# statesearch/benchmarks/run_all.py
# Compare DFS, BFS and A* (two heuristics) on one seeded maze and dump the numbers as JSON.
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .. import config
from ..algorithms import astar_search, breadth_first_search, depth_first_search
from ..core.metrics import MeasuredRun, SearchResult
from ..core.node import Node, SearchTree
from ..core.utils import node_to_path
from ..logging_utils import get_logger
from ..problems.maze import Maze, euclidean_distance, manhattan_distance

logger = get_logger("benchmarks")

Runner = Callable[[Maze, SearchTree, Optional[int]], Optional[Node]]


def _fmt_time(x: Optional[float]) -> str:
    return "n/a" if x is None else f"{x:.4f}"


def _load_algos() -> List[Tuple[str, Runner]]:
    return [
        ("DFS", lambda m, tree, budget: depth_first_search(
            m.start, m.goal_test, m.successors, max_expansions=budget, tree=tree)),
        ("BFS", lambda m, tree, budget: breadth_first_search(
            m.start, m.goal_test, m.successors, max_expansions=budget, tree=tree)),
        ("A* (Manhattan)", lambda m, tree, budget: astar_search(
            m.start, m.goal_test, m.successors, manhattan_distance(m.goal),
            max_expansions=budget, tree=tree)),
        ("A* (Euclidean)", lambda m, tree, budget: astar_search(
            m.start, m.goal_test, m.successors, euclidean_distance(m.goal),
            max_expansions=budget, tree=tree)),
    ]


def run_one(name: str, runner: Runner, maze: Maze, max_expansions: Optional[int] = None) -> SearchResult:
    tree: SearchTree = SearchTree()
    with MeasuredRun() as meter:
        goal = runner(maze, tree, max_expansions)
    if goal is None:
        return SearchResult(name, False, 0, float("inf"), len(tree), tree.expanded,
                            meter.elapsed, meter.peak_kb)
    path = node_to_path(goal)
    # DFS/BFS nodes carry no cost, so report the step count for every algorithm.
    return SearchResult(name, True, len(path), float(len(path) - 1), len(tree), tree.expanded,
                        meter.elapsed, meter.peak_kb)


def run_all(maze: Maze, max_expansions: Optional[int] = None) -> List[SearchResult]:
    rows: List[SearchResult] = []
    for name, runner in _load_algos():
        print(f"→ Running {name} ...")
        try:
            r = run_one(name, runner, maze, max_expansions)
        except Exception as e:
            logger.exception("%s failed", name)
            r = SearchResult(name, False, 0, float("inf"), 0, 0, 0.0, 0, error=repr(e))
        print(
            f"  {r.algo}: {'OK' if r.success else 'FAIL'} "
            f"length={r.path_length} expanded={r.nodes_expanded}, "
            f"generated={r.nodes_generated}, time={_fmt_time(r.time_s)}s"
        )
        rows.append(r)
    return rows


def build_report(maze: Maze, rows: List[SearchResult], seed: Optional[int]) -> Dict[str, Any]:
    return {
        "results": [
            # JSON has no infinity; a failed run has no cost.
            {**r.to_dict(), "cost": r.cost if r.success else None} for r in rows
        ],
        "maze": {"rows": maze.rows, "columns": maze.columns, "seed": seed, "grid": str(maze)},
        "ts": time.time(),
    }


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Compare DFS, BFS and A* on a random maze.")
    ap.add_argument("--rows", type=int, default=config.MAZE_ROWS)
    ap.add_argument("--columns", type=int, default=config.MAZE_COLUMNS)
    ap.add_argument("--sparseness", type=float, default=config.MAZE_SPARSENESS)
    ap.add_argument("--seed", type=int, default=config.MAZE_SEED)
    ap.add_argument("--max-expansions", type=int, default=config.MAX_EXPANSIONS)
    ap.add_argument("--out", type=Path, default=config.RESULTS_PATH)
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    args = _parse_args(argv)
    maze = Maze(args.rows, args.columns, args.sparseness,
                start=(0, 0), goal=(args.rows - 1, args.columns - 1), seed=args.seed)
    print(maze)

    rows = run_all(maze, args.max_expansions)
    out = build_report(maze, rows, args.seed)
    print(json.dumps(out["results"], indent=2))

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")
    return out


if __name__ == "__main__":
    main()
