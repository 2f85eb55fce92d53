# statesearch/algorithms/__init__.py
from __future__ import annotations
from typing import Any, Callable, Dict, Optional

from ..core.node import Node
from ..core.problem import Problem
from .astar import astar, astar_search
from .bfs import bfs, breadth_first_search
from .dfs import depth_first_search, dfs

ALGORITHMS: Dict[str, Callable[..., Optional[Node]]] = {
    "dfs": depth_first_search,
    "bfs": breadth_first_search,
    "astar": astar_search,
}


def search(problem: Problem, algorithm: str = "bfs", **kwargs: Any) -> Optional[Node]:
    """
    Run a registered algorithm against an object-style Problem.
    "astar" uses problem.heuristic unless a heuristic= keyword is given.
    """
    try:
        fn = ALGORITHMS[algorithm]
    except KeyError:
        raise KeyError(f"unknown algorithm {algorithm!r}; expected one of {sorted(ALGORITHMS)}") from None

    args = [problem.initial_state(), problem.goal_test, problem.successors]
    if fn is astar_search:
        heuristic = kwargs.pop("heuristic", None) or getattr(problem, "heuristic", None)
        if heuristic is None:
            raise TypeError(f"A* needs a heuristic; {type(problem).__name__} has none")
        args.append(heuristic)
    return fn(*args, **kwargs)


__all__ = [
    "ALGORITHMS", "search",
    "astar", "astar_search", "bfs", "breadth_first_search", "depth_first_search", "dfs",
]
