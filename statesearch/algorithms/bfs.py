# statesearch/algorithms/bfs.py
# Breadth-First Search: FIFO frontier; under unit step cost the returned path has the fewest edges.
from __future__ import annotations
from typing import Optional

from ..core.frontiers import FIFOQueue
from ..core.node import Node, SearchTree
from ..core.problem import GoalTest, State, Successors
from .graph_search import graph_search


def breadth_first_search(
    initial: State,
    goal_test: GoalTest,
    successors: Successors,
    *,
    max_expansions: Optional[int] = None,
    tree: Optional[SearchTree] = None,
) -> Optional[Node]:
    return graph_search("BFS", FIFOQueue(), initial, goal_test, successors,
                        max_expansions=max_expansions, tree=tree)


bfs = breadth_first_search
