# statesearch/algorithms/dfs.py
# Depth-First Search: LIFO frontier, no optimality guarantee; any first-found goal is returned.
from __future__ import annotations
from typing import Optional

from ..core.frontiers import LIFOStack
from ..core.node import Node, SearchTree
from ..core.problem import GoalTest, State, Successors
from .graph_search import graph_search


def depth_first_search(
    initial: State,
    goal_test: GoalTest,
    successors: Successors,
    *,
    max_expansions: Optional[int] = None,
    tree: Optional[SearchTree] = None,
) -> Optional[Node]:
    return graph_search("DFS", LIFOStack(), initial, goal_test, successors,
                        max_expansions=max_expansions, tree=tree)


dfs = depth_first_search
