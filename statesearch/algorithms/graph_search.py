# statesearch/algorithms/graph_search.py
# The expansion loop shared by DFS and BFS; only the frontier discipline differs between them.
from __future__ import annotations
from typing import Optional, Set, Union

from ..core.frontiers import FIFOQueue, LIFOStack
from ..core.node import Node, SearchTree
from ..core.problem import GoalTest, State, Successors
from ..logging_utils import get_logger

logger = get_logger("algorithms")

Frontier = Union[LIFOStack[Node], FIFOQueue[Node]]


def graph_search(
    name: str,
    frontier: Frontier,
    initial: State,
    goal_test: GoalTest,
    successors: Successors,
    max_expansions: Optional[int] = None,
    tree: Optional[SearchTree] = None,
) -> Optional[Node]:
    """
    Pop a node, goal-test it, otherwise push every successor not seen before.
    A state enters the explored set once, when it is first generated (the root
    is seeded), so it is never enqueued twice.
    Returns the goal node, or None when the reachable space is exhausted or the
    expansion budget runs out.
    """
    tree = SearchTree() if tree is None else tree
    root = tree.add(initial)
    frontier.push(root)
    explored: Set[State] = {initial}

    while frontier:
        node = frontier.pop()
        if goal_test(node.state):
            logger.debug("%s: goal found (generated=%d, expanded=%d)",
                         name, len(tree), tree.expanded)
            return node

        if max_expansions is not None and tree.expanded >= max_expansions:
            logger.warning("%s: expansion budget of %d exhausted", name, max_expansions)
            return None

        tree.expanded += 1
        for child in successors(node.state):
            if child in explored:
                continue
            explored.add(child)
            frontier.push(tree.add(child, parent=node))

    logger.debug("%s: state space exhausted (generated=%d, expanded=%d)",
                 name, len(tree), tree.expanded)
    return None
