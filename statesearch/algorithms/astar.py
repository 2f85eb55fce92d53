# statesearch/algorithms/astar.py
# A* search: priority frontier ordered by cost + heuristic, with a best-cost map per state.
from __future__ import annotations
from typing import Dict, Optional

from ..core.frontiers import PriorityQueue
from ..core.node import Node, SearchTree
from ..core.problem import GoalTest, Heuristic, State, StepCost, Successors
from ..logging_utils import get_logger

logger = get_logger("algorithms")


def astar_search(
    initial: State,
    goal_test: GoalTest,
    successors: Successors,
    heuristic: Heuristic,
    *,
    step_cost: Optional[StepCost] = None,
    max_expansions: Optional[int] = None,
    tree: Optional[SearchTree] = None,
) -> Optional[Node]:
    """
    A* over an implicit graph.

    Every successor step costs exactly 1 unless `step_cost(state, successor)` is
    given. With an admissible, consistent heuristic the returned node lies on a
    cheapest path. Equal f-values pop in insertion order.

    A state may sit in the frontier several times; its recorded best cost is
    overwritten whenever a strictly cheaper path turns up, and popped entries
    that are no longer the best for their state are skipped.
    """
    tree = SearchTree() if tree is None else tree
    root = tree.add(initial, cost=0.0, heuristic=heuristic(initial))
    frontier: PriorityQueue[Node] = PriorityQueue(key=lambda n: n.f)
    frontier.push(root)
    best_cost: Dict[State, float] = {initial: 0.0}

    while frontier:
        node = frontier.pop()
        if node.cost > best_cost[node.state]:
            continue  # stale entry

        if goal_test(node.state):
            logger.debug("A*: goal found at cost %s (generated=%d, expanded=%d)",
                         node.cost, len(tree), tree.expanded)
            return node

        if max_expansions is not None and tree.expanded >= max_expansions:
            logger.warning("A*: expansion budget of %d exhausted", max_expansions)
            return None

        tree.expanded += 1
        for child in successors(node.state):
            step = 1.0 if step_cost is None else float(step_cost(node.state, child))
            if step < 0:
                raise ValueError(
                    f"step_cost returned {step!r} for ({node.state!r} -> {child!r}); "
                    "A* requires non-negative step costs"
                )
            new_cost = node.cost + step
            prev = best_cost.get(child)
            if prev is None or new_cost < prev:
                best_cost[child] = new_cost
                frontier.push(tree.add(child, parent=node, cost=new_cost, heuristic=heuristic(child)))

    logger.debug("A*: state space exhausted (generated=%d, expanded=%d)", len(tree), tree.expanded)
    return None


astar = astar_search
