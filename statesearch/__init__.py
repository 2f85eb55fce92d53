"""
statesearch: generic state-space search (DFS, BFS, A*) and a backtracking
constraint-satisfaction solver, parameterised over arbitrary state, variable
and value types.

    from statesearch import breadth_first_search, node_to_path
    goal = breadth_first_search(start, is_goal, successors)
    path = node_to_path(goal) if goal is not None else None
"""
from .algorithms import ALGORITHMS, astar_search, breadth_first_search, depth_first_search, search
from .core import Node, SearchTree, binary_contains, linear_contains, node_to_path
from .csp import (
    CSP, AllDifferentConstraint, Constraint, CSPError, DuplicateVariable, InvalidAssignment,
    InvalidConstraint, InvalidDomain, NotEqualConstraint, PredicateConstraint,
)

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS", "search", "astar_search", "breadth_first_search", "depth_first_search",
    "Node", "SearchTree", "node_to_path", "linear_contains", "binary_contains",
    "CSP", "Constraint", "AllDifferentConstraint", "NotEqualConstraint", "PredicateConstraint",
    "CSPError", "DuplicateVariable", "InvalidAssignment", "InvalidConstraint", "InvalidDomain",
]
