# statesearch/core/__init__.py
from .node import Node, SearchTree
from .frontiers import FIFOQueue, LIFOStack, PriorityQueue
from .problem import GoalTest, Heuristic, Problem, State, StepCost, Successors
from .utils import binary_contains, linear_contains, node_to_path
from .metrics import MeasuredRun, SearchResult

__all__ = [
    "Node", "SearchTree",
    "FIFOQueue", "LIFOStack", "PriorityQueue",
    "GoalTest", "Heuristic", "Problem", "State", "StepCost", "Successors",
    "binary_contains", "linear_contains", "node_to_path",
    "MeasuredRun", "SearchResult",
]
