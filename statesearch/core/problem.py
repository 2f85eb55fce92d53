# statesearch/core/problem.py
# Capability interfaces handed to the search algorithms, plus the bundled Problem view used by the registry.
from __future__ import annotations
from typing import Hashable, Iterable, Protocol, runtime_checkable

State = Hashable


class GoalTest(Protocol):
    def __call__(self, state: State) -> bool: ...


class Successors(Protocol):
    def __call__(self, state: State) -> Iterable[State]: ...


class Heuristic(Protocol):
    """Estimated remaining cost; must never overestimate for A* to stay optimal."""
    def __call__(self, state: State) -> float: ...


class StepCost(Protocol):
    def __call__(self, state: State, successor: State) -> float: ...


@runtime_checkable
class Problem(Protocol):
    """
    Object-style state space. Any plain function, lambda or bound method can
    stand in for the individual capabilities above; a Problem just bundles them.
    heuristic() is only required by informed search.
    """
    def initial_state(self) -> State: ...
    def goal_test(self, state: State) -> bool: ...
    def successors(self, state: State) -> Iterable[State]: ...
