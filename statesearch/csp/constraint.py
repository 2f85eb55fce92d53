# statesearch/csp/constraint.py
# Constraints answer one question: is this (possibly partial) assignment still consistent with me?
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, List, Mapping, Sequence, TypeVar

V = TypeVar("V", bound=Hashable)
D = TypeVar("D")


class Constraint(ABC, Generic[V, D]):
    """
    A relation over `variables`. The CSP registers it under every one of them.

    satisfied() receives partial assignments during backtracking. It must return
    True while the relation can still hold for some completion, and only report
    False for violations no further assignment could repair. The simplest way to
    honour that is to return True until all of `variables` are assigned.
    """

    def __init__(self, variables: Sequence[V]) -> None:
        self.variables: List[V] = list(variables)

    @abstractmethod
    def satisfied(self, assignment: Mapping[V, D]) -> bool: ...

    def fully_assigned(self, assignment: Mapping[V, D]) -> bool:
        return all(v in assignment for v in self.variables)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.variables!r})"


class NotEqualConstraint(Constraint[V, D]):
    def __init__(self, first: V, second: V) -> None:
        super().__init__([first, second])
        self.first = first
        self.second = second

    def satisfied(self, assignment: Mapping[V, D]) -> bool:
        if self.first not in assignment or self.second not in assignment:
            return True
        return assignment[self.first] != assignment[self.second]


class AllDifferentConstraint(Constraint[V, D]):
    """No two of `variables` share a value. Fails as soon as two assigned ones collide."""

    def satisfied(self, assignment: Mapping[V, D]) -> bool:
        seen = []
        for v in self.variables:
            if v in assignment:
                value = assignment[v]
                if value in seen:
                    return False
                seen.append(value)
        return True


class PredicateConstraint(Constraint[V, D]):
    """Wraps predicate(*values) (values in `variables` order), evaluated once all are assigned."""

    def __init__(self, variables: Sequence[V], predicate: Callable[..., bool]) -> None:
        super().__init__(variables)
        self.predicate = predicate

    def satisfied(self, assignment: Mapping[V, D]) -> bool:
        if not self.fully_assigned(assignment):
            return True
        return bool(self.predicate(*(assignment[v] for v in self.variables)))
