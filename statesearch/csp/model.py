# statesearch/csp/model.py
# CSP model (variables, domains, constraint registry) and the backtracking solver over it.
from __future__ import annotations
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Mapping, Optional, Sequence, TypeVar

from ..logging_utils import get_logger
from .constraint import Constraint
from .errors import DuplicateVariable, InvalidAssignment, InvalidConstraint, InvalidDomain
from .ordering import first_unassigned

logger = get_logger("csp")

V = TypeVar("V", bound=Hashable)
D = TypeVar("D")

VariableSelector = Callable[["CSP", Mapping], Hashable]


class CSP(Generic[V, D]):
    """
    A constraint satisfaction problem: ordered variables, a domain for each, and
    constraints registered under every variable they touch.

    Backtracking recurses once per variable, so its depth equals the number of
    variables and very large problems can hit Python's recursion limit.
    """

    def __init__(self, variables: Sequence[V], domains: Mapping[V, Sequence[D]]) -> None:
        self.variables: List[V] = list(variables)
        self.domains: Dict[V, List[D]] = {}
        self.constraints: Dict[V, List[Constraint[V, D]]] = {}
        for v in self.variables:
            if v in self.domains:
                raise DuplicateVariable(f"{v!r} is declared more than once.")
            if v not in domains:
                raise InvalidDomain(f"Every variable should have a domain assigned to it; {v!r} has none.")
            self.domains[v] = list(domains[v])
            self.constraints[v] = []

    def add_constraint(self, constraint: Constraint[V, D]) -> None:
        unknown = [v for v in constraint.variables if v not in self.constraints]
        if unknown:
            raise InvalidConstraint(f"{constraint!r} references variables not in the CSP: {unknown!r}")
        for v in constraint.variables:
            self.constraints[v].append(constraint)

    def consistent(self, variable: V, assignment: Mapping[V, D]) -> bool:
        for constraint in self.constraints[variable]:
            if not constraint.satisfied(assignment):
                return False
        return True

    def solutions(
        self,
        assignment: Optional[Mapping[V, D]] = None,
        select_variable: VariableSelector = first_unassigned,
    ) -> Iterator[Dict[V, D]]:
        """
        Lazily yield every complete, consistent assignment extending `assignment`,
        in search order. Each yielded dict is a fresh copy.

        A malformed `assignment` raises InvalidAssignment here, before iteration starts.
        """
        return self._search(self._validated(assignment), select_variable)

    def _search(self, working: Dict[V, D], select_variable: VariableSelector) -> Iterator[Dict[V, D]]:
        for v in working:
            if not self.consistent(v, working):
                logger.debug("initial assignment violates a constraint on %r", v)
                return

        visited = 0

        def backtrack() -> Iterator[Dict[V, D]]:
            nonlocal visited
            if len(working) == len(self.variables):
                yield dict(working)
                return

            variable = select_variable(self, working)
            for value in self.domains[variable]:
                visited += 1
                working[variable] = value
                if self.consistent(variable, working):
                    yield from backtrack()
                # undo before trying the next sibling value
                del working[variable]

        try:
            yield from backtrack()
        finally:
            logger.debug("backtracking visited %d candidate assignments", visited)

    def backtracking_search(
        self,
        assignment: Optional[Mapping[V, D]] = None,
        select_variable: VariableSelector = first_unassigned,
    ) -> Optional[Dict[V, D]]:
        """First complete consistent assignment reachable from `assignment`, or None if unsatisfiable."""
        return next(self.solutions(assignment, select_variable), None)

    def solve(
        self,
        initial_assignment: Optional[Mapping[V, D]] = None,
        select_variable: VariableSelector = first_unassigned,
    ) -> Optional[Dict[V, D]]:
        return self.backtracking_search(initial_assignment, select_variable)

    def _validated(self, assignment: Optional[Mapping[V, D]]) -> Dict[V, D]:
        working: Dict[V, D] = {}
        for v, value in (assignment or {}).items():
            if v not in self.domains:
                raise InvalidAssignment(f"{v!r} is not a variable of this CSP")
            if value not in self.domains[v]:
                raise InvalidAssignment(f"{value!r} is not in the domain of {v!r}")
            working[v] = value
        return working

    def __repr__(self) -> str:
        n_constraints = len({id(c) for cs in self.constraints.values() for c in cs})
        return f"CSP(variables={len(self.variables)}, constraints={n_constraints})"
