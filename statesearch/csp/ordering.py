# statesearch/csp/ordering.py
# Variable-ordering heuristics for backtracking. first_unassigned is the default.
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Hashable, Mapping

if TYPE_CHECKING:
    from .model import CSP


def first_unassigned(csp: "CSP", assignment: Mapping[Hashable, Any]) -> Hashable:
    for v in csp.variables:
        if v not in assignment:
            return v
    raise ValueError("every variable is already assigned")


def most_constrained(csp: "CSP", assignment: Mapping[Hashable, Any]) -> Hashable:
    """Fewest domain values first, then most constraints, then declaration order."""
    best = None
    best_key = None
    for position, v in enumerate(csp.variables):
        if v in assignment:
            continue
        key = (len(csp.domains[v]), -len(csp.constraints[v]), position)
        if best_key is None or key < best_key:
            best, best_key = v, key
    if best_key is None:
        raise ValueError("every variable is already assigned")
    return best
