# statesearch/csp/__init__.py
from .constraint import AllDifferentConstraint, Constraint, NotEqualConstraint, PredicateConstraint
from .errors import CSPError, DuplicateVariable, InvalidAssignment, InvalidConstraint, InvalidDomain
from .model import CSP
from .ordering import first_unassigned, most_constrained

__all__ = [
    "CSP",
    "Constraint", "AllDifferentConstraint", "NotEqualConstraint", "PredicateConstraint",
    "CSPError", "DuplicateVariable", "InvalidAssignment", "InvalidConstraint", "InvalidDomain",
    "first_unassigned", "most_constrained",
]
