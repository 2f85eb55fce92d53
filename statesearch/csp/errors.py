# statesearch/csp/errors.py
from __future__ import annotations


class CSPError(Exception):
    """Base class for malformed constraint-satisfaction problems."""


class InvalidDomain(CSPError, ValueError):
    """A declared variable has no entry in the domain mapping."""


class InvalidConstraint(CSPError, ValueError):
    """A constraint touches a variable the CSP never declared."""


class InvalidAssignment(CSPError, ValueError):
    """An initial assignment names an undeclared variable or an out-of-domain value."""


class DuplicateVariable(CSPError, ValueError):
    """The same variable is declared more than once."""
