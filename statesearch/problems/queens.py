# statesearch/problems/queens.py
# N-Queens as a CSP: variables are columns 1..n, values are the row of that column's queen.
from __future__ import annotations
from typing import Mapping, Sequence

from ..csp import CSP, Constraint


class QueensConstraint(Constraint[int, int]):
    def __init__(self, columns: Sequence[int]) -> None:
        super().__init__(columns)
        self.columns = list(columns)

    def satisfied(self, assignment: Mapping[int, int]) -> bool:
        placed = [(c, assignment[c]) for c in self.columns if c in assignment]
        for i, (q1c, q1r) in enumerate(placed):
            for q2c, q2r in placed[i + 1:]:
                if q1r == q2r:
                    return False  # same row
                if abs(q1r - q2r) == abs(q1c - q2c):
                    return False  # same diagonal
        return True


def queens_csp(n: int = 8) -> CSP[int, int]:
    columns = list(range(1, n + 1))
    csp: CSP[int, int] = CSP(columns, {column: list(range(1, n + 1)) for column in columns})
    csp.add_constraint(QueensConstraint(columns))
    return csp


if __name__ == "__main__":
    solution = queens_csp().backtracking_search()
    print("No solution found!" if solution is None else dict(sorted(solution.items())))
