# statesearch/problems/word_search.py
# Place words in a letter grid (across, down, both diagonals) so no two words share a cell.
from __future__ import annotations
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from ..csp import CSP, Constraint


class GridLocation(NamedTuple):
    row: int
    column: int


Placement = Tuple[GridLocation, ...]

_ALPHABET = np.array(list("ABCDEFGHIJKLMNOPQRSTUVWXYZ"))


def generate_grid(rows: int, columns: int, seed: Optional[int] = None) -> np.ndarray:
    """rows x columns array of random uppercase letters."""
    rng = np.random.default_rng(seed)
    return _ALPHABET[rng.integers(0, len(_ALPHABET), size=(rows, columns))]


def display_grid(grid: np.ndarray) -> str:
    return "\n".join("".join(row) for row in grid)


def generate_domain(word: str, grid: np.ndarray) -> List[Placement]:
    """Every placement of `word` that fits inside the grid, scanning cells row by row."""
    height, width = grid.shape
    length = len(word)
    domain: List[Placement] = []
    for row in range(height):
        for col in range(width):
            steps = range(length)
            if col + length <= width:
                # left to right
                domain.append(tuple(GridLocation(row, col + i) for i in steps))
                # diagonal towards bottom right
                if row + length <= height:
                    domain.append(tuple(GridLocation(row + i, col + i) for i in steps))
            if row + length <= height:
                # top to bottom
                domain.append(tuple(GridLocation(row + i, col) for i in steps))
                # diagonal towards bottom left
                if col + 1 - length >= 0:
                    domain.append(tuple(GridLocation(row + i, col - i) for i in steps))
    return domain


class WordSearchConstraint(Constraint[str, Placement]):
    """Assigned words may not overlap in any cell."""

    def __init__(self, words: Sequence[str]) -> None:
        super().__init__(words)
        self.words = list(words)

    def satisfied(self, assignment: Mapping[str, Placement]) -> bool:
        cells = [loc for placement in assignment.values() for loc in placement]
        return len(set(cells)) == len(cells)


def word_search_csp(words: Sequence[str], grid: np.ndarray) -> CSP[str, Placement]:
    domains: Dict[str, List[Placement]] = {word: generate_domain(word, grid) for word in words}
    csp: CSP[str, Placement] = CSP(words, domains)
    csp.add_constraint(WordSearchConstraint(words))
    return csp


def fill_grid(grid: np.ndarray, solution: Mapping[str, Placement], seed: Optional[int] = None) -> np.ndarray:
    """Copy of `grid` with each word written into its placement, reversed half the time."""
    rng = np.random.default_rng(seed)
    filled = grid.copy()
    for word, placement in solution.items():
        locations = list(placement)
        if rng.random() < 0.5:
            locations.reverse()
        for letter, (row, col) in zip(word, locations):
            filled[row, col] = letter
    return filled


if __name__ == "__main__":
    grid = generate_grid(9, 9)
    words = ["MATTHEW", "JOE", "MARY", "SARAH", "SALLY"]
    solution = word_search_csp(words, grid).backtracking_search()
    if solution is None:
        print("No solution found!")
    else:
        print(display_grid(fill_grid(grid, solution)))
