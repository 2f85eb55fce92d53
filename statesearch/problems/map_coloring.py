# statesearch/problems/map_coloring.py
# Colour the seven Australian regions so that no two bordering regions match.
from __future__ import annotations
from typing import Sequence, Tuple

from ..csp import CSP, NotEqualConstraint

REGIONS = (
    "Western Australia", "Northern Territory", "South Australia", "Queensland",
    "New South Wales", "Victoria", "Tasmania",
)

BORDERS: Tuple[Tuple[str, str], ...] = (
    ("Western Australia", "Northern Territory"),
    ("Western Australia", "South Australia"),
    ("South Australia", "Northern Territory"),
    ("Queensland", "Northern Territory"),
    ("Queensland", "South Australia"),
    ("Queensland", "New South Wales"),
    ("New South Wales", "South Australia"),
    ("Victoria", "South Australia"),
    ("Victoria", "New South Wales"),
    ("Victoria", "Tasmania"),
)


class MapColoringConstraint(NotEqualConstraint[str, str]):
    """Two bordering places may not share a colour."""

    def __init__(self, place1: str, place2: str) -> None:
        super().__init__(place1, place2)
        self.place1 = place1
        self.place2 = place2


def australia_csp(colors: Sequence[str] = ("red", "green", "blue")) -> CSP[str, str]:
    csp: CSP[str, str] = CSP(REGIONS, {region: list(colors) for region in REGIONS})
    for place1, place2 in BORDERS:
        csp.add_constraint(MapColoringConstraint(place1, place2))
    return csp


if __name__ == "__main__":
    solution = australia_csp().backtracking_search()
    if solution is None:
        print("No solution found!")
    else:
        for region, color in solution.items():
            print(f"{region}: {color}")
