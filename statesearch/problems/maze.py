# statesearch/problems/maze.py
# Grid maze with randomly blocked cells; states are MazeLocation(row, column).
from __future__ import annotations
import math
from enum import IntEnum
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np


class Cell(IntEnum):
    EMPTY = 0
    BLOCKED = 1
    START = 2
    GOAL = 3
    PATH = 4

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Cell.EMPTY: " ", Cell.BLOCKED: "X", Cell.START: "S", Cell.GOAL: "G", Cell.PATH: "*"}


class MazeLocation(NamedTuple):
    row: int
    column: int


class Maze:
    """
    rows x columns grid, 4-neighbour moves with unit cost.

    - Each cell is blocked with probability `sparseness` (numpy Generator seeded by `seed`),
      unless `blocked` lists the walls explicitly.
    - Start and goal are never blocked.
    - successors(ml): down, up, right, left, skipping walls and the border.
    - heuristic(ml): Manhattan distance to the goal (admissible here).
    """

    def __init__(
        self,
        rows: int = 10,
        columns: int = 10,
        sparseness: float = 0.2,
        start: Tuple[int, int] = (0, 0),
        goal: Tuple[int, int] = (9, 9),
        seed: Optional[int] = None,
        blocked: Optional[Iterable[Tuple[int, int]]] = None,
    ) -> None:
        self.rows = rows
        self.columns = columns
        self.start = MazeLocation(*start)
        self.goal = MazeLocation(*goal)
        for name, loc in (("start", self.start), ("goal", self.goal)):
            if not self._in_bounds(loc.row, loc.column):
                raise ValueError(f"{name} {tuple(loc)} lies outside a {rows}x{columns} maze")

        self._grid = np.full((rows, columns), Cell.EMPTY, dtype=np.int8)
        if blocked is None:
            rng = np.random.default_rng(seed)
            self._grid[rng.random((rows, columns)) < sparseness] = Cell.BLOCKED
        else:
            for r, c in blocked:
                if not self._in_bounds(r, c):
                    raise ValueError(f"blocked cell {(r, c)} lies outside a {rows}x{columns} maze")
                self._grid[r, c] = Cell.BLOCKED
        self._restore_endpoints()

    @classmethod
    def from_text(cls, text: str) -> "Maze":
        """Build from rows of ' ', 'X', 'S', 'G' (exactly one S and one G)."""
        lines = [line for line in text.strip("\n").splitlines()]
        width = max(len(line) for line in lines)
        start = goal = None
        blocked: List[Tuple[int, int]] = []
        for r, line in enumerate(lines):
            for c, ch in enumerate(line.ljust(width)):
                if ch == "X":
                    blocked.append((r, c))
                elif ch == "S":
                    start = (r, c)
                elif ch == "G":
                    goal = (r, c)
        if start is None or goal is None:
            raise ValueError("maze text needs one 'S' and one 'G'")
        return cls(len(lines), width, start=start, goal=goal, blocked=blocked)

    def _restore_endpoints(self) -> None:
        self._grid[self.start.row, self.start.column] = Cell.START
        self._grid[self.goal.row, self.goal.column] = Cell.GOAL

    def _in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.columns

    def _open(self, r: int, c: int) -> bool:
        return self._in_bounds(r, c) and self._grid[r, c] != Cell.BLOCKED

    def cell(self, ml: Tuple[int, int]) -> Cell:
        return Cell(int(self._grid[ml[0], ml[1]]))

    # Problem protocol
    def initial_state(self) -> MazeLocation:
        return self.start

    def goal_test(self, ml: MazeLocation) -> bool:
        return ml == self.goal

    def successors(self, ml: MazeLocation) -> List[MazeLocation]:
        r, c = ml
        candidates = ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))
        return [MazeLocation(nr, nc) for nr, nc in candidates if self._open(nr, nc)]

    def heuristic(self, ml: MazeLocation) -> float:
        return manhattan_distance(self.goal)(ml)

    def mark(self, path: Iterable[Tuple[int, int]]) -> None:
        for r, c in path:
            self._grid[r, c] = Cell.PATH
        self._restore_endpoints()

    def clear(self, path: Iterable[Tuple[int, int]]) -> None:
        for r, c in path:
            self._grid[r, c] = Cell.EMPTY
        self._restore_endpoints()

    def __str__(self) -> str:
        return "".join(
            "".join(_SYMBOLS[Cell(int(v))] for v in row) + "\n" for row in self._grid
        )


def euclidean_distance(goal: Tuple[int, int]) -> Callable[[Tuple[int, int]], float]:
    def distance(ml: Tuple[int, int]) -> float:
        return math.hypot(ml[1] - goal[1], ml[0] - goal[0])
    return distance


def manhattan_distance(goal: Tuple[int, int]) -> Callable[[Tuple[int, int]], float]:
    def distance(ml: Tuple[int, int]) -> float:
        return float(abs(ml[1] - goal[1]) + abs(ml[0] - goal[0]))
    return distance


if __name__ == "__main__":
    from ..algorithms import astar_search, breadth_first_search, depth_first_search
    from ..core.utils import node_to_path

    m = Maze()
    print(m)
    runs = [
        ("depth-first search", lambda: depth_first_search(m.start, m.goal_test, m.successors)),
        ("breadth-first search", lambda: breadth_first_search(m.start, m.goal_test, m.successors)),
        ("A*", lambda: astar_search(m.start, m.goal_test, m.successors, manhattan_distance(m.goal))),
    ]
    for label, run in runs:
        solution = run()
        if solution is None:
            print(f"No solution found using {label}!")
            continue
        path = node_to_path(solution)
        m.mark(path)
        print(f"{label}: {len(path)} states")
        print(m)
        m.clear(path)
