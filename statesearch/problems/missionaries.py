# statesearch/problems/missionaries.py
# Missionaries and cannibals: move everyone across the river without missionaries ever being outnumbered.
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

MAX_NUM = 3


@dataclass(frozen=True, order=True)
class MCState:
    """West-bank head counts; boat=True means the boat is on the west bank."""
    missionaries: int
    cannibals: int
    boat: bool
    total: int = MAX_NUM

    @property
    def wm(self) -> int: return self.missionaries
    @property
    def wc(self) -> int: return self.cannibals
    @property
    def em(self) -> int: return self.total - self.missionaries
    @property
    def ec(self) -> int: return self.total - self.cannibals

    def is_legal(self) -> bool:
        # a bank with no missionaries cannot be outnumbered
        if 0 < self.wm < self.wc:
            return False
        if 0 < self.em < self.ec:
            return False
        return True

    def goal_test(self) -> bool:
        return self.is_legal() and self.em == self.total and self.ec == self.total

    def _cross(self, dm: int, dc: int) -> "MCState":
        # west-bank deltas; the boat always changes sides
        return MCState(self.wm + dm, self.wc + dc, not self.boat, self.total)

    def successors(self) -> List["MCState"]:
        moves: List[MCState] = []
        if self.boat:  # west -> east
            if self.wm > 1: moves.append(self._cross(-2, 0))
            if self.wm > 0: moves.append(self._cross(-1, 0))
            if self.wc > 1: moves.append(self._cross(0, -2))
            if self.wc > 0: moves.append(self._cross(0, -1))
            if self.wc > 0 and self.wm > 0: moves.append(self._cross(-1, -1))
        else:          # east -> west
            if self.em > 1: moves.append(self._cross(2, 0))
            if self.em > 0: moves.append(self._cross(1, 0))
            if self.ec > 1: moves.append(self._cross(0, 2))
            if self.ec > 0: moves.append(self._cross(0, 1))
            if self.ec > 0 and self.em > 0: moves.append(self._cross(1, 1))
        return [s for s in moves if s.is_legal()]

    def __str__(self) -> str:
        return (
            f"On the west bank there are {self.wm} missionaries and {self.wc} cannibals.\n"
            f"On the east bank there are {self.em} missionaries and {self.ec} cannibals.\n"
            f"The boat is on the {'west' if self.boat else 'east'} bank."
        )


def describe_solution(path: Sequence[MCState]) -> List[str]:
    """Narrate a solution path: the opening state, then one crossing plus resulting state per step."""
    if not path:
        return []
    lines = [str(path[0])]
    old = path[0]
    for cur in path[1:]:
        if cur.boat:
            lines.append(f"{old.em - cur.em} missionaries and {old.ec - cur.ec} cannibals "
                         "moved from the east bank to the west bank.")
        else:
            lines.append(f"{old.wm - cur.wm} missionaries and {old.wc - cur.wc} cannibals "
                         "moved from the west bank to the east bank.")
        lines.append(str(cur))
        old = cur
    return lines


if __name__ == "__main__":
    from ..algorithms import breadth_first_search
    from ..core.utils import node_to_path

    start = MCState(MAX_NUM, MAX_NUM, True)
    solution = breadth_first_search(start, MCState.goal_test, MCState.successors)
    if solution is None:
        print("No solution found!")
    else:
        print("\n".join(describe_solution(node_to_path(solution))))
